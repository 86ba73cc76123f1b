import os
import logging
from functools import lru_cache
from typing import Dict, List

from pydantic import BaseModel

LOG = logging.getLogger("filedrop.config")


# ---- Settings model ----------------------------------------------------------
class Settings(BaseModel):

    # Storage
    STORAGE_ROOT: str = "."

    # Generated names: <prefix><suffix><extension>
    NAME_SUFFIX_RANGE: int = 1000
    NAME_SUFFIX_WIDTH: int = 3
    NAME_EXTENSION: str = ".txt"
    MAX_CREATE_ATTEMPTS: int = 100

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"


# ---- Load / Validate (ENV only) ---------------------------------------------
def _load_env() -> Dict[str, str]:
    # unset and empty variables keep the model default
    out: Dict[str, str] = {}
    for field in Settings.model_fields:
        val = os.getenv(field)
        if val is not None and val != "":
            out[field] = val
    return out


def _validate(s: Settings) -> None:
    bad: List[str] = []
    if s.NAME_SUFFIX_RANGE < 1:
        bad.append("NAME_SUFFIX_RANGE")
    if s.NAME_SUFFIX_WIDTH < 1:
        bad.append("NAME_SUFFIX_WIDTH")
    if s.MAX_CREATE_ATTEMPTS < 1:
        bad.append("MAX_CREATE_ATTEMPTS")
    if not bad and s.NAME_SUFFIX_RANGE > 10 ** s.NAME_SUFFIX_WIDTH:
        bad.extend(["NAME_SUFFIX_RANGE", "NAME_SUFFIX_WIDTH"])
    if bad:
        raise RuntimeError(f"Invalid configuration values: {', '.join(bad)}")


def build_settings(data: Dict[str, str]) -> Settings:
    s = Settings(**data)
    _validate(s)
    LOG.info("Config sources: %s", {k: "ENV" for k in data})
    LOG.info("Config ready: root=%s, names=%d x %d digits, attempts=%d",
             s.STORAGE_ROOT, s.NAME_SUFFIX_RANGE, s.NAME_SUFFIX_WIDTH, s.MAX_CREATE_ATTEMPTS)
    return s


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    return build_settings(_load_env())


settings: Settings = load_settings()
