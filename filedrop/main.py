import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from filedrop import __version__
from filedrop.config.config import Settings, settings as default_settings
from filedrop.naming import NameGenerator
from filedrop.operations import Unmatched
from filedrop.routers.files import router as files_router
from filedrop.storage import FileStore


def setup_logging(level: str = "INFO"):
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)

    logging.getLogger("uvicorn").setLevel(level)
    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)

    logging.getLogger("filedrop").setLevel(level)


def build_store(s: Settings) -> FileStore:
    namer = NameGenerator(
        suffix_range=s.NAME_SUFFIX_RANGE,
        width=s.NAME_SUFFIX_WIDTH,
        extension=s.NAME_EXTENSION,
    )
    return FileStore(s.STORAGE_ROOT, namer=namer, max_attempts=s.MAX_CREATE_ATTEMPTS)


def create_app(settings: Optional[Settings] = None, store: Optional[FileStore] = None) -> FastAPI:
    s = settings or default_settings

    # every single-segment path is a file name: no /docs, no slash redirects
    app = FastAPI(
        title="filedrop",
        redirect_slashes=False,
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = s
    app.state.store = store or build_store(s)

    @app.exception_handler(StarletteHTTPException)
    async def unmatched(request: Request, exc: StarletteHTTPException):
        outcome = await Unmatched(request.method, str(request.url.path)).execute()
        return outcome.to_response()

    app.include_router(files_router)
    return app


app = create_app()


def run() -> None:
    setup_logging(default_settings.LOG_LEVEL)
    address = f"{default_settings.HOST}:{default_settings.PORT}"
    logging.getLogger("filedrop").info("Listening at address %s ...", address)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT, log_config=None)
