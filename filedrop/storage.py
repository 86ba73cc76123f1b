import logging
from pathlib import Path
from typing import Callable, Optional

import anyio

from filedrop.errors import CreateError, ExhaustedRetries, NotFound, WriteError
from filedrop.naming import NameGenerator

logger = logging.getLogger("filedrop.storage")

MAX_CREATE_ATTEMPTS = 100

# ValueError covers names the OS can never accept, e.g. an embedded NUL
PATH_ERRORS = (OSError, ValueError)


class FileStore:
    """Flat file namespace rooted at one directory; no in-process index."""

    def __init__(
        self,
        root,
        namer: Optional[Callable[[str], str]] = None,
        max_attempts: int = MAX_CREATE_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.namer = namer or NameGenerator()
        self.max_attempts = max_attempts

    def path_for(self, name: str) -> Path:
        return self.root / name

    async def delete(self, name: str) -> None:
        try:
            await anyio.Path(self.path_for(name)).unlink()
        except PATH_ERRORS as e:
            raise NotFound(name, e) from e

    async def read(self, name: str) -> bytes:
        try:
            async with await anyio.open_file(self.path_for(name), "rb") as f:
                return await f.read()
        except PATH_ERRORS as e:
            raise NotFound(name, e) from e

    async def write(self, name: str, content: bytes) -> None:
        try:
            f = await anyio.open_file(self.path_for(name), "wb")
        except PATH_ERRORS as e:
            raise CreateError(name, e) from e
        await self._fill(f, name, content)

    async def create_unique(self, prefix: str, content: bytes) -> str:
        """Claim a fresh generated name with an exclusive create and fill it.

        Only FileExistsError is retried; other create failures raise CreateError.
        """
        for attempt in range(1, self.max_attempts + 1):
            name = self.namer(prefix)
            try:
                f = await anyio.open_file(self.path_for(name), "xb")
            except FileExistsError:
                logger.debug("name %s taken (attempt %d/%d)", name, attempt, self.max_attempts)
                continue
            except PATH_ERRORS as e:
                raise CreateError(name, e) from e
            await self._fill(f, name, content)
            return name

        logger.warning("no free name for prefix %r after %d attempts", prefix, self.max_attempts)
        raise ExhaustedRetries(prefix, self.max_attempts)

    @staticmethod
    async def _fill(f, name: str, content: bytes) -> None:
        try:
            async with f:
                await f.write(content)
        except OSError as e:
            raise WriteError(name, e) from e
