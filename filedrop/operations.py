"""Operations behind the `/{name}` route; every failure is an empty 404."""
import logging
from dataclasses import dataclass
from typing import AsyncIterable, Optional, Union

from fastapi import Response, status

from filedrop.body import collect_body
from filedrop.errors import StorageError
from filedrop.storage import FileStore

logger = logging.getLogger("filedrop.files")

TEXT_PLAIN = "text/plain"


@dataclass(frozen=True)
class Outcome:
    status_code: int
    body: bytes = b""
    media_type: Optional[str] = None

    def to_response(self) -> Response:
        return Response(content=self.body, status_code=self.status_code, media_type=self.media_type)


OK = Outcome(status.HTTP_200_OK)
NOT_FOUND = Outcome(status.HTTP_404_NOT_FOUND)


def _failed(action: str, name: str, err: StorageError) -> Outcome:
    logger.warning("Failed to %s \"%s\": %s: %s", action, name, type(err).__name__, err)
    return NOT_FOUND


@dataclass(frozen=True)
class Delete:
    name: str

    async def execute(self, store: FileStore) -> Outcome:
        logger.info("Deleting file \"%s\" ...", self.name)
        try:
            await store.delete(self.name)
        except StorageError as e:
            return _failed("delete file", self.name, e)
        logger.info("Deleted file \"%s\"", self.name)
        return OK


@dataclass(frozen=True)
class Retrieve:
    name: str

    async def execute(self, store: FileStore) -> Outcome:
        logger.info("Downloading file \"%s\" ...", self.name)
        try:
            content = await store.read(self.name)
        except StorageError as e:
            return _failed("read file", self.name, e)
        logger.info("Downloaded file \"%s\" (%d bytes)", self.name, len(content))
        return Outcome(status.HTTP_200_OK, content, TEXT_PLAIN)


@dataclass(frozen=True)
class StoreAt:
    name: str
    content: bytes

    async def execute(self, store: FileStore) -> Outcome:
        try:
            await store.write(self.name, self.content)
        except StorageError as e:
            return _failed("upload file", self.name, e)
        logger.info("Uploaded file \"%s\" (%d bytes)", self.name, len(self.content))
        return OK


@dataclass(frozen=True)
class StoreGenerated:
    prefix: str
    content: bytes

    async def execute(self, store: FileStore) -> Outcome:
        try:
            name = await store.create_unique(self.prefix, self.content)
        except StorageError as e:
            return _failed("create new file with prefix", self.prefix, e)
        logger.info("Uploaded file \"%s\" (%d bytes)", name, len(self.content))
        return Outcome(status.HTTP_200_OK, name.encode("utf-8"), TEXT_PLAIN)


@dataclass(frozen=True)
class Unmatched:
    method: str
    uri: str

    async def execute(self, store: Optional[FileStore] = None) -> Outcome:
        logger.info("Invalid URI: %s \"%s\"", self.method, self.uri)
        return NOT_FOUND


Operation = Union[Delete, Retrieve, StoreAt, StoreGenerated, Unmatched]


async def parse_operation(method: str, name: str, body: AsyncIterable[bytes], uri: str = "") -> Operation:
    # PUT/POST collect the body first; StreamError means nothing is written
    method = method.upper()
    if method == "DELETE":
        return Delete(name)
    if method == "GET":
        return Retrieve(name)
    if method == "PUT":
        logger.info("Uploading file \"%s\" ...", name)
        return StoreAt(name, await collect_body(body))
    if method == "POST":
        logger.info("Uploading file \"%s*\" ...", name)
        return StoreGenerated(name, await collect_body(body))
    return Unmatched(method, uri or f"/{name}")
