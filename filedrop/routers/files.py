import logging

from fastapi import APIRouter, Depends, Request, Response

from filedrop.config.deps import get_store
from filedrop.errors import StreamError
from filedrop.operations import NOT_FOUND, parse_operation
from filedrop.storage import FileStore

logger = logging.getLogger("filedrop.files")

router = APIRouter(tags=["files"])


# ---------- /{name} : DELETE | GET | PUT | POST ----------
@router.api_route("/{name}", methods=["DELETE", "GET", "PUT", "POST"], include_in_schema=False)
async def handle_file(name: str, request: Request, store: FileStore = Depends(get_store)) -> Response:
    try:
        op = await parse_operation(request.method, name, request.stream(), uri=str(request.url.path))
    except StreamError as e:
        logger.warning("Failed to receive \"%s\": %s", name, e)
        return NOT_FOUND.to_response()
    outcome = await op.execute(store)
    return outcome.to_response()
