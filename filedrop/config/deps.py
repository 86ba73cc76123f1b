from fastapi import Request

from filedrop.storage import FileStore


def get_store(request: Request) -> FileStore:
    return request.app.state.store
