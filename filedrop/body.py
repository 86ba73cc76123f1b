from typing import AsyncIterable

from filedrop.errors import StreamError


async def collect_body(chunks: AsyncIterable[bytes]) -> bytes:
    """Fold an async stream of byte chunks into one buffer, in arrival order.

    Any error raised by the transport while iterating is re-raised as
    StreamError and the partial buffer is dropped.
    """
    body = bytearray()
    try:
        async for chunk in chunks:
            body.extend(chunk)
    except Exception as e:
        raise StreamError(str(e) or type(e).__name__) from e
    return bytes(body)
