import pytest

from filedrop.errors import StreamError
from filedrop.operations import (
    Delete,
    Retrieve,
    StoreAt,
    StoreGenerated,
    Unmatched,
    parse_operation,
)

pytestmark = pytest.mark.anyio


async def _body(*parts):
    for part in parts:
        yield part


async def _broken_body():
    yield b"partial"
    raise ConnectionError("client disconnected")


async def test_get_and_delete_do_not_touch_the_body():
    async def untouchable():
        raise AssertionError("body must not be read")
        yield b""

    assert await parse_operation("GET", "f.txt", untouchable()) == Retrieve("f.txt")
    assert await parse_operation("DELETE", "f.txt", untouchable()) == Delete("f.txt")


async def test_put_and_post_carry_the_collected_body():
    assert await parse_operation("PUT", "f.txt", _body(b"a", b"b")) == StoreAt("f.txt", b"ab")
    assert await parse_operation("post", "data", _body(b"X")) == StoreGenerated("data", b"X")


async def test_other_methods_are_unmatched():
    op = await parse_operation("PATCH", "f.txt", _body(), uri="/f.txt")
    assert op == Unmatched("PATCH", "/f.txt")


async def test_broken_upload_raises_before_any_operation_exists():
    with pytest.raises(StreamError):
        await parse_operation("PUT", "f.txt", _broken_body())


async def test_store_at_outcomes(store):
    ok = await StoreAt("a.txt", b"hello").execute(store)
    assert (ok.status_code, ok.body, ok.media_type) == (200, b"", None)

    missing_dir = await StoreAt("nope/a.txt", b"hello").execute(store)
    assert (missing_dir.status_code, missing_dir.body) == (404, b"")


async def test_retrieve_outcomes(store):
    await store.write("r.txt", b"content")
    found = await Retrieve("r.txt").execute(store)
    assert (found.status_code, found.body, found.media_type) == (200, b"content", "text/plain")

    gone = await Retrieve("gone.txt").execute(store)
    assert (gone.status_code, gone.body, gone.media_type) == (404, b"", None)


async def test_delete_outcomes(store):
    await store.write("d.txt", b"")
    assert (await Delete("d.txt").execute(store)).status_code == 200
    assert (await Delete("d.txt").execute(store)).status_code == 404


async def test_store_generated_returns_name_as_text(store):
    outcome = await StoreGenerated("log", b"entry").execute(store)
    assert outcome.status_code == 200
    assert outcome.media_type == "text/plain"
    name = outcome.body.decode()
    assert await store.read(name) == b"entry"


async def test_unmatched_is_empty_404():
    outcome = await Unmatched("GET", "/a/b").execute()
    assert (outcome.status_code, outcome.body) == (404, b"")


async def test_failures_are_logged(store, caplog):
    caplog.set_level("WARNING", logger="filedrop.files")
    await Retrieve("missing.txt").execute(store)
    assert any("NotFound" in r.getMessage() and "missing.txt" in r.getMessage() for r in caplog.records)
