import json
from unittest.mock import AsyncMock

import pytest

from lynk.backend.exception import (
    ChannelFileNotFoundError,
    ChannelNotFoundError,
    InvalidChannelPasswordError,
    InvalidFileDataError,
    PayloadTooLargeError,
    StoreUnavailableError,
)
from lynk.backend.model import ChannelFile
from lynk.backend.services import ChannelService, channel_key


def _file(file_id, data="aGk="):
    return ChannelFile(id=file_id, name=f"{file_id}.txt", mime_type="text/plain", size=2, data_base64=data)


@pytest.mark.asyncio
async def test_create_then_fetch(service, store):
    created = await service.create(text="hello")

    assert len(created.id) == 8
    assert created.ttl_seconds == 900
    assert created.password is None
    assert await store.exists(channel_key(created.id))

    snapshot = await service.fetch(created.id)
    assert snapshot.id == created.id
    assert snapshot.text == "hello"
    assert snapshot.files == []
    assert 0 < snapshot.ttl_seconds <= 900


@pytest.mark.asyncio
async def test_create_defaults_to_empty_text(service):
    created = await service.create()
    snapshot = await service.fetch(created.id)
    assert snapshot.text == ""


@pytest.mark.asyncio
async def test_fetch_unknown_channel(service):
    with pytest.raises(ChannelNotFoundError):
        await service.fetch("ffffffff")


@pytest.mark.asyncio
async def test_fetch_reports_remaining_ttl_then_refreshes(service, store, clock):
    created = await service.create(text="hello")
    clock.advance(300)

    snapshot = await service.fetch(created.id)

    assert snapshot.ttl_seconds == 600
    assert await store.ttl(channel_key(created.id)) == 900


@pytest.mark.asyncio
async def test_fetch_keeps_channel_alive(service, clock):
    created = await service.create(text="hello")
    for _ in range(3):
        clock.advance(800)
        await service.fetch(created.id)

    clock.advance(901)
    with pytest.raises(ChannelNotFoundError):
        await service.fetch(created.id)


@pytest.mark.asyncio
async def test_fetch_falls_back_to_configured_ttl(service, store):
    created = await service.create(text="hello")

    store.ttl = AsyncMock(return_value=-1)
    assert (await service.fetch(created.id)).ttl_seconds == 900

    store.ttl = AsyncMock(side_effect=StoreUnavailableError())
    assert (await service.fetch(created.id)).ttl_seconds == 900


@pytest.mark.asyncio
async def test_fetch_tolerates_key_vanishing_before_refresh(service, store):
    created = await service.create(text="hello")
    store.expire = AsyncMock(return_value=False)

    snapshot = await service.fetch(created.id)
    assert snapshot.text == "hello"


@pytest.mark.asyncio
async def test_fetch_legacy_plain_text_value(service, store):
    await store.set_ex(channel_key("abcd1234"), "legacy paste", 900)

    snapshot = await service.fetch("abcd1234", "any password")
    assert snapshot.text == "legacy paste"
    assert snapshot.files == []


@pytest.mark.asyncio
async def test_password_gate(protected_service):
    created = await protected_service.create(text="secret")
    assert created.password is not None
    assert len(created.password) == 12

    with pytest.raises(InvalidChannelPasswordError):
        await protected_service.fetch(created.id)
    with pytest.raises(InvalidChannelPasswordError):
        await protected_service.fetch(created.id, "wrong")

    snapshot = await protected_service.fetch(created.id, created.password)
    assert snapshot.text == "secret"


@pytest.mark.asyncio
async def test_password_is_stored_hashed(protected_service, store):
    created = await protected_service.create(text="secret")

    record = json.loads(await store.get(channel_key(created.id)))
    assert record["password_hash"]
    assert created.password not in record["password_hash"]


@pytest.mark.asyncio
async def test_caller_chosen_password(service):
    created = await service.create(text="mine", password="hunter2")
    assert created.password == "hunter2"

    with pytest.raises(InvalidChannelPasswordError):
        await service.fetch(created.id)
    assert (await service.fetch(created.id, "hunter2")).text == "mine"


@pytest.mark.asyncio
async def test_empty_caller_password_means_unprotected(service):
    created = await service.create(text="open", password="")
    assert created.password is None
    assert (await service.fetch(created.id)).text == "open"


@pytest.mark.asyncio
async def test_rejected_password_does_not_refresh_ttl(protected_service, store, clock):
    created = await protected_service.create(text="secret")
    clock.advance(300)

    with pytest.raises(InvalidChannelPasswordError):
        await protected_service.fetch(created.id, "wrong")
    with pytest.raises(InvalidChannelPasswordError):
        await protected_service.update(created.id, "wrong", "overwritten")

    assert await store.ttl(channel_key(created.id)) == 600
    assert (await protected_service.fetch(created.id, created.password)).text == "secret"


@pytest.mark.asyncio
async def test_update_preserves_protection(protected_service, store):
    created = await protected_service.create(text="before")
    key = channel_key(created.id)
    hash_before = json.loads(await store.get(key))["password_hash"]

    await protected_service.update(created.id, created.password, "after", [_file("f1")])

    snapshot = await protected_service.fetch(created.id, created.password)
    assert snapshot.text == "after"
    assert [f.id for f in snapshot.files] == ["f1"]
    assert json.loads(await store.get(key))["password_hash"] == hash_before
    with pytest.raises(InvalidChannelPasswordError):
        await protected_service.fetch(created.id, "wrongpassword")


@pytest.mark.asyncio
async def test_update_resets_ttl(service, store, clock):
    created = await service.create(text="hello")
    clock.advance(500)
    await service.update(created.id, None, "hello again")
    assert await store.ttl(channel_key(created.id)) == 900


@pytest.mark.asyncio
async def test_update_never_creates(service, store):
    with pytest.raises(ChannelNotFoundError):
        await service.update("ffffffff", None, "text")
    assert len(store) == 0


@pytest.mark.asyncio
async def test_update_validation_failure_keeps_old_content(store):
    service = ChannelService(store, ttl_seconds=900, max_channel_bytes=10)
    created = await service.create(text="small")

    with pytest.raises(PayloadTooLargeError):
        await service.update(created.id, None, "x" * 11)
    with pytest.raises(InvalidFileDataError):
        await service.update(created.id, None, "ok", [_file("f1", data="***")])

    assert (await service.fetch(created.id)).text == "small"


@pytest.mark.asyncio
async def test_create_validation_failure_writes_nothing(store):
    service = ChannelService(store, ttl_seconds=900, max_channel_bytes=10)

    with pytest.raises(PayloadTooLargeError):
        await service.create(text="x" * 11)
    with pytest.raises(InvalidFileDataError):
        await service.create(files=[_file("f1", data="not base64!!")])

    assert len(store) == 0


@pytest.mark.asyncio
async def test_create_propagates_store_failure(service, store):
    store.set_ex = AsyncMock(side_effect=StoreUnavailableError())
    with pytest.raises(StoreUnavailableError):
        await service.create(text="hello")


@pytest.mark.asyncio
async def test_delete_file_removes_one_attachment(service):
    created = await service.create(text="t", files=[_file("a"), _file("b"), _file("a")])

    await service.delete_file(created.id, None, "a")

    snapshot = await service.fetch(created.id)
    assert [f.id for f in snapshot.files] == ["b", "a"]
    assert snapshot.text == "t"


@pytest.mark.asyncio
async def test_delete_file_unknown_id(service, store, clock):
    created = await service.create(text="t", files=[_file("a")])
    clock.advance(100)

    with pytest.raises(ChannelFileNotFoundError):
        await service.delete_file(created.id, None, "zzz")

    assert await store.ttl(channel_key(created.id)) == 800


@pytest.mark.asyncio
async def test_delete_file_requires_password(protected_service):
    created = await protected_service.create(files=[_file("a")])

    with pytest.raises(InvalidChannelPasswordError):
        await protected_service.delete_file(created.id, None, "a")

    await protected_service.delete_file(created.id, created.password, "a")
    assert (await protected_service.fetch(created.id, created.password)).files == []


@pytest.mark.asyncio
async def test_delete_channel(protected_service):
    created = await protected_service.create(text="bye")

    with pytest.raises(InvalidChannelPasswordError):
        await protected_service.delete(created.id, "wrong")

    await protected_service.delete(created.id, created.password)
    with pytest.raises(ChannelNotFoundError):
        await protected_service.fetch(created.id, created.password)


def test_non_positive_ttl_uses_default(store):
    assert ChannelService(store, ttl_seconds=0).ttl_seconds == 900
