import asyncio
import json
import pytest

from ..core.exceptions import ConfigurationError, KeyNotFoundError, StoreUnavailableError
from ..save_state.state_management import JSONStorageManager, MemoryStorage, create_storage
from ..save_state.state_management import json_storage_manager


@pytest.fixture(params=["memory", "json"])
def storage(request, tmp_path):
    if request.param == "memory":
        return MemoryStorage()
    return JSONStorageManager(path=str(tmp_path / "store" / "saves.json"))


@pytest.mark.storage
def test_set_get_list_remove(storage):
    async def scenario():
        await storage.set("one", "1")
        await storage.set("two", "2")
        assert await storage.get("one") == "1"
        assert sorted(await storage.list_keys()) == ["one", "two"]
        await storage.remove("one")
        assert await storage.list_keys() == ["two"]

    asyncio.run(scenario())


@pytest.mark.storage
def test_get_missing_key(storage):
    with pytest.raises(KeyNotFoundError) as excinfo:
        asyncio.run(storage.get("absent"))
    assert excinfo.value.name == "absent"


@pytest.mark.storage
def test_remove_and_clear_on_empty_store(storage):
    async def scenario():
        await storage.remove("absent")
        await storage.clear()
        await storage.clear()
        return await storage.list_keys()

    assert asyncio.run(scenario()) == []


@pytest.mark.storage
def test_set_overwrites(storage):
    async def scenario():
        await storage.set("k", "old")
        await storage.set("k", "new")
        return await storage.get("k")

    assert asyncio.run(scenario()) == "new"


@pytest.mark.storage
def test_json_store_persists_across_instances(tmp_path):
    path = str(tmp_path / "saves.json")
    asyncio.run(JSONStorageManager(path=path).set("mysave", "{\"code\": \"x\"}"))

    reopened = JSONStorageManager(path=path)
    assert asyncio.run(reopened.get("mysave")) == "{\"code\": \"x\"}"
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {"mysave": "{\"code\": \"x\"}"}


@pytest.mark.storage
def test_json_store_missing_file_reads_empty(tmp_path):
    storage = JSONStorageManager(path=str(tmp_path / "nothing-here.json"))
    assert asyncio.run(storage.list_keys()) == []


@pytest.mark.storage
@pytest.mark.parametrize("content", ["{broken", "[1, 2, 3]"])
def test_json_store_corrupt_file_is_unavailable(tmp_path, content):
    path = tmp_path / "saves.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StoreUnavailableError):
        asyncio.run(JSONStorageManager(path=str(path)).list_keys())


def test_create_storage_backends(tmp_path):
    assert isinstance(create_storage({"storage": {"backend": "memory"}}), MemoryStorage)
    json_store = create_storage({"storage": {"backend": "json", "path": str(tmp_path / "s.json")}})
    assert isinstance(json_store, JSONStorageManager)
    assert json_store.path == str(tmp_path / "s.json")
    with pytest.raises(ConfigurationError):
        create_storage({"storage": {"backend": "redis"}})


@pytest.mark.storage
def test_concurrent_writes_to_distinct_names_all_survive(storage):
    names = []
    for round_ in range(10):
        batch = [f"save-{round_}-{n}" for n in range(8)]
        names.extend(batch)

        async def scenario():
            await asyncio.gather(*(storage.set(name, name.upper()) for name in batch))
            return sorted(await storage.list_keys())

        assert asyncio.run(scenario()) == sorted(names)


@pytest.mark.storage
def test_delete_racing_save_keeps_other_name(storage):
    async def scenario():
        await storage.set("b", "old")
        await asyncio.gather(storage.set("a", "new"), storage.remove("b"))
        return await storage.list_keys()

    assert asyncio.run(scenario()) == ["a"]


@pytest.mark.storage
def test_json_store_failed_write_leaves_no_temp_file(tmp_path, monkeypatch):
    path = tmp_path / "saves.json"
    storage = JSONStorageManager(path=str(path))

    def refuse_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(json_storage_manager.os, "replace", refuse_replace)
    with pytest.raises(StoreUnavailableError):
        asyncio.run(storage.set("mysave", "{}"))

    assert list(tmp_path.iterdir()) == []
