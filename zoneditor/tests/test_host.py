import asyncio
import pytest

from textual.worker import WorkerFailed

from ..core.model import EditorModel, Naming, Normal, Orientation
from ..save_state.host import SaveStateApp
from ..save_state.state_management import MemoryStorage

CONFIG = {
    "storage": {"backend": "memory"},
    "examples": {"scratch_name": "Scratch"},
    "dialog": {"strict": True, "invalid_name_hint": "Invalid File Name"},
}


@pytest.mark.integration
def test_save_as_load_and_delete_through_app():
    storage = MemoryStorage()

    async def scenario():
        app = SaveStateApp(config=CONFIG, storage=storage)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.editor_model = EditorModel(code="circle 5", orientation=Orientation.HORIZONTAL)

            await app.save_current(as_new_save=True).wait()
            await pilot.pause()
            assert app.editor_model.mode == Naming(Normal())

            await app.confirm_save_name("mine").wait()
            await pilot.pause()
            assert app.editor_model.mode == Normal()
            assert app.editor_model.ex_name == "mine"
            assert app.editor_model.local_saves == ["mine"]
            assert "mine" in storage

            app.editor_model = EditorModel(code="something else", local_saves=["mine"])
            await app.load_save("mine").wait()
            await pilot.pause()
            assert app.editor_model.code == "circle 5"
            assert app.editor_model.orientation is Orientation.HORIZONTAL

            await app.delete_save("mine").wait()
            await pilot.pause()
            assert app.editor_model.local_saves == []
            assert app.editor_model.ex_name == "Scratch"

    asyncio.run(scenario())


@pytest.mark.integration
def test_failed_load_keeps_app_running():
    async def scenario():
        app = SaveStateApp(config=CONFIG, storage=MemoryStorage())
        async with app.run_test() as pilot:
            before = app.editor_model
            worker = app.load_save("not-there")
            with pytest.raises(WorkerFailed):
                await worker.wait()
            await pilot.pause()
            assert app.editor_model == before
            assert app.is_running

    asyncio.run(scenario())


@pytest.mark.integration
def test_save_on_fresh_session_asks_for_a_name():
    storage = MemoryStorage()

    async def scenario():
        app = SaveStateApp(config=CONFIG, storage=storage)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.editor_model.ex_name == "Scratch"

            await app.save_current().wait()
            await pilot.pause()
            assert app.editor_model.mode == Naming(Normal())
            assert "Scratch" not in storage

    asyncio.run(scenario())
