import logging
from typing import Optional

from textual.app import App

from ..core.config_manager import load_config
from ..core.examples import ExampleCatalog
from ..core.model import EditorModel

from .reducer import ModelReducer
from .session_operations import SessionOperations
from .state_management import KeyValueStore, create_storage
from .events.save_events import (
    InstallSaveState,
    OpenSaveDialog,
    RemoveDialog,
    SaveOperationFailed,
    SelectExample,
    StateSaved,
    UpdateModel,
)


class SaveStateHostMixin:
    """
    Wires the save-state subsystem into a Textual app.

    The app owns the editor model. ``SessionOperations`` posts its results to
    the app, and the ``on_*`` handlers below feed every message through the
    reducer in the order the app receives them.
    """

    def init_save_state(self, config: Optional[dict] = None, storage: Optional[KeyValueStore] = None) -> None:
        self.save_state_config: dict = config if config is not None else load_config()
        self.examples = ExampleCatalog.from_config(self.save_state_config)
        self.storage: KeyValueStore = storage or create_storage(self.save_state_config)
        self.reducer = ModelReducer(self.examples, self.save_state_config)
        self.editor_model: EditorModel = self.reducer.base_model()

        self.session_operations = SessionOperations(self.storage, self.examples, self.save_state_config)
        self.session_operations.set_message_post_target(self)

    def refresh_save_state(self) -> None:
        """Called after every reduced message. Override to redraw."""

    def _reduce(self, message) -> None:
        self.editor_model = self.reducer.apply(self.editor_model, message)
        self.refresh_save_state()

    # Workers: store calls run off the message handlers; failures are reported
    # through SaveOperationFailed, so they must not take the app down.

    def save_current(self, as_new_save: bool = False):
        model = self.editor_model
        return self.run_worker(self.session_operations.save(model.ex_name, as_new_save, model), exit_on_error=False)

    def confirm_save_name(self, name: str):
        return self.run_worker(self.session_operations.check_and_save(name, self.editor_model), exit_on_error=False)

    def load_save(self, name: str):
        return self.run_worker(self.session_operations.load(name), exit_on_error=False)

    def refresh_saves(self):
        return self.run_worker(self.session_operations.list_saves(), exit_on_error=False)

    def delete_save(self, name: str):
        reset_current = name == self.editor_model.ex_name
        return self.run_worker(self.session_operations.delete(name, reset_current=reset_current), exit_on_error=False)

    def clear_saves(self):
        return self.run_worker(self.session_operations.clear_all(), exit_on_error=False)

    def on_update_model(self, message: UpdateModel) -> None:
        self._reduce(message)

    def on_open_save_dialog(self, message: OpenSaveDialog) -> None:
        self._reduce(message)

    def on_remove_dialog(self, message: RemoveDialog) -> None:
        self._reduce(message)

    def on_install_save_state(self, message: InstallSaveState) -> None:
        self._reduce(message)
        self.notify(f"Save '{message.name}' loaded")

    def on_select_example(self, message: SelectExample) -> None:
        self._reduce(message)

    def on_state_saved(self, message: StateSaved) -> None:
        self._reduce(message)
        self.notify(f"Saved '{message.name}'")

    def on_save_operation_failed(self, message: SaveOperationFailed) -> None:
        self._reduce(message)
        logging.error(f"Save operation '{message.operation}' failed: {message.error}")
        self.notify(f"Could not {message.operation} '{message.name}': {message.error}", severity="error")


class SaveStateApp(SaveStateHostMixin, App):
    """Minimal Textual host for the save-state subsystem."""

    ENABLE_COMMAND_PALETTE = False

    def __init__(self, config: Optional[dict] = None, storage: Optional[KeyValueStore] = None, **kwargs):
        super().__init__(**kwargs)
        self.init_save_state(config=config, storage=storage)

    def on_mount(self) -> None:
        self.refresh_saves()
