import logging
from dataclasses import replace
from typing import Optional

from textual.message import Message

from ..core.examples import ExampleCatalog
from ..core.exceptions import DialogStateViolation
from ..core.model import EditorModel, apply_update, sample_model

from .codec import hydrate, merge_into_model
from .dialog import SaveAsDialog
from .events.save_events import (
    InstallSaveState,
    OpenSaveDialog,
    RemoveDialog,
    SaveOperationFailed,
    SelectExample,
    StateSaved,
    UpdateModel,
)


class ModelReducer:
    """
    Applies posted save-state messages to the editor model.

    Every handler is pure: it takes the current model and returns the next one.
    With ``dialog.strict`` disabled a ``DialogStateViolation`` is logged and the
    model is returned unchanged instead of the error propagating.
    """

    def __init__(self, examples: ExampleCatalog, config: Optional[dict] = None):
        self.examples = examples
        self.dialog = SaveAsDialog()
        self.strict: bool = (config or {}).get('dialog', {}).get('strict', True)
        self._handlers = {
            UpdateModel: self._update_model,
            OpenSaveDialog: self._open_save_dialog,
            RemoveDialog: self._remove_dialog,
            InstallSaveState: self._install_save_state,
            SelectExample: self._select_example,
            StateSaved: self._state_saved,
            SaveOperationFailed: self._operation_failed,
        }

    def base_model(self) -> EditorModel:
        return sample_model(self.examples.scratch_name)

    def apply(self, model: EditorModel, message: Message) -> EditorModel:
        handler = self._handlers.get(type(message))
        if handler is None:
            logging.debug(f"Ignoring message {type(message).__name__}")
            return model
        try:
            return handler(model, message)
        except DialogStateViolation as e:
            if self.strict:
                raise
            logging.error(f"Dialog state violation ignored: {e}")
            return model

    def _update_model(self, model: EditorModel, message: UpdateModel) -> EditorModel:
        return apply_update(model, message.update)

    def _open_save_dialog(self, model: EditorModel, message: OpenSaveDialog) -> EditorModel:
        return self.dialog.request_save_as(model)

    def _remove_dialog(self, model: EditorModel, message: RemoveDialog) -> EditorModel:
        if message.commit:
            return self.dialog.confirm(model, message.name)
        return self.dialog.cancel(model)

    def _install_save_state(self, model: EditorModel, message: InstallSaveState) -> EditorModel:
        loaded = hydrate(message.record, model.local_saves, base=self.base_model())
        return replace(loaded, ex_name=message.name)

    def _select_example(self, model: EditorModel, message: SelectExample) -> EditorModel:
        loaded = merge_into_model(self.base_model(), {'code': message.content()}, model.local_saves)
        return replace(loaded, ex_name=message.name)

    def _state_saved(self, model: EditorModel, message: StateSaved) -> EditorModel:
        logging.info(f"Save '{message.name}' confirmed by store")
        return model

    def _operation_failed(self, model: EditorModel, message: SaveOperationFailed) -> EditorModel:
        logging.warning(f"{message.operation} of '{message.name}' failed: {message.error}")
        return model
