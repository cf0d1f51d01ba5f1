import logging
from dataclasses import replace

from ..core.exceptions import DialogStateViolation
from ..core.model import EditorModel, Naming

logger = logging.getLogger(__name__)


class SaveAsDialog:
    """
    State machine for the "name this save" dialog.

    States live in ``EditorModel.mode``: any mode other than ``Naming`` is
    "no dialog", and ``Naming(previous)`` remembers the mode to restore.

    Transitions:
        request_save_as: any mode -> Naming(mode)
        confirm:         Naming(previous) -> previous, committing the name
        cancel:          Naming(previous) -> previous, discarding the name

    ``confirm`` does not write to the store; the write happens before it is
    invoked.
    """

    def request_save_as(self, model: EditorModel) -> EditorModel:
        logger.debug(f"Opening save dialog from mode {model.mode!r}")
        return replace(model, mode=Naming(model.mode))

    def confirm(self, model: EditorModel, name: str) -> EditorModel:
        self._require_naming(model, "confirm")
        local_saves = list(model.local_saves)
        if name != model.ex_name and name not in local_saves:
            local_saves.append(name)
        logger.debug(f"Save dialog confirmed with name '{name}'")
        return replace(model, mode=model.mode.previous, local_saves=local_saves, ex_name=name)

    def cancel(self, model: EditorModel) -> EditorModel:
        self._require_naming(model, "cancel")
        logger.debug("Save dialog cancelled")
        return replace(model, mode=model.mode.previous)

    @staticmethod
    def _require_naming(model: EditorModel, action: str) -> None:
        if not model.is_naming:
            raise DialogStateViolation(action, model.mode)
