import logging
from typing import List, Optional

from ..core.examples import ExampleCatalog
from ..core.exceptions import StorageError, MalformedRecordError
from ..core.model import EditorModel, ModelUpdate

from .codec import decode, dumps, encode
from .validation import is_valid_name
from .state_management.storage_interface import KeyValueStore

# Events / Mixins
from .events.message_mixin import MessageEmitterMixin
from .events.save_events import (
    InstallSaveState,
    OpenSaveDialog,
    RemoveDialog,
    SaveOperationFailed,
    SelectExample,
    StateSaved,
    UpdateModel,
)

DEFAULT_INVALID_NAME_HINT = "Invalid File Name"


class SessionOperations(MessageEmitterMixin):
    """
    The save / load / list / delete / clear verbs over a key-value store.

    Each operation that touches the store awaits it and then posts exactly one
    message to the message post target. A failed store call or decode posts a
    single ``SaveOperationFailed`` and re-raises to the caller; no model update
    is posted in that case.
    """

    def __init__(self, storage: KeyValueStore, examples: ExampleCatalog, config: Optional[dict] = None):
        super().__init__()  # Initialize the mixin
        self.storage = storage
        self.examples = examples
        dialog_config = (config or {}).get('dialog', {})
        self.invalid_name_hint: str = dialog_config.get('invalid_name_hint', DEFAULT_INVALID_NAME_HINT)

    def _fail(self, operation: str, name: str, error: Exception) -> None:
        logging.error(f"{operation} failed for '{name}': {error}")
        self.post_message(SaveOperationFailed(operation, name, error))

    async def save(self, name: str, as_new_save: bool, model: EditorModel) -> None:
        """
        Save ``model`` under ``name``, or open the naming dialog for a new save.

        Args:
            name (str): The save name to write.
            as_new_save (bool): Ask the user for a name instead of writing.
                Always the case when ``name`` is a built-in example.
            model (EditorModel): The model to persist.

        Raises:
            StorageError: If the store write fails.
        """
        if name in self.examples.reserved_names:
            # built-in names are never written; the user has to pick a name
            logging.info(f"'{name}' is a built-in example, opening naming dialog")
            as_new_save = True

        if as_new_save:
            logging.info("Save-as requested, opening naming dialog")
            self.post_message(OpenSaveDialog())
            return

        try:
            await self.storage.set(name, dumps(encode(model)))
        except StorageError as e:
            self._fail("save", name, e)
            raise

        logging.info(f"Save '{name}' written successfully.")
        self.post_message(StateSaved(name))

    async def check_and_save(self, name: str, model: EditorModel) -> bool:
        """
        Validate the name typed into the dialog, then write and commit it.

        A rejected name never reaches the store: the input field is cleared and
        its hint set to the invalid-name message. Returns whether the save was
        written.
        """
        if not is_valid_name(name, self.examples.reserved_names):
            logging.info(f"Rejected save name '{name}'")
            self.post_message(UpdateModel(ModelUpdate(input_field="", input_hint=self.invalid_name_hint)))
            return False

        try:
            await self.storage.set(name, dumps(encode(model)))
        except StorageError as e:
            self._fail("save", name, e)
            raise

        logging.info(f"Save '{name}' created successfully.")
        self.post_message(RemoveDialog(commit=True, name=name))
        return True

    def request_save_as(self) -> None:
        self.post_message(OpenSaveDialog())

    def cancel_save_as(self) -> None:
        self.post_message(RemoveDialog(commit=False))

    async def load(self, name: str) -> None:
        """
        Load a built-in example or a user save.

        Built-in examples are served from the catalog without touching the
        store.

        Raises:
            KeyNotFoundError: If ``name`` is neither an example nor a stored save.
            MalformedRecordError: If the stored save cannot be decoded.
            StoreUnavailableError: If the store read fails.
        """
        content = self.examples.lookup(name)
        if content is not None:
            logging.info(f"Example '{name}' selected.")
            self.post_message(SelectExample(name, content))
            return

        try:
            record = decode(await self.storage.get(name))
        except (StorageError, MalformedRecordError) as e:
            self._fail("load", name, e)
            raise

        logging.info(f"Save '{name}' loaded successfully.")
        self.post_message(InstallSaveState(name, record))

    async def list_saves(self) -> List[str]:
        try:
            keys = await self.storage.list_keys()
        except StorageError as e:
            self._fail("list", "", e)
            raise

        reserved = self.examples.reserved_names
        saves = [key for key in keys if key not in reserved]
        self.post_message(UpdateModel(ModelUpdate(local_saves=saves)))
        return saves

    async def clear_all(self) -> None:
        try:
            await self.storage.clear()
        except StorageError as e:
            self._fail("clear", "", e)
            raise

        logging.info("All saves cleared.")
        self.post_message(UpdateModel(ModelUpdate(ex_name=self.examples.scratch_name, local_saves=[])))

    async def delete(self, name: str, reset_current: bool = False) -> None:
        """
        Remove a save from the store and from the save catalog.

        The current save name is left alone unless ``reset_current`` is set, in
        which case it goes back to the scratch name.
        """
        try:
            await self.storage.remove(name)
        except StorageError as e:
            self._fail("delete", name, e)
            raise

        logging.info(f"Save '{name}' deleted.")
        update = ModelUpdate(
            drop_save=name,
            ex_name=self.examples.scratch_name if reset_current else None,
        )
        self.post_message(UpdateModel(update))
