import logging
from textual.message import Message

from ...core.examples import ContentThunk
from ...core.model import ModelUpdate


class UpdateModel(Message):
    """Merge the fields carried by ``update`` into the model."""
    def __init__(self, update: ModelUpdate):
        self.update = update
        super().__init__()

class OpenSaveDialog(Message):
    """Switch the model into the naming state."""

class RemoveDialog(Message):
    """Close the naming dialog, committing ``name`` when ``commit`` is true."""
    def __init__(self, commit: bool, name: str = ""):
        self.commit = commit
        self.name = name
        super().__init__()

class SelectExample(Message):
    def __init__(self, name: str, content: ContentThunk):
        self.name = name
        self.content = content
        logging.info(f"SelectExample message created with example name: {name}")
        super().__init__()

class InstallSaveState(Message):
    """A save was read and decoded; install it keeping the current save catalog."""
    def __init__(self, name: str, record):
        self.name = name
        self.record = record
        super().__init__()

class StateSaved(Message):
    def __init__(self, name: str):
        self.name = name
        super().__init__()

class SaveOperationFailed(Message):
    def __init__(self, operation: str, name: str, error: Exception):
        self.operation = operation
        self.name = name
        self.error = error
        super().__init__()
