"""
zoneditor save-state subsystem

Persists a small slice of the editor's state (code, orientation, zone mode and
view offsets) to a key-value store and drives the save / save-as / load /
list / delete / clear workflow.

Key components:
- core.model: the editor model, its modes and explicit model updates.
- save_state.codec: model <-> persisted record projection.
- save_state.session_operations: the store-facing verbs, posting Textual messages.
- save_state.reducer: applies posted messages to the model.
- save_state.dialog: the "name this save" dialog state machine.
- save_state.host: Textual app integration.
"""
import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

from .core.config_manager import load_config, configure_logging
from .core.examples import ExampleCatalog
from .core.model import EditorModel, ModelUpdate, Naming, Normal, Orientation, sample_model
from .save_state import (
    ModelReducer,
    PersistedRecord,
    SaveAsDialog,
    SessionOperations,
    decode,
    encode,
    hydrate,
    is_valid_name,
)
from .save_state.state_management import JSONStorageManager, KeyValueStore, MemoryStorage, create_storage

__all__ = [
    'load_config', 'configure_logging',
    'ExampleCatalog',
    'EditorModel', 'ModelUpdate', 'Naming', 'Normal', 'Orientation', 'sample_model',
    'ModelReducer', 'PersistedRecord', 'SaveAsDialog', 'SessionOperations',
    'decode', 'encode', 'hydrate', 'is_valid_name',
    'JSONStorageManager', 'KeyValueStore', 'MemoryStorage', 'create_storage',
]
