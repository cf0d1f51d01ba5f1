from .codec import PersistedRecord, decode, dumps, encode, hydrate, merge_into_model, record_to_partial_model
from .dialog import SaveAsDialog
from .reducer import ModelReducer
from .session_operations import SessionOperations
from .validation import is_valid_name, validate_name
