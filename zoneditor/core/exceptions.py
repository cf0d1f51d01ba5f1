class ApplicationError(Exception):
    """Base class for all custom exceptions in the application."""
    pass


""" Storage related """
class StorageError(ApplicationError):
    """Base class for storage-related errors."""
    pass

class StoreUnavailableError(StorageError):
    """Raised when the backing store cannot be read or written."""
    pass

class KeyNotFoundError(StorageError):
    """Raised when a save name is not present in the store."""
    def __init__(self, name, message=None):
        if message is None:
            message = f"Save '{name}' does not exist"
        super().__init__(message)
        self.name = name


""" Session related """
class SessionError(ApplicationError):
    """Base class for session-related errors."""
    pass

class MalformedRecordError(SessionError):
    """Raised when a stored save cannot be decoded into a record."""
    pass

class MalformedOrientationError(MalformedRecordError):
    """Raised when the stored orientation tag is not a known variant."""
    def __init__(self, value, message=None):
        if message is None:
            message = f"Unknown orientation {value!r}. Expected 'Vertical' or 'Horizontal'."
        super().__init__(message)
        self.value = value

class InvalidSaveNameError(SessionError):
    """Raised when a save name is empty, blank or reserved."""
    def __init__(self, name, message=None):
        if message is None:
            message = f"Invalid save name '{name}'. Names must not be empty, blank or a built-in example."
        super().__init__(message)
        self.name = name


""" Event related """

# related exception for connecting our code to the Textual event driven system.
class MessagePostTargetNotSetError(ApplicationError):
    """Exception raised when message post target is not set."""
    pass


""" Statemachine related """
class StateMachineError(ApplicationError):
    """Base class for state machine errors."""
    pass

class DialogStateViolation(StateMachineError):
    """Raised when the save dialog is confirmed or cancelled outside the naming state.

    This is a programming error: the UI and the model have drifted apart.
    """
    def __init__(self, action, mode):
        super().__init__(f"Cannot {action} the save dialog while in mode {mode!r}")
        self.action = action
        self.mode = mode


""" Config related """
class ConfigurationError(ApplicationError):
    """Raised when the configuration cannot be loaded or is invalid."""
    pass
