from typing import Iterable

from ..core.exceptions import InvalidSaveNameError

# Only spaces and tabs count as blank; other whitespace is left alone.
BLANK_CHARACTERS = " \t"


def is_valid_name(name: str, reserved_names: Iterable[str]) -> bool:
    """A save name is valid when it is non-empty, not blank and not reserved.

    The store is never consulted, so an existing user save name is valid and
    saving under it overwrites.
    """
    if not name:
        return False
    if name in set(reserved_names):
        return False
    return name.strip(BLANK_CHARACTERS) != ""


def validate_name(name: str, reserved_names: Iterable[str], raise_on_error: bool = False) -> bool:
    valid = is_valid_name(name, reserved_names)
    if not valid and raise_on_error:
        raise InvalidSaveNameError(name)
    return valid
