from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional


class Orientation(Enum):
    VERTICAL = "Vertical"
    HORIZONTAL = "Horizontal"


""" Editor modes """

@dataclass(frozen=True)
class Normal:
    """No dialog is open."""

@dataclass(frozen=True)
class Naming:
    """The "name this save" dialog is open; ``previous`` is restored when it closes."""
    previous: object = field(default_factory=Normal)


@dataclass
class EditorModel:
    code: str = ""
    orientation: Orientation = Orientation.VERTICAL
    show_zones: int = 0
    mid_offset_x: int = 0
    mid_offset_y: int = 0
    local_saves: List[str] = field(default_factory=list)
    ex_name: str = "Scratch"
    mode: object = field(default_factory=Normal)
    input_field: str = ""
    input_hint: str = ""
    editing: Optional[str] = None
    startup: bool = True

    @property
    def is_naming(self) -> bool:
        return isinstance(self.mode, Naming)


def sample_model(scratch_name: str = "Scratch") -> EditorModel:
    """The base model loads are hydrated on top of."""
    return EditorModel(ex_name=scratch_name)


@dataclass(frozen=True)
class ModelUpdate:
    """An explicit set of field changes for the reducer to merge into the model.

    ``None`` means "leave the field alone". ``drop_save`` names a save to
    filter out of ``local_saves`` at the moment the update is applied.
    """
    local_saves: Optional[List[str]] = None
    ex_name: Optional[str] = None
    mode: Optional[object] = None
    input_field: Optional[str] = None
    input_hint: Optional[str] = None
    drop_save: Optional[str] = None


def apply_update(model: EditorModel, update: ModelUpdate) -> EditorModel:
    changes = {}
    for name in ("local_saves", "ex_name", "mode", "input_field", "input_hint"):
        value = getattr(update, name)
        if value is not None:
            changes[name] = list(value) if name == "local_saves" else value

    if update.drop_save is not None:
        saves = changes.get("local_saves", model.local_saves)
        changes["local_saves"] = [save for save in saves if save != update.drop_save]

    return replace(model, **changes)
