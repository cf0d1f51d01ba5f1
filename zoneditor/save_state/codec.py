"""
Conversion between the editor model and the persisted save record.

A save keeps five fields of the model. Decoding is a projection: everything
else is rebuilt from the sample model, the caller's save catalog is laid over
it, and the transient UI fields are reset.
"""
import json
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

from ..core.exceptions import MalformedOrientationError, MalformedRecordError
from ..core.model import EditorModel, Orientation, sample_model

# wire name -> (record attribute, expected type)
WIRE_FIELDS = {
    'code': ('code', str),
    'orient': ('orientation', str),
    'showZones': ('show_zones', int),
    'midOffsetX': ('mid_offset_x', int),
    'midOffsetY': ('mid_offset_y', int),
}


@dataclass(frozen=True)
class PersistedRecord:
    code: str
    orientation: Orientation
    show_zones: int
    mid_offset_x: int
    mid_offset_y: int


def encode(model: EditorModel) -> PersistedRecord:
    return PersistedRecord(
        code=model.code,
        orientation=model.orientation,
        show_zones=model.show_zones,
        mid_offset_x=model.mid_offset_x,
        mid_offset_y=model.mid_offset_y,
    )


def record_to_dict(record: PersistedRecord) -> Dict[str, Any]:
    return {
        'code': record.code,
        'orient': record.orientation.value,
        'showZones': record.show_zones,
        'midOffsetX': record.mid_offset_x,
        'midOffsetY': record.mid_offset_y,
    }


def dumps(record: PersistedRecord) -> str:
    return json.dumps(record_to_dict(record))


def _check_type(value: Any, expected: type) -> bool:
    # bool is an int subclass but never a valid integer field
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


def record_from_dict(data: Any) -> PersistedRecord:
    if not isinstance(data, dict):
        raise MalformedRecordError(f"Save record must be an object, got {type(data).__name__}")

    values = {}
    for wire_name, (attribute, expected) in WIRE_FIELDS.items():
        if wire_name not in data:
            raise MalformedRecordError(f"Save record is missing field '{wire_name}'")
        value = data[wire_name]
        if wire_name == 'orient':
            try:
                value = Orientation(value)
            except (ValueError, TypeError) as e:
                raise MalformedOrientationError(value) from e
        elif not _check_type(value, expected):
            raise MalformedRecordError(
                f"Save record field '{wire_name}' must be {expected.__name__}, got {type(value).__name__}"
            )
        values[attribute] = value

    return PersistedRecord(**values)


def decode(serialized: str) -> PersistedRecord:
    """
    Parse a stored save.

    Raises:
        MalformedOrientationError: If ``orient`` is not a known orientation tag.
        MalformedRecordError: If the text is not a JSON object or a field is
            missing or has the wrong type.
    """
    try:
        data = json.loads(serialized)
    except (TypeError, ValueError) as e:
        raise MalformedRecordError("Save record is not valid JSON") from e
    return record_from_dict(data)


def record_to_partial_model(record: PersistedRecord) -> Dict[str, Any]:
    return {
        'code': record.code,
        'orientation': record.orientation,
        'show_zones': record.show_zones,
        'mid_offset_x': record.mid_offset_x,
        'mid_offset_y': record.mid_offset_y,
    }


def merge_into_model(base: EditorModel, partial: Dict[str, Any], overlay_save_catalog: List[str]) -> EditorModel:
    """Lay ``partial`` and the caller's catalog over ``base`` and reset transient fields."""
    return replace(
        base,
        **partial,
        local_saves=list(overlay_save_catalog),
        input_field='',
        input_hint='',
        editing=None,
        startup=False,
    )


def hydrate(record: PersistedRecord, previous_catalog: List[str], base: Optional[EditorModel] = None) -> EditorModel:
    if base is None:
        base = sample_model()
    return merge_into_model(base, record_to_partial_model(record), previous_catalog)
