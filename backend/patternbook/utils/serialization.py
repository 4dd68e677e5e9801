from enum import Enum
from typing import Any


PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def serialize_value(obj: Any):
    """
    Turn demo results and catalog objects into JSON-compatible structures.
    Deterministic.
    Tolerant to primitives.
    """

    if isinstance(obj, PRIMITIVE_TYPES):
        return obj

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, (list, tuple)):
        return [serialize_value(item) for item in obj]

    if isinstance(obj, (set, frozenset)):
        return [serialize_value(item) for item in sorted(obj, key=repr)]

    if isinstance(obj, dict):
        return {str(k): serialize_value(v) for k, v in obj.items()}

    # dataclass-like objects
    if hasattr(obj, "__dict__"):
        return {
            key: serialize_value(value)
            for key, value in obj.__dict__.items()
            if not key.startswith("_") and not callable(value)
        }

    # Fallback (should rarely happen)
    return str(obj)
