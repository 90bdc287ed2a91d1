"""
Cardano NFT Metadata - JSON Value Access

Typed, fallible lookups into decoded JSON. Each helper checks presence and
shape before handing the value on, and raises MetadataValidationError on
mismatch instead of letting a KeyError or TypeError escape.
"""

import json
from enum import Enum
from typing import Any, Dict, List

from .exceptions import MetadataValidationError
from .metadata import MetadataError, MetadataErrors


class JsonType(str, Enum):
    """Shapes a decoded JSON value can take."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def json_type(value: Any) -> JsonType:
    """
    Classify a value produced by json.loads.

    Raises:
        TypeError: If the value could not have come from a JSON decoder
    """
    if value is None:
        return JsonType.NULL
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return JsonType.BOOL
    if isinstance(value, (int, float)):
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, list):
        return JsonType.ARRAY
    if isinstance(value, dict):
        return JsonType.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def fail(kind: MetadataErrors, message: str) -> MetadataValidationError:
    """Build the exception a pipeline stage raises to stop the call."""
    return MetadataValidationError(MetadataError(type=kind, message=message))


def expect_object(value: Any, message: str,
                  kind: MetadataErrors = MetadataErrors.CIP25) -> Dict[str, Any]:
    if json_type(value) is not JsonType.OBJECT:
        raise fail(kind, message)
    return value


def expect_array(value: Any, message: str,
                 kind: MetadataErrors = MetadataErrors.CIP25) -> List[Any]:
    if json_type(value) is not JsonType.ARRAY:
        raise fail(kind, message)
    return value


def has_value(obj: Dict[str, Any], key: str) -> bool:
    """True when `key` is present and not null, empty string or empty array."""
    if key not in obj:
        return False
    value = obj[key]
    if value is None:
        return False
    if isinstance(value, (str, list)) and len(value) == 0:
        return False
    return True


def encoded_size(value: Any) -> int:
    """Byte length of `value` as compact UTF-8 JSON."""
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    # lone surrogates count as 3 bytes, like the U+FFFD a browser encoder emits
    return len(text.encode("utf-8", "surrogatepass"))
