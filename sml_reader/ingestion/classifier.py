"""Narrow parsed YAML values to typed SML objects."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from sml_reader.domain import SML_OBJECT_ADAPTER, AnySMLObject


def _key_name(key: Any) -> str:
    # YAML 1.1 turns `on:`/`2024:` into bool/int keys; name them as written
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def classify(value: Any) -> AnySMLObject | None:
    """
    Return the SML object a parsed value describes, or None.

    A value qualifies when `object_type` is a known kind and both `label`
    and `unique_name` are strings. Other top-level keys are carried through
    with string names whatever their YAML type. Anything else is rejected
    silently; this never raises.
    """
    if isinstance(value, dict):
        value = {_key_name(key): item for key, item in value.items()}
    try:
        return SML_OBJECT_ADAPTER.validate_python(value)
    except ValidationError:
        return None
