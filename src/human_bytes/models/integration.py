"""Pydantic core-schema glue for byte fields.

Pydantic plays the role of the host serialization framework. Its mode is
mapped onto the human-readable flag:

- validation: ``json`` and ``strings`` input is human readable, ``python`` is binary
- serialization: ``model_dump(mode="json")`` / ``model_dump_json()`` are human
  readable, ``model_dump()`` (python mode) is binary
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic_core import core_schema


def byte_field_schema(
    validate: Callable[[Any, bool], Any],
    serialize: Callable[[Any, bool], Any],
) -> core_schema.CoreSchema:
    """Build a plain core schema that defers to the codec in both directions.

    Args:
        validate: ``(value, human_readable) -> field value``
        serialize: ``(field value, human_readable) -> token``

    Returns:
        Core schema for a pydantic field
    """

    def _validate(value: Any, info: core_schema.ValidationInfo) -> Any:
        return validate(value, info.mode != "python")

    def _serialize(value: Any, info: core_schema.SerializationInfo) -> Any:
        return serialize(value, info.mode_is_json())

    return core_schema.with_info_plain_validator_function(
        _validate,
        serialization=core_schema.plain_serializer_function_ser_schema(_serialize, info_arg=True),
    )
