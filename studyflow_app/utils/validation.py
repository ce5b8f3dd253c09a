"""Helpers for validating request payloads with marshmallow schemas."""

from typing import Any, Mapping, Optional

from flask import request
from marshmallow import Schema, fields, pre_load
from marshmallow import ValidationError as MarshmallowValidationError

from ..core.error_handlers import ValidationError
from .time_utils import ensure_utc


def get_json_body() -> dict:
    """Return the request JSON object, or an empty dict for an empty body."""
    data = request.get_json(silent=True)
    if data is None:
        if request.data:
            raise ValidationError('Request body must be valid JSON')
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def load_payload(schema: Schema, data: Optional[Mapping[str, Any]]) -> dict:
    """Validate ``data`` with ``schema`` and raise ``ValidationError`` on failure."""
    try:
        return schema.load(data or {})
    except MarshmallowValidationError as exc:
        raise ValidationError('Validation failed', errors=exc.messages) from exc


class StrictSchema(Schema):
    """Base schema for request bodies.

    Unknown keys are rejected (marshmallow's default ``RAISE``) and identity or
    credential fields get an explicit error instead of the generic one.
    """

    PROTECTED_FIELDS = ('id', 'user_id', 'email', 'password')

    @pre_load
    def reject_protected_fields(self, data, **kwargs):
        if not isinstance(data, Mapping):
            return data
        declared = set(self.fields)
        blocked = [key for key in self.PROTECTED_FIELDS if key in data and key not in declared]
        if blocked:
            raise MarshmallowValidationError(
                {key: ['This field cannot be changed here.'] for key in blocked}
            )
        return data


class UtcDateTime(fields.DateTime):
    """ISO-8601 datetime field; naive input is taken as UTC."""

    def _deserialize(self, value, attr, data, **kwargs):
        return ensure_utc(super()._deserialize(value, attr, data, **kwargs))


class StrictBoolean(fields.Boolean):
    """Boolean that accepts only JSON ``true`` and ``false``."""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            raise self.make_error('invalid', input=value)
        return value
