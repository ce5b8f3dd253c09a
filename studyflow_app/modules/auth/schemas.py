from dataclasses import dataclass
from typing import Optional

from flask import current_app
from marshmallow import fields, validate, validates
from marshmallow import ValidationError as MarshmallowValidationError

from ...utils.validation import StrictSchema


@dataclass(frozen=True)
class Actor:
    """Who is performing a request. Passed explicitly into every service call."""

    user_id: int
    session_id: Optional[str] = None


def _check_password_length(value: str) -> None:
    min_length = current_app.config.get('MIN_PASSWORD_LENGTH', 6)
    if len(value) < min_length:
        raise MarshmallowValidationError(f'Password must be at least {min_length} characters')


class SignupSchema(StrictSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=120))
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True)

    @validates('password')
    def validate_password(self, value, **kwargs):
        _check_password_length(value)


class LoginSchema(StrictSchema):
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))


class ProfileUpdateSchema(StrictSchema):
    """Generic profile update. Email and password have their own flows."""

    name = fields.String(validate=validate.Length(min=1, max=120))
    has_completed_setup = fields.Boolean()
    is_premium = fields.Boolean()


class PasswordChangeSchema(StrictSchema):
    current_password = fields.String(required=True, load_only=True)
    new_password = fields.String(required=True, load_only=True)

    @validates('new_password')
    def validate_new_password(self, value, **kwargs):
        _check_password_length(value)


class DeleteAccountSchema(StrictSchema):
    confirm_email = fields.String(required=True)
