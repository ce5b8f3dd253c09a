from marshmallow import fields, validate

from ...utils.validation import StrictSchema
from ..access_control.logics.policies import INVITEE_STATUSES, ROLE_VIEWER, ROLES


class NoteSchema(StrictSchema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=255))
    content = fields.String()
    subject_id = fields.Integer(allow_none=True)


class NoteUpdateSchema(NoteSchema):
    title = fields.String(validate=validate.Length(min=1, max=255))


class NoteShareSchema(StrictSchema):
    email = fields.Email(required=True)
    role = fields.String(load_default=ROLE_VIEWER, validate=validate.OneOf(ROLES))


class NoteShareUpdateSchema(StrictSchema):
    """Invitees send ``status``; owners send ``role``."""

    role = fields.String(validate=validate.OneOf(ROLES))
    status = fields.String(validate=validate.OneOf(INVITEE_STATUSES))


class CommentSchema(StrictSchema):
    content = fields.String(required=True, validate=validate.Length(min=1))
