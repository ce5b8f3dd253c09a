from marshmallow import fields, validate

from ...utils.validation import StrictBoolean, StrictSchema


class FlashcardSchema(StrictSchema):
    front = fields.String(required=True, validate=validate.Length(min=1))
    back = fields.String(required=True, validate=validate.Length(min=1))
    subject_id = fields.Integer(allow_none=True)


class FlashcardUpdateSchema(FlashcardSchema):
    """Only content and subject are editable; scheduling changes through reviews."""

    front = fields.String(validate=validate.Length(min=1))
    back = fields.String(validate=validate.Length(min=1))


class ReviewSchema(StrictSchema):
    correct = StrictBoolean(required=True)
