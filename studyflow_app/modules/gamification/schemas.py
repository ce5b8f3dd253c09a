from marshmallow import fields, validate

from ...utils.validation import StrictSchema


class FocusSchema(StrictSchema):
    minutes = fields.Integer(required=True, strict=True, validate=validate.Range(min=0))


class RewardCreateSchema(StrictSchema):
    target_tasks = fields.Integer(required=True, strict=True, validate=validate.Range(min=1))
    reward = fields.String(required=True, validate=validate.Length(min=1, max=255))


class RewardUpdateSchema(StrictSchema):
    target_tasks = fields.Integer(strict=True, validate=validate.Range(min=1))
    reward = fields.String(validate=validate.Length(min=1, max=255))
