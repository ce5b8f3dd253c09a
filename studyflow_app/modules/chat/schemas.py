from marshmallow import fields, validate

from ...models import AIMessage
from ...utils.validation import StrictSchema


class MessageSchema(StrictSchema):
    role = fields.String(load_default=AIMessage.ROLE_USER,
                         validate=validate.OneOf((AIMessage.ROLE_USER, AIMessage.ROLE_ASSISTANT)))
    content = fields.String(required=True, validate=validate.Length(min=1))
