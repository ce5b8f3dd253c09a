from marshmallow import EXCLUDE, Schema, fields, validate, validates_schema
from marshmallow import ValidationError as MarshmallowValidationError

from ...models import CalendarEvent
from ...utils.validation import StrictSchema, UtcDateTime
from ..access_control.logics.policies import INVITEE_STATUSES


class EventSchema(StrictSchema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=255))
    description = fields.String(allow_none=True)
    type = fields.String(validate=validate.OneOf(CalendarEvent.TYPES))
    start_time = UtcDateTime(required=True)
    end_time = UtcDateTime(allow_none=True)
    all_day = fields.Boolean()
    color = fields.String(validate=validate.Length(max=20))
    subject_id = fields.Integer(allow_none=True)
    recurrence = fields.String(allow_none=True, validate=validate.Length(max=255))
    reminder_minutes = fields.Integer(allow_none=True, validate=validate.Range(min=0))

    @validates_schema
    def validate_window(self, data, **kwargs):
        start, end = data.get('start_time'), data.get('end_time')
        if start and end and end < start:
            raise MarshmallowValidationError('End time must not be before start time.', 'end_time')


class EventUpdateSchema(EventSchema):
    title = fields.String(validate=validate.Length(min=1, max=255))
    start_time = UtcDateTime()


class EventShareSchema(StrictSchema):
    email = fields.Email(required=True)


class EventShareUpdateSchema(StrictSchema):
    status = fields.String(required=True, validate=validate.OneOf(INVITEE_STATUSES))


class EventRangeSchema(Schema):
    """Query string for listing events."""

    class Meta:
        unknown = EXCLUDE

    start = UtcDateTime()
    end = UtcDateTime()
