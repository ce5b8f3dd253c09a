from marshmallow import fields, validate

from ...models import JournalEntry, StickyNote, Task
from ...utils.validation import StrictSchema, UtcDateTime

_HEX_COLOR = validate.Regexp(r'^#[0-9A-Fa-f]{3,8}$', error='Must be a hex color like #3B82F6.')
_non_negative = validate.Range(min=0)


class SubjectSchema(StrictSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    color = fields.String(required=True, validate=_HEX_COLOR)
    total_topics = fields.Integer(validate=_non_negative)
    covered_topics = fields.Integer(validate=_non_negative)
    google_drive_url = fields.String(allow_none=True, validate=validate.Length(max=500))
    study_hours = fields.Integer(validate=_non_negative)
    weak_areas = fields.String(allow_none=True)


class SubjectUpdateSchema(SubjectSchema):
    name = fields.String(validate=validate.Length(min=1, max=200))
    color = fields.String(validate=_HEX_COLOR)


class ExamSchema(StrictSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    date = UtcDateTime(required=True)
    subject_id = fields.Integer(allow_none=True)
    confidence = fields.Integer(validate=validate.Range(min=0, max=100))
    weight = fields.Integer(validate=_non_negative)
    google_drive_url = fields.String(allow_none=True, validate=validate.Length(max=500))


class ExamUpdateSchema(ExamSchema):
    name = fields.String(validate=validate.Length(min=1, max=200))
    date = UtcDateTime()


class TaskSchema(StrictSchema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=255))
    description = fields.String(allow_none=True)
    subject_id = fields.Integer(allow_none=True)
    priority = fields.String(validate=validate.OneOf(Task.PRIORITIES))
    status = fields.String(validate=validate.OneOf(Task.STATUSES))
    due_date = UtcDateTime(allow_none=True)
    estimated_minutes = fields.Integer(allow_none=True, validate=_non_negative)
    tags = fields.List(fields.String())
    order = fields.Integer()


class TaskUpdateSchema(TaskSchema):
    title = fields.String(validate=validate.Length(min=1, max=255))


class ReminderSchema(StrictSchema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=255))
    description = fields.String(allow_none=True)
    reminder_time = UtcDateTime(required=True)
    event_id = fields.Integer(allow_none=True)
    task_id = fields.Integer(allow_none=True)


class ReminderUpdateSchema(ReminderSchema):
    title = fields.String(validate=validate.Length(min=1, max=255))
    reminder_time = UtcDateTime()
    is_read = fields.Boolean()


class StickyNoteSchema(StrictSchema):
    content = fields.String(required=True, validate=validate.Length(min=1))
    color = fields.String(load_default=StickyNote.DEFAULT_COLOR, validate=_HEX_COLOR)
    x = fields.Integer()
    y = fields.Integer()
    width = fields.Integer(validate=validate.Range(min=1))
    height = fields.Integer(validate=validate.Range(min=1))


class StickyNoteUpdateSchema(StickyNoteSchema):
    content = fields.String(validate=validate.Length(min=1))
    color = fields.String(validate=_HEX_COLOR)


class JournalEntrySchema(StrictSchema):
    date = fields.Date(required=True)
    mood = fields.String(required=True, validate=validate.OneOf(JournalEntry.MOODS))
    content = fields.String(required=True, validate=validate.Length(min=1))


class JournalEntryUpdateSchema(JournalEntrySchema):
    date = fields.Date()
    mood = fields.String(validate=validate.OneOf(JournalEntry.MOODS))
    content = fields.String(validate=validate.Length(min=1))
