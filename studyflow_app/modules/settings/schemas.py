from marshmallow import fields, validate

from ...utils.validation import StrictSchema

_minutes = validate.Range(min=1, max=180)


class PomodoroSettingsSchema(StrictSchema):
    work_duration = fields.Integer(strict=True, validate=_minutes)
    short_break_duration = fields.Integer(strict=True, validate=_minutes)
    long_break_duration = fields.Integer(strict=True, validate=_minutes)
    sessions_until_long_break = fields.Integer(strict=True, validate=validate.Range(min=1, max=12))
    auto_start_next = fields.Boolean()
    sound_enabled = fields.Boolean()
    notifications_enabled = fields.Boolean()


class AppPreferencesSchema(StrictSchema):
    theme = fields.String(validate=validate.OneOf(('light', 'dark')))
    has_seen_tour = fields.Boolean()
    health_reminders_enabled = fields.Boolean()
    focus_music_volume = fields.Integer(strict=True, validate=validate.Range(min=0, max=100))
