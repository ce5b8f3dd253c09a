from marshmallow import ValidationError as MarshmallowValidationError
from marshmallow import fields, validate, validates_schema

from ...models import Quiz
from ...utils.validation import StrictSchema


class QuestionSchema(StrictSchema):
    question = fields.String(required=True, validate=validate.Length(min=1))
    options = fields.List(fields.String(validate=validate.Length(min=1)), required=True,
                          validate=validate.Length(min=2))
    correct_answer = fields.Integer(required=True, strict=True)
    type = fields.String(load_default=Quiz.TYPE_MCQ, validate=validate.OneOf(Quiz.TYPES))

    @validates_schema
    def validate_answer(self, data, **kwargs):
        options = data.get('options') or []
        if data.get('type') == Quiz.TYPE_TRUE_FALSE and len(options) != 2:
            raise MarshmallowValidationError('True/false questions have exactly two options.', 'options')
        answer = data.get('correct_answer')
        if answer is not None and not 0 <= answer < len(options):
            raise MarshmallowValidationError('Must be the index of one of the options.', 'correct_answer')


class QuizSchema(StrictSchema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=255))
    subject_id = fields.Integer(allow_none=True)
    questions = fields.List(fields.Nested(QuestionSchema), required=True, validate=validate.Length(min=1))


class QuizUpdateSchema(QuizSchema):
    title = fields.String(validate=validate.Length(min=1, max=255))
    questions = fields.List(fields.Nested(QuestionSchema), validate=validate.Length(min=1))


class SubmissionSchema(StrictSchema):
    answers = fields.List(fields.Integer(strict=True, allow_none=True), required=True)
