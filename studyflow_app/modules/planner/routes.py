from flask import jsonify, request
from flask_login import login_required

from ...core.error_handlers import success_response
from ...utils.validation import get_json_body, load_payload
from ..auth.interface import AuthInterface
from . import planner_bp
from .schemas import (
    ExamSchema,
    ExamUpdateSchema,
    JournalEntrySchema,
    JournalEntryUpdateSchema,
    ReminderSchema,
    ReminderUpdateSchema,
    StickyNoteSchema,
    StickyNoteUpdateSchema,
    SubjectSchema,
    SubjectUpdateSchema,
    TaskSchema,
    TaskUpdateSchema,
)
from .services import (
    ExamService,
    JournalService,
    ReminderService,
    StickyNoteService,
    SubjectService,
    TaskService,
)


# ===== SUBJECTS =====

@planner_bp.route('/subjects', methods=['GET'])
@login_required
def list_subjects():
    subjects = SubjectService.list_subjects(AuthInterface.current_actor())
    return jsonify(success_response([s.to_dict() for s in subjects]))


@planner_bp.route('/subjects', methods=['POST'])
@login_required
def create_subject():
    data = load_payload(SubjectSchema(), get_json_body())
    subject = SubjectService.create_subject(AuthInterface.current_actor(), data)
    return jsonify(success_response(subject.to_dict())), 201


@planner_bp.route('/subjects/<int:subject_id>', methods=['GET'])
@login_required
def get_subject(subject_id):
    subject = SubjectService.get_subject(AuthInterface.current_actor(), subject_id)
    return jsonify(success_response(subject.to_dict()))


@planner_bp.route('/subjects/<int:subject_id>', methods=['PATCH'])
@login_required
def update_subject(subject_id):
    changes = load_payload(SubjectUpdateSchema(), get_json_body())
    subject = SubjectService.update_subject(AuthInterface.current_actor(), subject_id, changes)
    return jsonify(success_response(subject.to_dict()))


@planner_bp.route('/subjects/<int:subject_id>', methods=['DELETE'])
@login_required
def delete_subject(subject_id):
    SubjectService.delete_subject(AuthInterface.current_actor(), subject_id)
    return jsonify(success_response(message='Subject deleted'))


# ===== EXAMS =====

@planner_bp.route('/exams', methods=['GET'])
@login_required
def list_exams():
    exams = ExamService.list_exams(AuthInterface.current_actor())
    return jsonify(success_response([e.to_dict() for e in exams]))


@planner_bp.route('/exams', methods=['POST'])
@login_required
def create_exam():
    data = load_payload(ExamSchema(), get_json_body())
    exam = ExamService.create_exam(AuthInterface.current_actor(), data)
    return jsonify(success_response(exam.to_dict())), 201


@planner_bp.route('/exams/<int:exam_id>', methods=['GET'])
@login_required
def get_exam(exam_id):
    exam = ExamService.get_exam(AuthInterface.current_actor(), exam_id)
    return jsonify(success_response(exam.to_dict()))


@planner_bp.route('/exams/<int:exam_id>', methods=['PATCH'])
@login_required
def update_exam(exam_id):
    changes = load_payload(ExamUpdateSchema(), get_json_body())
    exam = ExamService.update_exam(AuthInterface.current_actor(), exam_id, changes)
    return jsonify(success_response(exam.to_dict()))


@planner_bp.route('/exams/<int:exam_id>', methods=['DELETE'])
@login_required
def delete_exam(exam_id):
    ExamService.delete_exam(AuthInterface.current_actor(), exam_id)
    return jsonify(success_response(message='Exam deleted'))


# ===== TASKS =====

@planner_bp.route('/tasks', methods=['GET'])
@login_required
def list_tasks():
    tasks = TaskService.list_tasks(AuthInterface.current_actor())
    return jsonify(success_response([t.to_dict() for t in tasks]))


@planner_bp.route('/tasks', methods=['POST'])
@login_required
def create_task():
    data = load_payload(TaskSchema(), get_json_body())
    task = TaskService.create_task(AuthInterface.current_actor(), data)
    return jsonify(success_response(task.to_dict())), 201


@planner_bp.route('/tasks/<int:task_id>', methods=['GET'])
@login_required
def get_task(task_id):
    task = TaskService.get_task(AuthInterface.current_actor(), task_id)
    return jsonify(success_response(task.to_dict()))


@planner_bp.route('/tasks/<int:task_id>', methods=['PATCH'])
@login_required
def update_task(task_id):
    """Update a task. Completing it reports any rewards it unlocked."""
    changes = load_payload(TaskUpdateSchema(), get_json_body())
    task, unlocked = TaskService.update_task(AuthInterface.current_actor(), task_id, changes)
    data = task.to_dict()
    data['unlocked_rewards'] = [r.to_dict() for r in unlocked]
    return jsonify(success_response(data))


@planner_bp.route('/tasks/<int:task_id>', methods=['DELETE'])
@login_required
def delete_task(task_id):
    TaskService.delete_task(AuthInterface.current_actor(), task_id)
    return jsonify(success_response(message='Task deleted'))


# ===== REMINDERS =====

@planner_bp.route('/reminders', methods=['GET'])
@login_required
def list_reminders():
    due_only = request.args.get('due', '').lower() in ('1', 'true', 'yes')
    reminders = ReminderService.list_reminders(AuthInterface.current_actor(), due_only=due_only)
    return jsonify(success_response([r.to_dict() for r in reminders]))


@planner_bp.route('/reminders', methods=['POST'])
@login_required
def create_reminder():
    data = load_payload(ReminderSchema(), get_json_body())
    reminder = ReminderService.create_reminder(AuthInterface.current_actor(), data)
    return jsonify(success_response(reminder.to_dict())), 201


@planner_bp.route('/reminders/<int:reminder_id>', methods=['PATCH'])
@login_required
def update_reminder(reminder_id):
    changes = load_payload(ReminderUpdateSchema(), get_json_body())
    reminder = ReminderService.update_reminder(AuthInterface.current_actor(), reminder_id, changes)
    return jsonify(success_response(reminder.to_dict()))


@planner_bp.route('/reminders/<int:reminder_id>', methods=['DELETE'])
@login_required
def delete_reminder(reminder_id):
    ReminderService.delete_reminder(AuthInterface.current_actor(), reminder_id)
    return jsonify(success_response(message='Reminder deleted'))


# ===== STICKY NOTES =====

@planner_bp.route('/sticky-notes', methods=['GET'])
@login_required
def list_sticky_notes():
    notes = StickyNoteService.list_sticky_notes(AuthInterface.current_actor())
    return jsonify(success_response([n.to_dict() for n in notes]))


@planner_bp.route('/sticky-notes', methods=['POST'])
@login_required
def create_sticky_note():
    data = load_payload(StickyNoteSchema(), get_json_body())
    note = StickyNoteService.create_sticky_note(AuthInterface.current_actor(), data)
    return jsonify(success_response(note.to_dict())), 201


@planner_bp.route('/sticky-notes/<int:note_id>', methods=['PATCH'])
@login_required
def update_sticky_note(note_id):
    changes = load_payload(StickyNoteUpdateSchema(), get_json_body())
    note = StickyNoteService.update_sticky_note(AuthInterface.current_actor(), note_id, changes)
    return jsonify(success_response(note.to_dict()))


@planner_bp.route('/sticky-notes/<int:note_id>', methods=['DELETE'])
@login_required
def delete_sticky_note(note_id):
    StickyNoteService.delete_sticky_note(AuthInterface.current_actor(), note_id)
    return jsonify(success_response(message='Sticky note deleted'))


# ===== JOURNAL =====

@planner_bp.route('/journal', methods=['GET'])
@login_required
def list_journal_entries():
    entries = JournalService.list_entries(AuthInterface.current_actor())
    return jsonify(success_response([e.to_dict() for e in entries]))


@planner_bp.route('/journal', methods=['POST'])
@login_required
def create_journal_entry():
    data = load_payload(JournalEntrySchema(), get_json_body())
    entry = JournalService.create_entry(AuthInterface.current_actor(), data)
    return jsonify(success_response(entry.to_dict())), 201


@planner_bp.route('/journal/<int:entry_id>', methods=['PATCH'])
@login_required
def update_journal_entry(entry_id):
    changes = load_payload(JournalEntryUpdateSchema(), get_json_body())
    entry = JournalService.update_entry(AuthInterface.current_actor(), entry_id, changes)
    return jsonify(success_response(entry.to_dict()))


@planner_bp.route('/journal/<int:entry_id>', methods=['DELETE'])
@login_required
def delete_journal_entry(entry_id):
    JournalService.delete_entry(AuthInterface.current_actor(), entry_id)
    return jsonify(success_response(message='Journal entry deleted'))
