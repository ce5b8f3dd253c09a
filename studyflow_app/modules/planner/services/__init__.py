from .exam_service import ExamService
from .journal_service import JournalService
from .reminder_service import ReminderService
from .sticky_note_service import StickyNoteService
from .subject_service import SubjectService
from .task_service import TaskService
