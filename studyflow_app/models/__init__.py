"""Database models package for StudyFlow."""

from ..core.extensions import db

from .user import AuthSession, User
from .planner import Exam, Reminder, Subject, Task
from .note import Note, NoteComment, NoteShare
from .calendar import CalendarEvent, EventShare
from .flashcard import Flashcard
from .journal import JournalEntry, StickyNote
from .quiz import Quiz
from .gamification import Reward
from .notification import Notification
from .settings import AppPreferences, PomodoroSettings
from .ai import AIMessage

__all__ = [
    'db',
    'User',
    'AuthSession',
    'Subject',
    'Exam',
    'Task',
    'Reminder',
    'Note',
    'NoteShare',
    'NoteComment',
    'CalendarEvent',
    'EventShare',
    'Flashcard',
    'StickyNote',
    'JournalEntry',
    'Quiz',
    'Reward',
    'Notification',
    'PomodoroSettings',
    'AppPreferences',
    'AIMessage',
]
