from .note_service import NoteService
