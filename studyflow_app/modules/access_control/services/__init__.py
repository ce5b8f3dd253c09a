from ....models import CalendarEvent, EventShare, Note, NoteShare
from .access_service import AccessService
from .share_service import ShareService

note_shares = ShareService(NoteShare, Note, 'note_id', 'note')
event_shares = ShareService(EventShare, CalendarEvent, 'event_id', 'event')
