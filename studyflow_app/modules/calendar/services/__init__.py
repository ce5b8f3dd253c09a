from .event_service import EventService
