"""
Access Control Module

Sharing policy for notes and calendar events plus ownership checks for
everything else. No routes of its own.
"""
from .logics.policies import Decision, Relationship, decide
from .services import AccessService, ShareService, event_shares, note_shares
