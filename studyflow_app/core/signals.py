"""
Central Signal Registry for Event-Driven Side Effects.

Usage:
    # Publisher (sender)
    from studyflow_app.core.signals import note_shared
    note_shared.send(current_app._get_current_object(), share=share, note=note, owner=owner)

    # Subscriber (receiver) - in module's events.py
    note_shared.connect(on_note_shared)
"""
from blinker import Namespace

# ============================================
# Account Signals
# ============================================
account_signals = Namespace()

# Signal: Fired after a new account is committed
# Payload: user
user_registered = account_signals.signal('user_registered')

# ============================================
# Sharing Signals
# ============================================
sharing_signals = Namespace()

# Signal: Fired after a note share row is committed
# Payload: share, note, owner
note_shared = sharing_signals.signal('note_shared')

# Signal: Fired after a calendar event share row is committed
# Payload: share, event, owner
event_shared = sharing_signals.signal('event_shared')

# ============================================
# Gamification Signals
# ============================================
gamification_signals = Namespace()

# Signal: Fired once per reward whose target was reached
# Payload: user_id, reward
reward_unlocked = gamification_signals.signal('reward_unlocked')

# Signal: Fired once per newly earned badge
# Payload: user_id, badge_id, badge_name
badge_earned = gamification_signals.signal('badge_earned')
