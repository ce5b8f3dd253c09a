"""Shared notes: note, invitation (share) and comment models."""

from datetime import datetime, timezone

from ..core.extensions import db
from ..utils.time_utils import isoformat


class Note(db.Model):
    __tablename__ = 'notes'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, default='')
    subject_id = db.Column(db.Integer, db.ForeignKey('subjects.id', ondelete='SET NULL'), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    shares = db.relationship(
        'NoteShare', backref='note', lazy=True, cascade='all, delete-orphan'
    )
    comments = db.relationship(
        'NoteComment', backref='note', lazy=True, cascade='all, delete-orphan',
        order_by='NoteComment.created_at',
    )

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'content': self.content or '',
            'subject_id': self.subject_id,
            'created_at': isoformat(self.created_at),
            'updated_at': isoformat(self.updated_at),
        }


class NoteShare(db.Model):
    """Invitation granting a role on a note to the holder of an email address."""

    __tablename__ = 'note_shares'

    id = db.Column(db.Integer, primary_key=True)
    note_id = db.Column(
        db.Integer, db.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False, index=True
    )
    shared_with_email = db.Column(db.String(255), nullable=False)
    shared_with_user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=True, index=True
    )
    role = db.Column(db.String(20), default='viewer', nullable=False)
    status = db.Column(db.String(20), default='pending', nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'note_id': self.note_id,
            'shared_with_email': self.shared_with_email,
            'shared_with_user_id': self.shared_with_user_id,
            'role': self.role,
            'status': self.status,
            'created_at': isoformat(self.created_at),
        }


class NoteComment(db.Model):
    __tablename__ = 'note_comments'

    id = db.Column(db.Integer, primary_key=True)
    note_id = db.Column(
        db.Integer, db.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False, index=True
    )
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    author = db.relationship('User', lazy=True)

    def to_dict(self):
        return {
            'id': self.id,
            'note_id': self.note_id,
            'user_id': self.user_id,
            'author_name': self.author.name if self.author else None,
            'content': self.content,
            'created_at': isoformat(self.created_at),
        }
