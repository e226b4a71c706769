# app/models/blacklist.py
from app import db
from app.utils.errors import ValidationError
from datetime import datetime
from sqlalchemy.orm import validates


BLACKLIST_TYPES = ('email', 'phone', 'url', 'other')
BLACKLIST_SOURCES = ('manual', 'auto', 'import')


class Blacklist(db.Model):
    """Known-bad contact value, at most one row per value"""
    __tablename__ = 'blacklist'

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(10), nullable=False)  # email, phone, url, other
    value = db.Column(db.String(255), unique=True, nullable=False)
    source = db.Column(db.String(10), default='manual')  # manual, auto, import
    reports = db.Column(db.Integer)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @validates('type')
    def validate_type(self, key, value):
        if value not in BLACKLIST_TYPES:
            raise ValidationError(f'Invalid blacklist type: {value}')
        return value

    @validates('source')
    def validate_source(self, key, value):
        if value not in BLACKLIST_SOURCES:
            raise ValidationError(f'Invalid blacklist source: {value}')
        return value

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'value': self.value,
            'source': self.source,
            'reports': self.reports,
            'notes': self.notes,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Blacklist {self.type}:{self.value} ({self.source})>'
