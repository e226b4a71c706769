# app/models/scam_type.py
from app import db
from datetime import datetime


class ScamType(db.Model):
    """Reference data shown in the report form dropdown"""
    __tablename__ = 'scam_types'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    description = db.Column(db.Text)
    active = db.Column(db.Boolean, default=True)
    examples = db.Column(db.JSON, default=list)
    prevention_tips = db.Column(db.JSON, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'active': self.active,
            'examples': list(self.examples or []),
            'preventionTips': list(self.prevention_tips or []),
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<ScamType {self.name}>'
