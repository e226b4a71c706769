# app/models/report.py
from app import db
from app.utils.errors import ValidationError
from datetime import datetime
from sqlalchemy.orm import validates


REPORT_STATUSES = ('new', 'reviewed', 'actioned')


class Report(db.Model):
    __tablename__ = 'reports'

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=False)
    contact_info = db.Column(db.String(255), index=True)
    date = db.Column(db.DateTime, default=datetime.utcnow)
    status = db.Column(db.String(20), default='new')  # new, reviewed, actioned
    ip_address = db.Column(db.String(64))
    screenshots = db.Column(db.JSON, default=list)  # ordered list of URLs
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @validates('status')
    def validate_status(self, key, value):
        if value not in REPORT_STATUSES:
            raise ValidationError(f'Invalid report status: {value}')
        return value

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'description': self.description,
            'contactInfo': self.contact_info,
            'date': self.date.isoformat() if self.date else None,
            'status': self.status,
            'ipAddress': self.ip_address,
            'screenshots': list(self.screenshots or []),
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Report {self.type} - {self.status}>'
