# app/services/report_service.py
"""
Report intake
"""
import logging
from datetime import datetime, timezone
from flask import current_app
from app import db
from app.models import Report
from app.services.blacklist_service import BlacklistService
from app.utils.errors import ValidationError
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ReportService:
    """Persist user reports and feed the auto-blacklist"""

    @staticmethod
    def submit_report(data, ip_address=None):
        """
        Save a new report and run the auto-blacklist check for its contact

        Args:
            data (dict): type, description, contactInfo?, date?, screenshots?
            ip_address (str): Network origin of the submitter

        Returns:
            Report: the saved report

        Raises:
            ValidationError: type/description missing or a malformed field
            SQLAlchemyError: the report could not be saved
        """
        report_type = data.get('type')
        description = data.get('description')
        contact_info = data.get('contactInfo') or None

        if not report_type or not description:
            raise ValidationError('Scam type and description are required')
        if contact_info is not None and not isinstance(contact_info, str):
            raise ValidationError('Contact info must be a string')

        report = Report(
            type=report_type,
            description=description,
            contact_info=contact_info,
            date=ReportService.parse_date(data.get('date')),
            status='new',
            ip_address=ip_address,
            screenshots=ReportService.parse_screenshots(data.get('screenshots')),
        )

        db.session.add(report)
        db.session.commit()
        logger.info(f"Report {report.id} saved ({report.type})")

        if contact_info:
            threshold = current_app.config.get(
                'AUTO_BLACKLIST_THRESHOLD', BlacklistService.DEFAULT_THRESHOLD
            )
            try:
                BlacklistService.check_and_blacklist(contact_info, threshold)
            except SQLAlchemyError:
                # The report is already committed; answer success anyway
                db.session.rollback()
                logger.exception(f"Auto-blacklist check failed for report {report.id}")

        return report

    @staticmethod
    def parse_date(value):
        """ISO-8601 string to naive UTC datetime; missing means now"""
        if not value:
            return datetime.utcnow()
        if not isinstance(value, str):
            raise ValidationError('Invalid date')

        try:
            parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            raise ValidationError('Invalid date')

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed

    @staticmethod
    def parse_screenshots(value):
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(url, str) for url in value):
            raise ValidationError('Screenshots must be a list of URLs')
        return value
