# app/services/blacklist_service.py
"""
Blacklist maintenance: automatic promotion of repeatedly reported contacts
and bulk import from files
"""
import re
import logging
from app import db
from app.models import Blacklist, Report
from app.models.blacklist import BLACKLIST_TYPES
from app.utils.security import mask_sensitive_data
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)

PHONE_RE = re.compile(r'^[0-9+]+$')


class BlacklistService:
    """Auto-blacklist heuristic and imports"""

    DEFAULT_THRESHOLD = 2

    @staticmethod
    def classify_contact(value):
        """email if it has an '@', phone if only digits and '+', else other"""
        if '@' in value:
            return 'email'
        if PHONE_RE.match(value):
            return 'phone'
        return 'other'

    @staticmethod
    def check_and_blacklist(contact_info, threshold=DEFAULT_THRESHOLD):
        """
        Blacklist a contact once it has been reported more than `threshold` times

        Args:
            contact_info (str): Contact value exactly as reported
            threshold (int): Report count that must be exceeded

        Returns:
            Blacklist | None: the entry created by this call, if any
        """
        report_count = Report.query.filter_by(contact_info=contact_info).count()

        if report_count <= threshold:
            return None

        existing = Blacklist.query.filter_by(value=contact_info).first()
        if existing:
            return None

        contact_type = BlacklistService.classify_contact(contact_info)
        entry = Blacklist(
            type=contact_type,
            value=contact_info,
            source='auto',
            reports=report_count,
        )
        db.session.add(entry)

        try:
            db.session.commit()
        except IntegrityError:
            # Another request inserted the same value after our lookup
            db.session.rollback()
            logger.info(f"Contact already blacklisted: {mask_sensitive_data(contact_info)}")
            return None

        logger.info(f"Auto-blacklisted {contact_type}: {mask_sensitive_data(contact_info)}")
        return entry

    @staticmethod
    def import_entries(rows):
        """
        Add imported contacts to the blacklist

        Args:
            rows: iterable of (value, type, notes); type and notes may be None

        Returns:
            dict: counts of imported and skipped rows
        """
        imported = 0
        skipped = 0
        seen = set()

        for value, contact_type, notes in rows:
            value = (value or '').strip()
            if not value:
                skipped += 1
                continue

            contact_type = contact_type or BlacklistService.classify_contact(value)
            if contact_type not in BLACKLIST_TYPES:
                logger.warning(f"Skipping {mask_sensitive_data(value)}: unknown type {contact_type}")
                skipped += 1
                continue
            if contact_type == 'email':
                # Email lookups compare against the lower-cased address
                value = value.lower()

            if value in seen or Blacklist.query.filter_by(value=value).first():
                skipped += 1
                continue
            seen.add(value)

            db.session.add(Blacklist(
                type=contact_type,
                value=value,
                source='import',
                notes=notes or None,
            ))
            imported += 1

        db.session.commit()
        logger.info(f"Blacklist import: {imported} imported, {skipped} skipped")

        return {'imported': imported, 'skipped': skipped}
