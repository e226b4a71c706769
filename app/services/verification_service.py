# app/services/verification_service.py
"""
Contact lookups against the blacklist
"""
from app.models import Blacklist
from app.utils.errors import ValidationError


class VerificationService:
    """Read-only checks of emails and phone numbers"""

    # Prefixes treated as domestic (North American numbering plan)
    DOMESTIC_PREFIXES = ('+1', '1')

    @staticmethod
    def verify_email(email):
        """
        Check an email address against the blacklist

        Args:
            email (str): Address as entered by the user

        Returns:
            dict: email, isBlacklisted, domain
        """
        if not email:
            raise ValidationError('Email is required')
        if not isinstance(email, str):
            raise ValidationError('Email must be a string')

        entry = Blacklist.query.filter_by(type='email', value=email.lower()).first()

        return {
            'email': email,
            'isBlacklisted': entry is not None,
            'domain': VerificationService.extract_domain(email),
        }

    @staticmethod
    def verify_phone(phone):
        """
        Check a phone number against the blacklist

        Args:
            phone (str): Number as entered by the user, matched exactly

        Returns:
            dict: phone, isBlacklisted, isInternational
        """
        if not phone:
            raise ValidationError('Phone number is required')
        if not isinstance(phone, str):
            raise ValidationError('Phone number must be a string')

        entry = Blacklist.query.filter_by(type='phone', value=phone).first()

        return {
            'phone': phone,
            'isBlacklisted': entry is not None,
            'isInternational': VerificationService.is_international(phone),
        }

    @staticmethod
    def extract_domain(email):
        """Text between the first '@' and the next one, '' without '@'"""
        parts = email.split('@')
        return parts[1] if len(parts) > 1 else ''

    @staticmethod
    def is_international(phone):
        return not phone.startswith(VerificationService.DOMESTIC_PREFIXES)
