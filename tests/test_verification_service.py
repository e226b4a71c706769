# tests/test_verification_service.py
"""
Verification service tests
"""
import pytest
from app.services.verification_service import VerificationService
from app.utils.errors import ValidationError


class TestVerifyEmail:
    """Tests of verify_email"""

    def test_blacklisted(self, app_context, blacklisted_email):
        result = VerificationService.verify_email('fraud@scam.com')
        assert result == {
            'email': 'fraud@scam.com',
            'isBlacklisted': True,
            'domain': 'scam.com',
        }

    def test_case_insensitive_match(self, app_context, blacklisted_email):
        result = VerificationService.verify_email('Fraud@SCAM.com')
        assert result['isBlacklisted'] is True
        # Input echoed unchanged
        assert result['email'] == 'Fraud@SCAM.com'
        assert result['domain'] == 'SCAM.com'

    def test_not_blacklisted(self, app_context, db):
        result = VerificationService.verify_email('user@example.com')
        assert result['isBlacklisted'] is False
        assert result['domain'] == 'example.com'

    def test_other_type_entry_does_not_match_email(self, app_context, db):
        from app.models import Blacklist
        db.session.add(Blacklist(type='other', value='odd@value'))
        db.session.commit()
        assert VerificationService.verify_email('odd@value')['isBlacklisted'] is False

    def test_no_at_sign(self, app_context, db):
        assert VerificationService.verify_email('noatsign')['domain'] == ''

    def test_multiple_at_signs(self, app_context, db):
        assert VerificationService.verify_email('a@b@c')['domain'] == 'b'

    @pytest.mark.parametrize('email', ['', None])
    def test_missing_email(self, app_context, email):
        with pytest.raises(ValidationError) as exc:
            VerificationService.verify_email(email)
        assert exc.value.message == 'Email is required'

    def test_non_string_email(self, app_context):
        with pytest.raises(ValidationError):
            VerificationService.verify_email(12345)


class TestVerifyPhone:
    """Tests of verify_phone"""

    def test_blacklisted(self, app_context, blacklisted_phone):
        result = VerificationService.verify_phone('+447700900000')
        assert result == {
            'phone': '+447700900000',
            'isBlacklisted': True,
            'isInternational': True,
        }

    def test_exact_match_only(self, app_context, blacklisted_phone):
        assert VerificationService.verify_phone('447700900000')['isBlacklisted'] is False

    @pytest.mark.parametrize('phone,international', [
        ('+447700900000', True),
        ('+14155552671', False),
        ('14155552671', False),
        ('4155552671', True),
    ])
    def test_international(self, app_context, db, phone, international):
        assert VerificationService.verify_phone(phone)['isInternational'] is international

    @pytest.mark.parametrize('phone', ['', None])
    def test_missing_phone(self, app_context, phone):
        with pytest.raises(ValidationError) as exc:
            VerificationService.verify_phone(phone)
        assert exc.value.message == 'Phone number is required'
