# tests/test_scripts.py
"""
Maintenance script tests
"""
from app.models import ScamType
from import_blacklist import read_rows
from setup_db import seed_scam_types, DEFAULT_SCAM_TYPES


class TestSeedScamTypes:
    """setup_db.seed_scam_types"""

    def test_seeds_defaults(self, app_context, db):
        created = seed_scam_types()
        assert created == len(DEFAULT_SCAM_TYPES)
        assert ScamType.query.count() == len(DEFAULT_SCAM_TYPES)
        assert all(t.active for t in ScamType.query.all())

    def test_idempotent(self, app_context, db):
        seed_scam_types()
        assert seed_scam_types() == 0
        assert ScamType.query.count() == len(DEFAULT_SCAM_TYPES)

    def test_keeps_existing(self, app_context, db):
        db.session.add(ScamType(name='Phishing', description='Custom', active=False))
        db.session.commit()

        seed_scam_types()
        phishing = ScamType.query.filter_by(name='Phishing').one()
        assert phishing.description == 'Custom'
        assert phishing.active is False


class TestReadRows:
    """import_blacklist.read_rows"""

    def test_plain_and_csv_lines(self, tmp_path):
        path = tmp_path / 'contacts.csv'
        path.write_text(
            '# exported from the fraud desk\n'
            'scam@example.com\n'
            '+447700900000,phone,Bulletin 12\n'
            'scam-site.com,url\n'
            '\n'
        )
        rows = list(read_rows(str(path)))
        assert rows == [
            ('scam@example.com', None, None),
            ('+447700900000', 'phone', 'Bulletin 12'),
            ('scam-site.com', 'url', None),
        ]
