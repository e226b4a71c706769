# tests/conftest.py
"""
Shared fixtures for the ScamShield tests
"""
import os
import pytest

# Force environment variables BEFORE importing the app
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'
os.environ['SECRET_KEY'] = 'test-secret-key-for-testing'
os.environ['APP_ENV'] = 'testing'

from app import create_app, db as _db
from app.models import Report, Blacklist, ScamType


@pytest.fixture(scope='function')
def app():
    """Flask application for tests"""
    app = create_app()
    app.config.update({
        'TESTING': True,
        'SECRET_KEY': 'test-secret-key-for-testing',
        'PRODUCTION': False,
        'AUTO_BLACKLIST_THRESHOLD': 2,
    })
    return app


@pytest.fixture(scope='function')
def db(app):
    """Create and drop the database for each test"""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app, db):
    """HTTP test client"""
    with app.test_client() as client:
        with app.app_context():
            yield client


@pytest.fixture
def app_context(app, db):
    """Application context"""
    with app.app_context():
        yield app


@pytest.fixture
def blacklisted_email(db):
    """Email entry added by a moderator"""
    entry = Blacklist(
        type='email',
        value='fraud@scam.com',
        source='manual',
        notes='Known phishing sender',
    )
    db.session.add(entry)
    db.session.commit()
    return entry


@pytest.fixture
def blacklisted_phone(db):
    """Phone entry added by a moderator"""
    entry = Blacklist(type='phone', value='+447700900000', source='manual')
    db.session.add(entry)
    db.session.commit()
    return entry


@pytest.fixture
def scam_types(db):
    """Mix of active and inactive scam types, inserted out of order"""
    types = [
        ScamType(name='Tech Support', description='Fake support calls',
                 examples=['Your PC is infected'], prevention_tips=['Hang up']),
        ScamType(name='Investment', description='Too good to be true returns', active=False),
        ScamType(name='Phishing', description='Credential theft',
                 examples=['Verify your account'], prevention_tips=['Check the link domain']),
        ScamType(name='Lottery', description='Fake prizes'),
    ]
    db.session.add_all(types)
    db.session.commit()
    return types


def submit(client, **payload):
    """Helper to post a report"""
    return client.post('/api/reports', json=payload)


def add_reports(db, contact_info, count):
    """Helper to insert reports for a contact directly"""
    for i in range(count):
        db.session.add(Report(
            type='Phishing',
            description=f'Report {i}',
            contact_info=contact_info,
            status='new',
        ))
    db.session.commit()
