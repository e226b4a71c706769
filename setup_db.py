# setup_db.py
"""
Script to create the database tables and seed the default scam types
Run with: python setup_db.py
"""

import logging
import sys
from app import create_app, db
from app.models import ScamType
from sqlalchemy.exc import SQLAlchemyError

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)

DEFAULT_SCAM_TYPES = [
    {
        'name': 'Phishing',
        'description': 'Messages impersonating a trusted organisation to steal credentials.',
        'examples': [
            'Your account has been suspended, click here to verify your identity.',
            'Unusual sign-in detected, confirm your password at this link.',
        ],
        'prevention_tips': [
            'Never log in through links received by email or SMS.',
            'Check the sender address and the link domain carefully.',
        ],
    },
    {
        'name': 'Lottery / Prize',
        'description': 'Claims that you have won a prize that requires a fee to release.',
        'examples': [
            'Congratulations, you have won a free gift! Pay shipping to claim it.',
        ],
        'prevention_tips': [
            'You cannot win a contest you never entered.',
            'Legitimate prizes never require an upfront payment.',
        ],
    },
    {
        'name': 'Tech Support',
        'description': 'Fake support agents asking for remote access or payment.',
        'examples': [
            'Your computer is infected, call this number immediately.',
        ],
        'prevention_tips': [
            'Real vendors do not cold-call about infections.',
            'Never grant remote access to unsolicited callers.',
        ],
    },
    {
        'name': 'Investment',
        'description': 'Promises of guaranteed, unusually high returns.',
        'examples': [
            'Double your crypto in 24 hours with our trading bot.',
        ],
        'prevention_tips': [
            'Guaranteed high returns are a red flag.',
            'Verify the firm with your financial regulator.',
        ],
    },
    {
        'name': 'Romance',
        'description': 'Online relationships built to ask for money.',
        'examples': [
            'I need help paying for a flight so we can finally meet.',
        ],
        'prevention_tips': [
            'Never send money to someone you have not met in person.',
        ],
    },
]


def seed_scam_types():
    """Insert default scam types that are not present yet"""
    created = 0
    for data in DEFAULT_SCAM_TYPES:
        if ScamType.query.filter_by(name=data['name']).first():
            continue
        db.session.add(ScamType(active=True, **data))
        created += 1

    db.session.commit()
    return created


def setup_database():
    """Create the tables and seed reference data"""
    app = create_app()

    with app.app_context():
        try:
            logger.info("Creating database tables...")
            db.create_all()

            created = seed_scam_types()
            logger.info(f"Scam types seeded: {created} new")
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Database setup failed: {e}")
            sys.exit(1)


if __name__ == '__main__':
    setup_database()
