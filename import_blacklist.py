"""
Script to import contacts into the blacklist
Run: python import_blacklist.py contacts.csv

One contact per line, optionally as CSV: value,type,notes
"""

import csv
import logging
import sys
from app import create_app, db
from app.services.blacklist_service import BlacklistService
from app.utils.errors import ValidationError
from sqlalchemy.exc import SQLAlchemyError

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)


def read_rows(path):
    """(value, type, notes) tuples from a text/CSV file, comments skipped"""
    with open(path, newline='', encoding='utf-8') as f:
        for row in csv.reader(f):
            if not row or row[0].strip().startswith('#'):
                continue
            value = row[0]
            contact_type = row[1].strip() if len(row) > 1 and row[1].strip() else None
            notes = row[2].strip() if len(row) > 2 else None
            yield value, contact_type, notes


def import_blacklist(path):
    app = create_app()

    with app.app_context():
        db.create_all()
        try:
            result = BlacklistService.import_entries(read_rows(path))
        except (SQLAlchemyError, ValidationError) as e:
            db.session.rollback()
            logger.error(f"Import failed: {e}")
            sys.exit(1)

    print(f"Imported: {result['imported']}")
    print(f"Skipped: {result['skipped']}")


if __name__ == '__main__':
    if len(sys.argv) != 2:
        print("Usage: python import_blacklist.py <file>")
        sys.exit(2)
    import_blacklist(sys.argv[1])
