import logging
import os
from app import create_app, db

# Configure logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)

app = create_app()

@app.shell_context_processor
def make_shell_context():
    # Import models here to avoid circular imports
    from app.models import Report, Blacklist, ScamType

    return {'db': db, 'Report': Report, 'Blacklist': Blacklist, 'ScamType': ScamType}

if __name__ == '__main__':
    with app.app_context():
        # Make sure the instance directory exists
        os.makedirs('instance', exist_ok=True)

        # Create tables
        db.create_all()
        logger.info("Database tables created/updated")

    debug = os.environ.get('FLASK_DEBUG', 'False').lower() in ['true', '1', 'on']
    port = app.config['PORT']
    logger.info(f"ScamShield running on http://localhost:{port} (debug={debug})")
    app.run(debug=debug, host='0.0.0.0', port=port)
