# app/__init__.py
import logging
from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS

db = SQLAlchemy()
migrate = Migrate()
logger = logging.getLogger(__name__)

def create_app(config_object='config.Config'):
    # The bundle is served by the frontend blueprint, not Flask's static route
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_object)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    CORS(app)

    # Import models so metadata is complete for create_all/migrations
    from app import models  # noqa: F401

    from app.utils.errors import ValidationError

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return jsonify({'error': error.message}), 400

    # Register blueprints
    from app.routes import api, frontend
    app.register_blueprint(api.bp)
    app.register_blueprint(frontend.bp)

    # Make sure the sqlite instance directory exists
    import os
    os.makedirs(os.path.join(app.root_path, '..', 'instance'), exist_ok=True)

    logger.info("Database backend: %s (env=%s)",
                app.config['SQLALCHEMY_DATABASE_URI'].split(':', 1)[0],
                app.config.get('APP_ENV'))

    return app
