import os
from dotenv import load_dotenv

load_dotenv()

# Project base directory
basedir = os.path.abspath(os.path.dirname(__file__))

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-in-production'

    # Database - absolute path for the sqlite fallback
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'scamshield.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server
    PORT = int(os.environ.get('PORT') or 5000)
    APP_ENV = os.environ.get('APP_ENV') or 'development'
    PRODUCTION = APP_ENV == 'production'

    # Prebuilt frontend bundle
    FRONTEND_DIR = os.environ.get('FRONTEND_DIR') or os.path.join(basedir, 'public')

    # Reports needed before a contact is blacklisted (strictly greater than)
    AUTO_BLACKLIST_THRESHOLD = int(os.environ.get('AUTO_BLACKLIST_THRESHOLD') or 2)
