# app/routes/frontend.py
import os
from flask import Blueprint, current_app, send_from_directory, abort

bp = Blueprint('frontend', __name__)


@bp.route('/', defaults={'path': ''})
@bp.route('/<path:path>')
def serve(path):
    """Prebuilt frontend bundle; unknown paths fall back to index.html in production"""
    frontend_dir = current_app.config['FRONTEND_DIR']

    if path and os.path.isfile(os.path.join(frontend_dir, path)):
        return send_from_directory(frontend_dir, path)

    if not path or current_app.config.get('PRODUCTION'):
        if os.path.isfile(os.path.join(frontend_dir, 'index.html')):
            return send_from_directory(frontend_dir, 'index.html')

    abort(404)
