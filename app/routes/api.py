# app/routes/api.py
from flask import Blueprint, request, jsonify
import logging
from app import db
from app.services.analysis_service import AnalysisService
from app.services.verification_service import VerificationService
from app.services.report_service import ReportService
from app.services.scam_type_service import ScamTypeService
from app.utils.security import get_client_ip
from sqlalchemy.exc import SQLAlchemyError

bp = Blueprint('api', __name__, url_prefix='/api')
logger = logging.getLogger(__name__)


def get_payload():
    """JSON body as a dict; anything else counts as empty"""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


@bp.route('/analyze', methods=['POST'])
def analyze():
    """Score a message for scam indicators"""
    result = AnalysisService.analyze(get_payload().get('text'))
    return jsonify(result)


@bp.route('/verify/email', methods=['POST'])
def verify_email():
    """Check an email address against the blacklist"""
    email = get_payload().get('email')

    try:
        result = VerificationService.verify_email(email)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Email verification error: {e}")
        return jsonify({'error': 'Server error during email verification'}), 500

    return jsonify(result)


@bp.route('/verify/phone', methods=['POST'])
def verify_phone():
    """Check a phone number against the blacklist"""
    phone = get_payload().get('phone')

    try:
        result = VerificationService.verify_phone(phone)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Phone verification error: {e}")
        return jsonify({'error': 'Server error during phone verification'}), 500

    return jsonify(result)


@bp.route('/reports', methods=['POST'])
def submit_report():
    """Save a user report"""
    try:
        report = ReportService.submit_report(get_payload(), ip_address=get_client_ip())
        body = {'message': 'Report submitted successfully', 'report': report.to_dict()}
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Report submission error: {e}")
        return jsonify({'error': 'Server error during report submission'}), 500

    return jsonify(body), 201


@bp.route('/scam-types', methods=['GET'])
def scam_types():
    """Active scam types for the report form dropdown"""
    try:
        types = ScamTypeService.list_active_scam_types()
        body = [scam_type.to_dict() for scam_type in types]
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Error fetching scam types: {e}")
        return jsonify({'error': 'Server error fetching scam types'}), 500

    return jsonify(body)


@bp.route('/<path:path>', methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE'])
def not_found(path):
    return jsonify({'error': 'Not found'}), 404
