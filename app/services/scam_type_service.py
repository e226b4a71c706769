# app/services/scam_type_service.py
from app.models import ScamType


class ScamTypeService:

    @staticmethod
    def list_active_scam_types():
        """Active scam types ordered by name"""
        return ScamType.query.filter_by(active=True).order_by(ScamType.name.asc()).all()
