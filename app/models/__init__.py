# Import all models
from .report import Report
from .blacklist import Blacklist
from .scam_type import ScamType

__all__ = ['Report', 'Blacklist', 'ScamType']
