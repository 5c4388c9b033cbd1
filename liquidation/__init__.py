"""
LEGAL-AID FEE LIQUIDATION ENGINE
Tribunale di Brindisi - gratuito patrocinio
"""

from .errors import ComputationError, TemplateError, TemplateMalformed, TemplateUnavailable
from .models import CaseRecord, LiquidationResult
from .processor import LiquidationProcessor

__all__ = [
    'LiquidationProcessor',
    'CaseRecord',
    'LiquidationResult',
    'ComputationError',
    'TemplateError',
    'TemplateMalformed',
    'TemplateUnavailable',
]
