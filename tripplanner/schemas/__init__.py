"""
API and transfer schemas.
"""

from .base import Envelope
from .transfer import ExportCollections, ExportData, ImportCounts, ImportResult

__all__ = [
    "Envelope",
    "ExportCollections",
    "ExportData",
    "ImportCounts",
    "ImportResult",
]
