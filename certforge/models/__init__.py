"""Data models for CertForge."""

from .config import AppConfig
from .request import ALLOWED_KEY_SIZES, GenerationRequest, GenerationResult
from .subject import Subject
from .summary import CertificateSummary, CSRSummary, PrivateKeySummary

__all__ = [
    "ALLOWED_KEY_SIZES",
    "AppConfig",
    "Subject",
    "GenerationRequest",
    "GenerationResult",
    "CertificateSummary",
    "CSRSummary",
    "PrivateKeySummary",
]
