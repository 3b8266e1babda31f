"""Decoded file summary models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CertificateSummary(BaseModel):
    """Human-relevant fields of an X.509 certificate."""

    subject: str
    issuer: str
    serial_number: int
    not_before: datetime
    not_after: datetime
    signature_algorithm: str
    dns_names: list[str] = Field(default_factory=list)
    self_signed: bool
    key_usage: list[str] = Field(default_factory=list)
    extended_key_usage: list[str] = Field(default_factory=list)


class CSRSummary(BaseModel):
    """Human-relevant fields of a PKCS#10 certificate request."""

    subject: str
    signature_algorithm: str
    dns_names: list[str] = Field(default_factory=list)
    signature_valid: bool
    signature_error: Optional[str] = None


class PrivateKeySummary(BaseModel):
    """Human-relevant fields of an RSA private key."""

    key_size: int
    public_exponent: int
    fingerprint_sha256: str
    valid: bool
    validation_error: Optional[str] = None
