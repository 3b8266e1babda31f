"""Generation request and result models."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .subject import Subject

ALLOWED_KEY_SIZES = (2048, 3072, 4096)
DEFAULT_KEY_SIZE = 2048
DEFAULT_VALIDITY_DAYS = 365
DEFAULT_FILE_PREFIX = "cert"


class GenerationRequest(BaseModel):
    """Everything needed to produce a key, a CSR and optionally a certificate."""

    subject: Subject = Field(default_factory=Subject)
    key_size: int = DEFAULT_KEY_SIZE
    sans: list[str] = Field(default_factory=list)
    self_signed: bool = False
    validity_days: int = Field(DEFAULT_VALIDITY_DAYS, gt=0)
    file_prefix: str = DEFAULT_FILE_PREFIX
    output_dir: Path = Path(".")

    @field_validator("sans", mode="before")
    @classmethod
    def clean_sans(cls, v):
        """Trim SAN entries and drop blanks, keeping order."""
        if v is None:
            return []
        return [str(item).strip() for item in v if str(item).strip()]

    @field_validator("key_size")
    @classmethod
    def validate_key_size(cls, v):
        if v not in ALLOWED_KEY_SIZES:
            raise ValueError(f"Key size must be one of {ALLOWED_KEY_SIZES}")
        return v

    @field_validator("file_prefix", mode="before")
    @classmethod
    def default_prefix(cls, v):
        if v is None or not str(v).strip():
            return DEFAULT_FILE_PREFIX
        return str(v).strip()

    @property
    def key_path(self) -> Path:
        return self.output_dir / f"{self.file_prefix}.key"

    @property
    def csr_path(self) -> Path:
        return self.output_dir / f"{self.file_prefix}.csr"

    @property
    def cert_path(self) -> Path:
        return self.output_dir / f"{self.file_prefix}.crt"


class GenerationResult(BaseModel):
    """Paths written by a generation run."""

    key_path: Path
    csr_path: Path
    cert_path: Optional[Path] = None
    validity_days: Optional[int] = None
    not_after: Optional[str] = None
