"""Subject identity model."""

from typing import Optional

from pydantic import BaseModel, field_validator


class Subject(BaseModel):
    """Certificate subject information.

    Every field is optional; blank values are normalised to None so that
    they are left out of the distinguished name.
    """

    common_name: Optional[str] = None
    organization: Optional[str] = None
    organizational_unit: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    locality: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def strip_blank(cls, v):
        """Trim whitespace and turn empty strings into None."""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("country")
    @classmethod
    def validate_country(cls, v):
        """Country must be a two letter code."""
        if v is None:
            return v
        if len(v) != 2 or not v.isalpha():
            raise ValueError("Country code must be 2 letters (ISO 3166-1 alpha-2)")
        return v.upper()

    @field_validator("common_name")
    @classmethod
    def validate_common_name(cls, v):
        """Common name is limited to 64 characters."""
        if v is not None and len(v) > 64:
            raise ValueError("Common name too long (max 64 characters)")
        return v

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "common_name": "example.com",
                "organization": "ACME Corp",
                "organizational_unit": "IT Department",
                "country": "US",
                "state": "California",
                "locality": "San Francisco",
            }
        }
