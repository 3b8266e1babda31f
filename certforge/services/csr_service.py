"""CSR (Certificate Signing Request) assembly service."""

import logging
from typing import Optional

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from certforge.models.subject import Subject
from certforge.utils.san import build_san

logger = logging.getLogger("certforge")

SUBJECT_OIDS = [
    ("common_name", x509.NameOID.COMMON_NAME),
    ("organization", x509.NameOID.ORGANIZATION_NAME),
    ("organizational_unit", x509.NameOID.ORGANIZATIONAL_UNIT_NAME),
    ("country", x509.NameOID.COUNTRY_NAME),
    ("state", x509.NameOID.STATE_OR_PROVINCE_NAME),
    ("locality", x509.NameOID.LOCALITY_NAME),
]


class CSRService:
    """Service for building and signing PKCS#10 requests."""

    @staticmethod
    def build_name(subject: Subject) -> x509.Name:
        """
        Build an X.509 name from a subject.

        Absent fields are left out entirely. The same name is used for the
        CSR and for a self-signed certificate.

        Args:
            subject: Subject identity

        Returns:
            X.509 Name

        Raises:
            ValueError: If a field value is rejected by the X.509 encoder
        """
        attributes = []
        for field, oid in SUBJECT_OIDS:
            value = getattr(subject, field)
            if value:
                attributes.append(x509.NameAttribute(oid, value))
        return x509.Name(attributes)

    @staticmethod
    def create_csr(
        subject: Subject,
        private_key: rsa.RSAPrivateKey,
        sans: Optional[list[str]] = None,
    ) -> x509.CertificateSigningRequest:
        """
        Create a CSR signed with SHA-256 and the given key.

        Args:
            subject: Subject identity
            private_key: RSA key pair
            sans: DNS names for the SubjectAltName extension, in order

        Returns:
            Signed certificate signing request

        Raises:
            ValueError: If the subject or a SAN cannot be encoded
        """
        builder = x509.CertificateSigningRequestBuilder().subject_name(CSRService.build_name(subject))

        if sans:
            builder = builder.add_extension(
                build_san(sans),
                critical=False,
            )
            logger.info(f"Added {len(sans)} Subject Alternative Names to the CSR")

        try:
            return builder.sign(private_key, hashes.SHA256())
        except (TypeError, ValueError) as e:
            logger.error(f"CSR creation failed: {e}")
            raise ValueError(f"Error creating CSR: {e}")

    @staticmethod
    def csr_to_pem(csr: x509.CertificateSigningRequest) -> bytes:
        """Serialize a CSR as a "CERTIFICATE REQUEST" PEM block."""
        return csr.public_bytes(serialization.Encoding.PEM)
