"""Self-signed certificate assembly service."""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from certforge.models.subject import Subject
from certforge.services.csr_service import CSRService
from certforge.utils.san import build_san
from certforge.utils.validators import looks_like_domain

logger = logging.getLogger("certforge")

SERIAL_NUMBER_BITS = 128


class CertificateService:
    """Service for self-signed server certificates."""

    @staticmethod
    def generate_serial_number() -> int:
        """
        Generate a random serial number below 2**128.

        Uses the operating system CSPRNG. Zero is redrawn since X.509
        serial numbers must be positive.

        Returns:
            Serial number
        """
        serial = 0
        while serial == 0:
            serial = secrets.randbits(SERIAL_NUMBER_BITS)
        return serial

    @staticmethod
    def collect_dns_names(common_name: Optional[str], sans: Optional[list[str]]) -> list[str]:
        """
        Build the certificate DNS names.

        Explicit SANs come first, in order. The common name is appended
        when it looks like a domain and is not already listed.

        Args:
            common_name: Subject common name
            sans: Explicit SAN entries

        Returns:
            Ordered DNS names
        """
        dns_names = list(sans or [])
        if looks_like_domain(common_name) and common_name not in dns_names:
            dns_names.append(common_name)
        return dns_names

    @staticmethod
    def create_self_signed_certificate(
        subject: Subject,
        private_key: rsa.RSAPrivateKey,
        sans: Optional[list[str]] = None,
        validity_days: int = 365,
        now: Optional[datetime] = None,
    ) -> x509.Certificate:
        """
        Create a self-signed TLS server certificate.

        Subject and issuer are the same name. The validity window is
        [now, now + validity_days]; key usage is digitalSignature and
        keyEncipherment; extended key usage is serverAuth.

        Args:
            subject: Subject identity
            private_key: RSA key pair used for both the certificate key and the signature
            sans: Explicit DNS names
            validity_days: Validity period in days
            now: Start of the validity window (defaults to the current UTC time)

        Returns:
            Signed certificate

        Raises:
            ValueError: If the certificate cannot be built or signed
        """
        name = CSRService.build_name(subject)
        not_before = (now or datetime.now(timezone.utc)).replace(microsecond=0)
        not_after = not_before + timedelta(days=validity_days)

        builder = (
            x509.CertificateBuilder()
            .subject_name(name)
            .issuer_name(name)
            .public_key(private_key.public_key())
            .serial_number(CertificateService.generate_serial_number())
            .not_valid_before(not_before)
            .not_valid_after(not_after)
            .add_extension(x509.BasicConstraints(ca=False, path_length=None), critical=True)
            .add_extension(
                x509.KeyUsage(
                    digital_signature=True,
                    content_commitment=False,
                    key_encipherment=True,
                    data_encipherment=False,
                    key_agreement=False,
                    key_cert_sign=False,
                    crl_sign=False,
                    encipher_only=False,
                    decipher_only=False,
                ),
                critical=True,
            )
            .add_extension(x509.ExtendedKeyUsage([x509.ExtendedKeyUsageOID.SERVER_AUTH]), critical=False)
        )

        dns_names = CertificateService.collect_dns_names(subject.common_name, sans)
        if dns_names:
            builder = builder.add_extension(
                build_san(dns_names),
                critical=False,
            )

        try:
            return builder.sign(private_key, hashes.SHA256())
        except (TypeError, ValueError) as e:
            logger.error(f"Certificate creation failed: {e}")
            raise ValueError(f"Failed to create certificate: {e}")

    @staticmethod
    def certificate_to_pem(cert: x509.Certificate) -> bytes:
        """Serialize a certificate as a "CERTIFICATE" PEM block."""
        return cert.public_bytes(serialization.Encoding.PEM)
