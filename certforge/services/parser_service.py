"""Certificate, CSR and private key decoding service."""

import hashlib
import logging
import math
from pathlib import Path
from typing import Optional, Union

from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from certforge.models.summary import CertificateSummary, CSRSummary, PrivateKeySummary
from certforge.utils.dn import format_name
from certforge.utils.file_utils import FileUtils
from certforge.utils.pem import (
    LABEL_CERTIFICATE,
    LABEL_CERTIFICATE_REQUEST,
    LABEL_PRIVATE_KEY,
    LABEL_PRIVATE_KEY_RSA,
    decode_first_pem_block,
)
from certforge.utils.san import decode_san_extension

logger = logging.getLogger("certforge")

Summary = Union[CertificateSummary, CSRSummary, PrivateKeySummary]

SIGNATURE_ALGORITHM_NAMES = {
    x509.SignatureAlgorithmOID.RSA_WITH_MD5: "MD5-RSA",
    x509.SignatureAlgorithmOID.RSA_WITH_SHA1: "SHA1-RSA",
    x509.SignatureAlgorithmOID.RSA_WITH_SHA256: "SHA256-RSA",
    x509.SignatureAlgorithmOID.RSA_WITH_SHA384: "SHA384-RSA",
    x509.SignatureAlgorithmOID.RSA_WITH_SHA512: "SHA512-RSA",
    x509.SignatureAlgorithmOID.RSASSA_PSS: "RSASSA-PSS",
    x509.SignatureAlgorithmOID.ECDSA_WITH_SHA1: "ECDSA-SHA1",
    x509.SignatureAlgorithmOID.ECDSA_WITH_SHA256: "ECDSA-SHA256",
    x509.SignatureAlgorithmOID.ECDSA_WITH_SHA384: "ECDSA-SHA384",
    x509.SignatureAlgorithmOID.ECDSA_WITH_SHA512: "ECDSA-SHA512",
    x509.SignatureAlgorithmOID.ED25519: "Ed25519",
}

EKU_NAMES = {
    x509.ExtendedKeyUsageOID.SERVER_AUTH: "serverAuth",
    x509.ExtendedKeyUsageOID.CLIENT_AUTH: "clientAuth",
    x509.ExtendedKeyUsageOID.CODE_SIGNING: "codeSigning",
    x509.ExtendedKeyUsageOID.EMAIL_PROTECTION: "emailProtection",
    x509.ExtendedKeyUsageOID.TIME_STAMPING: "timeStamping",
    x509.ExtendedKeyUsageOID.OCSP_SIGNING: "OCSPSigning",
}

# Raised by cryptography when it parses the extensions of a loaded object
EXTENSION_ERRORS = (ValueError, x509.DuplicateExtension, x509.UnsupportedGeneralNameType)


class CertificateParser:
    """Service for decoding PEM files into summaries."""

    @staticmethod
    def decode_file(file_path: Path) -> Summary:
        """
        Decode the first PEM block of a file.

        Args:
            file_path: Path to a certificate, CSR or private key file

        Returns:
            Summary matching the block type

        Raises:
            ValueError: If the file cannot be read or decoded
        """
        try:
            content = FileUtils.read_binary_file(file_path)
        except OSError as e:
            raise ValueError(f"Error reading file: {e}")

        # Latin-1 decodes any byte sequence
        return CertificateParser.decode_pem(content.decode("latin-1"))

    @staticmethod
    def decode_pem(pem_text: str) -> Summary:
        """
        Decode the first PEM block of a string and dispatch on its label.

        Args:
            pem_text: PEM-encoded content

        Returns:
            Summary matching the block type

        Raises:
            ValueError: If no PEM block is found, the label is unsupported,
                or the DER payload cannot be parsed
        """
        block = decode_first_pem_block(pem_text)

        if block.label == LABEL_CERTIFICATE:
            try:
                cert = x509.load_der_x509_certificate(block.der)
            except ValueError as e:
                raise ValueError(f"Failed to parse certificate: {e}")
            return CertificateParser.parse_certificate(cert)

        if block.label == LABEL_CERTIFICATE_REQUEST:
            try:
                csr = x509.load_der_x509_csr(block.der)
            except ValueError as e:
                raise ValueError(f"Failed to parse CSR: {e}")
            return CertificateParser.parse_csr(csr)

        if block.label in (LABEL_PRIVATE_KEY_RSA, LABEL_PRIVATE_KEY):
            try:
                key = serialization.load_der_private_key(
                    block.der, password=None, unsafe_skip_rsa_key_validation=True
                )
            except (TypeError, ValueError) as e:
                kind = "RSA private key" if block.label == LABEL_PRIVATE_KEY_RSA else "private key"
                raise ValueError(f"Failed to parse {kind}: {e}")
            if not isinstance(key, rsa.RSAPrivateKey):
                raise ValueError("Unsupported private key type")
            return CertificateParser.parse_private_key(key)

        raise ValueError(f"Unsupported PEM block type: {block.label}")

    @staticmethod
    def parse_certificate(cert: x509.Certificate) -> CertificateSummary:
        """
        Summarize an X.509 certificate.

        Args:
            cert: Certificate object

        Returns:
            Certificate summary
        """
        subject = format_name(cert.subject)
        issuer = format_name(cert.issuer)

        return CertificateSummary(
            subject=subject,
            issuer=issuer,
            serial_number=cert.serial_number,
            not_before=cert.not_valid_before_utc,
            not_after=cert.not_valid_after_utc,
            signature_algorithm=CertificateParser._signature_algorithm_name(cert.signature_algorithm_oid),
            dns_names=CertificateParser._extract_certificate_dns_names(cert),
            self_signed=subject == issuer,
            key_usage=CertificateParser._extract_key_usage(cert),
            extended_key_usage=CertificateParser._extract_extended_key_usage(cert),
        )

    @staticmethod
    def parse_csr(csr: x509.CertificateSigningRequest) -> CSRSummary:
        """
        Summarize a certificate signing request and verify its signature.

        Args:
            csr: CSR object

        Returns:
            CSR summary
        """
        signature_valid = csr.is_signature_valid
        return CSRSummary(
            subject=format_name(csr.subject),
            signature_algorithm=CertificateParser._signature_algorithm_name(csr.signature_algorithm_oid),
            dns_names=CertificateParser._extract_csr_dns_names(csr),
            signature_valid=signature_valid,
            signature_error=None if signature_valid else "signature does not match the embedded public key",
        )

    @staticmethod
    def parse_private_key(key: rsa.RSAPrivateKey) -> PrivateKeySummary:
        """
        Summarize an RSA private key and check its internal consistency.

        Args:
            key: RSA private key

        Returns:
            Private key summary
        """
        public_numbers = key.public_key().public_numbers()
        public_der = key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        validation_error = CertificateParser._validate_private_key(key)

        return PrivateKeySummary(
            key_size=public_numbers.n.bit_length(),
            public_exponent=public_numbers.e,
            fingerprint_sha256=hashlib.sha256(public_der).hexdigest(),
            valid=validation_error is None,
            validation_error=validation_error,
        )

    @staticmethod
    def _signature_algorithm_name(oid: x509.ObjectIdentifier) -> str:
        """Map a signature algorithm OID to a short display name."""
        return SIGNATURE_ALGORITHM_NAMES.get(oid, oid.dotted_string)

    @staticmethod
    def _extract_certificate_dns_names(cert: x509.Certificate) -> list[str]:
        """
        Extract DNS Subject Alternative Names from a certificate.

        Args:
            cert: Certificate object

        Returns:
            List of DNS names (empty if the extension is absent or unreadable)
        """
        try:
            san_ext = cert.extensions.get_extension_for_oid(x509.ExtensionOID.SUBJECT_ALTERNATIVE_NAME)
            return san_ext.value.get_values_for_type(x509.DNSName)
        except x509.ExtensionNotFound:
            return []
        except EXTENSION_ERRORS as e:
            logger.debug(f"Unreadable certificate extensions: {e}")
            return []

    @staticmethod
    def _extract_csr_dns_names(csr: x509.CertificateSigningRequest) -> list[str]:
        """
        Extract DNS names by walking the CSR's SubjectAltName DER value.

        Args:
            csr: CSR object

        Returns:
            List of DNS names (empty if the extension is absent or malformed)
        """
        try:
            extensions = csr.extensions
        except EXTENSION_ERRORS as e:
            logger.debug(f"Unreadable CSR extensions: {e}")
            return []

        dns_names = []
        for ext in extensions:
            if ext.oid != x509.ExtensionOID.SUBJECT_ALTERNATIVE_NAME:
                continue
            if isinstance(ext.value, x509.UnrecognizedExtension):
                raw = ext.value.value
            else:
                raw = ext.value.public_bytes()
            names, ok = decode_san_extension(raw)
            if ok:
                dns_names.extend(names)
        return dns_names

    @staticmethod
    def _extract_key_usage(cert: x509.Certificate) -> list[str]:
        """
        Extract Key Usage extension values.

        Args:
            cert: Certificate object

        Returns:
            List of Key Usage strings (e.g., ["digitalSignature", "keyEncipherment"])
        """
        try:
            ku = cert.extensions.get_extension_for_oid(x509.ExtensionOID.KEY_USAGE).value
        except x509.ExtensionNotFound:
            return []
        except EXTENSION_ERRORS as e:
            logger.debug(f"Unreadable certificate extensions: {e}")
            return []

        usage_list = []
        if ku.digital_signature:
            usage_list.append("digitalSignature")
        if ku.content_commitment:  # Also known as nonRepudiation
            usage_list.append("contentCommitment")
        if ku.key_encipherment:
            usage_list.append("keyEncipherment")
        if ku.data_encipherment:
            usage_list.append("dataEncipherment")
        if ku.key_agreement:
            usage_list.append("keyAgreement")
        if ku.key_cert_sign:
            usage_list.append("keyCertSign")
        if ku.crl_sign:
            usage_list.append("cRLSign")
        # encipher_only and decipher_only are only defined with key_agreement
        if ku.key_agreement and ku.encipher_only:
            usage_list.append("encipherOnly")
        if ku.key_agreement and ku.decipher_only:
            usage_list.append("decipherOnly")

        return usage_list

    @staticmethod
    def _extract_extended_key_usage(cert: x509.Certificate) -> list[str]:
        """
        Extract Extended Key Usage extension values.

        Args:
            cert: Certificate object

        Returns:
            List of Extended Key Usage strings, unknown OIDs as dotted strings
        """
        try:
            eku_ext = cert.extensions.get_extension_for_oid(x509.ExtensionOID.EXTENDED_KEY_USAGE)
        except x509.ExtensionNotFound:
            return []
        except EXTENSION_ERRORS as e:
            logger.debug(f"Unreadable certificate extensions: {e}")
            return []

        return [EKU_NAMES.get(oid, oid.dotted_string) for oid in eku_ext.value]

    @staticmethod
    def _validate_private_key(key: rsa.RSAPrivateKey) -> Optional[str]:
        """
        Check the CRT components of an RSA key against each other.

        Args:
            key: RSA private key

        Returns:
            Error message, or None when the key is consistent
        """
        numbers = key.private_numbers()
        p, q, d = numbers.p, numbers.q, numbers.d
        n, e = numbers.public_numbers.n, numbers.public_numbers.e

        if p <= 1 or q <= 1:
            return "invalid prime factors"
        if p * q != n:
            return "invalid modulus"
        if e < 2 or e >= n:
            return "public exponent out of range"

        carmichael = math.lcm(p - 1, q - 1)
        if (d * e) % carmichael != 1:
            return "invalid exponents"
        if numbers.dmp1 != d % (p - 1) or numbers.dmq1 != d % (q - 1):
            return "invalid CRT exponents"
        if (numbers.iqmp * q) % p != 1:
            return "invalid CRT coefficient"

        return None
