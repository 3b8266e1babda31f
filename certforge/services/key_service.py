"""RSA key generation service."""

import logging

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from certforge.utils.validators import normalize_key_size

logger = logging.getLogger("certforge")

PUBLIC_EXPONENT = 65537


class KeyService:
    """Service for RSA key pair generation and serialization."""

    @staticmethod
    def generate_private_key(key_size: int) -> rsa.RSAPrivateKey:
        """
        Generate an RSA key pair.

        Unsupported sizes are coerced to 2048 bits.

        Args:
            key_size: Requested modulus size in bits

        Returns:
            RSA private key (the public half is derived from it)
        """
        key_size = normalize_key_size(key_size)
        logger.debug(f"Generating RSA private key ({key_size} bits)")
        return rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=key_size)

    @staticmethod
    def private_key_to_pem(private_key: rsa.RSAPrivateKey) -> bytes:
        """Serialize a private key as an unencrypted "RSA PRIVATE KEY" PEM block."""
        return private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
