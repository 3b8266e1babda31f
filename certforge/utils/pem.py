"""PEM block reader."""

import base64
import binascii
import logging
import re
from typing import NamedTuple, Optional

logger = logging.getLogger("certforge")

PEM_BLOCK_PATTERN = re.compile(
    r"-----BEGIN (?P<label>[A-Z0-9 ]+)-----\r?\n(?P<body>.*?)-----END (?P=label)-----",
    re.DOTALL,
)

LABEL_PRIVATE_KEY_RSA = "RSA PRIVATE KEY"
LABEL_PRIVATE_KEY = "PRIVATE KEY"
LABEL_CERTIFICATE_REQUEST = "CERTIFICATE REQUEST"
LABEL_CERTIFICATE = "CERTIFICATE"


class PemBlock(NamedTuple):
    """A decoded PEM block."""

    label: str
    der: bytes


def decode_first_pem_block(pem_text: str) -> PemBlock:
    """
    Decode the first PEM block in ``pem_text``.

    A block whose body is not valid base64 is skipped. Blocks after the
    first decodable one are ignored.

    Args:
        pem_text: Text with at least one PEM block

    Returns:
        The block label and its DER payload

    Raises:
        ValueError: If no decodable PEM block is present
    """
    matches = list(PEM_BLOCK_PATTERN.finditer(pem_text))

    for index, match in enumerate(matches):
        der = _decode_body(match.group("body"))
        if der is None:
            logger.debug(f"Skipping undecodable {match.group('label')} block")
            continue
        if index < len(matches) - 1:
            logger.debug(f"Ignoring {len(matches) - index - 1} trailing PEM block(s)")
        return PemBlock(match.group("label"), der)

    raise ValueError("Failed to parse PEM block from file")


def _decode_body(body: str) -> Optional[bytes]:
    """Base64-decode a block body, or return None if it is not valid base64."""
    lines = []
    for line in body.splitlines():
        line = line.strip()
        # RFC 1421 headers such as "Proc-Type: 4,ENCRYPTED"
        if not line or ":" in line:
            continue
        lines.append(line)

    try:
        return base64.b64decode("".join(lines), validate=True)
    except (binascii.Error, ValueError):
        return None
