"""Subject Alternative Name extension codec.

The extension value is a DER ``SEQUENCE OF GeneralName``. DNS names are
carried as ``[2] IMPLICIT IA5String``: context-specific class (2), tag
number 2, primitive encoding.
"""

import logging
from typing import Optional

from cryptography import x509

logger = logging.getLogger("certforge")

CLASS_UNIVERSAL = 0
CLASS_CONTEXT_SPECIFIC = 2
TAG_SEQUENCE = 16
TAG_DNS_NAME = 2


class _TLV:
    """A single decoded DER element."""

    __slots__ = ("tag_class", "constructed", "tag", "value")

    def __init__(self, tag_class: int, constructed: bool, tag: int, value: bytes):
        self.tag_class = tag_class
        self.constructed = constructed
        self.tag = tag
        self.value = value


def build_san(names: list[str]) -> x509.SubjectAlternativeName:
    """Build a SubjectAltName extension holding DNS names, in order."""
    return x509.SubjectAlternativeName([x509.DNSName(name) for name in names])


def encode_san_extension(names: list[str]) -> bytes:
    """
    DER-encode a SubjectAltName extension value holding DNS names.

    Args:
        names: DNS names, in the order they should appear

    Returns:
        DER bytes of the extension value

    Raises:
        ValueError: If a name cannot be encoded as an IA5String
    """
    return build_san(names).public_bytes()


def decode_san_extension(data: bytes) -> tuple[list[str], bool]:
    """
    Extract DNS names from a DER SubjectAltName extension value.

    Entries other than DNS names are skipped. Malformed input never
    raises; it yields no names and ``ok`` set to False.

    Args:
        data: DER bytes of the extension value

    Returns:
        Tuple of (dns_names, ok)
    """
    outer, rest = _read_tlv(data)
    if outer is None or rest:
        return [], False
    if outer.tag_class != CLASS_UNIVERSAL or outer.tag != TAG_SEQUENCE or not outer.constructed:
        return [], False

    names = []
    remaining = outer.value
    while remaining:
        element, remaining = _read_tlv(remaining)
        if element is None:
            logger.debug("Malformed GeneralName inside SubjectAltName extension")
            return [], False
        if element.tag_class == CLASS_CONTEXT_SPECIFIC and element.tag == TAG_DNS_NAME:
            names.append(element.value.decode("ascii", errors="replace"))

    return names, True


def _read_tlv(data: bytes) -> tuple[Optional[_TLV], bytes]:
    """Read one DER element from the front of ``data``."""
    if len(data) < 2:
        return None, data

    first = data[0]
    tag_class = first >> 6
    constructed = bool(first & 0x20)
    tag = first & 0x1F
    pos = 1

    # High tag number form
    if tag == 0x1F:
        tag = 0
        while True:
            if pos >= len(data):
                return None, data
            octet = data[pos]
            pos += 1
            tag = (tag << 7) | (octet & 0x7F)
            if not octet & 0x80:
                break

    if pos >= len(data):
        return None, data
    length = data[pos]
    pos += 1
    if length & 0x80:
        num_octets = length & 0x7F
        # Indefinite lengths are not DER
        if num_octets == 0 or pos + num_octets > len(data):
            return None, data
        length = int.from_bytes(data[pos : pos + num_octets], "big")
        pos += num_octets

    if pos + length > len(data):
        return None, data

    return _TLV(tag_class, constructed, tag, data[pos : pos + length]), data[pos + length :]
