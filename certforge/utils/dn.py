"""Distinguished name formatting."""

from cryptography import x509

# Rendering order and short names
DN_FIELDS = [
    ("O", x509.NameOID.ORGANIZATION_NAME),
    ("OU", x509.NameOID.ORGANIZATIONAL_UNIT_NAME),
    ("C", x509.NameOID.COUNTRY_NAME),
    ("ST", x509.NameOID.STATE_OR_PROVINCE_NAME),
    ("L", x509.NameOID.LOCALITY_NAME),
]


def format_name(name: x509.Name) -> str:
    """
    Render a subject or issuer name as a comma separated string.

    Order is CN, then every O, OU, C, ST and L value. Absent attributes
    are omitted.

    Example:
        >>> format_name(x509.Name([x509.NameAttribute(x509.NameOID.COMMON_NAME, "example.com")]))
        'CN=example.com'
    """
    parts = []

    common_names = name.get_attributes_for_oid(x509.NameOID.COMMON_NAME)
    if common_names and common_names[0].value:
        parts.append(f"CN={common_names[0].value}")

    for short_name, oid in DN_FIELDS:
        for attribute in name.get_attributes_for_oid(oid):
            parts.append(f"{short_name}={attribute.value}")

    return ", ".join(parts)
