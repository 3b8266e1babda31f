"""Text rendering of decoded summaries."""

from datetime import datetime, timezone

from certforge.models.summary import CertificateSummary, CSRSummary, PrivateKeySummary

KEY_USAGE_LABELS = {
    "digitalSignature": "Digital Signature",
    "contentCommitment": "Content Commitment",
    "keyEncipherment": "Key Encipherment",
    "dataEncipherment": "Data Encipherment",
    "keyAgreement": "Key Agreement",
    "keyCertSign": "Certificate Sign",
    "cRLSign": "CRL Sign",
    "encipherOnly": "Encipher Only",
    "decipherOnly": "Decipher Only",
}

EXTENDED_KEY_USAGE_LABELS = {
    "serverAuth": "Server Authentication",
    "clientAuth": "Client Authentication",
    "codeSigning": "Code Signing",
    "emailProtection": "Email Protection",
    "timeStamping": "Time Stamping",
    "OCSPSigning": "OCSP Signing",
}


def format_rfc3339(value: datetime) -> str:
    """Format a timestamp as RFC 3339 in UTC, e.g. 2026-01-01T00:00:00Z."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _san_lines(dns_names: list[str]) -> list[str]:
    if not dns_names:
        return []
    return ["", "Subject Alternative Names:"] + [f"  DNS: {name}" for name in dns_names]


def render_certificate(summary: CertificateSummary) -> str:
    lines = [
        "=== Certificate Information ===",
        "",
        f"Subject: {summary.subject}",
        f"Issuer: {summary.issuer}",
        f"Serial Number: {summary.serial_number}",
        f"Not Before: {format_rfc3339(summary.not_before)}",
        f"Not After: {format_rfc3339(summary.not_after)}",
        f"Signature Algorithm: {summary.signature_algorithm}",
    ]
    lines += _san_lines(summary.dns_names)
    lines += ["", f"Self-signed: {_bool(summary.self_signed)}"]

    lines += ["", "Key Usage:"]
    lines += [f"  {KEY_USAGE_LABELS.get(usage, usage)}" for usage in summary.key_usage]

    if summary.extended_key_usage:
        lines += ["", "Extended Key Usage:"]
        lines += [f"  {EXTENDED_KEY_USAGE_LABELS.get(usage, usage)}" for usage in summary.extended_key_usage]

    return "\n".join(lines)


def render_csr(summary: CSRSummary) -> str:
    lines = [
        "=== Certificate Signing Request Information ===",
        "",
        f"Subject: {summary.subject}",
        f"Signature Algorithm: {summary.signature_algorithm}",
    ]
    lines += _san_lines(summary.dns_names)
    lines += ["", f"Signature Valid: {_bool(summary.signature_valid)}"]
    if summary.signature_error:
        lines.append(f"Signature Error: {summary.signature_error}")
    return "\n".join(lines)


def render_private_key(summary: PrivateKeySummary) -> str:
    lines = [
        "=== RSA Private Key Information ===",
        "",
        f"Key Size: {summary.key_size} bits",
        f"Public Exponent: {summary.public_exponent}",
        f"Public Key Fingerprint (SHA-256): {summary.fingerprint_sha256}",
        "",
    ]
    if summary.valid:
        lines.append("Key is valid")
    else:
        lines.append(f"Key Validation Error: {summary.validation_error}")
    return "\n".join(lines)


def render_summary(summary) -> str:
    """Render any decoded summary."""
    if isinstance(summary, CertificateSummary):
        return render_certificate(summary)
    if isinstance(summary, CSRSummary):
        return render_csr(summary)
    if isinstance(summary, PrivateKeySummary):
        return render_private_key(summary)
    raise ValueError(f"Unsupported summary type: {type(summary).__name__}")
