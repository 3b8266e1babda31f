"""Tests for the SubjectAltName codec."""

import pytest
from cryptography import x509

from certforge.utils.san import decode_san_extension, encode_san_extension


@pytest.mark.unit
class TestSANCodec:
    """Test SAN extension encoding and decoding."""

    def test_encode_uses_context_specific_tag_two(self):
        """Test that DNS names are encoded as [2] IMPLICIT IA5String."""
        encoded = encode_san_extension(["a.io"])

        # SEQUENCE { [2] "a.io" }
        assert encoded == b"\x30\x06\x82\x04a.io"

    def test_decode_preserves_order(self):
        """Test decoding returns names in encoded order."""
        names = ["example.com", "www.example.com", "api.example.com"]

        decoded, ok = decode_san_extension(encode_san_extension(names))

        assert ok is True
        assert decoded == names

    def test_encoded_value_parses_with_cryptography(self):
        """Test the encoded value is understood by a standard parser."""
        encoded = encode_san_extension(["example.com", "www.example.com"])
        ext = x509.SubjectAlternativeName([x509.DNSName("example.com"), x509.DNSName("www.example.com")])

        assert ext.public_bytes() == encoded

    def test_decode_skips_non_dns_entries(self):
        """Test IP address entries are ignored."""
        # SEQUENCE { [7] 127.0.0.1, [2] "a.io" }
        data = b"\x30\x0c\x87\x04\x7f\x00\x00\x01\x82\x04a.io"

        decoded, ok = decode_san_extension(data)

        assert ok is True
        assert decoded == ["a.io"]

    def test_decode_empty_sequence(self):
        """Test an empty SEQUENCE yields no names."""
        assert decode_san_extension(b"\x30\x00") == ([], True)

    @pytest.mark.parametrize(
        "data",
        [
            b"",
            b"\x30",
            b"\x30\x05\x82\x04a.io",  # outer length too short
            b"\x30\x06\x82\x09a.io",  # inner length overruns
            b"\x31\x06\x82\x04a.io",  # SET instead of SEQUENCE
            b"\x30\x06\x82\x04a.io\x00",  # trailing data
            b"\x30\x80\x82\x04a.io\x00\x00",  # indefinite length
        ],
    )
    def test_decode_malformed_input(self, data):
        """Test malformed input yields no names instead of raising."""
        decoded, ok = decode_san_extension(data)

        assert decoded == []
        assert ok is False

    def test_encode_rejects_non_ascii(self):
        """Test names that are not IA5String are rejected."""
        with pytest.raises(ValueError):
            encode_san_extension(["bücher.example"])
