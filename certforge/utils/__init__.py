"""Utility modules."""

from .dn import format_name
from .file_utils import FileUtils
from .logger import setup_logger
from .pem import PemBlock, decode_first_pem_block
from .san import decode_san_extension, encode_san_extension
from .validators import looks_like_domain, normalize_key_size, normalize_validity_days

__all__ = [
    "FileUtils",
    "PemBlock",
    "decode_first_pem_block",
    "decode_san_extension",
    "encode_san_extension",
    "format_name",
    "looks_like_domain",
    "normalize_key_size",
    "normalize_validity_days",
    "setup_logger",
]
