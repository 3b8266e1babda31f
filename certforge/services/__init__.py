"""Service layer for key, request and certificate handling."""

from .cert_service import CertificateService
from .csr_service import CSRService
from .generator_service import GeneratorService
from .key_service import KeyService
from .parser_service import CertificateParser
from .prompt_service import PromptService
from .yaml_service import YAMLService

__all__ = [
    "YAMLService",
    "KeyService",
    "CSRService",
    "CertificateService",
    "GeneratorService",
    "CertificateParser",
    "PromptService",
]
