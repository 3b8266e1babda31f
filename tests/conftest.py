"""Pytest configuration and shared fixtures."""

import logging

import pytest

from certforge.models.request import GenerationRequest
from certforge.models.subject import Subject
from certforge.services.key_service import KeyService


@pytest.fixture(autouse=True)
def reset_certforge_logger():
    """Drop handlers attached by setup_logger so each test starts clean."""
    logger = logging.getLogger("certforge")
    logger.propagate = True
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(scope="session")
def rsa_key():
    """A 2048-bit RSA key shared by tests that do not need a fresh one."""
    return KeyService.generate_private_key(2048)


@pytest.fixture
def output_dir(tmp_path):
    """Directory receiving generated files."""
    return tmp_path / "out"


@pytest.fixture
def sample_subject():
    """Create a sample certificate subject."""
    return Subject(
        common_name="example.com",
        organization="Example Inc",
        organizational_unit="IT Department",
        country="US",
        state="California",
        locality="San Francisco",
    )


@pytest.fixture
def sample_request(sample_subject, output_dir):
    """Create a sample self-signed generation request."""
    return GenerationRequest(
        subject=sample_subject,
        key_size=2048,
        sans=["example.com", "www.example.com"],
        self_signed=True,
        validity_days=730,
        file_prefix="cert",
        output_dir=output_dir,
    )
