"""Key, CSR and certificate generation pipeline."""

import logging
from pathlib import Path

from certforge.models.request import GenerationRequest, GenerationResult
from certforge.services.cert_service import CertificateService
from certforge.services.csr_service import CSRService
from certforge.services.key_service import KeyService
from certforge.utils.file_utils import FileUtils

logger = logging.getLogger("certforge")

PRIVATE_KEY_MODE = 0o600


class GeneratorService:
    """Service running a complete generation and writing the PEM files."""

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate a key pair, a CSR and optionally a self-signed certificate.

        Every object is built and signed before the first file is written.
        If writing fails, files already written by this run are removed.

        Args:
            request: Generation request

        Returns:
            Paths of the written files

        Raises:
            ValueError: If key, CSR or certificate creation fails
            OSError: If the output files cannot be written
        """
        logger.info(f"Generating RSA private key ({request.key_size} bits)...")
        private_key = KeyService.generate_private_key(request.key_size)

        csr = CSRService.create_csr(request.subject, private_key, request.sans)

        outputs = [
            (request.key_path, KeyService.private_key_to_pem(private_key), PRIVATE_KEY_MODE),
            (request.csr_path, CSRService.csr_to_pem(csr), None),
        ]

        cert = None
        if request.self_signed:
            cert = CertificateService.create_self_signed_certificate(
                request.subject,
                private_key,
                request.sans,
                request.validity_days,
            )
            outputs.append((request.cert_path, CertificateService.certificate_to_pem(cert), None))

        self._write_all(request.output_dir, outputs)

        result = GenerationResult(key_path=request.key_path, csr_path=request.csr_path)
        if cert is not None:
            result.cert_path = request.cert_path
            result.validity_days = request.validity_days
            result.not_after = cert.not_valid_after_utc.strftime("%Y-%m-%d")

        return result

    def _write_all(self, output_dir: Path, outputs: list[tuple]) -> None:
        """
        Write all output files, rolling back on the first failure.

        Args:
            output_dir: Directory receiving the files
            outputs: (path, content, mode) tuples in write order
        """
        written = []
        try:
            FileUtils.ensure_directory(output_dir)
            for path, content, mode in outputs:
                FileUtils.write_binary_file(path, content, mode=mode)
                written.append(path)
        except OSError as e:
            logger.error(f"Writing output files failed: {e}")
            # Rollback
            for path in written:
                try:
                    FileUtils.delete_file(path)
                except OSError as cleanup_error:
                    logger.warning(f"Could not remove {path}: {cleanup_error}")
            raise
