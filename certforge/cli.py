"""CertForge command-line entry point."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from certforge import __version__
from certforge.models.request import GenerationResult
from certforge.services.generator_service import GeneratorService
from certforge.services.parser_service import CertificateParser
from certforge.services.prompt_service import PromptService
from certforge.services.yaml_service import YAMLService
from certforge.utils.logger import setup_logger
from certforge.utils.render import render_summary

logger = logging.getLogger("certforge")

BANNER = "CertForge - TLS Certificate Generator\n----------------------------------"

EPILOG = """\
output files:
  <prefix>.key  Private key file
  <prefix>.csr  Certificate Signing Request file
  <prefix>.crt  Self-signed certificate file (if selected)

examples:
  certforge                          Generate a certificate interactively
  certforge -s -days=730             Self-signed certificate with 2-year validity
  certforge -s -o=/path/to/certs     Self-signed certificate in a specific directory
  certforge --decode cert.crt        Show information about a certificate, CSR or key
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="certforge",
        description=(
            "Generate SSL/TLS private keys and Certificate Signing Requests (CSRs), "
            "or self-signed certificates for development and testing."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--version", action="version", version=f"CertForge {__version__}")
    parser.add_argument(
        "-s", dest="self_signed", action="store_true", help="Create a self-signed certificate instead of just CSR"
    )
    parser.add_argument(
        "-days",
        "--days",
        dest="days",
        type=int,
        default=None,
        help="Validity period in days for self-signed certificates (default: 365)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        type=Path,
        default=None,
        help="Output directory for generated files (default: current directory)",
    )
    parser.add_argument(
        "--decode",
        metavar="FILE",
        type=Path,
        default=None,
        help="Decode and display information about a certificate, CSR, or key file",
    )

    subject = parser.add_argument_group("subject")
    subject.add_argument("--cn", dest="common_name", help="Common Name (domain name)")
    subject.add_argument("--org", dest="organization", help="Organization")
    subject.add_argument("--ou", dest="organizational_unit", help="Organizational Unit")
    subject.add_argument("--country", dest="country", help="Country (2 letter code)")
    subject.add_argument("--state", dest="state", help="State/Province")
    subject.add_argument("--locality", dest="locality", help="Locality/City")

    generation = parser.add_argument_group("generation")
    generation.add_argument("--key-size", dest="key_size", type=int, help="RSA key size (2048, 3072 or 4096)")
    generation.add_argument("--prefix", dest="file_prefix", help="Output file prefix (default: cert)")
    generation.add_argument(
        "--san", dest="sans", action="append", metavar="DNS", help="Subject Alternative Name (repeatable)"
    )
    generation.add_argument(
        "--non-interactive", dest="non_interactive", action="store_true", help="Never prompt; use defaults"
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML configuration file")

    return parser


def run_decode(file_path: Path) -> int:
    """Decode a PEM file and print its summary."""
    summary = CertificateParser.decode_file(file_path)
    print(render_summary(summary))
    return 0


def run_generate(args: argparse.Namespace, prompt_service: PromptService) -> int:
    """Collect input, generate the files and report what was written."""
    if prompt_service.interactive:
        print(BANNER)

    subject_values = {
        field: getattr(args, field)
        for field in ("common_name", "organization", "organizational_unit", "country", "state", "locality")
    }
    request = prompt_service.collect(
        subject_values=subject_values,
        key_size=args.key_size,
        file_prefix=args.file_prefix,
        sans=args.sans,
        self_signed=args.self_signed,
        validity_days=args.days,
        output_dir=args.output_dir,
    )

    result = GeneratorService().generate(request)
    print_result(result)
    return 0


def print_result(result: GenerationResult) -> None:
    """Print the paths written by a generation run."""
    print("\nSuccess!")
    print(f"Private key saved to: {result.key_path}")
    print(f"CSR saved to: {result.csr_path}")

    if result.cert_path is not None:
        print(f"Self-signed certificate saved to: {result.cert_path}")
        print(f"Certificate is valid for {result.validity_days} days (until {result.not_after})")
    else:
        print("\nYou can now submit the CSR file to your Certificate Authority.")

    print("Keep your private key file secure and do not share it with anyone.")


def main(argv: Optional[list[str]] = None, input_func: Callable[[str], str] = input) -> int:
    """
    Run CertForge.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        input_func: Function used to read interactive answers

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = YAMLService.load_config(args.config)
        setup_logger(config)

        if args.decode is not None:
            return run_decode(args.decode)

        prompt_service = PromptService(
            input_func=input_func,
            interactive=not args.non_interactive,
            defaults=config.defaults,
        )
        return run_generate(args, prompt_service)

    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print()
        return 1


if __name__ == "__main__":
    sys.exit(main())
