"""Interactive input collection service."""

import logging
from pathlib import Path
from typing import Callable, Optional

from certforge.models.config import GenerationDefaults
from certforge.models.request import GenerationRequest
from certforge.models.subject import Subject
from certforge.utils.validators import normalize_key_size, normalize_validity_days

logger = logging.getLogger("certforge")

# (field, prompt) in the order the operator is asked
SUBJECT_PROMPTS = [
    ("common_name", "Common Name (domain name, e.g. example.com): "),
    ("organization", "Organization (e.g. Company Inc): "),
    ("organizational_unit", "Organizational Unit (e.g. IT Department): "),
    ("country", "Country (2 letter code, e.g. US): "),
    ("state", "State/Province (e.g. California): "),
    ("locality", "Locality/City (e.g. San Francisco): "),
]


class PromptService:
    """Merge command-line values with interactive prompts."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        interactive: bool = True,
        defaults: Optional[GenerationDefaults] = None,
    ):
        """
        Initialize prompt service.

        Args:
            input_func: Reads one answer for a prompt
            output_func: Prints an informational line
            interactive: When False nothing is asked and defaults are used
            defaults: Default key size, validity and file prefix
        """
        self.input_func = input_func
        self.output_func = output_func
        self.interactive = interactive
        self.defaults = defaults or GenerationDefaults()

    def ask(self, prompt: str) -> str:
        """
        Ask one question and return the trimmed answer.

        End of input counts as a blank answer.
        """
        if not self.interactive:
            return ""
        try:
            return self.input_func(prompt).strip()
        except EOFError:
            return ""

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question; anything but y/yes is no."""
        return self.ask(prompt).lower() in ("y", "yes")

    def collect_sans(self) -> list[str]:
        """Read SAN entries one per line until a blank line."""
        if not self.confirm("\nDo you want to add Subject Alternative Names (SANs)? [y/N]: "):
            return []

        self.output_func("Enter Subject Alternative Names (one per line, blank line to finish):")
        sans = []
        while True:
            san = self.ask("")
            if not san:
                break
            sans.append(san)
        return sans

    def collect(
        self,
        subject_values: Optional[dict] = None,
        key_size: Optional[int] = None,
        file_prefix: Optional[str] = None,
        sans: Optional[list[str]] = None,
        self_signed: bool = False,
        validity_days: Optional[int] = None,
        output_dir: Optional[Path] = None,
    ) -> GenerationRequest:
        """
        Build a generation request, prompting for every value not given.

        Args:
            subject_values: Subject fields already supplied on the command line
            key_size: Key size flag value
            file_prefix: Output prefix flag value
            sans: SAN flag values; when given the SAN prompt is skipped
            self_signed: Whether -s was given
            validity_days: -days flag value
            output_dir: -o flag value

        Returns:
            Validated generation request

        Raises:
            ValueError: If a subject value is invalid
        """
        subject_values = dict(subject_values or {})
        for field, prompt in SUBJECT_PROMPTS:
            if subject_values.get(field) is None:
                subject_values[field] = self.ask(prompt)
        subject = Subject(**subject_values)

        if key_size is None:
            answer = self.ask(f"RSA Key Size (2048, 3072, or 4096) [default: {self.defaults.key_size}]: ")
            key_size = normalize_key_size(answer or self.defaults.key_size)
        else:
            key_size = normalize_key_size(key_size)

        if file_prefix is None:
            file_prefix = self.ask(f"Output file prefix [default: {self.defaults.file_prefix}]: ")
        file_prefix = file_prefix or self.defaults.file_prefix

        days = normalize_validity_days(validity_days, default=self.defaults.validity_days)
        create_self_signed = self_signed
        if not self_signed:
            create_self_signed = self.confirm("\nDo you want to create a self-signed certificate? [y/N]: ")
            if create_self_signed:
                answer = self.ask(f"Certificate validity in days [default: {days}]: ")
                days = normalize_validity_days(answer, default=days)

        if sans is None:
            sans = self.collect_sans()

        return GenerationRequest(
            subject=subject,
            key_size=key_size,
            sans=sans,
            self_signed=create_self_signed,
            validity_days=days,
            file_prefix=file_prefix,
            output_dir=output_dir or Path("."),
        )
