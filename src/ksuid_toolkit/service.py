"""
KsuidService - façade over parsing and generation

This is the surface an outer tool (the CLI, a web handler, a batch job) talks
to. It adds what the core deliberately leaves out: logging, metrics and
settings-driven defaults. Errors from the core propagate unchanged.

Example:
    >>> from ksuid_toolkit import KsuidService
    >>> service = KsuidService()
    >>> ids = service.generate(3)
    >>> service.parse(str(ids[0])) == ids[0]
    True
"""

from collections.abc import Iterable

from ksuid_toolkit.config import KsuidSettings
from ksuid_toolkit.generator import KsuidGenerator
from ksuid_toolkit.kernel.errors import KsuidError
from ksuid_toolkit.kernel.logging import LogOperation, get_logger
from ksuid_toolkit.kernel.metrics import (
    batch_size,
    ksuids_generated_total,
    ksuids_parsed_total,
    track_duration,
)
from ksuid_toolkit.kernel.randomness import PayloadSource
from ksuid_toolkit.kernel.time import TimeProvider
from ksuid_toolkit.ksuid import Ksuid, parse

logger = get_logger(__name__)


class KsuidService:
    """
    Parse and generate identifiers

    Holds one KsuidGenerator; a per-call time provider can override the
    generator's clock for a single batch.
    """

    def __init__(
        self,
        settings: KsuidSettings | None = None,
        payload_source: PayloadSource | None = None,
        time_provider: TimeProvider | None = None,
    ) -> None:
        """
        Initialize service

        Args:
            settings: Defaults for count and output (KsuidSettings() if None)
            payload_source: Payload source for the generator (CSPRNG if None)
            time_provider: Clock for the generator (system clock if None)
        """
        self.settings = settings or KsuidSettings()
        self.generator = KsuidGenerator(payload_source, time_provider)

    @track_duration("parse")
    def parse(self, text: str) -> Ksuid:
        """
        Parse one identifier string

        Raises:
            InvalidLength: If the string does not decode to 20 bytes
            InvalidCharacter: If the string is not base62
        """
        try:
            ksuid = parse(text)
        except KsuidError as exc:
            ksuids_parsed_total.labels(status="failure").inc()
            logger.info("parse rejected", input_length=len(text), error=str(exc))
            raise
        ksuids_parsed_total.labels(status="success").inc()
        return ksuid

    def parse_many(self, texts: Iterable[str]) -> list[Ksuid]:
        """Parse several strings, stopping at the first invalid one"""
        return [self.parse(text) for text in texts]

    @track_duration("generate")
    def generate(
        self,
        count: int | None = None,
        time_provider: TimeProvider | None = None,
    ) -> list[Ksuid]:
        """
        Generate a batch of identifiers

        Args:
            count: How many (settings.default_count if None)
            time_provider: Clock read once per id (generator's clock if None)

        Returns:
            Identifiers in generation order
        """
        if count is None:
            count = self.settings.default_count
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        clock = time_provider or self.generator.time_provider
        with LogOperation(logger, "generate", count=count):
            ksuids = [self.generator.new_ksuid(clock.now()) for _ in range(count)]

        batch_size.observe(count)
        ksuids_generated_total.inc(count)
        return ksuids
