"""Protocol for dictionary lookup clients."""

from typing import Protocol

from lexiview.models import RawRecord


class DefinitionClient(Protocol):
    """Interface for a dictionary backend that can fetch raw entries for a word.

    Any dictionary source (Wiktionary REST API, a local dump, a test double)
    implements this protocol to feed the aggregation pipeline.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this client (e.g., 'Wiktionary')."""
        ...

    def fetch_definition(self, word: str) -> list[RawRecord]:
        """Fetch the raw records for a single word.

        Args:
            word: Word to look up, unescaped.

        Returns:
            Raw records in the order the service returned them.

        Raises:
            WordLookupError: If the service cannot be reached or does not
                answer with a usable result.
        """
        ...
