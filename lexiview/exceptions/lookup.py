"""Dictionary lookup exceptions."""

from .base import LexiviewException


class WordLookupError(LexiviewException):
    """Raised when a dictionary lookup fails.

    Exactly one of ``status_code`` (the service answered with something
    other than 200) or ``transport_message`` (the request never produced
    a usable response) is normally set.
    """

    def __init__(
        self,
        word: str,
        status_code: int | None = None,
        transport_message: str | None = None,
    ):
        self.word = word
        self.status_code = status_code
        self.transport_message = transport_message
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.status_code is not None:
            return f"Lookup of '{self.word}' failed with HTTP status {self.status_code}"
        if self.transport_message:
            return f"Lookup of '{self.word}' failed: {self.transport_message}"
        return f"Lookup of '{self.word}' failed"

    @property
    def not_found(self) -> bool:
        """Check if the service reported that the word does not exist."""
        return self.status_code == 404
