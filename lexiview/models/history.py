"""Data model for back/forward history of a display surface."""

from dataclasses import dataclass, field

from .entry import WordEntry


@dataclass
class HistoryState:
    """History owned by one display surface.

    ``back`` and ``forward`` are stacks: the last element is the top.
    """

    current: WordEntry | None = None
    back: list[WordEntry] = field(default_factory=list)
    forward: list[WordEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check if nothing has been loaded yet."""
        return self.current is None

    @property
    def can_go_back(self) -> bool:
        return bool(self.back)

    @property
    def can_go_forward(self) -> bool:
        return bool(self.forward)
