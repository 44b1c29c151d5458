"""History navigation exceptions."""

from enum import Enum

from .base import LexiviewException


class NavigationDirection(Enum):
    """Direction of a history navigation step."""

    BACK = "back"
    FORWARD = "forward"


class NoHistoryError(LexiviewException):
    """Raised when navigating back or forward with an empty stack."""

    def __init__(self, direction: NavigationDirection):
        self.direction = direction
        super().__init__(f"No {direction.value} history")
