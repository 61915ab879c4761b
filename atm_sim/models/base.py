"""Base models shared across account kinds."""

from dataclasses import dataclass
from datetime import datetime

HISTORY_TIMESTAMP_FORMAT = "%m/%d/%Y %I:%M %p"


@dataclass(frozen=True)
class HistoryEntry:
    """A single timestamped line of an account's history.

    Rendered as ``MM/DD/YYYY hh:mm AM/PM - description``, for example
    ``01/18/2018 08:58 PM - Account Opened.``
    """

    timestamp: datetime
    description: str

    def render(self, fmt: str = HISTORY_TIMESTAMP_FORMAT) -> str:
        """Format the entry for display."""
        return f"{self.timestamp.strftime(fmt)} - {self.description}"

    def __str__(self) -> str:
        return self.render()
