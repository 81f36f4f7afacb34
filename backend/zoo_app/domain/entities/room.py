"""Domain entity: a room animals can be placed in or favour."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Room:
    """Core domain entity for a zoo room."""

    title: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def rename(self, title: str) -> None:
        """Replace the title and refresh the updated_at timestamp."""
        self.title = title
        self.updated_at = datetime.now(timezone.utc)
