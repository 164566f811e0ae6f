"""Status entity describing API health."""
from dataclasses import dataclass


@dataclass
class Status:
    """Represents the PUBG API status resource."""

    id: str
    released_at: str = ""
    version: str = ""

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'released_at': self.released_at,
            'version': self.version,
        }
