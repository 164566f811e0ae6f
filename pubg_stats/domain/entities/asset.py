"""Asset entity pointing at a downloadable match file."""
from dataclasses import dataclass


@dataclass
class Asset:
    """A match asset; in practice the telemetry file."""

    id: str
    url: str = ""
    name: str = ""
    description: str = ""
    created_at: str = ""

    def to_dict(self) -> dict:
        """Asset fields, with ``url`` pointing at the downloadable file."""
        return {
            'id': self.id,
            'url': self.url,
            'name': self.name,
            'description': self.description,
            'created_at': self.created_at,
        }
