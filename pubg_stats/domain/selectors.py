"""Player lookup selectors."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidArgumentError


class SelectorKind(Enum):
    """The four ways a player can be looked up."""

    ID = "id"
    IDS = "ids"
    NAME = "name"
    NAMES = "names"


def _require_text(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{what} must be a non-empty string, got {value!r}")
    return value


def _require_texts(values: Any, what: str) -> tuple[str, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidArgumentError(f"{what} must be a sequence of strings, got {values!r}")
    if not values:
        raise InvalidArgumentError(f"{what} must not be empty")
    return tuple(_require_text(v, what[:-1] if what.endswith("s") else what) for v in values)


@dataclass(frozen=True)
class PlayerSelector:
    """
    Which player(s) to fetch.

    Build one with :meth:`by_id`, :meth:`by_ids`, :meth:`by_name` or
    :meth:`by_names`. Only a single-id lookup resolves to one ``Player``;
    every other kind, a single name included, resolves to a list.
    """

    kind: SelectorKind
    values: tuple[str, ...]

    @classmethod
    def by_id(cls, player_id: str) -> "PlayerSelector":
        return cls(SelectorKind.ID, (_require_text(player_id, "player id"),))

    @classmethod
    def by_ids(cls, player_ids: Sequence[str]) -> "PlayerSelector":
        return cls(SelectorKind.IDS, _require_texts(player_ids, "player ids"))

    @classmethod
    def by_name(cls, name: str) -> "PlayerSelector":
        return cls(SelectorKind.NAME, (_require_text(name, "player name"),))

    @classmethod
    def by_names(cls, names: Sequence[str]) -> "PlayerSelector":
        return cls(SelectorKind.NAMES, _require_texts(names, "player names"))

    @classmethod
    def from_mapping(cls, args: Mapping[str, Any]) -> "PlayerSelector":
        """Accept the ``{"id": ...}`` / ``{"name": ...}`` shorthand. ``id`` wins if both are set."""
        player_id = args.get("id")
        if player_id:
            if isinstance(player_id, str):
                return cls.by_id(player_id)
            return cls.by_ids(player_id)
        name = args.get("name")
        if name:
            if isinstance(name, str):
                return cls.by_name(name)
            return cls.by_names(name)
        raise InvalidArgumentError("player lookup requires an 'id' or a 'name'")

    @classmethod
    def coerce(cls, value: Any) -> "PlayerSelector":
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise InvalidArgumentError(
            f"expected a PlayerSelector or a mapping with 'id' or 'name', got {type(value).__name__}"
        )

    @property
    def returns_many(self) -> bool:
        return self.kind is not SelectorKind.ID

    @property
    def joined(self) -> str:
        """Values comma-joined in the given order, as the API filters expect."""
        return ",".join(self.values)
