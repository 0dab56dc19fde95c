"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from rookbot.core.enums import GameResult

if TYPE_CHECKING:
    from rookbot.core.move import Move
    from rookbot.core.position import Position

DEFAULT_DEPTH = 2


def validate_depth(depth: object) -> int:
    """Return *depth* if it is a non-negative ``int``, else raise ValueError."""
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise ValueError(f"Search depth must be an int, got {depth!r}")
    if depth < 0:
        raise ValueError(f"Search depth must be >= 0, got {depth}")
    return depth


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = DEFAULT_DEPTH

    def __post_init__(self) -> None:
        validate_depth(self.max_depth)


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``best_move`` is ``None`` when there was nothing to choose from;
    ``outcome`` then tells checkmate from stalemate, and stays
    ``IN_PROGRESS`` if the position itself still has legal moves.
    ``scored_moves`` holds every top-level legal move with its search score
    as ``value``.
    """

    best_move: Move | None
    score: int
    depth: int
    nodes: int
    outcome: GameResult = GameResult.IN_PROGRESS
    scored_moves: tuple[Move, ...] = field(default=())

    @property
    def uci(self) -> str | None:
        return self.best_move.uci if self.best_move is not None else None


class IEngine(Protocol):
    """Protocol for engines driven by the bot or the Qt worker."""

    def search(self, position: Position, limits: SearchLimits) -> SearchResult: ...
