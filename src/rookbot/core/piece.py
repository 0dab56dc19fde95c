"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from rookbot.core.enums import Rank, Team

# FEN character ↔ (Team, Rank)
_CHAR_MAP: dict[str, tuple[Team, Rank]] = {
    "P": (Team.WHITE, Rank.PAWN),
    "N": (Team.WHITE, Rank.KNIGHT),
    "B": (Team.WHITE, Rank.BISHOP),
    "R": (Team.WHITE, Rank.ROOK),
    "Q": (Team.WHITE, Rank.QUEEN),
    "K": (Team.WHITE, Rank.KING),
    "p": (Team.BLACK, Rank.PAWN),
    "n": (Team.BLACK, Rank.KNIGHT),
    "b": (Team.BLACK, Rank.BISHOP),
    "r": (Team.BLACK, Rank.ROOK),
    "q": (Team.BLACK, Rank.QUEEN),
    "k": (Team.BLACK, Rank.KING),
}

_FEN_CHARS: dict[tuple[Team, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    team: Team
    rank: Rank

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.team, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            team, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(team, rank)

    @property
    def value(self) -> int:
        """Signed material value of this piece."""
        return self.rank.valuation(self.team)
