"""Piece value object: a (color, type) pair plus its FEN letter and glyph."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType

# Lowercase FEN letter per type; White uses the uppercase form.
_FEN_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

_BY_LETTER: dict[str, tuple[Color, PieceType]] = {
    **{letter.upper(): (Color.WHITE, pt) for pt, letter in _FEN_LETTERS.items()},
    **{letter: (Color.BLACK, pt) for pt, letter in _FEN_LETTERS.items()},
}

# Unicode chess block: white king at U+2654, then queen, rook, bishop,
# knight, pawn; the black set follows six code points later.
_GLYPH_BASE = 0x2654
_GLYPH_ORDER: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)

_GLYPHS: dict[tuple[Color, PieceType], str] = {
    (color, pt): chr(_GLYPH_BASE + len(_GLYPH_ORDER) * int(color) + i)
    for color in Color
    for i, pt in enumerate(_GLYPH_ORDER)
}


@dataclass(frozen=True, slots=True)
class Piece:
    """One side's piece of a given type. Compared and hashed by value."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _FEN_LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Parse a FEN letter: ``"N"`` is a white knight, ``"n"`` a black one."""
        try:
            color, piece_type = _BY_LETTER[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, piece_type)

    @property
    def symbol(self) -> str:
        """Glyph drawn on the board, e.g. ♞ for a black knight."""
        return _GLYPHS[(self.color, self.piece_type)]
