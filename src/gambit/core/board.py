"""Board - piece grid plus the state needed to generate moves."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import CastlingRights, Color, PieceType
from gambit.core.errors import InvalidSquareError
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES, BOARD_SIZE, Square, square_name

_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid with side to move, castling rights and en-passant target.

    The grid is a flat list of optional pieces, so :meth:`copy` is a shallow
    list copy. Pieces are immutable and shared between copies.
    """

    __slots__ = ("_squares", "_king_squares", "side_to_move", "castling", "en_passant")

    def __init__(
        self,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None] * _COLOR_COUNT
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant

    @staticmethod
    def _index(sq: Square) -> int:
        row, col = sq
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise InvalidSquareError(f"Square out of range: {tuple(sq)!r}")
        return row * BOARD_SIZE + col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        idx = self._index(sq)
        old_piece = self._squares[idx]
        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            color_idx = int(old_piece.color)
            if self._king_squares[color_idx] == sq:
                self._king_squares[color_idx] = None

        self._squares[idx] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = Square(*sq)

    def is_empty(self, sq: Square) -> bool:
        return self._squares[self._index(sq)] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        """Yield (square, piece) for every piece of *color*, row by row."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None and piece.color == color:
                yield sq, piece

    def squares_of(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in zip(ALL_SQUARES, self._squares) if piece == target]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None if that king is missing."""
        return self._king_squares[int(color)]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board(self.side_to_move, self.castling, self.en_passant)
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White to move, all rights intact."""
        b = cls(Color.WHITE, CastlingRights.ALL, None)
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Text output --------------------------------------------------------

    def render(self, *, glyphs: bool = False) -> str:
        """Grid with rank and file labels, rank 8 first.

        Pieces are FEN letters by default, or Unicode glyphs with *glyphs*.
        """
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._squares[row * BOARD_SIZE + col]
                if p is None:
                    cells.append(".")
                else:
                    cells.append(p.symbol if glyphs else str(p))
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
        )

    def __repr__(self) -> str:
        ep = square_name(self.en_passant) if self.en_passant is not None else "-"
        status = f"{self.side_to_move} to move, castling={self.castling!r}, ep={ep}"
        return f"{self.render()}\n{status}"
