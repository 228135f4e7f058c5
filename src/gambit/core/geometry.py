"""Precomputed board geometry: offsets, rays, home squares."""

from __future__ import annotations

from typing import NamedTuple

from gambit.core.enums import CastlingRights, Color
from gambit.core.types import ALL_SQUARES, Square, is_valid_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Row delta of a pawn step; White advances toward row 0.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}

KING_HOME: dict[Color, Square] = {
    Color.WHITE: Square(7, 4),
    Color.BLACK: Square(0, 4),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for dr, dc in offsets:
            ar = sq.row + dr
            ac = sq.col + dc
            if is_valid_square(ar, ac):
                moves.append(Square(ar, ac))
        targets[sq] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ar = sq.row + dr
            ac = sq.col + dc
            ray: list[Square] = []
            while is_valid_square(ar, ac):
                ray.append(Square(ar, ac))
                ar += dr
                ac += dc
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Castling layout -------------------------------------------------------


class CastlingPath(NamedTuple):
    """Fixed squares involved in one castling move."""

    color: Color
    right: CastlingRights
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]  # must be empty
    king_path: tuple[Square, ...]  # start, transit, destination; must be safe


def _castling_path(color: Color, right: CastlingRights, kingside: bool) -> CastlingPath:
    row = HOME_ROW[color]
    if kingside:
        return CastlingPath(
            color,
            right,
            king_from=Square(row, 4),
            king_to=Square(row, 6),
            rook_from=Square(row, 7),
            rook_to=Square(row, 5),
            between=(Square(row, 5), Square(row, 6)),
            king_path=(Square(row, 4), Square(row, 5), Square(row, 6)),
        )
    return CastlingPath(
        color,
        right,
        king_from=Square(row, 4),
        king_to=Square(row, 2),
        rook_from=Square(row, 0),
        rook_to=Square(row, 3),
        between=(Square(row, 1), Square(row, 2), Square(row, 3)),
        king_path=(Square(row, 4), Square(row, 3), Square(row, 2)),
    )


CASTLING_PATHS: dict[Color, tuple[CastlingPath, ...]] = {
    Color.WHITE: (
        _castling_path(Color.WHITE, CastlingRights.WHITE_KINGSIDE, kingside=True),
        _castling_path(Color.WHITE, CastlingRights.WHITE_QUEENSIDE, kingside=False),
    ),
    Color.BLACK: (
        _castling_path(Color.BLACK, CastlingRights.BLACK_KINGSIDE, kingside=True),
        _castling_path(Color.BLACK, CastlingRights.BLACK_QUEENSIDE, kingside=False),
    ),
}

# King destination → path, for resolving the rook of a castling move.
CASTLING_BY_KING_TARGET: dict[Square, CastlingPath] = {
    path.king_to: path for paths in CASTLING_PATHS.values() for path in paths
}

# Corner square → (owning color, right lost when that rook moves or is taken).
ROOK_CORNERS: dict[Square, tuple[Color, CastlingRights]] = {
    path.rook_from: (path.color, path.right)
    for paths in CASTLING_PATHS.values()
    for path in paths
}

KING_RIGHTS: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}
