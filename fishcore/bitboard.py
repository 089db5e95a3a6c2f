"""Bitboards: 64-bit square sets, attack tables and magic-bitboard lookups.

Squares are numbered 0 (a1) to 63 (h8), file-major within each rank.
The attack tables are built lazily on first use.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterator, List

from fishcore.misc import PRNG

MASK64 = (1 << 64) - 1

FILE_A_BB = 0x0101010101010101
FILE_B_BB = FILE_A_BB << 1
FILE_C_BB = FILE_A_BB << 2
FILE_D_BB = FILE_A_BB << 3
FILE_E_BB = FILE_A_BB << 4
FILE_F_BB = FILE_A_BB << 5
FILE_G_BB = FILE_A_BB << 6
FILE_H_BB = FILE_A_BB << 7

RANK_1_BB = 0xFF
RANK_2_BB = RANK_1_BB << (8 * 1)
RANK_3_BB = RANK_1_BB << (8 * 2)
RANK_4_BB = RANK_1_BB << (8 * 3)
RANK_5_BB = RANK_1_BB << (8 * 4)
RANK_6_BB = RANK_1_BB << (8 * 5)
RANK_7_BB = RANK_1_BB << (8 * 6)
RANK_8_BB = RANK_1_BB << (8 * 7)

NORTH = 8
EAST = 1
SOUTH = -NORTH
WEST = -EAST
NORTH_EAST = NORTH + EAST
SOUTH_EAST = SOUTH + EAST
SOUTH_WEST = SOUTH + WEST
NORTH_WEST = NORTH + WEST

_NOT_FILE_A = ~FILE_A_BB & MASK64
_NOT_FILE_H = ~FILE_H_BB & MASK64

# PRNG seeds per rank that find the 64-bit magics quickly.
_MAGIC_SEEDS = (728, 10316, 55013, 32803, 12281, 15100, 16645, 255)


class Color(IntEnum):
    WHITE = 0
    BLACK = 1


class PieceType(IntEnum):
    NO_PIECE_TYPE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


@dataclass(eq=False)
class Magic:
    """Magic-bitboard data for one square and one slider type."""

    mask: int
    magic: int
    shift: int
    attacks: List[int] = field(repr=False)

    def index(self, occupied: int) -> int:
        """Return the attack-table index for the given occupancy."""
        return (((occupied & self.mask) * self.magic) & MASK64) >> self.shift

    def attacks_bb(self, occupied: int) -> int:
        """Return the attacks for the given occupancy."""
        return self.attacks[self.index(occupied)]


def _check_square(s: int) -> int:
    if not 0 <= s < 64:
        raise ValueError(f"square {s} out of range")
    return s


def _check_line(index: int, what: str) -> int:
    if not 0 <= index < 8:
        raise ValueError(f"{what} {index} out of range")
    return index


def square_bb(s: int) -> int:
    """Return the bitboard holding only square ``s``."""
    return 1 << _check_square(s)


def more_than_one(b: int) -> bool:
    """Return True if ``b`` has at least two bits set."""
    return bool(b & (b - 1))


def rank_bb(rank: int) -> int:
    """Return the bitboard of all squares on the given rank (0-7)."""
    return RANK_1_BB << (8 * _check_line(rank, "rank"))


def file_bb(file: int) -> int:
    """Return the bitboard of all squares on the given file (0-7)."""
    return FILE_A_BB << _check_line(file, "file")


def shift(b: int, direction: int) -> int:
    """Move every square of ``b`` one step (or two straight steps) in ``direction``.

    Squares moving off the board vanish; an unsupported direction gives 0.
    """
    b &= MASK64
    if direction == NORTH:
        return (b << 8) & MASK64
    if direction == SOUTH:
        return b >> 8
    if direction == NORTH + NORTH:
        return (b << 16) & MASK64
    if direction == SOUTH + SOUTH:
        return b >> 16
    if direction == EAST:
        return ((b & _NOT_FILE_H) << 1) & MASK64
    if direction == WEST:
        return (b & _NOT_FILE_A) >> 1
    if direction == NORTH_EAST:
        return ((b & _NOT_FILE_H) << 9) & MASK64
    if direction == NORTH_WEST:
        return ((b & _NOT_FILE_A) << 7) & MASK64
    if direction == SOUTH_EAST:
        return (b & _NOT_FILE_H) >> 7
    if direction == SOUTH_WEST:
        return (b & _NOT_FILE_A) >> 9
    return 0


def pawn_attacks_bb(color: int, b: int) -> int:
    """Return the squares attacked by pawns of ``color`` standing on ``b``."""
    if Color(color) == Color.WHITE:
        return shift(b, NORTH_WEST) | shift(b, NORTH_EAST)
    return shift(b, SOUTH_WEST) | shift(b, SOUTH_EAST)


def file_distance(s1: int, s2: int) -> int:
    """Return the number of files between two squares."""
    return abs((_check_square(s1) & 7) - (_check_square(s2) & 7))


def rank_distance(s1: int, s2: int) -> int:
    """Return the number of ranks between two squares."""
    return abs((_check_square(s1) >> 3) - (_check_square(s2) >> 3))


def distance(s1: int, s2: int) -> int:
    """Return the number of king steps between two squares."""
    return max(file_distance(s1, s2), rank_distance(s1, s2))


def edge_distance(f: int) -> int:
    """Return the distance of a file (or rank) from the nearest board edge."""
    _check_line(f, "file")
    return min(f, 7 - f)


def _safe_destination(s: int, step: int) -> int:
    to = s + step
    if 0 <= to < 64 and distance(s, to) <= 2:
        return 1 << to
    return 0


_ROOK_DIRECTIONS = (NORTH, SOUTH, EAST, WEST)
_BISHOP_DIRECTIONS = (NORTH_EAST, SOUTH_EAST, SOUTH_WEST, NORTH_WEST)


def sliding_attack(piece_type: int, s: int, occupied: int) -> int:
    """Compute rook or bishop attacks from ``s`` by walking each ray.

    Each ray stops at (and includes) the first occupied square.
    """
    pt = PieceType(piece_type)
    if pt == PieceType.ROOK:
        directions = _ROOK_DIRECTIONS
    elif pt == PieceType.BISHOP:
        directions = _BISHOP_DIRECTIONS
    else:
        raise ValueError("sliding attacks exist only for rooks and bishops")
    _check_square(s)

    attacks = 0
    for d in directions:
        sq = s
        while _safe_destination(sq, d):
            sq += d
            attacks |= 1 << sq
            if (occupied >> sq) & 1:
                break
    return attacks


def _init_magics(pt: PieceType) -> List[Magic]:
    magics: List[Magic] = []
    epoch_count = 0
    for s in range(64):
        # Board edges are not part of the relevant occupancy.
        edges = ((RANK_1_BB | RANK_8_BB) & ~rank_bb(s >> 3)) | (
            (FILE_A_BB | FILE_H_BB) & ~file_bb(s & 7)
        )
        mask = sliding_attack(pt, s, 0) & ~edges & MASK64
        bits = mask.bit_count()
        shift_amount = 64 - bits

        # Carry-Rippler enumeration of all subsets of the mask.
        occupancy: List[int] = []
        reference: List[int] = []
        b = 0
        while True:
            occupancy.append(b)
            reference.append(sliding_attack(pt, s, b))
            b = (b - mask) & mask
            if not b:
                break

        table = [0] * (1 << bits)
        epoch = [0] * (1 << bits)
        rng = PRNG(_MAGIC_SEEDS[s >> 3])

        while True:
            magic = 0
            while (((magic * mask) & MASK64) >> 56).bit_count() < 6:
                magic = rng.sparse_rand()

            epoch_count += 1
            for occ, ref in zip(occupancy, reference):
                idx = ((occ * magic) & MASK64) >> shift_amount
                if epoch[idx] < epoch_count:
                    epoch[idx] = epoch_count
                    table[idx] = ref
                elif table[idx] != ref:
                    break
            else:
                break

        magics.append(Magic(mask, magic, shift_amount, table))
    return magics


@dataclass
class _Tables:
    magics: Dict[PieceType, List[Magic]]
    pseudo: Dict[PieceType, List[int]]
    pawn: Dict[Color, List[int]]
    line: List[List[int]]
    between: List[List[int]]


@functools.lru_cache(maxsize=None)
def _tables() -> _Tables:
    magics = {
        PieceType.ROOK: _init_magics(PieceType.ROOK),
        PieceType.BISHOP: _init_magics(PieceType.BISHOP),
    }

    def slide(pt: PieceType, s: int, occ: int) -> int:
        return magics[pt][s].attacks_bb(occ)

    pseudo = {
        pt: [0] * 64
        for pt in (
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.ROOK,
            PieceType.QUEEN,
            PieceType.KING,
        )
    }
    pawn = {c: [0] * 64 for c in Color}
    line = [[0] * 64 for _ in range(64)]
    between = [[0] * 64 for _ in range(64)]

    for s1 in range(64):
        pawn[Color.WHITE][s1] = pawn_attacks_bb(Color.WHITE, 1 << s1)
        pawn[Color.BLACK][s1] = pawn_attacks_bb(Color.BLACK, 1 << s1)

        for step in (-9, -8, -7, -1, 1, 7, 8, 9):
            pseudo[PieceType.KING][s1] |= _safe_destination(s1, step)
        for step in (-17, -15, -10, -6, 6, 10, 15, 17):
            pseudo[PieceType.KNIGHT][s1] |= _safe_destination(s1, step)

        pseudo[PieceType.BISHOP][s1] = slide(PieceType.BISHOP, s1, 0)
        pseudo[PieceType.ROOK][s1] = slide(PieceType.ROOK, s1, 0)
        pseudo[PieceType.QUEEN][s1] = pseudo[PieceType.BISHOP][s1] | pseudo[PieceType.ROOK][s1]

        for pt in (PieceType.BISHOP, PieceType.ROOK):
            for s2 in range(64):
                if (pseudo[pt][s1] >> s2) & 1:
                    line[s1][s2] = (
                        (slide(pt, s1, 0) & slide(pt, s2, 0)) | (1 << s1) | (1 << s2)
                    )
                    between[s1][s2] = slide(pt, s1, 1 << s2) & slide(pt, s2, 1 << s1)
                between[s1][s2] |= 1 << s2

    return _Tables(magics, pseudo, pawn, line, between)


def pawn_attacks(color: int, s: int) -> int:
    """Return the squares a pawn of ``color`` on ``s`` attacks."""
    return _tables().pawn[Color(color)][_check_square(s)]


def line_bb(s1: int, s2: int) -> int:
    """Return the full edge-to-edge line through both squares, or 0 if they are not aligned."""
    return _tables().line[_check_square(s1)][_check_square(s2)]


def between_bb(s1: int, s2: int) -> int:
    """Return the squares strictly after ``s1`` up to and including ``s2``.

    If the squares are not on a common line, only ``s2`` is returned.
    """
    return _tables().between[_check_square(s1)][_check_square(s2)]


def aligned(s1: int, s2: int, s3: int) -> bool:
    """Return True if the three squares lie on one straight or diagonal line."""
    return bool(line_bb(s1, s2) & square_bb(s3))


def pseudo_attacks(piece_type: int, s: int) -> int:
    """Return the attacks of a non-pawn piece on ``s`` on an empty board."""
    pt = PieceType(piece_type)
    if pt in (PieceType.PAWN, PieceType.NO_PIECE_TYPE):
        raise ValueError("pseudo attacks are not defined for pawns")
    return _tables().pseudo[pt][_check_square(s)]


def attacks_bb(piece_type: int, s: int, occupied: int = 0) -> int:
    """Return the attacks of a non-pawn piece on ``s`` given the occupied squares."""
    pt = PieceType(piece_type)
    if pt in (PieceType.PAWN, PieceType.NO_PIECE_TYPE):
        raise ValueError("attacks_bb is not defined for pawns")
    _check_square(s)
    tables = _tables()
    if pt in (PieceType.BISHOP, PieceType.ROOK):
        return tables.magics[pt][s].attacks_bb(occupied)
    if pt == PieceType.QUEEN:
        return tables.magics[PieceType.BISHOP][s].attacks_bb(occupied) | tables.magics[
            PieceType.ROOK
        ][s].attacks_bb(occupied)
    return tables.pseudo[pt][s]


def popcount(b: int) -> int:
    """Return the number of set bits in a bitboard."""
    return (b & MASK64).bit_count()


def lsb(b: int) -> int:
    """Return the least significant square of a non-empty bitboard."""
    b &= MASK64
    if not b:
        raise ValueError("lsb of an empty bitboard")
    return (b & -b).bit_length() - 1


def msb(b: int) -> int:
    """Return the most significant square of a non-empty bitboard."""
    b &= MASK64
    if not b:
        raise ValueError("msb of an empty bitboard")
    return b.bit_length() - 1


def least_significant_square_bb(b: int) -> int:
    """Return the bitboard of the least significant square of a non-empty bitboard."""
    b &= MASK64
    if not b:
        raise ValueError("empty bitboard")
    return b & -b


def iter_squares(b: int) -> Iterator[int]:
    """Yield the squares of ``b`` from least to most significant."""
    b &= MASK64
    while b:
        low = b & -b
        yield low.bit_length() - 1
        b ^= low


def pretty(b: int) -> str:
    """Return an ASCII drawing of the bitboard, rank 8 at the top."""
    border = "+---+---+---+---+---+---+---+---+\n"
    out = [border]
    for r in range(7, -1, -1):
        for f in range(8):
            out.append("| X " if (b >> (8 * r + f)) & 1 else "|   ")
        out.append(f"| {r + 1}\n")
        out.append(border)
    out.append("  a   b   c   d   e   f   g   h\n")
    return "".join(out)