# fishcore

Building blocks for a chess engine, in plain Python with no dependencies.

## What is inside

- `fishcore.bitboard` — 64-bit bitboards for an 8×8 board. Square, rank and
  file masks (`square_bb`, `rank_bb`, `file_bb`), `shift`, pawn attacks
  (`pawn_attacks_bb`, `pawn_attacks`), empty-board attacks
  (`pseudo_attacks`) and `attacks_bb`, which gives knight, bishop, rook,
  queen and king attacks with sliders stopping at blockers. Rook and bishop
  attacks are looked up through magic bitboards (`Magic`); the tables are
  built on first use. Also `sliding_attack`, `popcount`, `lsb`, `msb`,
  `least_significant_square_bb`, `iter_squares`, `more_than_one`,
  `line_bb`, `between_bb`, `aligned`, `distance`, `file_distance`,
  `rank_distance`, `edge_distance`, the `Color` and `PieceType` enums, and
  an ASCII printer, `pretty`.
- `fishcore.misc` — the xorshift64* generator `PRNG` (`rand64`,
  `sparse_rand`), `mul_hi64`, `split`, `move_to_front` and a monotonic
  millisecond clock, `now`.
- `fishcore.debug` — `DebugStats`, a thread-safe collector of hit rates,
  means, standard deviations, extremes and correlations in 32 numbered
  slots, with `report()` returning one line per used slot and `clear()`.
- `fishcore.sysinfo` — version strings (`engine_version_info`,
  `engine_info`), `remove_whitespace`, `is_whitespace`, `str_to_size_t`,
  `read_file_to_string`, `get_working_directory` and
  `get_binary_directory`.

Squares are numbered 0 (a1) to 63 (h8), rank by rank. Invalid squares,
ranks, files and piece types raise `ValueError`.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

Attacks of a rook on a1 with a blocker on a4:

```python
from fishcore.bitboard import PieceType, attacks_bb, square_bb, pretty

A1, A4 = 0, 24
print(pretty(attacks_bb(PieceType.ROOK, A1, square_bb(A4))))
```

Walking the squares of a bitboard:

```python
from fishcore.bitboard import RANK_2_BB, iter_squares

print(list(iter_squares(RANK_2_BB)))  # [8, 9, ..., 15]
```

Collecting statistics:

```python
from fishcore.debug import DebugStats

stats = DebugStats()
for value in (3, 5, 7):
    stats.mean_of(value)
    stats.hit_on(value > 4)
print(stats.report())
```

## What it does not do

This package has no position or board representation, no move generation,
search or evaluation, no UCI command loop and no benchmark runner. It
provides no command-line program; it is a library of the pieces listed
above.