# magpie

Building blocks for a crossword board game engine, in pure Python with no
third-party dependencies.

## Modules

- `magpie.letter_distribution`: `LetterDistribution` holds, per machine
  letter, the tile count, score, vowel flag and written form, plus
  `score_order` (machine letters by descending score). Build one with
  `parse_letter_distribution(lines)` from `letter,lower,count,score,is_vowel`
  lines, or `load_letter_distribution(path)` from a CSV file.
  `to_machine_letter`, `to_human_letter` and `str_to_machine_letters` convert
  between text and machine letters (multi-character tiles are matched longest
  first; `.` can stand for a played-through square). Unknown text raises
  `InvalidLetterError`. Helpers: `get_blanked_machine_letter`,
  `get_unblanked_machine_letter`, `is_blanked`,
  `get_letter_distribution_filepath` and
  `get_letter_distribution_name_from_lexicon_name`.
- `magpie.rack`: `Rack` keeps tile counts per machine letter, with
  `add_letter`, `take_letter`, `score`, `set_to_string`, `to_string`, `copy`,
  `copy_from` and equality via `racks_are_equal`.
- `magpie.move`: `Move` (a play, exchange or pass, see `MoveType`) with
  `description()` giving text such as `8D ZILLION`, `(Exch ABC)` or `(Pass)`.
  `MoveList` is a bounded heap keeping the best `capacity - 1` moves with
  `insert_spare_move`, `insert_spare_move_top_equity`, `pop_move` and
  `sort_moves` (best first). `compare_moves` fixes a deterministic order:
  equity, then position, tiles played, length and tiles.
- `magpie.player`: `Player` with index, name, rack, score and an optional
  strategy object; `reset()` and `copy()`.
- `magpie.stats`: `Stat`, a weighted running mean/variance accumulator with
  `push`, `push_stat`, `variance`, `stdev` and `standard_error`;
  `combine_stats` merges several; `round_to_nearest_int` rounds half away
  from zero. `STATS_Z95`, `STATS_Z98` and `STATS_Z99` are z-values.
- `magpie.string_builder`: `StringBuilder`, an appendable text buffer with
  `truncate`, `clear`, `peek` and `dump`.
- `magpie.log`: `Logger` writes levelled messages (`LogLevel`) to stderr and
  to registered callbacks or streams; a `FATAL` message raises `SystemExit`.

## Installation

    pip install .

## Example

```python
from magpie.letter_distribution import parse_letter_distribution
from magpie.rack import Rack

ld = parse_letter_distribution([
    "?,?,2,0,0",
    "A,a,9,1,1",
    "B,b,2,3,0",
])
rack = Rack(ld.size)
rack.set_to_string("AB?", ld)
print(rack.to_string(ld))   # ?AB
print(rack.score(ld))       # 4
```

```python
from magpie.stats import Stat

stat = Stat()
for value in (1.0, 2.0, 3.0):
    stat.push(value, 1)
print(stat.mean, stat.variance())
```

## What it does not do

This package holds data structures only. It has no board, no move
generator, no game loop or simulation, no random number source and no
command-line program; callers supply those themselves.

## Running the tests

    pip install .[test]
    pytest