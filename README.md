# drillbook

A collection of small, well-known algorithm exercises. Each one is a plain
Python function that takes ordinary Python values and returns its answer.
Invalid input raises `ValueError`.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `drillbook.grids`

Breadth- and depth-first searches on grids.

- `knight_moves(rows, cols, start, target)` returns the fewest knight moves
  between two squares on a 1-indexed board. It raises `ValueError` when a
  square is off the board or the target cannot be reached.
- `ripening_days(grid)` takes cells of `1` (ripe), `0` (unripe) and `-1`
  (empty). It returns the number of days until every tomato is ripe, or `-1`
  if some tomato never ripens.
- `longest_increasing_path(grid)` returns the number of cells on the longest
  strictly increasing orthogonal path.
- `housing_complexes(rows)` takes strings of `'0'` and `'1'` and returns the
  sizes of the connected groups of `'1'` cells in ascending order. The number
  of groups is the length of that list.
- `cavity_map(grid)` marks with `'X'` every interior cell that is deeper than
  all four of its neighbours.
- `grid_search(grid, pattern)` returns `True` if the pattern rows appear as a
  block somewhere in the grid.

### `drillbook.dynamic`

Dynamic programming and counting.

- `longest_common_subsequence(first, second)` returns the length of the
  longest common subsequence.
- `sugar_bags(weight)` returns the fewest 3 kg and 5 kg bags that make up a
  weight exactly, or `None` if no combination does.
- `knapsack(capacity, items)` solves the 0/1 knapsack problem over
  `(weight, value)` pairs.
- `candy_store(n, k)` returns the number of ways to pick `k` candies from `n`
  kinds with repetition, modulo 10^9.
- `expression_count(digit, number)` returns the fewest uses of one digit that
  express a number with `+ - * /` and concatenation. It returns `None` when
  more than eight uses would be needed.

### `drillbook.puzzles`

- `even_odd_query(arr, queries)` answers `"Even"` or `"Odd"` for each
  1-indexed `(x, y)` query.
- `chocolate_feast(n, c, m)`
- `halloween_party(k)`
- `average_after_operations(n, operations)`
- `service_lane(width, cases)`
- `special_problems(k, chapters)`
- `flatland_space_stations(n, stations)`

### `drillbook.exercises`

- `inner_product`, `middle_chars`, `price_durations`, `weekday_2016`,
  `days_in_year`, `swap_case`, `unfinished_runner`, `gym_suits`,
  `largest_number`, `largest_after_removal`, `mix_scoville`,
  `travel_route`, `third_largest_distinct`

## Example

```python
from drillbook.dynamic import longest_common_subsequence
from drillbook.exercises import largest_number

longest_common_subsequence("ACAYKP", "CAPCAK")  # 4
largest_number([3, 30, 34, 5, 9])               # "9534330"
```

## What it does not do

drillbook is a library only. It has no command-line interface and does not
read problem input from standard input or files. To use it, call the
functions from your own code with Python values.