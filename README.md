# chartcoords

Coordinate systems and data helpers for charts. The package turns logical values
into pixel positions. The values can be numbers, categories, dates, datetimes or
durations. It also picks round key points for axis ticks and grid lines. It has no
dependencies outside the standard library.

## Modules

- `chartcoords.translate`: the `CoordTranslate` and `ReverseCoordTranslate` base
  classes. `Shift` moves points by a fixed offset. `ShiftAndTrans` applies another
  translation and then a shift. Both can translate in either direction.
- `chartcoords.ranged`: the axis base classes `Ranged`, `ReversibleRanged` and
  `DiscreteRanged`. `RangedCoord` is a cartesian system built from two axes, with
  `translate`, `reverse_translate`, `x_range`, `y_range`, `x_axis_pixel_range`,
  `y_axis_pixel_range` and `draw_mesh`. `draw_mesh` hands each grid line to a
  callback as a `MeshLine`, tagged `MeshKind.X` or `MeshKind.Y`. The module also has
  two axis decorators. `CentricDiscreteRange` centres each value in its slot.
  `PartialAxis` draws the axis line over only part of the range. `make_partial_axis`
  builds a `PartialAxis` from the visible fraction of the full axis.
- `chartcoords.numeric`: the linear axes `RangedCoordFloat(start, end)` and
  `RangedCoordInt(start, end)`. `GroupBy(inner, size)` puts integer key points on
  multiples of `size`. The functions `compute_float_key_points` and
  `compute_int_key_points` pick the tick values.
- `chartcoords.logarithmic`: `LogCoord(start, end)`, a log-scaled axis. With integer
  bounds the key points are integers, and an integer zero is placed as if it were 0.5.
- `chartcoords.category`: `Category(name, elements)`, an axis over a fixed list.
  `get(value)` returns the category that refers to that element, or `None` when the
  value is not in the list.
- `chartcoords.dates`: `RangedDate` gives daily or weekly key points. `Monthly` and
  `Yearly` put key points on the first of a month, and work for both `date` and
  `datetime` values. `map_time` maps a time value onto pixels.
- `chartcoords.timespans`: `RangedDateTime` and `RangedDuration` give sub-daily key
  points, down to the microsecond resolution of `datetime`. `compute_period_per_point`
  chooses the tick period.
- `chartcoords.fitting`: `fitting_range(values)` returns `(smallest, largest)`, or
  `(0, 1)` when there are no values.
- `chartcoords.floatfmt`: `pretty_print_float(n, allow_sn)` returns the shortest
  readable form of a float. When `allow_sn` is true it uses scientific notation if
  that form is clearly shorter.
- `chartcoords.quartiles`: `Quartiles(samples)`. `values()` returns the lower fence,
  lower quartile, median, upper quartile and upper fence. The fences lie 1.5 IQR
  beyond the quartiles.

## Example

```python
from datetime import date

from chartcoords.category import Category
from chartcoords.dates import Monthly
from chartcoords.floatfmt import pretty_print_float
from chartcoords.numeric import RangedCoordFloat, RangedCoordInt
from chartcoords.ranged import RangedCoord

coord = RangedCoord(RangedCoordInt(0, 20), RangedCoordFloat(0.0, 1.0), (0, 1024), (0, 768))
print(coord.translate((5, 0.5)))       # (256, 384)
print(coord.x_spec.key_points(11))     # [0, 2, 4, ..., 20]

colors = Category("color", ["red", "green", "blue"])
print(colors.map(colors.get("green"), (0, 8)))  # 4

months = Monthly(date(2019, 8, 5), date(2020, 9, 1))
print([d.month for d in months.key_points(5)])  # [9, 12, 3, 6, 9]

print(pretty_print_float(1e100, True))  # "1e100"
```

## What it does not do

The package only computes coordinates and key points. It does not draw anything.
There are no drawing backends, drawing areas, fonts or image output. A caller that
wants grid lines on screen passes its own callback to `RangedCoord.draw_mesh` and
draws the `MeshLine` values itself.

## Tests

```
pip install -e ".[test]"
pytest
```