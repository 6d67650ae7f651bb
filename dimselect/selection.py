"""Selection specifiers and axis tags.

A selection is either a `LabelSelection` (row or column names) or a
`PositionSelection` (1-based row or column numbers). The axis it addresses is
one of the two `Axis` singletons, `ROWS` or `COLUMNS`.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from public import public

import dimselect.common.exceptions as com
from dimselect.util import promote_tuple


class Axis:
    __slots__ = ()

    columns: bool
    name: str

    def __repr__(self) -> str:
        return self.name.upper()


@public
class Rows(Axis):
    __slots__ = ()

    columns = False
    name = "rows"


@public
class Columns(Axis):
    __slots__ = ()

    columns = True
    name = "columns"


ROWS = Rows()
COLUMNS = Columns()


@public
def axis_from_flag(cols: Any) -> Axis:
    """Map the boolean axis flag to `COLUMNS` (true) or `ROWS` (false)."""
    if not isinstance(cols, (bool, np.bool_)):
        raise com.SelectionTypeError(
            f"`cols` must be a boolean, got {type(cols).__name__}"
        )
    return COLUMNS if cols else ROWS


class Selection:
    """An ordered, non-empty sequence of row or column identifiers."""

    __slots__ = ("items",)

    def __init__(self, items: tuple) -> None:
        self.items = items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.items == other.items

    def __hash__(self) -> int:
        return hash((type(self), self.items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.items!r}"


@public
class LabelSelection(Selection):
    """Rows or columns addressed by name."""

    __slots__ = ()


@public
class PositionSelection(Selection):
    """Rows or columns addressed by 1-based position."""

    __slots__ = ()


def _is_label(value: Any) -> bool:
    return isinstance(value, str)


def _is_position(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _as_position(value: numbers.Real) -> int | float:
    # whole numbers become ints, anything else is left for `resolve` to reject
    if isinstance(value, numbers.Integral):
        return int(value)
    value = float(value)
    return int(value) if value.is_integer() else value


@public
def as_selection(selection: Any) -> Selection:
    """Turn user input into a `LabelSelection` or a `PositionSelection`.

    A bare string or number counts as a selection of one. Whole-number floats
    are positions like the equivalent ints.

    Raises
    ------
    SelectionTypeError
        If `selection` is empty, mixes names and positions, or holds anything
        else.

    Examples
    --------
    >>> as_selection("a")
    LabelSelection('a',)
    >>> as_selection([3, 1])
    PositionSelection(3, 1)
    """
    if isinstance(selection, Selection):
        items = selection.items
    elif isinstance(selection, (dict, set, frozenset)):
        raise com.SelectionTypeError(
            f"`selection` must be an ordered sequence, got {type(selection).__name__}"
        )
    else:
        items = promote_tuple(selection)

    if not items:
        raise com.SelectionTypeError("`selection` must not be empty")

    if all(map(_is_label, items)):
        return LabelSelection(tuple(map(str, items)))
    if all(map(_is_position, items)):
        return PositionSelection(tuple(map(_as_position, items)))

    kinds = sorted({type(item).__name__ for item in items})
    raise com.SelectionTypeError(
        "`selection` must hold only names (str) or only positions (numbers), "
        f"got {', '.join(kinds)}"
    )
