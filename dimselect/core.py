"""Row and column selection that never drops a dimension.

Selecting a single column of a matrix or a data frame with the usual indexing
primitives collapses the result to a one-dimensional value:

>>> import pandas as pd
>>> df = pd.DataFrame({"a": [1, 2], "b": [3, 4]}, index=["A", "B"])
>>> type(df.iloc[:, 0]).__name__
'Series'

`select` always returns an object of the same family and dimensionality as
its input:

>>> select(df, "a")
   a
A  1
B  2

Implementation
--------------
The work is split over a handful of dispatchers, one implementation per
combination of data family (`Matrix`, `numpy.ndarray`, `pandas.DataFrame`),
selection kind (`LabelSelection`, `PositionSelection`) and axis (`Rows`,
`Columns`):

``axis_labels(data, axis)``
    The labels along `axis`, or `None` when the axis is unlabeled.
``resolve(selection, data, axis)``
    The 0-based positions the selection refers to, in selection order.
``take_many(data, axis, positions)``
    The ordinary multi-element slice; two or more positions already keep
    both dimensions.
``take_one(data, axis, position)``
    The explicit two-dimensional rebuild of a single row or column.
"""

from __future__ import annotations

import functools
import logging
from collections import defaultdict
from typing import Any

import numpy as np
import pandas as pd
import toolz
from public import public

import dimselect.common.exceptions as com
from dimselect.kinds import coerce_column, kind_at
from dimselect.matrix import Matrix
from dimselect.selection import (
    Axis,
    Columns,
    LabelSelection,
    PositionSelection,
    Rows,
    as_selection,
    axis_from_flag,
)
from dimselect.trace import TraceDispatcher, trace
from dimselect.util import log, unique

logger = logging.getLogger(__name__)


@functools.singledispatch
def is_tabular(data):
    """Nothing is selectable without a specific override."""
    return False


@is_tabular.register(pd.DataFrame)
@is_tabular.register(Matrix)
def is_tabular_labeled(data):
    return True


@is_tabular.register(np.ndarray)
def is_tabular_ndarray(data):
    # np.matrix indexing never yields a 1-d result and is deprecated upstream
    return data.ndim == 2 and not isinstance(data, np.matrix)


def axis_size(data, axis: Axis) -> int:
    return data.shape[1 if axis.columns else 0]


axis_labels = TraceDispatcher(
    "axis_labels",
    doc="Return the labels of `data` along `axis`, or None if it has none.",
)


@axis_labels.register(pd.DataFrame, Axis)
def axis_labels_frame(data, axis):
    return tuple(data.columns if axis.columns else data.index)


@axis_labels.register(Matrix, Axis)
def axis_labels_matrix(data, axis):
    return data.labels(axis)


@axis_labels.register(np.ndarray, Axis)
def axis_labels_ndarray(data, axis):
    return None


resolve = TraceDispatcher(
    "resolve",
    doc="""\
Resolve a selection to 0-based positions along an axis of `data`.

Parameters
----------
selection : LabelSelection or PositionSelection
data : Matrix, numpy.ndarray or pandas.DataFrame
axis : Rows or Columns

Returns
-------
list[int]
    Positions in selection order. A name shared by several rows or columns
    expands to all of them.

Raises
------
NotFoundError
    If any name or position does not exist along `axis`.
""",
)


@resolve.register(LabelSelection, object, Axis)
def resolve_labels(selection, data, axis):
    labels = axis_labels(data, axis) or ()

    lookup = defaultdict(list)
    for i, label in enumerate(labels):
        lookup[label].append(i)

    missing = [label for label in unique(selection) if label not in lookup]
    if missing:
        raise com.NotFoundError(missing, cols=axis.columns)

    return list(toolz.concat(lookup[label] for label in selection))


@resolve.register(PositionSelection, object, Axis)
def resolve_positions(selection, data, axis):
    size = axis_size(data, axis)
    # fractional positions never name a row or column
    missing = [
        i for i in unique(selection) if not (isinstance(i, int) and 1 <= i <= size)
    ]
    if missing:
        raise com.NotFoundError(missing, cols=axis.columns)
    return [i - 1 for i in selection]


take_many = TraceDispatcher(
    "take_many",
    doc="Slice two or more rows or columns at 0-based positions, in order.",
)


@take_many.register(pd.DataFrame, Columns, list)
def take_many_columns_frame(data, axis, positions):
    return data.iloc[:, positions]


@take_many.register(pd.DataFrame, Rows, list)
def take_many_rows_frame(data, axis, positions):
    return data.iloc[positions]


@take_many.register(Matrix, Axis, list)
def take_many_matrix(data, axis, positions):
    return data.take(positions, axis)


@take_many.register(np.ndarray, Columns, list)
def take_many_columns_ndarray(data, axis, positions):
    return data[:, positions]


@take_many.register(np.ndarray, Rows, list)
def take_many_rows_ndarray(data, axis, positions):
    return data[positions, :]


take_one = TraceDispatcher(
    "take_one",
    doc="Rebuild a single row or column at a 0-based position as a 2-d object.",
)


@take_one.register(Matrix, Columns, int)
def take_one_column_matrix(data, axis, position):
    colnames = data.colnames
    return Matrix(
        data.column(position).reshape(-1, 1),
        rownames=data.rownames,
        colnames=None if colnames is None else [colnames[position]],
    )


@take_one.register(Matrix, Rows, int)
def take_one_row_matrix(data, axis, position):
    rownames = data.rownames
    return Matrix(
        data.row(position).reshape(1, -1),
        rownames=None if rownames is None else [rownames[position]],
        colnames=data.colnames,
    )


@take_one.register(np.ndarray, Columns, int)
def take_one_column_ndarray(data, axis, position):
    return np.column_stack([data[:, position]])


@take_one.register(np.ndarray, Rows, int)
def take_one_row_ndarray(data, axis, position):
    return np.vstack([data[position, :]])


@take_one.register(pd.DataFrame, Columns, int)
def take_one_column_frame(data, axis, position):
    column = coerce_column(data.iloc[:, position].copy(), kind_at(data, position))
    result = column.to_frame()
    result.columns = data.columns[[position]]
    result.attrs = dict(data.attrs)
    return result


@take_one.register(pd.DataFrame, Rows, int)
def take_one_row_frame(data, axis, position):
    # a list key keeps the single row as a one-row frame
    return data.iloc[[position]]


@public
@trace
def select(data: Any, selection: Any, cols: bool = True):
    """Select rows or columns of a matrix or a data frame.

    Unlike plain indexing, selecting exactly one row or column returns a
    one-row or one-column object rather than a flat one.

    Parameters
    ----------
    data
        A `Matrix`, a two-dimensional `numpy.ndarray` or a
        `pandas.DataFrame`.
    selection
        Names of the rows or columns, or their 1-based positions. A single
        name or position may be passed bare. Order is kept and repeats are
        not collapsed.
    cols
        Select columns if `True`, rows otherwise.

    Returns
    -------
    Matrix | numpy.ndarray | pandas.DataFrame
        A new object of the same type as `data` holding the selected rows or
        columns, in the requested order.

    Raises
    ------
    SelectionTypeError
        If `data` is not a matrix or a data frame, if `selection` is empty,
        mixes names and positions or holds anything else, or if `cols` is not
        a boolean.
    NotFoundError
        If any requested row or column does not exist.

    Examples
    --------
    >>> m = Matrix([[1, 2, 3], [4, 5, 6]], rownames=["A", "B"], colnames=list("abc"))
    >>> select(m, 2).shape
    (2, 1)
    >>> select(m, "A", cols=False).colnames
    ('a', 'b', 'c')
    >>> select(m, ["c", "a"]).values
    array([[3, 1],
           [6, 4]])
    """
    if not is_tabular(data):
        raise com.SelectionTypeError(
            "`data` must be a Matrix, a 2-d numpy.ndarray or a pandas.DataFrame, "
            f"got {type(data).__name__}"
        )
    selection = as_selection(selection)
    axis = axis_from_flag(cols)

    positions = resolve(selection, data, axis)
    logger.debug("Resolved %r along %r to positions %s", selection, axis, positions)
    log(f"select: {len(positions)} of {axis_size(data, axis)} {axis.name}")

    if len(positions) > 1:
        return take_many(data, axis, positions)

    (position,) = positions
    return take_one(data, axis, position)
