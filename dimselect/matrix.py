"""A homogeneous two-dimensional array with optional row and column labels."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd
from public import public

import dimselect.common.exceptions as com
from dimselect.util import labels_or_none

if TYPE_CHECKING:
    from dimselect.selection import Axis


def _labels(labels: Sequence | None, size: int, what: str) -> tuple[str, ...] | None:
    if labels is None:
        return None
    labels = tuple(map(str, labels))
    if len(labels) != size:
        raise com.MatrixShapeError(
            f"Matrix has {size} {what} but {len(labels)} {what[:-1]} labels were given"
        )
    return labels


@public
class Matrix:
    """A matrix: every cell shares one dtype, rows and columns may be named.

    Parameters
    ----------
    values
        Anything `numpy.asarray` turns into a two-dimensional array.
    rownames
        Optional row labels, one per row.
    colnames
        Optional column labels, one per column.

    Examples
    --------
    >>> m = Matrix([[1, 2], [3, 4]], rownames=["A", "B"], colnames=["a", "b"])
    >>> m.shape
    (2, 2)
    >>> m.column(1)
    array([2, 4])
    """

    __slots__ = ("_values", "_rownames", "_colnames")

    def __init__(
        self,
        values: Any,
        rownames: Sequence[str] | None = None,
        colnames: Sequence[str] | None = None,
    ) -> None:
        values = np.asarray(values)
        if values.ndim != 2:
            raise com.MatrixShapeError(
                f"Matrix values must be two-dimensional, got {values.ndim} dimension(s)"
            )
        values = values.copy()
        values.flags.writeable = False
        nrow, ncol = values.shape
        self._values = values
        self._rownames = _labels(rownames, nrow, "rows")
        self._colnames = _labels(colnames, ncol, "columns")

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> Matrix:
        """Build a matrix from a data frame, keeping its non-default labels."""
        return cls(
            df.to_numpy(),
            rownames=labels_or_none(df.index),
            colnames=labels_or_none(df.columns),
        )

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            self._values, index=self._rownames, columns=self._colnames, copy=True
        )

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def rownames(self) -> tuple[str, ...] | None:
        return self._rownames

    @property
    def colnames(self) -> tuple[str, ...] | None:
        return self._colnames

    @property
    def shape(self) -> tuple[int, int]:
        return self._values.shape

    @property
    def ndim(self) -> int:
        return 2

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def labels(self, axis: Axis) -> tuple[str, ...] | None:
        return self._colnames if axis.columns else self._rownames

    def take(self, positions: Sequence[int], axis: Axis) -> Matrix:
        """Slice several rows or columns at 0-based `positions`, in order."""
        positions = list(positions)
        if axis.columns:
            colnames = self._colnames
            return Matrix(
                self._values[:, positions],
                rownames=self._rownames,
                colnames=None if colnames is None else [colnames[i] for i in positions],
            )
        rownames = self._rownames
        return Matrix(
            self._values[positions, :],
            rownames=None if rownames is None else [rownames[i] for i in positions],
            colnames=self._colnames,
        )

    def row(self, i: int) -> np.ndarray:
        """Extract the 0-based row `i` as a flat array."""
        return self._values[i, :]

    def column(self, j: int) -> np.ndarray:
        """Extract the 0-based column `j` as a flat array."""
        return self._values[:, j]

    def equals(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return False
        return (
            self._rownames == other._rownames
            and self._colnames == other._colnames
            and self.dtype == other.dtype
            and np.array_equal(self._values, other._values, equal_nan=self._nan_safe)
        )

    @property
    def _nan_safe(self) -> bool:
        return self.dtype.kind in "fc"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __len__(self) -> int:
        return self.shape[0]

    def __repr__(self) -> str:
        nrow, ncol = self.shape
        return f"Matrix[{nrow}x{ncol}, {self.dtype}]\n{self.to_frame()!r}"
