"""Reference examples for `select` and a harness that replays them."""

from __future__ import annotations

import string

import numpy as np
import pandas as pd
import pandas.testing as tm

from dimselect.core import select
from dimselect.matrix import Matrix
from dimselect.selection import COLUMNS


def example_frame(seed: int = 0) -> pd.DataFrame:
    """Five rows labeled A-E with int, float, text and categorical columns."""
    rng = np.random.default_rng(seed)
    return pd.DataFrame(
        {
            "a": np.arange(1, 6),
            "b": rng.standard_normal(5),
            "c": list(string.ascii_lowercase[:5]),
            "d": pd.Categorical(range(6, 11)),
        },
        index=list(string.ascii_uppercase[:5]),
    )


def example_matrix(seed: int = 0) -> Matrix:
    """A 4x5 float matrix with rows A-D and columns a-e."""
    rng = np.random.default_rng(seed)
    return Matrix(
        rng.standard_normal((4, 5)),
        rownames=list(string.ascii_uppercase[:4]),
        colnames=list(string.ascii_lowercase[:5]),
    )


def _same(name, left, right):
    if isinstance(left, pd.DataFrame):
        try:
            tm.assert_frame_equal(left, right)
        except AssertionError as e:
            raise AssertionError(f"check {name!r} failed: {e}") from e
    elif not left.equals(right):
        raise AssertionError(f"check {name!r} failed:\n{left!r}\n!=\n{right!r}")


def check_select(seed: int = 0) -> str:
    """Run the reference examples through `select`.

    Raises
    ------
    AssertionError
        Naming the first example whose result is not the expected one.
    """
    d = example_frame(seed)
    m = example_matrix(seed)

    # more than one column is plain indexing
    _same("frame columns by name", select(d, ["d", "c"]), d.iloc[:, [3, 2]])

    # a single row of a frame is plain indexing as well
    _same("frame row by name", select(d, "B", cols=False), d.iloc[[1]])

    _same("matrix columns by name", select(m, ["d", "c"]), m.take([3, 2], COLUMNS))

    m2 = select(m, "C", cols=False)
    if m.row(2).ndim != 1 or m2.shape != (1, 5):
        raise AssertionError("check 'matrix row stays a matrix' failed")

    # names and positions agree
    for names, positions in [
        ("a", 1),
        (["a", "d"], [1, 4]),
        (["c", "b", "d"], [3, 2, 4]),
        ("c", 3),
        ("d", 4),
    ]:
        _same(
            f"frame columns {names!r}", select(d, names), select(d, positions)
        )

    for names, positions in [(["D", "A"], [4, 1]), ("B", 2), ("D", 4)]:
        _same(
            f"frame rows {names!r}",
            select(d, names, cols=False),
            select(d, positions, cols=False),
        )

    for names, positions, cols in [
        (["d", "c"], [4, 3], True),
        ("b", 2, True),
        (["D", "C"], [4, 3], False),
        ("B", 2, False),
    ]:
        _same(
            f"matrix {names!r}",
            select(m, names, cols=cols),
            select(m, positions, cols=cols),
        )

    return "All checks completed successfully"
