"""Preferred scalar kinds of data frame columns.

The kind of a column decides how it is rebuilt when it is selected on its own:
text stays plain text and is never turned into a categorical.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping

import pandas as pd
import pandas.api.types as pdt
from public import public

import dimselect.common.exceptions as com

KINDS_ATTR = "dimselect.kinds"


@public
class ScalarKind(enum.Enum):
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    TEXT = "text"
    CATEGORICAL = "categorical"
    TEMPORAL = "temporal"
    OTHER = "other"


@public
def infer_kind(series: pd.Series) -> ScalarKind:
    """Infer the scalar kind of a column from its dtype and values."""
    dtype = series.dtype
    if isinstance(dtype, pd.CategoricalDtype):
        return ScalarKind.CATEGORICAL
    elif pdt.is_bool_dtype(dtype):
        return ScalarKind.BOOLEAN
    elif pdt.is_numeric_dtype(dtype):
        return ScalarKind.NUMERIC
    elif (
        pdt.is_datetime64_any_dtype(dtype)
        or pdt.is_timedelta64_dtype(dtype)
        or isinstance(dtype, pd.PeriodDtype)
    ):
        return ScalarKind.TEMPORAL
    elif pdt.is_string_dtype(dtype) and pd.api.types.infer_dtype(
        series, skipna=True
    ) in ("string", "empty"):
        return ScalarKind.TEXT
    return ScalarKind.OTHER


def _declared(df: pd.DataFrame) -> Mapping:
    return df.attrs.get(KINDS_ATTR, {})


@public
def with_kinds(df: pd.DataFrame, **kinds: ScalarKind | str) -> pd.DataFrame:
    """Return a shallow copy of `df` that carries declared column kinds.

    Declared kinds win over the inferred ones and follow the frame through
    selection.

    Examples
    --------
    >>> df = pd.DataFrame({"code": ["x", "y"]})
    >>> column_kinds(with_kinds(df, code="categorical"))
    {'code': <ScalarKind.CATEGORICAL: 'categorical'>}
    """
    unknown = [name for name in kinds if name not in df.columns]
    if unknown:
        raise com.DimSelectInputError(
            f"Cannot declare kinds for unknown columns: {', '.join(map(repr, unknown))}"
        )
    try:
        parsed = {name: ScalarKind(kind) for name, kind in kinds.items()}
    except ValueError as e:
        raise com.DimSelectInputError(str(e)) from e

    result = df.copy(deep=False)
    result.attrs = {**df.attrs, KINDS_ATTR: {**_declared(df), **parsed}}
    return result


@public
def kind_at(df: pd.DataFrame, position: int) -> ScalarKind:
    """Return the preferred kind of the column at 0-based `position`."""
    kind = _declared(df).get(df.columns[position])
    return kind if kind is not None else infer_kind(df.iloc[:, position])


@public
def column_kinds(df: pd.DataFrame) -> dict:
    """Map each column label of `df` to its preferred `ScalarKind`."""
    return {name: kind_at(df, j) for j, name in enumerate(df.columns)}


@public
def coerce_column(series: pd.Series, kind: ScalarKind) -> pd.Series:
    """Give `series` the representation its preferred `kind` asks for.

    `TEXT` yields plain strings, decoding a categorical and formatting any
    other values with `str`. Missing values stay missing.
    """
    is_categorical = isinstance(series.dtype, pd.CategoricalDtype)
    if kind is ScalarKind.TEXT:
        if is_categorical:
            categories = series.cat.categories.dtype
            if not pdt.is_string_dtype(categories):
                categories = object
            series = series.astype(categories)
        if infer_kind(series) is not ScalarKind.TEXT:
            series = series.astype(object).map(str, na_action="ignore")
        return series
    elif kind is ScalarKind.CATEGORICAL and not is_categorical:
        return series.astype("category")
    return series
