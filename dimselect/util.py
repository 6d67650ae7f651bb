"""dimselect utility functions."""
from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd


def is_iterable(o: Any) -> bool:
    """Return whether `o` is iterable and not a :class:`str` or :class:`bytes`.

    Parameters
    ----------
    o : object
        Any python object

    Returns
    -------
    bool

    Examples
    --------
    >>> is_iterable("1")
    False
    >>> is_iterable(b"1")
    False
    >>> is_iterable(iter("1"))
    True
    >>> is_iterable(1)
    False
    >>> is_iterable([])
    True
    """
    if isinstance(o, (str, bytes)):
        return False

    try:
        iter(o)
    except TypeError:
        return False
    else:
        return True


def promote_tuple(val: Any) -> tuple:
    """Promote a value to a tuple.

    Parameters
    ----------
    val
        Value to promote

    Returns
    -------
    tuple

    Examples
    --------
    >>> promote_tuple("a")
    ('a',)
    >>> promote_tuple([1, 2])
    (1, 2)
    """
    if isinstance(val, tuple):
        return val
    elif isinstance(val, np.ndarray) and val.ndim == 0:
        return (val.item(),)
    elif is_iterable(val):
        return tuple(val)
    else:
        return (val,)


def unique(values) -> tuple:
    """Return the distinct elements of `values`, in order of first appearance.

    Examples
    --------
    >>> unique(["b", "a", "b"])
    ('b', 'a')
    """
    return tuple(dict.fromkeys(values))


def labels_or_none(index: pd.Index) -> tuple | None:
    """Return the labels of a pandas index, or `None` for a default range index."""
    if isinstance(index, pd.RangeIndex):
        return None
    return tuple(index)


def log(msg: str) -> None:
    """Log `msg` using ``options.verbose_log`` if set, otherwise ``print``."""
    from dimselect.config import options

    if options.verbose:
        (options.verbose_log or print)(msg)

