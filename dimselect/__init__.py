"""Initialize dimselect module."""
from __future__ import annotations

__version__ = "1.0.0"

from dimselect import util
from dimselect.common.exceptions import (
    DimSelectError,
    NotFoundError,
    SelectionTypeError,
)
from dimselect.config import option_context, options
from dimselect.core import select
from dimselect.kinds import ScalarKind, column_kinds, with_kinds
from dimselect.matrix import Matrix

__all__ = [
    "util",
    "DimSelectError",
    "Matrix",
    "NotFoundError",
    "ScalarKind",
    "SelectionTypeError",
    "column_kinds",
    "option_context",
    "options",
    "select",
    "with_kinds",
]
