# Copyright 2014 Cloudera Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Module for exceptions."""

from __future__ import annotations

from collections.abc import Sequence


class DimSelectError(Exception):
    """DimSelectError."""


class DimSelectInputError(ValueError, DimSelectError):
    """DimSelectInputError."""


class InputTypeError(TypeError, DimSelectError):
    """InputTypeError."""


class SelectionTypeError(InputTypeError):
    """The data, selection or axis flag passed to `select` is malformed."""


class MatrixShapeError(InputTypeError):
    """A `Matrix` was constructed from values or labels of the wrong shape."""


class NotFoundError(KeyError, DimSelectError):
    """One or more requested rows or columns are not present in the data."""

    def __init__(self, missing: Sequence, cols: bool = True) -> None:
        super().__init__(tuple(missing), cols)

    @property
    def missing(self) -> tuple:
        return self.args[0]

    @property
    def cols(self) -> bool:
        return self.args[1]

    def __str__(self) -> str:
        from dimselect.config import options

        missing, cols = self.args
        limit = options.max_reported
        quoted = ", ".join(f"'{item}'" for item in missing[:limit])
        if len(missing) > limit:
            quoted += ", and others"
        what = "Columns" if cols else "Rows"
        return f"{what} {quoted} are not present in 'data'."
