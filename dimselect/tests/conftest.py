from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from dimselect.matrix import Matrix
from dimselect.testing import example_frame, example_matrix


@pytest.fixture
def df():
    return example_frame()


@pytest.fixture
def matrix():
    return example_matrix()


@pytest.fixture
def array():
    return np.arange(12).reshape(3, 4)


@pytest.fixture
def dup_df():
    return pd.DataFrame(
        [[1, 2, 3], [4, 5, 6]], columns=["x", "y", "x"], index=["r", "s"]
    )


@pytest.fixture
def dup_matrix():
    return Matrix(
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        rownames=["p", "q", "p"],
        colnames=["u", "v", "w"],
    )
