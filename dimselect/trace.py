"""Module that adds tracing to selection.

With tracing enabled, this module will log time and call stack information of
the steps taken by `select`. Call stack information is presented with
indentation level.

For example:

import logging

import pandas as pd

import dimselect
from dimselect import trace

logging.basicConfig()
trace.enable()

df = pd.DataFrame({"a": [1, 2, 3], "b": list("xyz")})
dimselect.select(df, "b")

Output:

DEBUG:dimselect.trace: select DataFrame
DEBUG:dimselect.trace:   resolve_labels LabelSelection
DEBUG:dimselect.trace:     axis_labels_frame DataFrame
DEBUG:dimselect.trace:     axis_labels_frame DataFrame 0:00:00.000021
DEBUG:dimselect.trace:   resolve_labels LabelSelection 0:00:00.000034
DEBUG:dimselect.trace:   take_one_column_frame DataFrame
DEBUG:dimselect.trace:   take_one_column_frame DataFrame 0:00:00.000412
DEBUG:dimselect.trace: select DataFrame 0:00:00.000733
"""

from __future__ import annotations

import functools
import logging
import sys
import traceback
from datetime import datetime

from multipledispatch import Dispatcher

from dimselect.config import options

_logger = logging.getLogger("dimselect.trace")

# A list of funcs that is traced
_trace_funcs = set()


def enable():
    """Enable tracing."""
    options.trace = True
    logging.getLogger("dimselect.trace").setLevel(logging.DEBUG)


def disable():
    """Disable tracing."""
    options.trace = False
    logging.getLogger("dimselect.trace").setLevel(logging.NOTSET)


def _log_trace(func, start=None):
    level = 0
    current_frame = None

    # Increase the current level for each traced function in the stackframe
    # This way we can visualize the call stack.
    for frame, _ in traceback.walk_stack(sys._getframe(1)):
        current_frame = current_frame if current_frame is not None else frame
        func_name = frame.f_code.co_name
        if func_name in _trace_funcs:
            level += 1

    # The first frame is always traced_func, which holds `args`
    args = current_frame.f_locals["args"]
    current_arg = args[0] if args else None

    _logger.debug(
        "%s %s %s %s",
        "  " * level,
        func.__name__,
        type(current_arg).__qualname__,
        f"{datetime.now() - start}" if start else "",
    )


def trace(func):
    """Return a function decorator that wraps `func` with tracing."""
    _trace_funcs.add(func.__name__)

    @functools.wraps(func)
    def traced_func(*args, **kwargs):
        if not options.trace:
            return func(*args, **kwargs)
        else:
            start = datetime.now()
            _log_trace(func)
            res = func(*args, **kwargs)
            _log_trace(func, start)
            return res

    return traced_func


class TraceDispatcher(Dispatcher):
    """A Dispatcher that also wraps the registered function with tracing."""

    def __init__(self, name, doc=None):
        super().__init__(name, doc)

    def register(self, *types, **kwargs):
        """Register a function with this Dispatcher.

        The function will also be wrapped with tracing information.
        """

        def _(func):
            trace_func = trace(func)
            Dispatcher.register(self, *types, **kwargs)(trace_func)
            # return func instead trace_func here so that
            # chained register didn't get wrapped multiple
            # times
            return func

        return _
