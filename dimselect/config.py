from __future__ import annotations

import contextlib
from typing import Any, Callable, Optional

from public import public

import dimselect.common.exceptions as com


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_callable_or_none(value: Any) -> bool:
    return value is None or callable(value)


class Config:
    """Base class for option namespaces.

    Subclasses declare their options as annotated class attributes holding the
    default value, and may map option names to predicates in `__validators__`.
    """

    __validators__: dict[str, Callable[[Any], bool]] = {}

    def __init__(self, **kwargs: Any) -> None:
        for name in self._fields():
            object.__setattr__(self, name, getattr(type(self), name))
        for name, value in kwargs.items():
            setattr(self, name, value)

    @classmethod
    def _fields(cls) -> list[str]:
        fields = []
        for klass in reversed(cls.__mro__):
            fields.extend(getattr(klass, "__annotations__", {}))
        return [name for name in dict.fromkeys(fields) if not name.startswith("_")]

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self._fields():
            raise AttributeError(
                f"{type(self).__name__!r} object has no option {name!r}"
            )
        validator = self.__validators__.get(name)
        if validator is not None and not validator(value):
            raise com.DimSelectInputError(
                f"Invalid value {value!r} for option {name!r}"
            )
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields())
        return f"{type(self).__name__}({fields})"

    def get(self, key: str) -> Any:
        value = self
        for field in key.split("."):
            value = getattr(value, field)
        return value

    def set(self, key: str, value: Any) -> None:
        *prefix, key = key.split(".")
        conf = self
        for field in prefix:
            conf = getattr(conf, field)
        setattr(conf, key, value)

    @contextlib.contextmanager
    def _with_temporary(self, options):
        try:
            old = {}
            for key, value in options.items():
                old[key] = self.get(key)
                self.set(key, value)
            yield
        finally:
            for key, value in old.items():
                self.set(key, value)

    def __call__(self, options):
        return self._with_temporary(options)


class Options(Config):
    """dimselect configuration options.

    Attributes
    ----------
    max_reported : int
        Number of missing row or column identifiers listed in the message of
        a `NotFoundError` before it is truncated with "and others".
    verbose : bool
        Run in verbose mode if [](`True`)
    verbose_log: Callable[[str], None] | None
        A callable to use when logging.
    trace : bool
        Log entry and elapsed time of the selection steps. See
        `dimselect/trace.py` for details.
    """

    max_reported: int = 5
    verbose: bool = False
    verbose_log: Optional[Callable] = None
    trace: bool = False

    __validators__ = {
        "max_reported": _is_positive_int,
        "verbose": _is_bool,
        "verbose_log": _is_callable_or_none,
        "trace": _is_bool,
    }


options = Options()


@public
def option_context(key, new_value):
    return options({key: new_value})


public(options=options)
