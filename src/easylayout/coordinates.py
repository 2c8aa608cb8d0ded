from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import singledispatch
from numbers import Real
from typing import NamedTuple, Optional, override
import math
import os
import warnings

# Warnings are attributed to the first frame outside this package.
_PACKAGE_PREFIX = os.path.dirname(os.path.abspath(__file__)) + os.sep


class SpacingError(ValueError):
    """Exception raised when a padding or gap value can't be normalized."""

    pass


class AmbiguousUnitWarning(UserWarning):
    """
    Emitted when an absolute spacing value has no container extent to be
    measured against and is read as a raw percentage instead.
    """

    pass


class Serializable(ABC):
    """
    Simple serialization interface for values that need to be rendered as
    strings for the consuming layout system.
    """

    @abstractmethod
    def serialize(self) -> str:
        pass


def format_number(value: float) -> str:
    """
    Render a number the way a style sheet expects it: integral values without a
    fractional part, everything else with the shortest round-tripping repr.
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_percent(value: float) -> str:
    return f"{format_number(value)}%"


class Spacing(Serializable, ABC):
    """
    A padding or gap value, either absolute or a percentage of the container.
    """

    value: float

    @abstractmethod
    def to_percent(self, extent: Optional[float] = None, strict: bool = False) -> float:
        """
        Convert to a percentage of a container axis whose size is `extent`.
        """
        pass

    def __call__(self, value: Real | str) -> Spacing:
        return type(self)(_parse_number(value) * self.value)


@dataclass(frozen=True)
class Percent(Spacing):
    """
    Percentage of the container, applied as-is on both axes.
    """

    value: float

    @override
    def to_percent(self, extent: Optional[float] = None, strict: bool = False) -> float:
        return self.value

    @override
    def serialize(self) -> str:
        return format_percent(self.value)

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True)
class Absolute(Spacing):
    """
    Spacing in the container's own units (typically pixels).
    """

    value: float

    @override
    def to_percent(self, extent: Optional[float] = None, strict: bool = False) -> float:
        if self.value == 0:
            return 0.0

        if extent is None:
            if strict:
                raise SpacingError(
                    f"Absolute spacing {self.serialize()} requires a container size."
                )
            warnings.warn(
                f"No container size given, treating absolute spacing "
                f"{self.serialize()} as {self.serialize()}%.",
                AmbiguousUnitWarning,
                skip_file_prefixes=(_PACKAGE_PREFIX,),
            )
            return self.value

        if not extent > 0:
            raise SpacingError(f"Container size must be positive, got {extent}.")

        return (self.value / extent) * 100

    @override
    def serialize(self) -> str:
        return format_number(self.value)

    def __str__(self) -> str:
        return self.serialize()


class AxisPercents(NamedTuple):
    h: float
    v: float


def _parse_number(value: Real | str) -> float:
    if isinstance(value, bool):
        raise SpacingError(f"Spacing can't be a boolean, got {value}.")

    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise SpacingError(f"Invalid spacing value: {value!r}") from exc

    if not math.isfinite(number):
        raise SpacingError(f"Spacing must be finite, got {value!r}.")

    return number


# Constructing spacing values


@singledispatch
def spacing(value) -> Spacing:
    raise SpacingError(f"Type {type(value)} can't be converted to a spacing value.")


@spacing.register(Spacing)
def _(value) -> Spacing:
    return value


@spacing.register(bool)
def _(value) -> Spacing:
    raise SpacingError(f"Spacing can't be a boolean, got {value}.")


@spacing.register(Real)
def _(value) -> Spacing:
    return Absolute(_parse_number(value))


@spacing.register(str)
def _(value) -> Spacing:
    text = value.strip()
    if text.endswith("%"):
        return Percent(_parse_number(text[:-1].strip()))
    return Absolute(_parse_number(text))


pct = Percent(1.0)
units = Absolute(1.0)


def normalize(
    value: Spacing | Real | str,
    width: Optional[float] = None,
    height: Optional[float] = None,
    strict: bool = False,
) -> AxisPercents:
    """
    Normalize a spacing value into horizontal and vertical percentages.
    """
    sp = spacing(value)
    return AxisPercents(
        h=sp.to_percent(width, strict=strict),
        v=sp.to_percent(height, strict=strict),
    )
