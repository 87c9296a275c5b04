from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
import math
import operator
from typing import Any, Callable

import numpy as np

from vectorchart.errors import ChartDataError


LOGGER = logging.getLogger(__name__)

Getter = Callable[[Any], Any]


@dataclass(frozen=True)
class FieldAccessor:
    """Reads the X and Y fields of one record.

    The lookup strategy is fixed when the accessor is built; records are never
    inspected to decide how to read them.
    """

    x_getter: Getter
    y_getter: Getter
    x_name: str = "x"
    y_name: str = "y"

    @classmethod
    def from_keys(cls, x_key: Any, y_key: Any, *, attribute: bool = False) -> "FieldAccessor":
        make = operator.attrgetter if attribute else operator.itemgetter
        return cls(x_getter=make(x_key), y_getter=make(y_key), x_name=str(x_key), y_name=str(y_key))

    def get_x(self, item: Any) -> Any:
        return _read(self.x_getter, item)

    def get_y(self, item: Any) -> Any:
        return _read(self.y_getter, item)


def as_field_accessor(fields: FieldAccessor | tuple[Any, Any]) -> FieldAccessor:
    if isinstance(fields, FieldAccessor):
        return fields
    if isinstance(fields, tuple) and len(fields) == 2:
        x_key, y_key = fields
        return FieldAccessor.from_keys(x_key, y_key)
    raise TypeError(f"expected FieldAccessor or (x_key, y_key), got {type(fields)!r}")


def _read(getter: Getter, item: Any) -> Any:
    try:
        return getter(item)
    except (LookupError, AttributeError):
        return None


def parse_value(raw: Any, *, index: int, label: str = "y", strict: bool = False) -> float:
    """Parse one declared-numeric field.

    Missing, non-numeric and non-finite values become 0.0, or raise `ChartDataError`
    when `strict` is set.
    """

    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        value = math.nan
    if math.isfinite(value):
        return value
    if strict:
        raise ChartDataError(f"{label} contains non-numeric value at index {index}: {raw!r}")
    LOGGER.warning("%s value at index %d is not numeric (%r); using 0", label, index, raw)
    return 0.0


def parse_y_values(dataset: Sequence[Any], fields: FieldAccessor, *, strict: bool = False) -> np.ndarray:
    out = np.empty(len(dataset), dtype=np.float64)
    for i, item in enumerate(dataset):
        out[i] = parse_value(fields.get_y(item), index=i, label=fields.y_name, strict=strict)
    return out


def x_label_source(item: Any, fields: FieldAccessor) -> str:
    raw = fields.get_x(item)
    return "" if raw is None else str(raw)


def y_label_source(item: Any, fields: FieldAccessor) -> str:
    raw = fields.get_y(item)
    return "" if raw is None else str(raw)
