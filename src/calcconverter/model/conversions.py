"""
Unit Conversion Engine
======================
Static conversion tables and the pure functions that evaluate them.

Each category maps a source unit to a target unit to either a multiplicative
factor or (temperature only) a one-argument function.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import re
from typing import Callable, Dict, List, Mapping, Union

from calcconverter.utils import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    format_non_finite,
    number_to_string,
    to_exponential,
)


class Category(StrEnum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    TIME = "time"


class ConversionLookupError(LookupError):
    """Raised for a category or unit the conversion table does not define."""


Conversion = Union[float, Callable[[float], float]]
ConversionTable = Mapping[Category, Mapping[str, Mapping[str, Conversion]]]


@dataclass(frozen=True)
class UnitOption:
    key: str
    label: str


def _identity(value: float) -> float:
    return value


CONVERSION_TABLE: ConversionTable = {
    Category.LENGTH: {
        "meter": {"meter": 1, "kilometer": 0.001, "centimeter": 100},
        "kilometer": {"meter": 1000, "kilometer": 1, "centimeter": 100000},
        "centimeter": {"meter": 0.01, "kilometer": 0.00001, "centimeter": 1},
    },
    Category.WEIGHT: {
        "gram": {"gram": 1, "kilogram": 0.001},
        "kilogram": {"gram": 1000, "kilogram": 1},
    },
    Category.TEMPERATURE: {
        "celsius": {"celsius": _identity, "fahrenheit": celsius_to_fahrenheit},
        "fahrenheit": {"celsius": fahrenheit_to_celsius, "fahrenheit": _identity},
    },
    Category.TIME: {
        "second": {"second": 1, "minute": 1 / 60, "hour": 1 / 3600},
        "minute": {"second": 60, "minute": 1, "hour": 1 / 60},
        "hour": {"second": 3600, "minute": 60, "hour": 1},
    },
}

# Dropdown entries, bilingual labels (Arabic / English)
UNIT_OPTIONS: Dict[Category, List[UnitOption]] = {
    Category.LENGTH: [
        UnitOption("meter", "متر / Meter"),
        UnitOption("kilometer", "كيلومتر / Kilometer"),
        UnitOption("centimeter", "سنتيمتر / Centimeter"),
    ],
    Category.WEIGHT: [
        UnitOption("gram", "جرام / Gram"),
        UnitOption("kilogram", "كيلوجرام / Kilogram"),
    ],
    Category.TEMPERATURE: [
        UnitOption("celsius", "مئوية / Celsius"),
        UnitOption("fahrenheit", "فهرنهايت / Fahrenheit"),
    ],
    Category.TIME: [
        UnitOption("second", "ثانية / Second"),
        UnitOption("minute", "دقيقة / Minute"),
        UnitOption("hour", "ساعة / Hour"),
    ],
}

CATEGORY_LABELS: Dict[Category, str] = {
    Category.LENGTH: "الطول / Length",
    Category.WEIGHT: "الوزن / Weight",
    Category.TEMPERATURE: "درجة الحرارة / Temperature",
    Category.TIME: "الوقت / Time",
}

_TRAILING_ZEROS = re.compile(r"\.?0+$")


def _resolve_category(category: Union[Category, str]) -> Category:
    try:
        return Category(category)
    except ValueError:
        raise ConversionLookupError(f"Unknown category: {category!r}") from None


def convert(category: Union[Category, str], from_unit: str, to_unit: str, value: float) -> float:
    """
    Convert a value between two units of one category.

    Raises:
        ConversionLookupError: If the category or either unit is not defined.
    """
    cat = _resolve_category(category)
    try:
        formula = CONVERSION_TABLE[cat][from_unit][to_unit]
    except KeyError:
        raise ConversionLookupError(
            f"No conversion from {from_unit!r} to {to_unit!r} in {cat}"
        ) from None

    # Temperature is the only category with non-linear formulas
    if cat is Category.TEMPERATURE:
        return formula(value)
    return value * formula


def format_result(value: float) -> str:
    """Render a conversion result, tiny values in exponential notation."""
    special = format_non_finite(value)
    if special is not None:
        return special
    if value == 0:
        return "0"
    if abs(value) < 0.0001:
        return to_exponential(value, 4)
    # Fixed notation stops at 1e21, larger values print in exponent form
    if abs(value) >= 1e21:
        return number_to_string(value)
    return _TRAILING_ZEROS.sub("", f"{value:.6f}")


def list_units(category: Union[Category, str]) -> List[UnitOption]:
    return list(UNIT_OPTIONS[_resolve_category(category)])


def default_target_index(options: List[UnitOption]) -> int:
    """The "to" list preselects the second unit when there is one."""
    return 1 if len(options) > 1 else 0
