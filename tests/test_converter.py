from typing import List, Optional

import pytest

from calcconverter.model.conversions import Category, UnitOption
from calcconverter.model.converter import ConverterState, UnitConverter, parse_input


class RecordingConverterView:
    def __init__(self) -> None:
        self.options: List[UnitOption] = []
        self.from_index: Optional[int] = None
        self.to_index: Optional[int] = None
        self.input_text: Optional[str] = None
        self.results: List[str] = []

    def show_units(self, options: List[UnitOption], from_index: int, to_index: int) -> None:
        self.options = options
        self.from_index = from_index
        self.to_index = to_index

    def show_input(self, text: str) -> None:
        self.input_text = text

    def show_result(self, text: str) -> None:
        self.results.append(text)


@pytest.fixture
def view() -> RecordingConverterView:
    return RecordingConverterView()


@pytest.fixture
def converter(view) -> UnitConverter:
    conv = UnitConverter(sink=view)
    conv.start()
    return conv


def test_start_populates_default_category(converter, view):
    assert [o.key for o in view.options] == ["meter", "kilometer", "centimeter"]
    assert (view.from_index, view.to_index) == (0, 1)
    assert converter.state.from_unit == "meter"
    assert converter.state.to_unit == "kilometer"
    assert view.results == ["0"]


def test_input_converts_immediately(converter, view):
    converter.set_input("1500")
    assert view.results[-1] == "1.5"


def test_unit_changes_convert(converter, view):
    converter.set_input("2")
    converter.set_from_unit("kilometer")
    converter.set_to_unit("centimeter")
    assert view.results[-1] == "200000"


def test_category_change_keeps_input_and_resets_units(converter, view):
    converter.set_input("100")
    converter.select_category("temperature")
    assert converter.state.category is Category.TEMPERATURE
    assert [o.key for o in view.options] == ["celsius", "fahrenheit"]
    assert view.results[-1] == "212"


def test_non_numeric_input_counts_as_zero(converter, view):
    converter.select_category(Category.TEMPERATURE)
    converter.set_input("abc")
    assert view.results[-1] == "32"


def test_tiny_results_use_exponential_notation(converter, view):
    converter.set_from_unit("centimeter")
    converter.set_input("1")
    assert view.results[-1] == "1.0000e-5"


def test_clear_resets_input_and_result(converter, view):
    converter.set_input("42")
    converter.clear()
    assert converter.state.input_text == "0"
    assert view.input_text == "0"
    assert view.results[-1] == "0"


def test_convert_returns_shown_text(converter):
    converter.set_input("90")
    converter.select_category("time")
    converter.set_from_unit("second")
    converter.set_to_unit("minute")
    assert converter.convert() == "1.5"
    assert converter.convert() == "1.5"


def test_works_without_sink():
    conv = UnitConverter(ConverterState(category=Category.WEIGHT, input_text="3"))
    conv.start()
    assert conv.convert() == "0.003"


@pytest.mark.parametrize("text, expected", [
    ("", 0.0),
    ("abc", 0.0),
    ("12abc", 12.0),
    ("-4.5", -4.5),
    (" 3", 3.0),
])
def test_parse_input(text, expected):
    assert parse_input(text) == expected
