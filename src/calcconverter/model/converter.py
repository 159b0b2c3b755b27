"""
Unit Converter Controller
Keeps the converter inputs and pushes unit lists and results to a sink.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional, Protocol, Union

from calcconverter.model.conversions import (
    Category,
    UnitOption,
    convert,
    default_target_index,
    format_result,
    list_units,
)
from calcconverter.utils import parse_number

logger = logging.getLogger(__name__)


class ConverterSink(Protocol):
    def show_units(self, options: List[UnitOption], from_index: int, to_index: int) -> None: ...
    def show_input(self, text: str) -> None: ...
    def show_result(self, text: str) -> None: ...


@dataclass
class ConverterState:
    category: Category = Category.LENGTH
    input_text: str = "0"
    from_unit: str = ""
    to_unit: str = ""


def parse_input(text: str) -> float:
    """Read the input box. Anything that is not a number counts as 0."""
    value = parse_number(text)
    if value is None:
        return 0.0
    return value


class UnitConverter:
    def __init__(self, state: Optional[ConverterState] = None, sink: Optional[ConverterSink] = None) -> None:
        self.state = state if state is not None else ConverterState()
        self.sink = sink

    def start(self) -> None:
        """Populate the unit lists for the current category and convert once."""
        self._load_units(self.state.category)
        self.convert()

    def select_category(self, category: Union[Category, str]) -> None:
        self._load_units(Category(category))
        self.convert()

    def set_input(self, text: str) -> None:
        self.state.input_text = text
        self.convert()

    def set_from_unit(self, key: str) -> None:
        self.state.from_unit = key
        self.convert()

    def set_to_unit(self, key: str) -> None:
        self.state.to_unit = key
        self.convert()

    def clear(self) -> None:
        self.state.input_text = "0"
        if self.sink is not None:
            self.sink.show_input("0")
            self.sink.show_result("0")

    def convert(self) -> str:
        """Convert the current input and display it. Returns the shown text."""
        value = parse_input(self.state.input_text)
        result = convert(self.state.category, self.state.from_unit, self.state.to_unit, value)
        text = format_result(result)
        logger.debug(f"{value} {self.state.from_unit} -> {self.state.to_unit} = {text}")
        if self.sink is not None:
            self.sink.show_result(text)
        return text

    def _load_units(self, category: Category) -> None:
        options = list_units(category)
        to_index = default_target_index(options)
        self.state.category = category
        self.state.from_unit = options[0].key
        self.state.to_unit = options[to_index].key
        if self.sink is not None:
            self.sink.show_units(options, 0, to_index)
