import math
from typing import List, Tuple

import pytest

from calcconverter.model.calculator import (
    AppendDigit,
    ApplyFunction,
    Calculator,
    CalculatorState,
    ChooseOperator,
    Command,
    Operator,
    RunCommand,
    ScientificFunction,
    action_for_key,
    action_from_tags,
)


class RecordingDisplay:
    def __init__(self) -> None:
        self.frames: List[Tuple[str, str]] = []

    def show_operands(self, current: str, previous: str) -> None:
        self.frames.append((current, previous))


@pytest.fixture
def calc() -> Calculator:
    return Calculator()


def enter(calc: Calculator, digits: str) -> None:
    for digit in digits:
        calc.append_number(digit)


def test_initial_state(calc):
    assert calc.state == CalculatorState("0", "", None)


def test_leading_zero_is_replaced(calc):
    enter(calc, "05")
    assert calc.state.current_operand == "5"


def test_decimal_point_on_zero_appends(calc):
    calc.append_number(".")
    assert calc.state.current_operand == "0."
    calc.append_number("5")
    assert calc.state.current_operand == "0.5"


def test_second_decimal_point_is_ignored(calc):
    enter(calc, "1.2.3")
    assert calc.state.current_operand == "1.23"


def test_addition(calc):
    enter(calc, "5")
    calc.choose_operation(Operator.ADD)
    assert calc.state.previous_operand == "5 +"
    assert calc.state.current_operand == "0"
    enter(calc, "3")
    calc.compute()
    assert calc.state == CalculatorState("8", "", None)


def test_operator_chaining(calc):
    enter(calc, "5")
    calc.choose_operation(Operator.ADD)
    enter(calc, "3")
    calc.choose_operation(Operator.ADD)
    assert calc.state.previous_operand == "8 +"
    assert calc.state.current_operand == "0"
    enter(calc, "2")
    calc.compute()
    assert calc.state.current_operand == "10"


def test_chaining_mixed_operators(calc):
    enter(calc, "6")
    calc.choose_operation(Operator.MULTIPLY)
    enter(calc, "7")
    calc.choose_operation(Operator.SUBTRACT)
    assert calc.state.previous_operand == "42 −"
    enter(calc, "2")
    calc.compute()
    assert calc.state.current_operand == "40"


def test_switching_operator_applies_pending_one_to_zero(calc):
    enter(calc, "5")
    calc.choose_operation(Operator.ADD)
    calc.choose_operation(Operator.MULTIPLY)
    assert calc.state.previous_operand == "5 ×"
    assert calc.state.pending_operator is Operator.MULTIPLY


def test_result_can_be_reused(calc):
    enter(calc, "5")
    calc.choose_operation(Operator.ADD)
    enter(calc, "3")
    calc.compute()
    calc.choose_operation(Operator.MULTIPLY)
    enter(calc, "2")
    calc.compute()
    assert calc.state.current_operand == "16"


def test_float_results_keep_full_precision(calc):
    enter(calc, "0.1")
    calc.choose_operation(Operator.ADD)
    enter(calc, "0.2")
    calc.compute()
    assert calc.state.current_operand == "0.30000000000000004"


def test_large_products_show_shortest_digits(calc):
    enter(calc, "12345678901")
    calc.choose_operation(Operator.MULTIPLY)
    enter(calc, "12345678901")
    calc.compute()
    assert calc.state.current_operand == "152415787526596560000"


def test_division(calc):
    enter(calc, "7")
    calc.choose_operation(Operator.DIVIDE)
    enter(calc, "2")
    calc.compute()
    assert calc.state.current_operand == "3.5"


def test_division_by_zero_gives_infinity(calc):
    enter(calc, "1")
    calc.choose_operation(Operator.DIVIDE)
    calc.compute()
    assert calc.state.current_operand == "Infinity"


def test_zero_divided_by_zero_gives_nan(calc):
    calc.choose_operation(Operator.DIVIDE)
    calc.compute()
    assert calc.state.current_operand == "NaN"


def test_infinity_keeps_propagating(calc):
    enter(calc, "1")
    calc.choose_operation(Operator.DIVIDE)
    calc.compute()
    calc.choose_operation(Operator.ADD)
    enter(calc, "1")
    calc.compute()
    assert calc.state.current_operand == "Infinity"


def test_compute_without_operator_is_noop(calc):
    enter(calc, "42")
    calc.compute()
    assert calc.state == CalculatorState("42", "", None)


def test_compute_ignores_non_numeric_operands(calc):
    calc.state.previous_operand = "5 +"
    calc.state.pending_operator = Operator.ADD
    calc.state.current_operand = "abc"
    calc.compute()
    assert calc.state == CalculatorState("abc", "5 +", Operator.ADD)


def test_delete(calc):
    enter(calc, "123")
    calc.delete()
    assert calc.state.current_operand == "12"
    calc.delete()
    calc.delete()
    assert calc.state.current_operand == "0"
    calc.delete()
    assert calc.state.current_operand == "0"


def test_clear_resets_everything(calc):
    enter(calc, "9")
    calc.choose_operation(Operator.SUBTRACT)
    enter(calc, "4")
    calc.clear()
    assert calc.state == CalculatorState("0", "", None)


def test_sin_uses_degrees(calc):
    enter(calc, "90")
    calc.scientific_function(ScientificFunction.SIN)
    assert float(calc.state.current_operand) == pytest.approx(1.0)


def test_cos_uses_degrees(calc):
    enter(calc, "60")
    calc.scientific_function(ScientificFunction.COS)
    assert float(calc.state.current_operand) == pytest.approx(0.5)


def test_tan_uses_degrees(calc):
    enter(calc, "45")
    calc.scientific_function(ScientificFunction.TAN)
    assert float(calc.state.current_operand) == pytest.approx(1.0)


@pytest.mark.parametrize("entry, function, expected", [
    ("100", ScientificFunction.LOG, "2"),
    ("1", ScientificFunction.LN, "0"),
    ("16", ScientificFunction.SQRT, "4"),
    ("12", ScientificFunction.SQUARE, "144"),
    ("7", ScientificFunction.PI, "3.141592653589793"),
    ("0", ScientificFunction.LOG, "-Infinity"),
])
def test_scientific_functions(calc, entry, function, expected):
    enter(calc, entry)
    calc.scientific_function(function)
    assert calc.state.current_operand == expected


def test_out_of_domain_functions_give_nan(calc):
    calc.choose_operation(Operator.SUBTRACT)
    enter(calc, "4")
    calc.compute()
    assert calc.state.current_operand == "-4"
    calc.scientific_function(ScientificFunction.SQRT)
    assert calc.state.current_operand == "NaN"


def test_scientific_function_keeps_pending_operation(calc):
    enter(calc, "2")
    calc.choose_operation(Operator.ADD)
    enter(calc, "3")
    calc.scientific_function(ScientificFunction.SQUARE)
    calc.compute()
    assert calc.state.current_operand == "11"


def test_scientific_function_ignores_non_numeric_operand(calc):
    calc.state.current_operand = "Infinit"
    calc.scientific_function(ScientificFunction.SIN)
    assert calc.state.current_operand == "Infinit"


def test_dispatch_renders_after_every_action():
    display = RecordingDisplay()
    calc = Calculator(sink=display)
    for action in (
        AppendDigit("5"),
        ChooseOperator(Operator.ADD),
        AppendDigit("3"),
        RunCommand(Command.EQUALS),
    ):
        calc.dispatch(action)
    assert display.frames == [("5", ""), ("0", "5 +"), ("3", "5 +"), ("8", "")]


def test_dispatch_renders_even_when_state_is_unchanged():
    display = RecordingDisplay()
    calc = Calculator(sink=display)
    calc.dispatch(RunCommand(Command.DELETE))
    calc.dispatch(ApplyFunction(ScientificFunction.PI))
    assert display.frames == [("0", ""), (str(math.pi), "")]


def test_dispatch_rejects_unknown_action(calc):
    with pytest.raises(AssertionError):
        calc.dispatch("equals")


def test_shared_state_object_is_mutated_in_place():
    state = CalculatorState()
    calc = Calculator(state)
    calc.append_number("4")
    assert state.current_operand == "4"


@pytest.mark.parametrize("key, expected", [
    ("7", AppendDigit("7")),
    (".", AppendDigit(".")),
    ("Enter", RunCommand(Command.EQUALS)),
    ("=", RunCommand(Command.EQUALS)),
    ("Backspace", RunCommand(Command.DELETE)),
    ("Escape", RunCommand(Command.CLEAR)),
    ("+", ChooseOperator(Operator.ADD)),
    ("-", ChooseOperator(Operator.SUBTRACT)),
    ("*", ChooseOperator(Operator.MULTIPLY)),
    ("/", ChooseOperator(Operator.DIVIDE)),
])
def test_action_for_key(key, expected):
    assert action_for_key(key) == expected


@pytest.mark.parametrize("key", ["a", "%", "Tab", "", "12"])
def test_unbound_keys(key):
    assert action_for_key(key) is None


def test_handle_key_sequence():
    display = RecordingDisplay()
    calc = Calculator(sink=display)
    for key in ["9", "*", "3", "Enter"]:
        assert calc.handle_key(key)
    assert calc.state.current_operand == "27"
    assert not calc.handle_key("x")
    assert len(display.frames) == 4


def test_action_from_tags():
    assert action_from_tags(number="4") == AppendDigit("4")
    assert action_from_tags(operator="÷") == ChooseOperator(Operator.DIVIDE)
    assert action_from_tags(action="clear") == RunCommand(Command.CLEAR)
    assert action_from_tags(action="equals") == RunCommand(Command.EQUALS)
    assert action_from_tags(action="power") == ApplyFunction(ScientificFunction.SQUARE)
    assert action_from_tags(action="pi") == ApplyFunction(ScientificFunction.PI)


@pytest.mark.parametrize("tags", [
    {},
    {"number": "x"},
    {"operator": "^"},
    {"action": "factorial"},
])
def test_action_from_tags_rejects_unknown(tags):
    with pytest.raises(ValueError):
        action_from_tags(**tags)
