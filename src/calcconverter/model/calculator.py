"""
Calculator State Machine
========================
Holds the operands of the running calculation and applies user actions.

Why is this file needed?
------------------------
1. State Management: current/previous operand strings and the pending
   operator live in one explicitly constructed object.
2. Decoupling: rendering goes through the small DisplaySink protocol, so the
   machine has NO knowledge of Qt and is testable on its own.

Classes:
    Operator, ScientificFunction, Command: Button tags.
    AppendDigit, ChooseOperator, RunCommand, ApplyFunction: Action variants.
    CalculatorState: The operand data.
    Calculator: The state machine.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
import math
from typing import Callable, Dict, Optional, Protocol, Union, assert_never

from calcconverter.utils import number_to_string, parse_number

logger = logging.getLogger(__name__)

DECIMAL_POINT = "."
DIGITS = "0123456789"


class Operator(StrEnum):
    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"


class ScientificFunction(StrEnum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LOG = "log"
    LN = "ln"
    SQRT = "sqrt"
    SQUARE = "power"
    PI = "pi"


class Command(StrEnum):
    CLEAR = "clear"
    DELETE = "delete"
    EQUALS = "equals"


@dataclass(frozen=True)
class AppendDigit:
    digit: str


@dataclass(frozen=True)
class ChooseOperator:
    operator: Operator


@dataclass(frozen=True)
class RunCommand:
    command: Command


@dataclass(frozen=True)
class ApplyFunction:
    function: ScientificFunction


CalculatorAction = Union[AppendDigit, ChooseOperator, RunCommand, ApplyFunction]

# Keyboard characters that select an operator
KEY_OPERATORS: Dict[str, Operator] = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
}

KEY_COMMANDS: Dict[str, Command] = {
    "Enter": Command.EQUALS,
    "=": Command.EQUALS,
    "Backspace": Command.DELETE,
    "Escape": Command.CLEAR,
}


def action_for_key(key: str) -> Optional[CalculatorAction]:
    """Map a key name ("5", "Enter", "*", ...) to an action, None if unbound."""
    if len(key) == 1 and (key in DIGITS or key == DECIMAL_POINT):
        return AppendDigit(key)
    if key in KEY_COMMANDS:
        return RunCommand(KEY_COMMANDS[key])
    if key in KEY_OPERATORS:
        return ChooseOperator(KEY_OPERATORS[key])
    return None


def action_from_tags(
    number: Optional[str] = None,
    operator: Optional[str] = None,
    action: Optional[str] = None,
) -> CalculatorAction:
    """
    Build an action from the tags a calculator button carries.

    Exactly one tag is expected. 'action' is either a Command or a
    ScientificFunction name.

    Raises:
        ValueError: If no tag is given or a tag is unknown.
    """
    if number is not None:
        if number not in DIGITS and number != DECIMAL_POINT:
            raise ValueError(f"Not a digit: {number!r}")
        return AppendDigit(number)
    if operator is not None:
        return ChooseOperator(Operator(operator))
    if action is not None:
        if action in {command.value for command in Command}:
            return RunCommand(Command(action))
        return ApplyFunction(ScientificFunction(action))
    raise ValueError("Button carries no calculator tag.")


class DisplaySink(Protocol):
    def show_operands(self, current: str, previous: str) -> None: ...


# --- ARITHMETIC (IEEE semantics, never raises) ---

def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _degrees_trig(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(degrees: float) -> float:
        if not math.isfinite(degrees):
            return math.nan
        return func(degrees * math.pi / 180)
    return wrapped


def _log_domain(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        if math.isnan(x) or x < 0:
            return math.nan
        if x == 0:
            return -math.inf
        return func(x)
    return wrapped


def _sqrt(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    return math.sqrt(x)


BINARY_OPERATIONS: Dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUBTRACT: lambda a, b: a - b,
    Operator.MULTIPLY: lambda a, b: a * b,
    Operator.DIVIDE: _divide,
}

UNARY_FUNCTIONS: Dict[ScientificFunction, Callable[[float], float]] = {
    ScientificFunction.SIN: _degrees_trig(math.sin),
    ScientificFunction.COS: _degrees_trig(math.cos),
    ScientificFunction.TAN: _degrees_trig(math.tan),
    ScientificFunction.LOG: _log_domain(math.log10),
    ScientificFunction.LN: _log_domain(math.log),
    ScientificFunction.SQRT: _sqrt,
    ScientificFunction.SQUARE: lambda x: x * x,
    ScientificFunction.PI: lambda _: math.pi,
}


@dataclass
class CalculatorState:
    current_operand: str = "0"
    previous_operand: str = ""
    pending_operator: Optional[Operator] = None

    def reset(self) -> None:
        self.current_operand = "0"
        self.previous_operand = ""
        self.pending_operator = None


class Calculator:
    """
    Input/operation state machine.

    The individual transitions (append_number, compute, ...) only mutate
    state. dispatch() applies an action and re-renders the display.
    """

    def __init__(self, state: Optional[CalculatorState] = None, sink: Optional[DisplaySink] = None) -> None:
        self.state = state if state is not None else CalculatorState()
        self.sink = sink
        self.clear()

    # --- TRANSITIONS ---

    def clear(self) -> None:
        self.state.reset()

    def delete(self) -> None:
        if self.state.current_operand == "0":
            return
        self.state.current_operand = self.state.current_operand[:-1] or "0"

    def append_number(self, digit: str) -> None:
        current = self.state.current_operand
        if digit == DECIMAL_POINT and DECIMAL_POINT in current:
            return
        if current == "0" and digit != DECIMAL_POINT:
            self.state.current_operand = digit
        else:
            self.state.current_operand = current + digit

    def choose_operation(self, operator: Operator) -> None:
        if self.state.current_operand == "":
            return
        # Chaining: finish the pending calculation before starting a new one
        if self.state.previous_operand != "":
            self.compute()
        self.state.pending_operator = operator
        self.state.previous_operand = f"{self.state.current_operand} {operator}"
        self.state.current_operand = "0"

    def compute(self) -> None:
        prev = parse_number(self.state.previous_operand)
        current = parse_number(self.state.current_operand)
        if prev is None or current is None:
            logger.debug(
                f"Compute ignored, operands '{self.state.previous_operand}' / "
                f"'{self.state.current_operand}' are not numeric."
            )
            return
        operator = self.state.pending_operator
        if operator is None:
            return

        result = BINARY_OPERATIONS[operator](prev, current)
        self.state.current_operand = number_to_string(result)
        self.state.pending_operator = None
        self.state.previous_operand = ""

    def scientific_function(self, function: ScientificFunction) -> None:
        current = parse_number(self.state.current_operand)
        if current is None:
            logger.debug(f"{function} ignored, operand '{self.state.current_operand}' is not numeric.")
            return
        self.state.current_operand = number_to_string(UNARY_FUNCTIONS[function](current))

    # --- DISPATCH ---

    def dispatch(self, action: CalculatorAction) -> None:
        """Apply a user action, then re-render both display regions."""
        if isinstance(action, AppendDigit):
            self.append_number(action.digit)
        elif isinstance(action, ChooseOperator):
            self.choose_operation(action.operator)
        elif isinstance(action, RunCommand):
            self._run_command(action.command)
        elif isinstance(action, ApplyFunction):
            self.scientific_function(action.function)
        else:
            assert_never(action)
        self.update_display()

    def _run_command(self, command: Command) -> None:
        if command is Command.CLEAR:
            self.clear()
        elif command is Command.DELETE:
            self.delete()
        elif command is Command.EQUALS:
            self.compute()
        else:
            assert_never(command)

    def handle_key(self, key: str) -> bool:
        """Dispatch a keyboard key. Returns False when the key is not bound."""
        action = action_for_key(key)
        if action is None:
            return False
        self.dispatch(action)
        return True

    def update_display(self) -> None:
        if self.sink is not None:
            self.sink.show_operands(self.state.current_operand, self.state.previous_operand)
