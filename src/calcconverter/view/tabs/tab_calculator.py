"""
Calculator Panel
"""
from typing import List, Optional, Tuple

from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QLabel, QPushButton, QFrame
from PySide6.QtCore import Qt

from calcconverter.model.calculator import (
    Calculator, CalculatorAction, CalculatorState, Command, Operator, ScientificFunction, action_from_tags
)

# (label, tag name, tag value, row, column, row span, column span)
ButtonSpec = Tuple[str, str, str, int, int, int, int]

BUTTONS: List[ButtonSpec] = [
    ("sin", "action", ScientificFunction.SIN, 0, 0, 1, 1),
    ("cos", "action", ScientificFunction.COS, 0, 1, 1, 1),
    ("tan", "action", ScientificFunction.TAN, 0, 2, 1, 1),
    ("log", "action", ScientificFunction.LOG, 0, 3, 1, 1),
    ("ln", "action", ScientificFunction.LN, 1, 0, 1, 1),
    ("√", "action", ScientificFunction.SQRT, 1, 1, 1, 1),
    ("x²", "action", ScientificFunction.SQUARE, 1, 2, 1, 1),
    ("π", "action", ScientificFunction.PI, 1, 3, 1, 1),
    ("C", "action", Command.CLEAR, 2, 0, 1, 1),
    ("⌫", "action", Command.DELETE, 2, 1, 1, 1),
    (Operator.DIVIDE, "operator", Operator.DIVIDE, 2, 2, 1, 1),
    (Operator.MULTIPLY, "operator", Operator.MULTIPLY, 2, 3, 1, 1),
    ("7", "number", "7", 3, 0, 1, 1),
    ("8", "number", "8", 3, 1, 1, 1),
    ("9", "number", "9", 3, 2, 1, 1),
    (Operator.SUBTRACT, "operator", Operator.SUBTRACT, 3, 3, 1, 1),
    ("4", "number", "4", 4, 0, 1, 1),
    ("5", "number", "5", 4, 1, 1, 1),
    ("6", "number", "6", 4, 2, 1, 1),
    (Operator.ADD, "operator", Operator.ADD, 4, 3, 1, 1),
    ("1", "number", "1", 5, 0, 1, 1),
    ("2", "number", "2", 5, 1, 1, 1),
    ("3", "number", "3", 5, 2, 1, 1),
    ("=", "action", Command.EQUALS, 5, 3, 2, 1),
    ("0", "number", "0", 6, 0, 1, 2),
    (".", "number", ".", 6, 2, 1, 1),
]


def button_action(button: QPushButton) -> CalculatorAction:
    """Read the tag properties of a calculator button."""
    return action_from_tags(
        number=button.property("number"),
        operator=button.property("operator"),
        action=button.property("action"),
    )


class CalculatorPanel(QWidget):
    def __init__(self, state: CalculatorState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.calculator = Calculator(state, sink=self)
        self.buttons: List[QPushButton] = []

        layout = QVBoxLayout(self)

        # --- Display ---
        display = QFrame()
        display.setFrameShape(QFrame.StyledPanel)
        display_layout = QVBoxLayout(display)

        self.lbl_previous = QLabel("")
        self.lbl_previous.setObjectName("previousOperand")
        self.lbl_previous.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        display_layout.addWidget(self.lbl_previous)

        self.lbl_current = QLabel("0")
        self.lbl_current.setObjectName("currentOperand")
        self.lbl_current.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.lbl_current.setTextInteractionFlags(Qt.TextSelectableByMouse)
        display_layout.addWidget(self.lbl_current)

        layout.addWidget(display)

        # --- Keypad ---
        grid = QGridLayout()
        for text, tag, value, row, col, row_span, col_span in BUTTONS:
            btn = QPushButton(str(text))
            btn.setProperty(tag, str(value))
            btn.setProperty("kind", tag)
            # Keep keyboard focus on the window so key presses reach it
            btn.setFocusPolicy(Qt.NoFocus)
            btn.clicked.connect(lambda _=False, b=btn: self.on_button_clicked(b))
            grid.addWidget(btn, row, col, row_span, col_span)
            self.buttons.append(btn)
        layout.addLayout(grid)

        self.calculator.update_display()

    # --- DisplaySink ---

    def show_operands(self, current: str, previous: str) -> None:
        self.lbl_current.setText(current)
        self.lbl_previous.setText(previous)

    # --- SLOTS ---

    def on_button_clicked(self, button: QPushButton) -> None:
        self.calculator.dispatch(button_action(button))

    def find_button(self, text: str) -> QPushButton:
        for btn in self.buttons:
            if btn.text() == text:
                return btn
        raise KeyError(text)
