"""
Application State (Data Model)
==============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the calculator operands, the converter inputs
   and the active tab in one place.
2. Decoupling: Views read from this object; Controllers write to this object.

Classes:
    AppState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from calcconverter.model.calculator import CalculatorState
from calcconverter.model.converter import ConverterState
from calcconverter.model.tabs import Tab


@dataclass
class AppState:
    """
    Holds the entire state of the running window.
    Pass this instance to the Controllers and the Main Window.
    """
    calculator: CalculatorState = field(default_factory=CalculatorState)
    converter: ConverterState = field(default_factory=ConverterState)
    active_tab: Tab = Tab.CALCULATOR
