"""
The MODEL layer contains pure data structures and the application logic.
It has NO knowledge of the GUI (Qt).
It deals with the calculator, unit conversion, theme and tab selection.
"""
