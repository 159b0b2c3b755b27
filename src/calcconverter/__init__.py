"""Calculator and unit converter with a dark-mode toggle."""
