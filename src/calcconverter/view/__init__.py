"""
The VIEW layer contains the Qt widgets.
They implement the sink protocols of the model layer and forward Qt events
(clicks, key presses, combo box changes) to the controllers.
"""
