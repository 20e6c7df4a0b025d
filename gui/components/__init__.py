"""GUI components for createsfz."""

from .input_selector import InputSelector
from .log_view import LogView
from .options_panel import CreateOptions, OptionsPanel
from .output_picker import OutputPicker

__all__ = ["OutputPicker", "OptionsPanel", "CreateOptions", "InputSelector", "LogView"]
