"""createsfz GUI package."""

__version__ = "1.0.0"

from .app import CreateSFZApp
from .strings import Strings

__all__ = ["CreateSFZApp", "Strings", "__version__"]
