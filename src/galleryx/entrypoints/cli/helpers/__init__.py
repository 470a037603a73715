"""CLI helpers for GALLERYX.

Utilities used by the command-line interface: message emitters that write to
stderr with emoji→ASCII fallbacks, click parameter types for raw-text input,
and the unit-of-work session used by every command.
"""

from .messages import error, success, warn
from .param_types import DECIMAL, DISPLAY_DATE, enum_choice
from .session import open_gallery

__all__ = ["DECIMAL", "DISPLAY_DATE", "enum_choice", "error", "open_gallery", "success", "warn"]
