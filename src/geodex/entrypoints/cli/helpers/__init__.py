"""CLI helpers for GEODEX.

Message emitters that write to stderr with emoji->ASCII fallbacks, the
logger-level option parser, and rendering of dispatch results.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .render import render

__all__ = ["error", "parse_log_level", "render", "success", "warn"]
