"""Core configuration, logging, errors, and text helpers.

Re-exports convenience types from submodules for nicer imports if desired.
"""

from .config import AppSettings, get_settings  # noqa: F401
from .exceptions import SummarizerError  # noqa: F401
