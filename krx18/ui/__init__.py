"""
UI Layer - Rich console, themes, error panels and tables.
"""

from krx18.ui.components import UIComponents
from krx18.ui.themes import ThemeManager, ThemeName, get_theme, get_palette, set_theme
from krx18.ui.error_handler import ErrorHandler, handle_error, display_warning, display_info
from krx18.ui.progress import status_spinner
from krx18.ui.console import get_console, setup_console

__all__ = [
    "UIComponents",
    "ThemeManager",
    "ThemeName",
    "get_theme",
    "get_palette",
    "set_theme",
    "ErrorHandler",
    "handle_error",
    "display_warning",
    "display_info",
    "status_spinner",
    "get_console",
    "setup_console",
]
