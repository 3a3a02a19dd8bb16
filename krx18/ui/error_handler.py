"""
Error Handler - Error panels with context and suggestions.

This module renders exceptions raised by providers, the fetch layer and
the configuration layer as Rich panels with actionable suggestions.
"""

import traceback
from typing import List, Optional

from rich.markup import escape
from rich.panel import Panel

from krx18.core.exceptions import (
    Krx18Error,
    ConfigurationError,
    ProviderError,
    NetworkError,
    SearchError,
    ValidationError,
)
from krx18.ui.console import get_console
from krx18.ui.themes import get_palette


class ErrorHandler:
    """Handles error display with consistent formatting and helpful context."""

    def handle_error(
        self,
        error: Exception,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """
        Handle and display an error with appropriate formatting.

        Args:
            error: Exception to handle
            context: Additional context about where the error occurred
            show_traceback: Whether to show the full traceback
        """
        if isinstance(error, ConfigurationError):
            self._display_configuration_error(error, context, show_traceback)
        elif isinstance(error, NetworkError):
            self._display_network_error(error, context, show_traceback)
        elif isinstance(error, SearchError):
            self._display_search_error(error, context, show_traceback)
        elif isinstance(error, ProviderError):
            self._display_provider_error(error, context, show_traceback)
        elif isinstance(error, ValidationError):
            self._display_validation_error(error, context, show_traceback)
        elif isinstance(error, Krx18Error):
            self._render("❌ Error", error.message, [], context, [], error.details if show_traceback else None)
        else:
            self._render(
                "💥 Unexpected Error",
                f"{error.__class__.__name__}: {error}",
                [],
                context,
                [
                    "Check the command syntax and arguments",
                    "Verify your configuration is correct",
                    "Run again with [cyan]--debug[/cyan] for a traceback",
                ],
                traceback.format_exc() if show_traceback else None,
            )

    def _render(
        self,
        title: str,
        message: str,
        facts: List[str],
        context: Optional[str],
        suggestions: List[str],
        details: Optional[object] = None,
    ) -> None:
        palette = get_palette()
        content_parts = [f"[{palette.error}]{escape(message)}[/{palette.error}]"]
        content_parts.extend(facts)

        if context:
            content_parts.append(f"\n[dim]Context:[/dim] {context}")

        if suggestions:
            content_parts.append(f"\n\n[{palette.info}]💡 Suggestions:[/{palette.info}]")
            content_parts.extend(f"• {suggestion}" for suggestion in suggestions)

        if details:
            content_parts.append(f"\n\n[dim]Details:[/dim]\n{escape(str(details))}")

        panel = Panel(
            "\n".join(content_parts),
            title=title,
            border_style=palette.error,
            padding=(1, 2)
        )
        get_console().print(panel)

    def _display_configuration_error(self, error: ConfigurationError, context, show_traceback) -> None:
        facts = []
        if error.config_path:
            facts.append(f"\n[dim]Configuration file:[/dim] [cyan]{error.config_path}[/cyan]")

        suggestions = [
            "Check configuration file syntax and format",
            "Use [cyan]krx18 config show[/cyan] to inspect current settings",
            "Reset to defaults with [cyan]krx18 config reset[/cyan]",
        ]
        self._render("⚙️  Configuration Error", error.message, facts, context, suggestions,
                     error.details if show_traceback else None)

    def _display_network_error(self, error: NetworkError, context, show_traceback) -> None:
        facts = []
        if error.url:
            facts.append(f"\n[dim]URL:[/dim] [blue]{error.url}[/blue]")
        if error.status_code:
            facts.append(f"\n[dim]Status Code:[/dim] {error.status_code}")

        suggestions = [
            "Check your internet connection",
            "Verify the site is reachable in a browser",
            "Try again in a few moments",
        ]
        if error.status_code == 403:
            suggestions.insert(0, "The site may be blocking requests - try a different user agent")
        elif error.status_code == 404:
            suggestions.insert(0, "The requested page may no longer exist")
        elif error.status_code and error.status_code >= 500:
            suggestions.insert(0, "The site is experiencing server issues")

        self._render("🌐 Network Error", error.message, facts, context, suggestions,
                     error.details if show_traceback else None)

    def _display_search_error(self, error: SearchError, context, show_traceback) -> None:
        facts = []
        if error.query is not None:
            facts.append(f"\n[dim]Query:[/dim] [cyan]{error.query!r}[/cyan]")
        if error.source:
            facts.append(f"\n[dim]Source:[/dim] [cyan]{error.source}[/cyan]")

        suggestions = [
            "Try different search terms or keywords",
            "Browse the latest titles with [cyan]krx18 catalog[/cyan]",
        ]
        self._render("🔍 Search Error", error.message, facts, context, suggestions,
                     error.details if show_traceback else None)

    def _display_provider_error(self, error: ProviderError, context, show_traceback) -> None:
        facts = []
        if error.provider_name:
            facts.append(f"\n[dim]Provider:[/dim] [cyan]{error.provider_name}[/cyan]")

        suggestions = [
            "Check the provider base URL with [cyan]krx18 config get provider.base_url[/cyan]",
            "The site layout may have changed",
        ]
        self._render("🔌 Provider Error", error.message, facts, context, suggestions,
                     error.details if show_traceback else None)

    def _display_validation_error(self, error: ValidationError, context, show_traceback) -> None:
        facts = []
        if error.field_name:
            facts.append(f"\n[dim]Field:[/dim] [cyan]{error.field_name}[/cyan]")
        if error.invalid_value is not None:
            facts.append(f"\n[dim]Invalid Value:[/dim] [red]{error.invalid_value}[/red]")

        self._render("✅ Validation Error", error.message, facts, context,
                     ["Check the value format and type"],
                     error.details if show_traceback else None)

    def display_warning(self, message: str, title: str = "⚠️  Warning") -> None:
        palette = get_palette()
        panel = Panel(
            f"[{palette.warning}]{message}[/{palette.warning}]",
            title=f"[{palette.warning}]{title}[/{palette.warning}]",
            border_style=palette.warning,
            padding=(1, 2)
        )
        get_console().print(panel)

    def display_info(self, message: str, title: str = "ℹ️  Information") -> None:
        palette = get_palette()
        panel = Panel(
            f"[{palette.info}]{message}[/{palette.info}]",
            title=f"[{palette.info}]{title}[/{palette.info}]",
            border_style=palette.info,
            padding=(1, 2)
        )
        get_console().print(panel)


# Global error handler instance
_error_handler = ErrorHandler()


def handle_error(
    error: Exception,
    context: Optional[str] = None,
    show_traceback: bool = False
) -> None:
    """Handle and display an error using the global error handler."""
    _error_handler.handle_error(error, context, show_traceback)


def display_warning(message: str, title: str = "⚠️  Warning") -> None:
    """Display a warning message using the global error handler."""
    _error_handler.display_warning(message, title)


def display_info(message: str, title: str = "ℹ️  Information") -> None:
    """Display an information message using the global error handler."""
    _error_handler.display_info(message, title)


__all__ = [
    "ErrorHandler",
    "handle_error",
    "display_warning",
    "display_info",
]
