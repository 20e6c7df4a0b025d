"""Log display component."""

from typing import Callable

import flet as ft

from ..strings import Strings

LEVEL_COLORS = {
    "info": None,
    "warning": ft.Colors.ORANGE,
    "error": ft.Colors.RED,
    "success": ft.Colors.GREEN,
}


class LogView:
    """Leveled log view with copy and clear functionality."""

    def __init__(
        self,
        page: ft.Page,
        get_debug_log: Callable[[], str] | None = None,
    ):
        """Initialize log view.

        Args:
            page: Flet page instance for updates
            get_debug_log: Callback to get the captured createsfz output
        """
        self.page = page
        self._entries: list[tuple[str, str]] = []
        self._get_debug_log = get_debug_log

        self.log_list = ft.ListView(
            expand=True,
            spacing=2,
            auto_scroll=True,
        )

        # Build container
        self.container = self._build()

    def _build(self) -> ft.Container:
        """Build the log view container."""
        return ft.Container(
            content=ft.Column(
                [
                    ft.Row(
                        [
                            ft.Text(
                                Strings.CONVERSION_LOG,
                                weight=ft.FontWeight.BOLD,
                                size=12,
                            ),
                            ft.Row(
                                [
                                    ft.TextButton(
                                        Strings.COPY,
                                        on_click=self._on_copy_click,
                                    ),
                                    ft.TextButton(
                                        Strings.COPY_DEBUG,
                                        on_click=self._on_copy_debug_click,
                                    ),
                                    ft.TextButton(
                                        Strings.CLEAR,
                                        on_click=self._on_clear_click,
                                    ),
                                ],
                                spacing=0,
                            ),
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    ft.Container(
                        content=self.log_list,
                        border=ft.Border.all(1, ft.Colors.GREY_300),
                        border_radius=5,
                        padding=10,
                        expand=True,
                    ),
                ],
                spacing=5,
                expand=True,
            ),
            expand=True,
        )

    def add(self, message: str, level: str = "info"):
        """Add a log entry.

        Args:
            message: Log message
            level: "info", "warning", "error", or "success"
        """
        self.log_list.controls.append(
            ft.Text(message, color=LEVEL_COLORS.get(level), size=12)
        )
        self._entries.append((level, message))
        if self.page.controls:
            self.page.update()

    def clear(self):
        """Clear all log entries."""
        self.log_list.controls.clear()
        self._entries.clear()
        self.page.update()

    def get_text(self) -> str:
        """Get all log text, warnings and errors tagged with their level."""
        lines = []
        for level, message in self._entries:
            if level in ("warning", "error"):
                lines.append(f"[{level.upper()}] {message}")
            else:
                lines.append(message)
        return "\n".join(lines)

    async def _on_copy_click(self, e):
        """Handle copy button click."""
        await ft.Clipboard().set(self.get_text())
        self.add(Strings.LOG_COPIED, level="info")

    async def _on_copy_debug_click(self, e):
        """Handle copy debug button click."""
        debug_content = self._get_debug_log() if self._get_debug_log else ""
        if debug_content:
            await ft.Clipboard().set(debug_content)
            self.add(Strings.DEBUG_LOG_COPIED, level="info")
        else:
            self.add("No debug log available yet", level="warning")

    def _on_clear_click(self, e):
        """Handle clear button click."""
        self.clear()
