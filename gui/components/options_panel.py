"""SFZ options panel component."""

from dataclasses import dataclass

from typing import Callable

import flet as ft

from createsfz import FORMATS, parse_volume

from ..strings import Strings

PROBE_KEY = "probe"


@dataclass
class CreateOptions:
    """SFZ build options data class."""

    format_name: str | None = None
    name_filter: str | None = None
    root_note_text: str = ""
    range_low: int = 0
    range_high: int = 0
    release_volume: float = 0.0
    overwrite: bool = False


def _int_or_zero(value: str | None) -> int:
    try:
        return int(value) if value else 0
    except ValueError:
        return 0


class OptionsPanel:
    """Options panel with format selection, text fields and checkbox."""

    def __init__(
        self,
        page: ft.Page,
        log_callback: Callable[[str, str], None] | None = None,
    ):
        """Initialize options panel.

        Args:
            page: Flet page instance (for dialogs)
            log_callback: Callback for logging (message, level)
        """
        self.page = page
        self.log = log_callback

        # Format dropdown, probe first
        self.format_dd = ft.Dropdown(
            label=Strings.FORMAT_LABEL,
            value=PROBE_KEY,
            dense=True,
            expand=True,
            options=[ft.dropdown.Option(key=PROBE_KEY, text=Strings.FORMAT_PROBE)]
            + [
                ft.dropdown.Option(key=f.name, text=f"{f.name}  ({f.example})")
                for f in FORMATS
            ],
        )

        self.filter_field = ft.TextField(
            label=Strings.FILTER_LABEL,
            hint_text=Strings.FILTER_HINT,
            expand=True,
            dense=True,
        )
        self.root_note_field = ft.TextField(
            label=Strings.ROOT_NOTE_LABEL,
            hint_text=Strings.ROOT_NOTE_HINT,
            width=120,
            dense=True,
        )

        # Key range and release fields
        self.range_low_field = ft.TextField(
            label=Strings.RANGE_LOW_LABEL,
            value="0",
            width=100,
            dense=True,
            input_filter=ft.NumbersOnlyInputFilter(),
        )
        self.range_high_field = ft.TextField(
            label=Strings.RANGE_HIGH_LABEL,
            value="0",
            width=100,
            dense=True,
            input_filter=ft.NumbersOnlyInputFilter(),
        )
        self.release_volume_field = ft.TextField(
            label=Strings.RELEASE_VOLUME_LABEL,
            value="0",
            width=100,
            dense=True,
        )

        self.overwrite_cb = ft.Checkbox(
            label=Strings.OVERWRITE,
            value=False,
        )

        # Options help button (for all options)
        self.options_help_btn = ft.IconButton(
            icon=ft.Icons.HELP_OUTLINE,
            icon_size=18,
            tooltip=Strings.OPTIONS_HELP_TITLE,
            on_click=self._show_options_help,
        )

        # Build container
        self.container = self._build()

    def _show_options_help(self, e):
        """Show options help dialog."""
        dialog = ft.AlertDialog(
            modal=False,
            title=ft.Text(Strings.OPTIONS_HELP_TITLE),
            content=ft.Text(Strings.OPTIONS_HELP_TEXT),
            actions=[
                ft.TextButton(Strings.OK, on_click=lambda e: self.page.pop_dialog()),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
        )
        self.page.show_dialog(dialog)

    def _build(self) -> ft.Container:
        """Build the options panel container."""
        return ft.Container(
            content=ft.Column(
                [
                    # Header row with title and help button
                    ft.Row(
                        [
                            ft.Text(
                                Strings.OPTIONS,
                                weight=ft.FontWeight.BOLD,
                                size=12,
                            ),
                            self.options_help_btn,
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    ft.Row([self.format_dd]),
                    ft.Row([self.filter_field, self.root_note_field]),
                    ft.Row(
                        [
                            self.range_low_field,
                            self.range_high_field,
                            self.release_volume_field,
                        ],
                    ),
                    ft.Row([self.overwrite_cb]),
                ],
                spacing=8,
            ),
            padding=10,
            border=ft.Border.all(1, ft.Colors.GREY_300),
            border_radius=8,
        )

    def get_options(self) -> CreateOptions:
        """Get current options as dataclass."""
        format_name = self.format_dd.value
        if format_name == PROBE_KEY:
            format_name = None

        release_volume = 0.0
        if self.release_volume_field.value:
            try:
                release_volume = parse_volume(self.release_volume_field.value)
            except ValueError:
                if self.log:
                    self.log(
                        Strings.BAD_RELEASE_VOLUME.format(
                            value=self.release_volume_field.value
                        ),
                        "warning",
                    )

        return CreateOptions(
            format_name=format_name,
            name_filter=self.filter_field.value or None,
            root_note_text=(self.root_note_field.value or "").strip(),
            range_low=_int_or_zero(self.range_low_field.value),
            range_high=_int_or_zero(self.range_high_field.value),
            release_volume=release_volume,
            overwrite=self.overwrite_cb.value or False,
        )
