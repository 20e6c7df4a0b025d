"""Output folder selection component."""

from typing import Callable

import flet as ft

from ..strings import Strings


class OutputPicker:
    """Output folder field with a browse button and a status line."""

    def __init__(
        self,
        file_picker: ft.FilePicker,
        on_selected: Callable[[str], None],
    ):
        """Initialize output picker.

        Args:
            file_picker: FilePicker service
            on_selected: Callback with the chosen folder
        """
        self.file_picker = file_picker
        self.on_selected = on_selected
        self.selected_path: str | None = None

        self.path_field = ft.TextField(
            label=Strings.OUTPUT_FOLDER,
            read_only=True,
            expand=True,
            hint_text=Strings.OUTPUT_HINT,
        )
        # Shows existing .sfz files in the chosen folder
        self.status = ft.Text("", size=11, color=ft.Colors.ORANGE, visible=False)

        self.container = ft.Container(
            content=ft.Column(
                [
                    ft.Text(Strings.OUTPUT_FOLDER, weight=ft.FontWeight.BOLD, size=12),
                    ft.Row(
                        [
                            self.path_field,
                            ft.Button(Strings.BROWSE, on_click=self._on_browse),
                        ],
                    ),
                    self.status,
                ],
                spacing=5,
            ),
            padding=10,
            border=ft.Border.all(1, ft.Colors.GREY_300),
            border_radius=8,
        )

    def set_status(self, message: str):
        """Show a note under the path field, hide it when empty."""
        self.status.value = message
        self.status.visible = bool(message)
        self.status.update()

    async def _on_browse(self, e):
        folder = await self.file_picker.get_directory_path(
            dialog_title=Strings.SELECT_OUTPUT_TITLE
        )
        if not folder:
            return
        self.selected_path = folder
        self.path_field.value = folder
        self.path_field.update()
        self.on_selected(folder)
