"""Sample folder/file selection component."""

from pathlib import Path
from typing import Awaitable, Callable

import flet as ft

from createsfz import AUDIO_EXTENSIONS

from ..strings import Strings


class InputSelector:
    """Input selection buttons (sample folder, or explicit files)."""

    def __init__(
        self,
        page: ft.Page,
        file_picker: ft.FilePicker,
        on_folder_selected: Callable[[str], Awaitable[None]],
        on_files_selected: Callable[[str, list[str]], Awaitable[None]],
        log_callback: Callable[[str, str], None],
    ):
        """Initialize input selector.

        Args:
            page: Flet page instance
            file_picker: FilePicker service
            on_folder_selected: Callback(folder) for a sample folder
            on_files_selected: Callback(folder, names) for explicit files
            log_callback: Callback for logging (message, level)
        """
        self.page = page
        self.file_picker = file_picker
        self.on_folder_selected = on_folder_selected
        self.on_files_selected = on_files_selected
        self.log = log_callback

        # Remember last directory for better UX
        self._last_directory: str | None = None

        # Buttons (initially disabled)
        self.select_folder_btn = ft.Button(
            Strings.SELECT_FOLDER,
            icon=ft.Icons.FOLDER_OPEN,
            on_click=self._on_select_folder,
            expand=True,
            disabled=True,
        )
        self.select_files_btn = ft.Button(
            Strings.SELECT_FILES,
            icon=ft.Icons.AUDIO_FILE,
            on_click=self._on_select_files,
            expand=True,
            disabled=True,
        )

        # Build container
        self.container = self._build()

    def _build(self) -> ft.Container:
        """Build the input selector container."""
        return ft.Container(
            content=ft.Column(
                [
                    ft.Text(
                        Strings.SELECT_INPUT,
                        weight=ft.FontWeight.BOLD,
                        size=12,
                    ),
                    ft.Row(
                        [self.select_folder_btn, self.select_files_btn],
                        spacing=10,
                    ),
                    ft.Text(
                        Strings.INPUT_HINT,
                        size=11,
                        color=ft.Colors.GREY_500,
                        text_align=ft.TextAlign.CENTER,
                    ),
                ],
                spacing=8,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=15,
            border=ft.Border.all(1, ft.Colors.GREY_300),
            border_radius=8,
        )

    def set_enabled(self, enabled: bool):
        """Enable or disable input buttons."""
        self.select_folder_btn.disabled = not enabled
        self.select_files_btn.disabled = not enabled
        self.page.update()

    async def _on_select_folder(self, e):
        """Handle sample folder selection."""
        result = await self.file_picker.get_directory_path(
            dialog_title=Strings.SELECT_INPUT_FOLDER_TITLE,
            initial_directory=self._last_directory,
        )
        if result:
            # Remember directory for next time
            self._last_directory = result
            await self.on_folder_selected(result)

    async def _on_select_files(self, e):
        """Handle explicit sample file selection."""
        results = await self.file_picker.pick_files(
            dialog_title=Strings.SELECT_FILES_TITLE,
            file_type=ft.FilePickerFileType.CUSTOM,
            allowed_extensions=list(AUDIO_EXTENSIONS),
            allow_multiple=True,
            initial_directory=self._last_directory,
        )
        if not results:
            return

        paths = [Path(f.path) for f in results]
        folders = {p.parent for p in paths}
        if len(folders) > 1:
            self.log(Strings.FILES_IN_SEVERAL_FOLDERS, "error")
            return

        folder = str(paths[0].parent)
        self._last_directory = folder
        # Selection order is the key order
        await self.on_files_selected(folder, [p.name for p in paths])
