"""Main Flet application."""

from pathlib import Path

import flet as ft

from createsfz import __version__ as createsfz_version
from createsfz import parse_note

from .components import InputSelector, LogView, OptionsPanel, OutputPicker
from .converter import ConverterBridge
from .strings import Strings


class CreateSFZApp:
    """Main application class."""

    def __init__(self, page: ft.Page):
        """Initialize the application.

        Args:
            page: Flet page instance
        """
        self.page = page
        self._output_path: str | None = None

        self._setup_page()
        self._setup_services()
        self._create_components()
        self._build_layout()

        # Initial state
        self.log_view.add(Strings.READY_MESSAGE, "info")
        self.log_view.add(
            f"createsfz v{createsfz_version} (Flet {ft.version.__version__})", "info"
        )

    def _setup_page(self):
        """Configure page properties."""
        self.page.title = Strings.APP_TITLE
        self.page.window.width = 560
        self.page.window.height = 860
        self.page.padding = 20

    def _setup_services(self):
        """Register page services."""
        self.file_picker = ft.FilePicker()
        self.page.services.append(self.file_picker)

    def _create_components(self):
        """Create all GUI components."""
        # Converter bridge (created first for debug log callback)
        self.converter = ConverterBridge(self._gui_log)

        self.log_view = LogView(
            page=self.page,
            get_debug_log=self.converter.get_debug_log,
        )

        self.output_picker = OutputPicker(
            file_picker=self.file_picker,
            on_selected=self._on_output_selected,
        )

        self.options_panel = OptionsPanel(page=self.page, log_callback=self._gui_log)

        self.input_selector = InputSelector(
            page=self.page,
            file_picker=self.file_picker,
            on_folder_selected=self._on_folder_selected,
            on_files_selected=self._on_files_selected,
            log_callback=self._gui_log,
        )

    def _build_layout(self):
        """Build the page layout."""
        self.page.add(
            ft.Text(
                Strings.APP_TITLE,
                size=20,
                weight=ft.FontWeight.BOLD,
            ),
            ft.Container(height=10),
            self.output_picker.container,
            ft.Container(height=10),
            self.options_panel.container,
            ft.Container(height=10),
            self.input_selector.container,
            ft.Container(height=10),
            self.log_view.container,
        )

    def _gui_log(self, message: str, level: str = "info"):
        """Log callback for GUI."""
        self.log_view.add(message, level)

    def _on_output_selected(self, path: str):
        """Handle output folder selection."""
        self._output_path = path
        self._gui_log(f"Output folder: {path}", "info")
        existing = self.converter.check_output_folder(path)
        self.output_picker.set_status(
            Strings.OUTPUT_SFZ_COUNT.format(count=len(existing)) if existing else ""
        )
        self.input_selector.set_enabled(True)

    async def _on_folder_selected(self, folder: str):
        """Build an SFZ with notes read from the file names."""
        options = self.options_panel.get_options()
        root_note = None
        if options.root_note_text:
            root_note = self._parse_root_note(options.root_note_text)
            if root_note is None:
                return
        await self._run(folder, root_note=root_note)

    async def _on_files_selected(self, folder: str, names: list[str]):
        """Build an SFZ mapping the selected files from the root note."""
        options = self.options_panel.get_options()
        if not options.root_note_text:
            self._gui_log(Strings.ROOT_NOTE_REQUIRED, "error")
            return
        root_note = self._parse_root_note(options.root_note_text)
        if root_note is None:
            return
        await self._run(folder, root_note=root_note, samples=names)

    def _parse_root_note(self, text: str) -> int | None:
        try:
            return parse_note(text)
        except ValueError:
            self._gui_log(Strings.BAD_ROOT_NOTE.format(value=text), "error")
            return None

    async def _run(
        self,
        folder: str,
        root_note: int | None = None,
        samples: list[str] | None = None,
    ):
        """Run one SFZ build and report the result."""
        if not self._output_path:
            self._gui_log(Strings.SELECT_OUTPUT_FIRST, "error")
            return

        options = self.options_panel.get_options()
        self._gui_log(
            Strings.STARTING_CONVERSION.format(folder=Path(folder).name), "info"
        )

        # Disable input during the run
        self.input_selector.set_enabled(False)

        try:
            result = await self.converter.create(
                sample_dir=folder,
                output_dir=self._output_path,
                format_name=options.format_name,
                name_filter=options.name_filter,
                root_note=root_note,
                samples=samples,
                overwrite=options.overwrite,
                range_low=options.range_low,
                range_high=options.range_high,
                release_volume=options.release_volume,
            )

            if result is None:
                await self._show_result_dialog(
                    Strings.CONVERSION_FAILED, self.converter.last_error or ""
                )
                return

            summary = Strings.CONVERSION_RESULT.format(
                output=Path(result.output_path).name,
                notes=result.num_notes,
                regions=result.num_regions,
            )
            skipped = len(result.classification.skipped)
            if skipped:
                summary += "\n" + Strings.SKIPPED_FILES.format(count=skipped)
            self._gui_log(summary, "success" if not skipped else "warning")
            await self._show_result_dialog(Strings.CONVERSION_COMPLETE, summary)

        finally:
            # Re-enable input
            self.input_selector.set_enabled(True)

    async def _show_result_dialog(self, title: str, message: str):
        """Show completion dialog."""
        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text(title),
            content=ft.Text(f"{message}\n\nOutput: {self._output_path}"),
            actions=[
                ft.TextButton(
                    Strings.OK,
                    on_click=lambda e: self.page.pop_dialog(),
                ),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
        )
        self.page.show_dialog(dialog)
