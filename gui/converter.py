"""Bridge between GUI and createsfz.py."""

import asyncio
import io
import os
from contextlib import redirect_stdout
from typing import Callable

from createsfz import (
    ConversionError,
    CreateResult,
    ValidationError,
    create_sfz,
)

from .strings import Strings


class ConverterBridge:
    """Bridges GUI to the createsfz pipeline."""

    def __init__(self, log_callback: Callable[[str, str], None]):
        """Initialize bridge with log callback.

        Args:
            log_callback: Function(message, level) for logging
        """
        self.log = log_callback
        self._debug_log: list[str] = []
        self.last_error: str | None = None

    def get_debug_log(self) -> str:
        """Get the detailed debug log from last run.

        Returns:
            str: Full stdout output from the run
        """
        return "\n".join(self._debug_log)

    def clear_debug_log(self):
        """Clear the debug log."""
        self._debug_log.clear()

    async def create(
        self,
        sample_dir: str,
        output_dir: str,
        format_name: str | None = None,
        name_filter: str | None = None,
        root_note: int | None = None,
        samples: list[str] | None = None,
        overwrite: bool = False,
        range_low: int = 0,
        range_high: int = 0,
        release_volume: float = 0.0,
    ) -> CreateResult | None:
        """Build one SFZ file asynchronously.

        Args:
            sample_dir: Folder containing the samples
            output_dir: Folder for the .sfz file
            format_name: Sample name format, None to detect
            name_filter: Only use files containing this text
            root_note: Map samples to keys from this MIDI note
            samples: Explicit ordered sample names (with root_note)
            overwrite: Replace an existing .sfz file
            range_low: Keys below the lowest note to cover
            range_high: Keys above the highest note to cover
            release_volume: Volume (dB) of release-trigger regions

        Returns:
            CreateResult, or None if the run failed
        """
        self.clear_debug_log()
        self.last_error = None
        try:
            # Run in thread to avoid blocking UI
            result = await asyncio.to_thread(
                self._create_single,
                sample_dir,
                output_dir,
                format_name,
                name_filter,
                root_note,
                samples,
                overwrite,
                range_low,
                range_high,
                release_volume,
            )
        except ConversionError as e:
            self.last_error = str(e)
            self.log(f"  -> Error: {e}", "error")
            return None
        except ValidationError as e:
            self.last_error = str(e)
            self.log(f"  -> Validation error: {e}", "error")
            return None

        skipped = result.classification.skipped
        if skipped:
            self.log(f"  -> {len(skipped)} file(s) skipped", "warning")
            for filename, reason in skipped:
                self.log(f"     {filename}: {reason}", "warning")
        self.log(f"  -> Done: {result.output_path}", "success")
        return result

    def _create_single(
        self,
        sample_dir: str,
        output_dir: str,
        format_name: str | None,
        name_filter: str | None,
        root_note: int | None,
        samples: list[str] | None,
        overwrite: bool,
        range_low: int,
        range_high: int,
        release_volume: float,
    ) -> CreateResult:
        """Run create_sfz (runs in thread).

        The output file name is not known until the samples are classified,
        so the run writes relative to output_dir.
        """
        stdout_capture = io.StringIO()
        try:
            with redirect_stdout(stdout_capture):
                result = create_sfz(
                    sample_dir,
                    output_path=None,
                    format_name=format_name,
                    name_filter=name_filter,
                    root_note=root_note,
                    samples=samples,
                    overwrite=overwrite,
                    range_low=range_low,
                    range_high=range_high,
                    release_volume=release_volume,
                    output_dir=output_dir,
                )
                result.classification.print_summary()
        finally:
            captured = stdout_capture.getvalue()
            if captured:
                self._debug_log.append(captured)

        return result

    def check_output_folder(self, folder: str) -> list[str]:
        """Warn when a folder already holds .sfz files.

        Returns:
            list: Names of the existing .sfz files
        """
        existing = self.sfz_files_in(folder)
        if existing:
            self.log(
                Strings.OUTPUT_HAS_SFZ_WARNING.format(count=len(existing)), "warning"
            )
        return existing

    @staticmethod
    def sfz_files_in(folder: str) -> list[str]:
        """Names of existing .sfz files in a folder."""
        if not os.path.isdir(folder):
            return []
        return sorted(n for n in os.listdir(folder) if n.lower().endswith(".sfz"))
