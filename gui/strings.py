"""Localization strings for GUI.

All user-facing strings are centralized here for future localization.
"""


class Strings:
    """Centralized strings for the GUI."""

    # Window
    APP_TITLE = "createsfz - SFZ Instrument Builder"

    # Output section
    OUTPUT_FOLDER = "OUTPUT FOLDER"
    OUTPUT_HINT = "Select output folder first"
    BROWSE = "Browse"
    OUTPUT_HAS_SFZ_WARNING = (
        "Warning: Output folder already contains {count} .sfz file(s). "
        "Enable 'Overwrite' to replace them."
    )
    OUTPUT_SFZ_COUNT = "{count} existing .sfz file(s)"

    # Options section
    OPTIONS = "OPTIONS"
    FORMAT_LABEL = "Name format"
    FORMAT_PROBE = "Detect automatically"
    FILTER_LABEL = "Filter"
    FILTER_HINT = "Only files containing this text"
    ROOT_NOTE_LABEL = "Root note"
    ROOT_NOTE_HINT = "e.g. C3 or 60"
    RANGE_LOW_LABEL = "Keys below"
    RANGE_HIGH_LABEL = "Keys above"
    RELEASE_VOLUME_LABEL = "Release dB"
    OVERWRITE = "Overwrite existing file"

    # Options help dialog
    OPTIONS_HELP_TITLE = "Options Help"
    OPTIONS_HELP_TEXT = (
        "Name format\n"
        "  How notes and velocities are read from file names.\n"
        "  • format1: Piano_Hard-C4-1.wav\n"
        "  • format2: Organ RT C3.wav\n"
        "  • pianobook: Keys mf C3 RT.wav\n"
        "  'Detect automatically' picks the format matching most files.\n\n"
        "Filter\n"
        "  Only use files whose name contains this text.\n\n"
        "Root note\n"
        "  Required when selecting files. Files are mapped to\n"
        "  consecutive keys from this note, in selection order.\n\n"
        "Keys below\n"
        "  Extend the lowest sampled note downwards.\n\n"
        "Keys above\n"
        "  Kept for older presets; every note ends on its own key.\n\n"
        "Release dB\n"
        "  Volume of release-trigger samples (0 = unchanged)."
    )

    # Input section
    SELECT_INPUT = "SELECT SAMPLES"
    SELECT_FILES = "Select File(s)"
    SELECT_FOLDER = "Select Folder"
    INPUT_HINT = "Folder: notes from file names / Files: mapped from root note"

    # Log section
    CONVERSION_LOG = "LOG"
    COPY = "Copy"
    COPY_DEBUG = "Copy Debug"
    CLEAR = "Clear"
    LOG_COPIED = "Log copied to clipboard"
    DEBUG_LOG_COPIED = "Debug log copied to clipboard (detailed output)"
    READY_MESSAGE = "Ready. Select output folder to begin."

    # Dialogs
    SELECT_OUTPUT_TITLE = "Select Output Folder"
    SELECT_FILES_TITLE = "Select Sample Files"
    SELECT_INPUT_FOLDER_TITLE = "Select Sample Folder"
    CONVERSION_COMPLETE = "SFZ Created"
    CONVERSION_FAILED = "SFZ Not Created"
    OK = "OK"

    # Errors
    SELECT_OUTPUT_FIRST = "Please select output folder first"
    ROOT_NOTE_REQUIRED = "Enter a root note to map selected files"
    BAD_ROOT_NOTE = "Invalid root note: {value}"
    BAD_RELEASE_VOLUME = "Invalid release volume: {value} (using 0 dB)"
    FILES_IN_SEVERAL_FOLDERS = "Selected files must be in one folder"

    # Progress
    STARTING_CONVERSION = "Building SFZ from {folder}/ ..."
    CONVERSION_RESULT = "{output}: {notes} note(s), {regions} region(s)"
    SKIPPED_FILES = "{count} file(s) skipped"
