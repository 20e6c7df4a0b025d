#!/usr/bin/env python3
"""SFZ instrument builder.

Builds an SFZ instrument from a folder of audio samples, guessing each
sample's note, velocity layer, round-robin variation and release-trigger
status from its file name.

Usage: createsfz.py <sample-dir> [-o OUTPUT] [--format NAME] [--filter TEXT]

Copyright (c) 2025, createsfz contributors
"""

import argparse
import bisect
import math
import os
import re
import sys
from collections import defaultdict
from dataclasses import dataclass, field

__version__ = "1.0.0"


# =============================================================================
# Constants
# =============================================================================

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

AUDIO_EXTENSIONS = ("wav", "flac", "ogg", "aif", "aiff")

# Velocity/variation value for samples whose name does not carry one
UNSPECIFIED = -1

# None = probe all known formats
DEFAULT_FORMAT = None

HEADER = "//\n// SFZ file created by createsfz.\n//"
FOOTER = "//\n// End of SFZ file created by createsfz.\n//"


# =============================================================================
# Errors
# =============================================================================


class CreateSFZError(Exception):
    """Base class for fatal errors."""


class ValidationError(CreateSFZError):
    """Invalid input: missing directory, unknown format, bad option."""


class ConversionError(CreateSFZError):
    """Nothing usable could be produced, or the output could not be written."""


class FormatNotRecognizedError(ConversionError):
    """No known sample name format matched any file."""


class OutputExistsError(ConversionError):
    """Output file exists and overwriting was not allowed."""


# =============================================================================
# Note Names
# =============================================================================
#
# Note names are a letter A-G, an optional '#' (no flats) and a signed octave.
# Octave -2 starts at MIDI note 0, so middle C (60) is "C3":
#
#   C-2 -> 0    C3 -> 60    C#3 -> 61    A3 -> 69    C4 -> 72
#
# =============================================================================

NOTE_NAME_RE = re.compile(r"^([A-Ga-g])(#?)(-?\d+)$")


def note_name_to_number(name):
    """Convert a note name (e.g. "C3", "A#-1") to a MIDI note number.

    Args:
        name: Note name

    Returns:
        int: MIDI note number (0-127)

    Raises:
        ValueError: If the name is malformed or out of MIDI range
    """
    match = NOTE_NAME_RE.match(name.strip())
    if not match:
        raise ValueError(f"bad note name: {name!r}")
    letter, sharp, octave = match.groups()
    pitch_class = NOTE_NAMES.index(letter.upper() + sharp)
    number = (int(octave) + 2) * 12 + pitch_class
    if not 0 <= number <= 127:
        raise ValueError(f"note out of MIDI range: {name!r} ({number})")
    return number


def note_number_to_name(number):
    """Convert a MIDI note number to a note name (e.g. 60 -> 'C3')."""
    octave = (number // 12) - 2
    return f"{NOTE_NAMES[number % 12]}{octave}"


def parse_note(text):
    """Parse a note given either as a MIDI number ("60") or a name ("C3")."""
    text = str(text).strip()
    try:
        number = int(text)
    except ValueError:
        return note_name_to_number(text)
    if not 0 <= number <= 127:
        raise ValueError(f"note out of MIDI range: {number}")
    return number


# =============================================================================
# Sample Name Formats
# =============================================================================
#
# Each format is a regular expression with named groups:
#   - base:      instrument name shared by all files of the set (required)
#   - note:      note name, see above (required)
#   - velocity:  velocity name, looked up in the format's velocity list
#   - release:   non-empty when the file is a release trigger
#   - variation: round-robin number
#
# A format without a group does not encode that attribute. Velocity lists are
# ordered softest first; the list position is the velocity ordinal used for
# sorting and grouping.
#
# =============================================================================

_NOTE = r"(?P<note>[A-Ga-g]#?-?\d+)"
_EXT = r"\.(?i:" + "|".join(AUDIO_EXTENSIONS) + r")$"


def _alternation(names):
    # Longest first so "ff" is tried before "f"
    return "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))


@dataclass(frozen=True)
class FilenameFormat:
    """A sample file naming convention."""

    name: str
    description: str
    example: str
    pattern: re.Pattern
    velocities: tuple = ()

    def has_group(self, role):
        return role in self.pattern.groupindex

    def velocity_ordinal(self, velocity_name):
        """Return the ordinal of a velocity name, or UNSPECIFIED."""
        if velocity_name in self.velocities:
            return self.velocities.index(velocity_name)
        return UNSPECIFIED


FORMAT1_VELOCITIES = ("Soft", "Medium", "Hard")
PIANOBOOK_VELOCITIES = ("pp", "p", "mp", "mf", "f", "ff")

# Probe order: ties between formats go to the earlier entry
FORMATS = (
    FilenameFormat(
        name="format1",
        description="base_velocity-Note-Variation.ext",
        example="Piano_Hard-C4-1.wav",
        pattern=re.compile(
            r"^(?P<base>.+)_(?P<velocity>[^_\-]+)-"
            + _NOTE
            + r"-(?P<variation>[^.\-]+)"
            + _EXT
        ),
        velocities=FORMAT1_VELOCITIES,
    ),
    FilenameFormat(
        name="format2",
        description="base [RT ]Note.ext",
        example="Organ RT C3.wav",
        pattern=re.compile(r"^(?P<base>.+?) (?P<release>RT )?" + _NOTE + _EXT),
    ),
    FilenameFormat(
        name="pianobook",
        description="base [velocity ]Note[ RT].ext",
        example="Keys mf C3 RT.wav",
        pattern=re.compile(
            r"^(?P<base>.+?) (?:(?P<velocity>"
            + _alternation(PIANOBOOK_VELOCITIES)
            + r") )?"
            + _NOTE
            + r"(?P<release> RT)?"
            + _EXT
        ),
        velocities=PIANOBOOK_VELOCITIES,
    ),
)


def get_format(name):
    """Look up a known format by name (case-insensitive).

    Raises:
        ValidationError: If no format has that name
    """
    for sample_format in FORMATS:
        if sample_format.name == name.lower():
            return sample_format
    known = ", ".join(f.name for f in FORMATS)
    raise ValidationError(f"unknown sample name format: {name} (known: {known})")


def is_audio_file(filename):
    """True for visible files with a known audio extension."""
    if filename.startswith("."):
        return False
    ext = os.path.splitext(filename)[1][1:].lower()
    return ext in AUDIO_EXTENSIONS


# =============================================================================
# Samples
# =============================================================================


@dataclass(frozen=True, order=True)
class Sample:
    """One sample file assigned to a note.

    Samples sort by note, velocity ordinal, variation and finally file name,
    so two different files never compare equal.
    """

    note_number: int
    velocity: int = UNSPECIFIED
    variation: int = UNSPECIFIED
    filename: str = ""
    is_release: bool = field(default=False, compare=False)


class SampleIndex:
    """Samples by note number, kept sorted, in a main and a release layer."""

    def __init__(self):
        self.main = {}
        self.release = {}

    def add(self, sample):
        """Add a sample to its layer. Adding the same sample twice is a no-op.

        Returns:
            bool: True if the sample was added
        """
        layer = self.release if sample.is_release else self.main
        samples = layer.setdefault(sample.note_number, [])
        pos = bisect.bisect_left(samples, sample)
        if pos < len(samples) and samples[pos] == sample:
            return False
        samples.insert(pos, sample)
        return True

    def __len__(self):
        return sum(len(s) for s in self.main.values()) + sum(
            len(s) for s in self.release.values()
        )

    def __eq__(self, other):
        if not isinstance(other, SampleIndex):
            return NotImplemented
        return self.main == other.main and self.release == other.release

    def notes(self, release=False):
        """Note numbers of a layer, ascending."""
        return sorted(self.release if release else self.main)

    def samples(self, release=False):
        """All samples of a layer in sort order."""
        layer = self.release if release else self.main
        return [s for note in sorted(layer) for s in layer[note]]


# =============================================================================
# Classification
# =============================================================================


@dataclass
class Classification:
    """Result of classifying a list of file names with one format."""

    sample_format: FilenameFormat | None
    index: SampleIndex = field(default_factory=SampleIndex)
    base_name: str | None = None
    used: list = field(default_factory=list)
    # (filename, reason)
    skipped: list = field(default_factory=list)
    filtered: int = 0
    # (filename, message), files that were used anyway
    warnings: list = field(default_factory=list)

    @property
    def format_name(self):
        return self.sample_format.name if self.sample_format else "manual"

    def skip(self, filename, reason):
        self.skipped.append((filename, reason))

    def print_summary(self):
        """Print used/skipped counts and the reason for each skipped file."""
        print("\n" + "=" * 50)
        print("SAMPLE SUMMARY")
        print("=" * 50)
        print(f"Format: {self.format_name}")
        if self.base_name:
            print(f"Base name: {self.base_name}")
        print(f"Files used: {len(self.used)}")
        print(f"  Release triggers: {len(self.index.samples(release=True))}")
        print(f"Files skipped: {len(self.skipped)}")
        if self.filtered:
            print(f"Files filtered out: {self.filtered}")

        if self.skipped:
            print(f"\n--- Skipped ({len(self.skipped)}) ---")
            for filename, reason in self.skipped:
                print(f"  - {filename}: {reason}")
        if self.warnings:
            print(f"\n--- Warnings ({len(self.warnings)}) ---")
            for filename, message in self.warnings:
                print(f"  - {filename}: {message}")

        print("=" * 50)


def _apply_filter(filenames, name_filter, result):
    for filename in filenames:
        if name_filter and name_filter not in filename:
            result.filtered += 1
            continue
        yield filename


def classify_samples(filenames, sample_format, name_filter=None):
    """Classify file names with a naming format.

    Files are taken in the given order. The first matching file fixes the
    base name of the set; later files with an unrelated base name are
    skipped. Files that do not match, or whose note or variation cannot be
    read, are skipped and recorded with a reason.

    Args:
        filenames: Ordered sample file names
        sample_format: FilenameFormat to apply
        name_filter: Only consider names containing this text

    Returns:
        Classification: Index of the recognised samples plus diagnostics
    """
    result = Classification(sample_format)
    has_velocity = sample_format.has_group("velocity")
    has_release = sample_format.has_group("release")
    has_variation = sample_format.has_group("variation")

    for filename in _apply_filter(filenames, name_filter, result):
        match = sample_format.pattern.match(filename)
        if not match:
            result.skip(filename, f"does not match {sample_format.name}")
            continue

        base_name = match.group("base")
        if result.base_name is None:
            result.base_name = base_name
        elif base_name != result.base_name and not base_name.startswith(
            result.base_name
        ):
            result.skip(
                filename,
                f"base name '{base_name}' differs from '{result.base_name}'",
            )
            continue

        velocity = UNSPECIFIED
        velocity_name = match.group("velocity") if has_velocity else None
        if velocity_name:
            velocity = sample_format.velocity_ordinal(velocity_name)
            if velocity == UNSPECIFIED:
                result.warnings.append(
                    (filename, f"unknown velocity '{velocity_name}'")
                )

        is_release = bool(has_release and match.group("release"))

        variation = UNSPECIFIED
        if has_variation:
            try:
                variation = int(match.group("variation"))
            except ValueError:
                result.skip(
                    filename, f"bad variation number '{match.group('variation')}'"
                )
                continue

        try:
            note_number = note_name_to_number(match.group("note"))
        except ValueError as e:
            result.skip(filename, str(e))
            continue

        sample = Sample(note_number, velocity, variation, filename, is_release)
        if result.index.add(sample):
            result.used.append(filename)

    return result


def map_samples_to_keys(filenames, root_note, name_filter=None, audio_only=False):
    """Map samples to consecutive keys, without looking at their names.

    The first file goes to root_note, the next to root_note + 1, and so on.
    With audio_only, hidden and non-audio files are skipped and take no key.

    Args:
        filenames: Ordered sample file names
        root_note: MIDI note number of the first sample
        name_filter: Only consider names containing this text
        audio_only: Only map visible files with an audio extension

    Returns:
        Classification: Index of the mapped samples
    """
    result = Classification(None)
    note_number = root_note
    for filename in _apply_filter(filenames, name_filter, result):
        if audio_only and not is_audio_file(filename):
            result.skip(filename, "not an audio file")
            continue
        if note_number > 127:
            result.skip(filename, "no keys left above 127")
            continue
        if filename in result.used:
            result.skip(filename, "listed twice")
            continue
        if result.base_name is None:
            result.base_name = os.path.splitext(filename)[0]
        result.index.add(Sample(note_number, UNSPECIFIED, 1, filename))
        result.used.append(filename)
        note_number += 1
    return result


def classify_all_formats(filenames, name_filter=None, formats=None):
    """Classify the file names with every format, in probe order."""
    filenames = list(filenames)
    return [
        classify_samples(filenames, sample_format, name_filter)
        for sample_format in (formats or FORMATS)
    ]


def probe_format(filenames, name_filter=None, formats=None):
    """Find the format that recognises the most samples.

    Formats are tried in order; a later format must classify strictly more
    samples to replace an earlier one.

    Returns:
        Classification: The winning format's classification

    Raises:
        FormatNotRecognizedError: If no format recognises any file
    """
    results = classify_all_formats(filenames, name_filter, formats)
    for result in results:
        print(f"  Probe {result.format_name}: {len(result.used)} sample(s)")
    best = select_best(results)
    if best is None:
        raise FormatNotRecognizedError("no recognized sample name format")
    return best


def select_best(results):
    """Pick the classification with the most samples, earliest on ties.

    Returns:
        Classification, or None if none classified any sample
    """
    best = None
    for result in results:
        count = len(result.used)
        if count and (best is None or count > len(best.used)):
            best = result
    return best


# =============================================================================
# Region Output
# =============================================================================


def velocity_ranges(count):
    """Split the MIDI velocity range 0-127 into equal parts.

    The last part always ends at 127.

    Args:
        count: Number of velocity layers (1-127)

    Returns:
        list: (lovel, hivel) tuples, softest first
    """
    if not 1 <= count <= 127:
        raise ValueError(f"velocity layer count out of range: {count}")
    each = 127 // count
    ranges = []
    for i in range(count):
        lo = i * each
        hi = (i + 1) * each - 1
        if i == count - 1:
            hi = 127
        ranges.append((lo, hi))
    return ranges


def split_by_velocity(samples):
    """Group sorted samples of one note into runs of equal velocity."""
    groups = defaultdict(list)
    for sample in samples:
        groups[sample.velocity].append(sample)
    return [groups[v] for v in sorted(groups)]


def render_regions(
    layer, range_low=0, range_high=0, release=False, release_volume=0.0
):
    """Render the <global>/<group>/<region> stanzas of one layer.

    Keys are filled downwards: the first note reaches range_low keys below
    itself, every later note starts one key above the previous note. The
    upper key of every region is its own note; range_high is accepted for
    compatibility and does not widen any note.

    Args:
        layer: dict of note number -> sorted list of Samples
        range_low: Keys below the lowest note to cover
        range_high: Accepted for compatibility, regions end on their note
        release: Mark regions as release triggers
        release_volume: Volume (dB) for release-trigger regions, 0 = none

    Returns:
        list: Output lines
    """
    lines = []
    previous = None
    for note in sorted(layer):
        samples = layer[note]
        lokey = max(0, note - range_low) if previous is None else previous + 1
        hikey = note
        previous = note

        lines.append("")
        lines.append(f"// Note: {note} ({note_number_to_name(note)})")
        lines.append("<global>")
        lines.append(f"pitch_keycenter={note}")
        lines.append(f"lokey={lokey}")
        lines.append(f"hikey={hikey}")

        groups = split_by_velocity(samples)
        specified = [g for g in groups if g[0].velocity != UNSPECIFIED]
        ranges = velocity_ranges(len(specified)) if specified else []
        range_by_velocity = {
            g[0].velocity: ranges[i] for i, g in enumerate(specified)
        }

        for group in groups:
            velocity = group[0].velocity
            if velocity == UNSPECIFIED:
                lines.append("<group>")
            else:
                lovel, hivel = range_by_velocity[velocity]
                lines.append(f"<group> lovel={lovel} hivel={hivel}")
            lines.append(f"seq_length={len(group)}")
            for seq, sample in enumerate(group, 1):
                lines.append("<region>")
                lines.append(f"sample={sample.filename}")
                lines.append(f"seq_position={seq}")
                if release:
                    lines.append("trigger=release")
                    if release_volume:
                        lines.append(f"volume={release_volume:g}")
                lines.append("")
    return lines


def render_sfz(
    index, default_path=None, range_low=0, range_high=0, release_volume=0.0
):
    """Render a complete SFZ document.

    Args:
        index: SampleIndex to write
        default_path: Sample folder recorded in <control>, None to omit
        range_low: Keys below the lowest note to cover
        range_high: Accepted for compatibility, regions end on their note
        release_volume: Volume (dB) for release-trigger regions

    Returns:
        str: SFZ text

    Raises:
        ConversionError: If there are no (non release-trigger) samples
    """
    if not index.main:
        raise ConversionError("no samples to write")

    lines = [HEADER, "<control>"]
    if default_path:
        lines.append(f"default_path={default_path}")
    lines.extend(render_regions(index.main, range_low, range_high))
    if index.release:
        lines.append("")
        lines.append("// Release triggers")
        lines.extend(
            render_regions(
                index.release,
                range_low,
                range_high,
                release=True,
                release_volume=release_volume,
            )
        )
    lines.append(FOOTER)
    return "\n".join(lines) + "\n"


# =============================================================================
# Files
# =============================================================================


def list_sample_files(directory):
    """Return the sorted names of the regular files in a directory.

    Raises:
        ValidationError: If the directory is missing or unreadable
    """
    if not os.path.isdir(directory):
        raise ValidationError(f"bad directory: {directory}")
    try:
        names = os.listdir(directory)
    except OSError as e:
        raise ValidationError(f"cannot read directory {directory}: {e}") from e
    return sorted(n for n in names if os.path.isfile(os.path.join(directory, n)))


def default_path_for(sample_dir, output_path):
    """Sample folder as seen from the output file, with a trailing '/'."""
    output_dir = os.path.dirname(os.path.abspath(output_path))
    try:
        path = os.path.relpath(os.path.abspath(sample_dir), output_dir)
    except ValueError:
        # Different drives on Windows
        path = os.path.abspath(sample_dir)
    path = path.replace("\\", "/")
    if not path.endswith("/"):
        path += "/"
    return path


def write_sfz(output_path, text, overwrite=False):
    """Write SFZ text to a file.

    Raises:
        OutputExistsError: If the file exists and overwrite is False
        ConversionError: If the file cannot be written
    """
    if os.path.exists(output_path) and not overwrite:
        raise OutputExistsError(
            f"output file already exists: {os.path.abspath(output_path)}"
        )
    try:
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise ConversionError(f"cannot write {output_path}: {e}") from e


@dataclass
class CreateResult:
    """Outcome of a create_sfz() run."""

    output_path: str
    classification: Classification
    num_notes: int
    num_regions: int


def create_sfz(
    sample_dir,
    output_path=None,
    format_name=DEFAULT_FORMAT,
    name_filter=None,
    root_note=None,
    samples=None,
    overwrite=False,
    range_low=0,
    range_high=0,
    release_volume=0.0,
    output_dir=None,
):
    """Build an SFZ file from a folder of samples.

    Args:
        sample_dir: Folder containing the samples
        output_path: SFZ file to write (default: <base name>.sfz)
        format_name: Sample name format, None to probe all formats
        name_filter: Only use files whose name contains this text
        root_note: Map samples to consecutive keys from this MIDI note
            instead of reading notes from their names
        samples: Explicit ordered sample file names (requires root_note)
        overwrite: Replace an existing output file
        range_low: Keys below the lowest note to cover
        range_high: Accepted for compatibility, regions end on their note
        release_volume: Volume (dB) for release-trigger regions
        output_dir: Folder for the default output file (default: current)

    Returns:
        CreateResult
    """
    print(f"Loading: {sample_dir}")
    if samples is not None and root_note is None:
        raise ValidationError("an explicit sample list needs a root note")
    if not math.isfinite(release_volume):
        raise ValidationError(f"bad release volume: {release_volume}")

    if samples is not None:
        filenames = list(samples)
    else:
        filenames = list_sample_files(sample_dir)
    print(f"Checking {len(filenames)} file(s)...")

    if root_note is not None:
        classification = map_samples_to_keys(
            filenames, root_note, name_filter, audio_only=samples is None
        )
    elif format_name:
        classification = classify_samples(
            filenames, get_format(format_name), name_filter
        )
    else:
        classification = probe_format(filenames, name_filter)

    for filename in classification.used:
        print(f"  [OK] {filename}")
    for filename, reason in classification.skipped:
        print(f"  [SKIP] {filename} ({reason})")

    if not classification.used:
        classification.print_summary()
        raise ConversionError(
            f"no samples recognized in {sample_dir} ({classification.format_name})"
        )

    if output_path is None:
        output_path = os.path.join(
            output_dir or "", f"{classification.base_name}.sfz"
        )

    text = render_sfz(
        classification.index,
        default_path_for(sample_dir, output_path),
        range_low,
        range_high,
        release_volume,
    )
    write_sfz(output_path, text, overwrite)

    index = classification.index
    result = CreateResult(
        output_path=output_path,
        classification=classification,
        num_notes=len(set(index.notes()) | set(index.notes(release=True))),
        num_regions=len(index),
    )

    print("\n=== Complete ===")
    print(f"Output: {output_path}")
    print(f"  - format: {classification.format_name}")
    print(f"  - {result.num_notes} note(s)")
    print(f"  - {result.num_regions} region(s)")
    if index.release:
        print(f"  - {len(index.samples(release=True))} release trigger(s)")
    return result


# =============================================================================
# Main Entry Point
# =============================================================================


def print_formats():
    """Print the known sample name formats in probe order."""
    for sample_format in FORMATS:
        print(f"{sample_format.name:<10} {sample_format.description}")
        print(f"{'':<10} e.g. {sample_format.example}")
        if sample_format.velocities:
            print(f"{'':<10} velocities: {', '.join(sample_format.velocities)}")


def parse_volume(text):
    """Parse a volume in dB, rejecting nan and infinities.

    Raises:
        ValueError: If the text is not a finite number
    """
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"volume must be a finite number: {text}")
    return value


def _volume_arg(text):
    try:
        return parse_volume(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _note_arg(text):
    try:
        return parse_note(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="createsfz",
        description="Create an SFZ instrument from a folder of audio samples.",
        epilog="Notes, velocity layers, round-robins and release triggers "
        "are read from the sample file names.",
    )
    parser.add_argument(
        "sample_dir",
        metavar="SAMPLE_DIR",
        nargs="?",
        help="Folder containing the samples",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="SFZ file to write (default: <sample base name>.sfz)",
    )
    parser.add_argument(
        "--format",
        "-f",
        dest="format_name",
        choices=[f.name for f in FORMATS],
        default=DEFAULT_FORMAT,
        help="Sample name format (default: try all formats)",
    )
    parser.add_argument(
        "--filter",
        dest="name_filter",
        metavar="TEXT",
        help="Only use samples whose file name contains TEXT",
    )
    parser.add_argument(
        "--root",
        type=_note_arg,
        metavar="NOTE",
        help="Map samples to consecutive keys starting at NOTE (e.g. C3 or 60)",
    )
    parser.add_argument(
        "--samples",
        nargs="+",
        metavar="FILE",
        help="Explicit ordered sample file names, mapped from --root upwards "
        "(give SAMPLE_DIR before --samples)",
    )
    parser.add_argument(
        "--range-low",
        type=int,
        default=0,
        metavar="N",
        help="Extend the lowest note N keys downwards (default: 0)",
    )
    parser.add_argument(
        "--range-high",
        type=int,
        default=0,
        metavar="N",
        help="Accepted for compatibility; every region ends on its own note",
    )
    parser.add_argument(
        "--release-volume",
        type=_volume_arg,
        default=0.0,
        metavar="DB",
        help="Volume of release-trigger regions in dB (default: 0, unchanged)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace the output file if it already exists",
    )
    parser.add_argument(
        "--list-formats",
        action="store_true",
        help="List the known sample name formats and exit",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_formats:
        print_formats()
        return 0

    if not args.sample_dir:
        if args.samples:
            parser.error("SAMPLE_DIR must come before --samples")
        parser.error("SAMPLE_DIR is required")
    if args.samples and args.root is None:
        parser.error("--samples requires --root")
    if args.range_low < 0 or args.range_high < 0:
        parser.error("key ranges must not be negative")

    try:
        result = create_sfz(
            args.sample_dir,
            output_path=args.output,
            format_name=args.format_name,
            name_filter=args.name_filter,
            root_note=args.root,
            samples=args.samples,
            overwrite=args.overwrite,
            range_low=args.range_low,
            range_high=args.range_high,
            release_volume=args.release_volume,
        )
    except CreateSFZError as e:
        print(f"Error: {e}")
        sys.exit(1)

    result.classification.print_summary()
    return 0


if __name__ == "__main__":
    sys.exit(main())
