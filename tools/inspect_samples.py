#!/usr/bin/env python3
"""Sample folder inspector for createsfz.

Shows how each known name format classifies a sample folder and how the
chosen format lays the samples out, without writing an SFZ file.

Features:
- Classified/skipped counts per format
- Format selection (the one createsfz would probe)
- Per-note table of velocity layers, round-robins and release triggers

Usage:
    inspect_samples.py <sample_dir>                  # Probe all formats
    inspect_samples.py <sample_dir> --format format1 # Inspect one format
    inspect_samples.py <sample_dir> --skipped        # List skipped files

Copyright (c) 2025, createsfz contributors
"""

import argparse
import os
import sys
from collections import defaultdict

# Allow running from the tools/ folder of a checkout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from createsfz import (  # noqa: E402
    FORMATS,
    UNSPECIFIED,
    CreateSFZError,
    classify_all_formats,
    get_format,
    list_sample_files,
    note_number_to_name,
    select_best,
)


# =============================================================================
# Analysis
# =============================================================================


def note_layout(classification, release=False):
    """Summarize the samples of one layer per note.

    Args:
        classification: Classification to summarize
        release: Summarize the release-trigger layer

    Returns:
        list: dicts with note, name, velocities (list of (ordinal, count))
    """
    index = classification.index
    layer = index.release if release else index.main
    rows = []
    for note in sorted(layer):
        counts = defaultdict(int)
        for sample in layer[note]:
            counts[sample.velocity] += 1
        rows.append(
            {
                "note": note,
                "name": note_number_to_name(note),
                "velocities": sorted(counts.items()),
            }
        )
    return rows


# =============================================================================
# Output
# =============================================================================


def velocity_label(sample_format, ordinal):
    if ordinal == UNSPECIFIED:
        return "-"
    return sample_format.velocities[ordinal]


def print_format_table(results):
    print(f"{'Format':<12} {'Used':>6} {'Skipped':>8} {'Release':>8}  Base name")
    print("-" * 60)
    for result in results:
        release = len(result.index.samples(release=True))
        print(
            f"{result.format_name:<12} {len(result.used):>6} "
            f"{len(result.skipped):>8} {release:>8}  {result.base_name or ''}"
        )


def print_layout(classification):
    sample_format = classification.sample_format
    for release in (False, True):
        rows = note_layout(classification, release)
        if not rows:
            continue
        print(f"\n--- {'Release triggers' if release else 'Notes'} ({len(rows)}) ---")
        for row in rows:
            layers = ", ".join(
                f"{velocity_label(sample_format, v)} x{count}"
                for v, count in row["velocities"]
            )
            print(f"  {row['note']:>3} {row['name']:<4} {layers}")


def print_skipped(classification):
    if not classification.skipped:
        print("\n--- No skipped files ---")
        return
    print(f"\n--- Skipped ({len(classification.skipped)}) ---")
    for filename, reason in classification.skipped:
        print(f"  - {filename}: {reason}")


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Show how createsfz would classify a folder of samples.",
    )
    parser.add_argument("sample_dir", metavar="SAMPLE_DIR", help="Sample folder")
    parser.add_argument(
        "--format",
        "-f",
        dest="format_name",
        choices=[f.name for f in FORMATS],
        help="Inspect this format only (default: all formats)",
    )
    parser.add_argument("--filter", dest="name_filter", metavar="TEXT")
    parser.add_argument(
        "--skipped", action="store_true", help="List skipped files and reasons"
    )
    args = parser.parse_args(argv)

    try:
        filenames = list_sample_files(args.sample_dir)
        formats = [get_format(args.format_name)] if args.format_name else None
    except CreateSFZError as e:
        print(f"Error: {e}")
        return 1

    print(f"{args.sample_dir}: {len(filenames)} file(s)\n")
    results = classify_all_formats(filenames, args.name_filter, formats)
    print_format_table(results)

    best = select_best(results)
    if best is None:
        print("\nNo recognized sample name format")
        return 1

    print(f"\nSelected format: {best.format_name}")
    print_layout(best)
    if args.skipped:
        print_skipped(best)
    return 0


if __name__ == "__main__":
    sys.exit(main())
