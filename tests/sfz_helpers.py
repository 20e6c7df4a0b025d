"""Helpers for reading createsfz output in tests."""

from pathlib import Path


def touch_samples(folder: Path, names):
    """Create empty sample files."""
    folder.mkdir(parents=True, exist_ok=True)
    for name in names:
        (folder / name).write_bytes(b"")
    return folder


def parse_sfz(text: str) -> list[tuple[str, dict]]:
    """Split SFZ text into (header, opcodes) stanzas, ignoring comments."""
    stanzas = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("//"):
            continue
        if line.startswith("<"):
            end = line.index(">")
            opcodes = dict(tok.split("=", 1) for tok in line[end + 1 :].split())
            stanzas.append((line[1:end], opcodes))
        else:
            key, value = line.split("=", 1)
            stanzas[-1][1][key] = value
    return stanzas


def headers(stanzas) -> list[str]:
    return [h for h, _ in stanzas]
