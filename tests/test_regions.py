import pytest

from sfz_helpers import headers, parse_sfz

from createsfz import (
    FOOTER,
    HEADER,
    UNSPECIFIED,
    ConversionError,
    Sample,
    SampleIndex,
    classify_samples,
    get_format,
    render_regions,
    render_sfz,
    velocity_ranges,
)


def test_velocity_ranges_examples():
    assert velocity_ranges(1) == [(0, 127)]
    assert velocity_ranges(2) == [(0, 62), (63, 127)]
    assert velocity_ranges(3) == [(0, 41), (42, 83), (84, 127)]


def test_velocity_ranges_cover_0_to_127():
    for count in range(1, 128):
        ranges = velocity_ranges(count)
        assert len(ranges) == count
        assert ranges[0][0] == 0
        assert ranges[-1][1] == 127
        for (_, hi), (lo, _) in zip(ranges, ranges[1:]):
            assert lo == hi + 1
        assert all(lo <= hi for lo, hi in ranges)


@pytest.mark.parametrize("count", [0, -1, 128])
def test_velocity_ranges_rejects_bad_counts(count):
    with pytest.raises(ValueError):
        velocity_ranges(count)


def layer_of(*notes):
    return {n: [Sample(n, UNSPECIFIED, 1, f"{n}.wav")] for n in notes}


def key_ranges(lines):
    stanzas = parse_sfz("\n".join(lines))
    return [
        (int(op["pitch_keycenter"]), int(op["lokey"]), int(op["hikey"]))
        for header, op in stanzas
        if header == "global"
    ]


def test_key_ranges_fill_down_to_previous_note():
    lines = render_regions(layer_of(67, 60, 64), range_low=5)
    assert key_ranges(lines) == [(60, 55, 60), (64, 61, 64), (67, 65, 67)]


def test_key_ranges_are_contiguous():
    notes = [24, 31, 36, 43, 48, 60, 61, 72]
    ranges = key_ranges(render_regions(layer_of(*notes), range_low=3))
    assert ranges[0][1] == 21
    for (note, _, hikey), (_, next_lokey, _) in zip(ranges, ranges[1:]):
        assert hikey == note
        assert next_lokey == hikey + 1


def test_range_high_does_not_widen_notes():
    ranges = key_ranges(render_regions(layer_of(60, 64), range_low=2, range_high=3))
    assert ranges == [(60, 58, 60), (64, 61, 64)]
    ranges = key_ranges(render_regions(layer_of(126), range_high=5))
    assert ranges == [(126, 126, 126)]


def test_lowest_key_is_clamped_to_zero():
    assert key_ranges(render_regions(layer_of(2), range_low=5)) == [(2, 0, 2)]


def test_piano_velocity_layers_and_round_robins():
    result = classify_samples(
        ["Piano_Soft-C3-1.wav", "Piano_Soft-C3-2.wav", "Piano_Hard-C3-1.wav"],
        get_format("format1"),
    )
    stanzas = parse_sfz("\n".join(render_regions(result.index.main)))
    assert headers(stanzas) == ["global", "group", "region", "region", "group", "region"]
    assert stanzas[0][1] == {"pitch_keycenter": "60", "lokey": "60", "hikey": "60"}
    assert stanzas[1][1] == {"lovel": "0", "hivel": "62", "seq_length": "2"}
    assert stanzas[2][1] == {"sample": "Piano_Soft-C3-1.wav", "seq_position": "1"}
    assert stanzas[3][1] == {"sample": "Piano_Soft-C3-2.wav", "seq_position": "2"}
    assert stanzas[4][1] == {"lovel": "63", "hivel": "127", "seq_length": "1"}
    assert stanzas[5][1] == {"sample": "Piano_Hard-C3-1.wav", "seq_position": "1"}


def test_round_robin_positions_follow_variation_order():
    names = [f"Piano_Medium-C3-{v}.wav" for v in (3, 1, 4, 2)]
    result = classify_samples(names, get_format("format1"))
    stanzas = parse_sfz("\n".join(render_regions(result.index.main)))
    regions = [op for h, op in stanzas if h == "region"]
    assert [r["seq_position"] for r in regions] == ["1", "2", "3", "4"]
    assert [r["sample"] for r in regions] == [
        "Piano_Medium-C3-1.wav",
        "Piano_Medium-C3-2.wav",
        "Piano_Medium-C3-3.wav",
        "Piano_Medium-C3-4.wav",
    ]
    [group] = [op for h, op in stanzas if h == "group"]
    assert group["seq_length"] == "4"


def test_unspecified_velocity_has_no_velocity_range():
    lines = render_regions(layer_of(60))
    assert "<group>" in lines
    stanzas = parse_sfz("\n".join(lines))
    assert stanzas[1] == ("group", {"seq_length": "1"})


def test_unspecified_velocity_next_to_named_layers():
    layer = {
        60: [
            Sample(60, UNSPECIFIED, 1, "odd.wav"),
            Sample(60, 0, 1, "soft.wav"),
            Sample(60, 2, 1, "hard.wav"),
        ]
    }
    groups = [op for h, op in parse_sfz("\n".join(render_regions(layer))) if h == "group"]
    assert groups == [
        {"seq_length": "1"},
        {"lovel": "0", "hivel": "62", "seq_length": "1"},
        {"lovel": "63", "hivel": "127", "seq_length": "1"},
    ]


def test_release_regions_are_marked():
    layer = layer_of(60)
    stanzas = parse_sfz("\n".join(render_regions(layer, release=True)))
    assert stanzas[-1][1]["trigger"] == "release"
    assert "volume" not in stanzas[-1][1]

    stanzas = parse_sfz(
        "\n".join(render_regions(layer, release=True, release_volume=-6.0))
    )
    assert stanzas[-1][1]["volume"] == "-6"


def test_render_sfz_document_layout():
    result = classify_samples(
        ["Organ C3.wav", "Organ D3.wav", "Organ RT C3.wav"], get_format("format2")
    )
    text = render_sfz(result.index, "samples/", range_low=2, release_volume=-3.5)
    assert text.startswith(HEADER + "\n<control>\ndefault_path=samples/\n")
    assert text.endswith(FOOTER + "\n")

    stanzas = parse_sfz(text)
    assert headers(stanzas) == [
        "control",
        "global",
        "group",
        "region",
        "global",
        "group",
        "region",
        "global",
        "group",
        "region",
    ]
    # The release layer fills keys on its own
    release_global = stanzas[7][1]
    assert (release_global["lokey"], release_global["hikey"]) == ("58", "60")
    assert stanzas[9][1] == {
        "sample": "Organ RT C3.wav",
        "seq_position": "1",
        "trigger": "release",
        "volume": "-3.5",
    }


def test_render_sfz_without_default_path():
    index = SampleIndex()
    index.add(Sample(60, UNSPECIFIED, 1, "a.wav"))
    assert "default_path" not in render_sfz(index)


def test_render_sfz_needs_main_samples():
    with pytest.raises(ConversionError, match="no samples"):
        render_sfz(SampleIndex())

    index = SampleIndex()
    index.add(Sample(60, UNSPECIFIED, 1, "rt.wav", is_release=True))
    with pytest.raises(ConversionError):
        render_sfz(index)
