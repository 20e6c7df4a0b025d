from createsfz import (
    UNSPECIFIED,
    Sample,
    SampleIndex,
    classify_samples,
    get_format,
    is_audio_file,
    map_samples_to_keys,
)

FORMAT1 = get_format("format1")
FORMAT2 = get_format("format2")


def test_first_match_sets_base_name():
    result = classify_samples(
        ["notes.txt", "Piano_Soft-C3-1.wav", "Piano_Soft-D3-1.wav"], FORMAT1
    )
    assert result.base_name == "Piano"
    assert result.used == ["Piano_Soft-C3-1.wav", "Piano_Soft-D3-1.wav"]
    assert result.skipped == [("notes.txt", "does not match format1")]


def test_unrelated_base_name_is_skipped():
    result = classify_samples(
        ["Piano_Soft-C3-1.wav", "Guitar_Soft-C3-1.wav", "PianoB_Soft-D3-1.wav"],
        FORMAT1,
    )
    # PianoB starts with Piano and is kept
    assert result.used == ["Piano_Soft-C3-1.wav", "PianoB_Soft-D3-1.wav"]
    [(filename, reason)] = result.skipped
    assert filename == "Guitar_Soft-C3-1.wav"
    assert "base name" in reason


def test_bad_variation_is_skipped():
    result = classify_samples(["Piano_Soft-C3-x.wav", "Piano_Soft-C3-2.wav"], FORMAT1)
    assert result.used == ["Piano_Soft-C3-2.wav"]
    assert "variation" in result.skipped[0][1]


def test_out_of_range_note_is_skipped():
    result = classify_samples(["Piano_Soft-C9-1.wav"], FORMAT1)
    assert result.used == []
    assert "out of MIDI range" in result.skipped[0][1]


def test_unknown_velocity_is_unspecified_with_warning():
    result = classify_samples(["Piano_Loud-C3-1.wav"], FORMAT1)
    [sample] = result.index.samples()
    assert sample.velocity == UNSPECIFIED
    assert result.warnings == [("Piano_Loud-C3-1.wav", "unknown velocity 'Loud'")]
    assert result.skipped == []


def test_filter_drops_names_without_reporting():
    names = ["Piano_Soft-C3-1.wav", "Piano_Hard-C3-1.wav", "Piano_Soft-D3-1.wav"]
    result = classify_samples(names, FORMAT1, name_filter="Soft")
    assert result.filtered == 1
    assert result.skipped == []
    assert len(result.used) == 2


def test_release_triggers_go_to_their_own_layer():
    result = classify_samples(["Organ C3.wav", "Organ RT C3.wav"], FORMAT2)
    assert [s.filename for s in result.index.samples()] == ["Organ C3.wav"]
    assert [s.filename for s in result.index.samples(release=True)] == [
        "Organ RT C3.wav"
    ]


def test_classification_is_repeatable():
    names = [
        "Piano_Soft-C3-2.wav",
        "Piano_Hard-C3-1.wav",
        "Piano_Soft-C3-1.wav",
        "Piano_Medium-E3-1.wav",
    ]
    first = classify_samples(names, FORMAT1)
    second = classify_samples(names, FORMAT1)
    assert first.index == second.index
    assert first.used == second.used


def test_samples_with_same_note_and_velocity_are_all_kept():
    result = classify_samples(["Organ C3.wav", "Organ2 C3.wav"], FORMAT2)
    assert [s.filename for s in result.index.main[60]] == [
        "Organ C3.wav",
        "Organ2 C3.wav",
    ]


def test_sample_order_is_total():
    samples = [
        Sample(60, 2, 1, "c.wav"),
        Sample(60, 0, 2, "b.wav"),
        Sample(48, 1, 1, "z.wav"),
        Sample(60, 0, 1, "d.wav"),
        Sample(60, 0, 1, "a.wav"),
    ]
    ordered = sorted(samples)
    assert [s.filename for s in ordered] == ["z.wav", "a.wav", "d.wav", "b.wav", "c.wav"]
    for a in samples:
        for b in samples:
            if a is not b:
                assert (a < b) != (b < a)


def test_index_ignores_the_same_sample_twice():
    index = SampleIndex()
    assert index.add(Sample(60, 0, 1, "a.wav"))
    assert not index.add(Sample(60, 0, 1, "a.wav"))
    assert len(index) == 1


def test_map_samples_to_keys_in_list_order():
    result = map_samples_to_keys(["b.wav", "a.wav", "c.wav"], 60)
    assert result.base_name == "b"
    assert result.format_name == "manual"
    samples = result.index.samples()
    assert [(s.note_number, s.filename) for s in samples] == [
        (60, "b.wav"),
        (61, "a.wav"),
        (62, "c.wav"),
    ]
    assert all(s.velocity == UNSPECIFIED and s.variation == 1 for s in samples)


def test_map_samples_to_keys_stops_at_127():
    result = map_samples_to_keys(["a.wav", "b.wav", "c.wav"], 126)
    assert result.used == ["a.wav", "b.wav"]
    assert result.skipped == [("c.wav", "no keys left above 127")]


def test_map_samples_to_keys_skips_repeated_names():
    result = map_samples_to_keys(["a.wav", "a.wav", "b.wav"], 60)
    assert [s.note_number for s in result.index.samples()] == [60, 61]
    assert result.skipped == [("a.wav", "listed twice")]


def test_map_samples_to_keys_audio_only_skips_other_files():
    names = [".DS_Store", "kick.wav", "notes.txt", "snare.WAV", "._kick.wav"]
    result = map_samples_to_keys(names, 36, audio_only=True)
    assert result.base_name == "kick"
    assert [(s.note_number, s.filename) for s in result.index.samples()] == [
        (36, "kick.wav"),
        (37, "snare.WAV"),
    ]
    assert result.skipped == [
        (".DS_Store", "not an audio file"),
        ("notes.txt", "not an audio file"),
        ("._kick.wav", "not an audio file"),
    ]


def test_is_audio_file():
    assert is_audio_file("kick.wav")
    assert is_audio_file("Pad C3.AIFF")
    assert is_audio_file("loop.flac")
    assert not is_audio_file("notes.txt")
    assert not is_audio_file(".hidden.wav")
    assert not is_audio_file("wav")
