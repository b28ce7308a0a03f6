"""Tests for the note table and frequency classification."""

import math

import numpy as np
import pytest

from monopitch.analysis import NoteClassifier, classify_note
from monopitch.core import (
    PitchClass,
    NoteReference,
    NoteTable,
    DEFAULT_NOTE_TABLE,
    InvalidConfigurationError,
)


class TestPitchClass:
    """Tests for the PitchClass enum."""

    def test_thirteen_cases(self):
        assert len(PitchClass) == 13
        assert PitchClass.UNKNOWN.value == "Unknown"

    def test_from_index(self):
        assert PitchClass.from_index(0) == PitchClass.C
        assert PitchClass.from_index(9) == PitchClass.A
        assert PitchClass.from_index(13) == PitchClass.C_SHARP

    def test_index(self):
        assert PitchClass.B.index == 11
        assert PitchClass.UNKNOWN.index == -1

    def test_str(self):
        assert str(PitchClass.F_SHARP) == "F#"


class TestNoteTable:
    """Tests for the reference note table."""

    def test_default_range(self):
        assert len(DEFAULT_NOTE_TABLE) == 108
        assert DEFAULT_NOTE_TABLE[0].frequency == 16.35
        assert DEFAULT_NOTE_TABLE[0].name == "C0"
        assert DEFAULT_NOTE_TABLE[-1].frequency == 7902.13
        assert DEFAULT_NOTE_TABLE[-1].name == "B8"

    @pytest.mark.parametrize(
        "name,freq",
        [
            ("A0", 27.50),
            ("C4", 261.63),
            ("A4", 440.00),
            ("G#6", 1661.22),
            ("C8", 4186.01),
            ("A#8", 7458.62),
        ],
    )
    def test_standard_frequencies(self, name, freq):
        by_name = {ref.name: ref for ref in DEFAULT_NOTE_TABLE}
        assert by_name[name].frequency == freq

    def test_every_reference_frequency(self):
        expected = {
            "C": [16.35, 32.70, 65.41, 130.81, 261.63, 523.25, 1046.50, 2093.00, 4186.01],
            "C#": [17.32, 34.65, 69.30, 138.59, 277.18, 554.37, 1108.73, 2217.46, 4434.92],
            "D": [18.35, 36.71, 73.42, 146.83, 293.66, 587.33, 1174.66, 2349.32, 4698.63],
            "D#": [19.45, 38.89, 77.78, 155.56, 311.13, 622.25, 1244.51, 2489.02, 4978.03],
            "E": [20.60, 41.20, 82.41, 164.81, 329.63, 659.25, 1318.51, 2637.02, 5274.04],
            "F": [21.83, 43.65, 87.31, 174.61, 349.23, 698.46, 1396.91, 2793.83, 5587.65],
            "F#": [23.12, 46.25, 92.50, 185.00, 369.99, 739.99, 1479.98, 2959.96, 5919.91],
            "G": [24.50, 49.00, 98.00, 196.00, 392.00, 783.99, 1567.98, 3135.96, 6271.93],
            "G#": [25.96, 51.91, 103.83, 207.65, 415.30, 830.61, 1661.22, 3322.44, 6644.88],
            "A": [27.50, 55.00, 110.00, 220.00, 440.00, 880.00, 1760.00, 3520.00, 7040.00],
            "A#": [29.14, 58.27, 116.54, 233.08, 466.16, 932.33, 1864.66, 3729.31, 7458.62],
            "B": [30.87, 61.74, 123.47, 246.94, 493.88, 987.77, 1975.53, 3951.07, 7902.13],
        }
        actual = {}
        for ref in DEFAULT_NOTE_TABLE:
            actual.setdefault(ref.pitch_class.value, []).append(ref.frequency)
            assert ref.name == f"{ref.pitch_class.value}{len(actual[ref.pitch_class.value]) - 1}"

        assert actual == expected

    def test_equal_tempered_tuning(self):
        table = NoteTable.equal_tempered(min_octave=4, max_octave=4, a4=432.0)
        by_name = {ref.name: ref.frequency for ref in table}

        assert len(table) == 12
        assert by_name["A4"] == 432.0

    def test_equal_tempered_close_to_standard(self):
        generated = NoteTable.equal_tempered()
        for ours, ref in zip(generated, DEFAULT_NOTE_TABLE):
            assert ours.name == ref.name
            assert abs(ours.frequency - ref.frequency) <= 0.011

    def test_sorted_ascending(self):
        freqs = DEFAULT_NOTE_TABLE.frequencies
        assert list(freqs) == sorted(freqs)

    def test_midi_numbers(self):
        by_name = {ref.name: ref for ref in DEFAULT_NOTE_TABLE}
        assert by_name["A4"].midi == 69
        assert by_name["C4"].midi == 60

    def test_octave_slice(self):
        octave = DEFAULT_NOTE_TABLE.octave(4)
        assert [ref.pitch_class for ref in octave] == [PitchClass.from_index(i) for i in range(12)]

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_NOTE_TABLE._entries = ()
        with pytest.raises(Exception):
            DEFAULT_NOTE_TABLE[0].frequency = 1.0

    def test_from_pairs_sorts_and_numbers_octaves(self):
        table = NoteTable.from_pairs(
            [(220.0, PitchClass.A), (110.0, PitchClass.A), (130.81, PitchClass.C)]
        )
        assert table.frequencies == (110.0, 130.81, 220.0)
        assert [ref.octave for ref in table] == [0, 0, 1]

    def test_rejects_empty_and_unknown(self):
        with pytest.raises(ValueError):
            NoteTable([])
        with pytest.raises(ValueError):
            NoteTable([NoteReference(100.0, PitchClass.UNKNOWN, 0)])


class TestClassifyNote:
    """Tests for classify_note and NoteClassifier."""

    def test_round_trip_from_octave_one(self):
        for ref in DEFAULT_NOTE_TABLE:
            if ref.octave < 1:
                continue
            assert classify_note(ref.frequency, DEFAULT_NOTE_TABLE, 1.0) == ref.pitch_class, ref.name

    def test_every_pitch_class_round_trips(self):
        for ref in DEFAULT_NOTE_TABLE.octave(4):
            assert classify_note(ref.frequency) == ref.pitch_class

    def test_low_octave_neighbours_within_tolerance(self):
        # C0 (16.35) and C#0 (17.32) are 0.97 Hz apart; the lower one wins
        assert classify_note(17.32) == PitchClass.C

    @pytest.mark.parametrize(
        "freq,expected",
        [(658.255, PitchClass.E), (660.245, PitchClass.E), (4697.635, PitchClass.D)],
    )
    def test_tolerance_window_edges(self, freq, expected):
        assert classify_note(freq) == expected

    def test_no_reference_near_1000hz(self):
        assert classify_note(1000.0, DEFAULT_NOTE_TABLE, 1.0) == PitchClass.UNKNOWN

    def test_tolerance_is_strict(self):
        assert classify_note(440.5) == PitchClass.A
        assert classify_note(439.01) == PitchClass.A
        assert classify_note(441.0) == PitchClass.UNKNOWN
        assert classify_note(439.0) == PitchClass.UNKNOWN

    def test_custom_epsilon(self):
        assert classify_note(445.0, DEFAULT_NOTE_TABLE, 10.0) == PitchClass.A
        assert classify_note(440.5, DEFAULT_NOTE_TABLE, 0.25) == PitchClass.UNKNOWN

    def test_custom_table(self):
        table = NoteTable.from_pairs([(100.0, PitchClass.E), (200.0, PitchClass.F)])
        assert classify_note(200.4, table, 1.0) == PitchClass.F
        assert classify_note(440.0, table, 1.0) == PitchClass.UNKNOWN

    @pytest.mark.parametrize("freq", [0.0, -440.0, math.nan, math.inf])
    def test_degenerate_frequencies(self, freq):
        assert classify_note(freq) == PitchClass.UNKNOWN

    def test_out_of_range(self):
        assert classify_note(5.0) == PitchClass.UNKNOWN
        assert classify_note(12000.0) == PitchClass.UNKNOWN

    def test_matches_linear_first_match(self):
        classifier = NoteClassifier(DEFAULT_NOTE_TABLE, 1.0)

        def linear(freq):
            for ref in DEFAULT_NOTE_TABLE:
                if abs(freq - ref.frequency) < 1.0:
                    return ref.pitch_class
            return PitchClass.UNKNOWN

        for freq in np.linspace(10.0, 8000.0, 8011):
            assert classifier.classify(float(freq)) == linear(float(freq))

    def test_match_returns_reference(self):
        ref = NoteClassifier().match(261.9)
        assert ref is not None
        assert ref.name == "C4"
        assert NoteClassifier().match(1000.0) is None

    @pytest.mark.parametrize("epsilon", [0.0, -1.0])
    def test_invalid_epsilon(self, epsilon):
        with pytest.raises(InvalidConfigurationError):
            NoteClassifier(DEFAULT_NOTE_TABLE, epsilon)
