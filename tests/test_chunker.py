"""Unit tests for block chunking and timestamp headers.

WHY: The chunker is the whole point of the package. A wrong boundary
rule silently shifts every header in a long transcript; a wrong header
encoding breaks every note that cites a timestamp.

HOW: Tests are organized by concern:
  - TestFormatTimestamp: M:SS encoding, hour folding, no 24h wrap
  - TestWorkedExamples: the documented scenarios, exact output
  - TestBlockProperties: partition, non-empty blocks, threshold closure,
    degenerate thresholds, idempotence
  - TestTranscriptChunker: the bound-threshold wrapper

RULES:
- Header lines are recognised with HEADER_RE; fragment texts never match it
- Property tests sweep a handful of thresholds and durations, not a grid
"""

import re

import pytest

from transcript_chunker.core.chunker import (
    TranscriptChunker,
    chunk_fragments,
    format_timestamp,
    format_transcript,
    render_blocks,
)
from transcript_chunker.core.ir import TimedFragment

HEADER_RE = re.compile(r"^(0|[1-9]\d*):[0-5]\d$")


def _texts(lines):
    return [line for line in lines if not HEADER_RE.match(line)]


def _headers(lines):
    return [line for line in lines if HEADER_RE.match(line)]


# =========================================================================
# Timestamp encoding
# =========================================================================

class TestFormatTimestamp:
    """format_timestamp() folds hours into minutes."""

    def test_zero(self):
        assert format_timestamp(0) == "0:00"

    def test_seconds_are_zero_padded(self):
        assert format_timestamp(7000) == "0:07"

    def test_minutes_have_no_leading_zero(self):
        assert format_timestamp(4 * 60_000 + 7000) == "4:07"

    def test_past_one_hour_folds_into_minutes(self):
        # 1:01:05
        assert format_timestamp(3_665_000) == "61:05"

    def test_one_hour_five_minutes_nine_seconds(self):
        assert format_timestamp((3600 + 5 * 60 + 9) * 1000) == "65:09"

    def test_no_wrap_past_24_hours(self):
        # 25:00:01 would wrap to 1:00:01 through a clock conversion
        assert format_timestamp((25 * 3600 + 1) * 1000) == "1500:01"

    def test_sub_second_is_truncated(self):
        assert format_timestamp(59_999) == "0:59"

    def test_float_offset(self):
        assert format_timestamp(61_500.75) == "1:01"

    def test_matches_header_pattern(self):
        for offset in (0, 999, 1000, 59_000, 60_000, 3_599_000, 3_600_000, 86_400_000):
            assert HEADER_RE.match(format_timestamp(offset)), offset


# =========================================================================
# Worked examples
# =========================================================================

class TestWorkedExamples:
    """Exact outputs for the documented scenarios."""

    def test_scenario_a_closing_fragment_emits_no_header(self, scenario_a):
        assert format_transcript(scenario_a, 10) == ["0:00", "Hello", "world"]

    def test_scenario_b_one_header_per_block(self, scenario_b):
        assert format_transcript(scenario_b, 10) == ["0:00", "one", "two", "three"]

    def test_scenario_c_header_past_the_hour(self):
        fragments = [TimedFragment(text="late remark", offset_ms=3_665_000, duration_ms=1500)]
        assert format_transcript(fragments, 10) == ["61:05", "late remark"]

    def test_lecture_has_two_blocks(self, lecture_fragments):
        assert format_transcript(lecture_fragments, 10) == [
            "0:00",
            "Welcome back everyone.",
            "Today we cover sorting.",
            "Let's start with insertion sort",
            "0:11",
            "which builds the output",
            "one element at a time.",
            "Its worst case is quadratic",
            "but it is fast on small inputs.",
        ]

    def test_header_uses_offset_of_block_opener(self):
        fragments = [
            TimedFragment(text="a", offset_ms=0, duration_ms=6000),
            TimedFragment(text="b", offset_ms=62_000, duration_ms=10_000),
        ]
        assert format_transcript(fragments, 10) == ["0:00", "a", "1:02", "b"]

    def test_exact_threshold_starts_new_block(self, uniform_fragments):
        fragments = uniform_fragments(3, 5000)
        # first opens; second accumulates 5s; third reaches 10s exactly
        assert format_transcript(fragments, 10) == ["0:00", "f0", "f1", "0:10", "f2"]

    def test_tenth_second_fragments_sum_in_float_seconds(self, uniform_fragments):
        # ten additions of 0.1 give 0.9999999999999999, still under 1 s
        fragments = uniform_fragments(11, 100)
        lines = format_transcript(fragments, 1)
        assert lines == ["0:00"] + ["f{}".format(i) for i in range(11)]
        assert len(_headers(lines)) == 1

    def test_tenth_second_fragments_close_on_the_next_one(self, uniform_fragments):
        fragments = uniform_fragments(12, 100)
        blocks = chunk_fragments(fragments, 1)
        assert [len(b.fragments) for b in blocks] == [11, 1]
        assert render_blocks(blocks)[-2:] == ["0:01", "f11"]

    def test_empty_input(self):
        assert format_transcript([], 10) == []
        assert chunk_fragments([], 10) == []

    def test_accepts_generator(self, scenario_b):
        assert format_transcript(iter(scenario_b), 10) == ["0:00", "one", "two", "three"]


# =========================================================================
# Properties
# =========================================================================

THRESHOLDS = [0.5, 3, 10, 25.5, 1000]


class TestBlockProperties:
    """Invariants that hold for any ordered input."""

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_texts_are_preserved_in_order(self, sample_transcript, threshold):
        fragments = sample_transcript
        lines = format_transcript(fragments, threshold)
        assert _texts(lines) == [f.text for f in fragments]

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_blocks_partition_input(self, sample_transcript, threshold):
        fragments = sample_transcript
        blocks = chunk_fragments(fragments, threshold)
        flattened = [f for block in blocks for f in block.fragments]
        assert flattened == list(fragments)
        assert all(block.fragments for block in blocks)

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_first_fragment_opens_first_block(self, sample_transcript, threshold):
        fragments = sample_transcript
        lines = format_transcript(fragments, threshold)
        assert lines[0] == format_timestamp(fragments[0].offset_ms)
        assert lines[1] == fragments[0].text

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_threshold_reached_before_each_new_block(self, sample_transcript, threshold):
        """Seconds after a block's opener, through the next opener, meet the threshold."""
        blocks = chunk_fragments(sample_transcript, threshold)
        for current, following in zip(blocks, blocks[1:]):
            accumulated = 0.0
            for fragment in current.fragments[1:] + following.fragments[:1]:
                accumulated += fragment.duration_s
            assert accumulated >= threshold

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_no_block_is_split_early(self, sample_transcript, threshold):
        """Within a block, the running total in seconds stays below the threshold."""
        blocks = chunk_fragments(sample_transcript, threshold)
        for block in blocks:
            running = 0.0
            for fragment in block.fragments[1:]:
                running += fragment.duration_s
                assert running < threshold

    def test_headers_are_monotonic_for_ordered_input(self, sample_transcript):
        fragments = sample_transcript
        blocks = chunk_fragments(fragments, 3)
        offsets = [b.start_offset_ms for b in blocks]
        assert offsets == sorted(offsets)
        for line in _headers(render_blocks(blocks)):
            assert HEADER_RE.match(line)

    @pytest.mark.parametrize("threshold", [0, -1, -0.5])
    def test_non_positive_threshold_gives_one_block_per_fragment(self, threshold, uniform_fragments):
        fragments = uniform_fragments(6, 2000)
        blocks = chunk_fragments(fragments, threshold)
        assert [len(b.fragments) for b in blocks] == [1] * 6

    def test_zero_threshold_with_zero_durations(self, uniform_fragments):
        fragments = uniform_fragments(4, 0)
        lines = format_transcript(fragments, 0)
        assert len(_headers(lines)) == 4

    def test_repeated_calls_are_identical(self, sample_transcript):
        fragments = sample_transcript
        assert format_transcript(fragments, 10) == format_transcript(fragments, 10)

    def test_decreasing_offsets_do_not_raise(self):
        fragments = [
            TimedFragment(text="b", offset_ms=20_000, duration_ms=12_000),
            TimedFragment(text="a", offset_ms=5000, duration_ms=12_000),
        ]
        assert format_transcript(fragments, 10) == ["0:20", "b", "0:05", "a"]

    def test_input_is_not_modified(self, lecture_fragments):
        before = list(lecture_fragments)
        format_transcript(lecture_fragments, 10)
        assert lecture_fragments == before


# =========================================================================
# TranscriptChunker
# =========================================================================

class TestTranscriptChunker:
    """The threshold-bound wrapper delegates to the module functions."""

    def test_format_matches_function(self, lecture_fragments):
        chunker = TranscriptChunker(threshold_seconds=10)
        assert chunker.format(lecture_fragments) == format_transcript(lecture_fragments, 10)

    def test_blocks_match_function(self, lecture_fragments):
        chunker = TranscriptChunker(threshold_seconds=3)
        assert chunker.blocks(lecture_fragments) == chunk_fragments(lecture_fragments, 3)

    def test_block_duration(self, scenario_b):
        block = TranscriptChunker(10).blocks(scenario_b)[0]
        assert block.duration_s == pytest.approx(12.0)
        assert block.texts == ["one", "two", "three"]
