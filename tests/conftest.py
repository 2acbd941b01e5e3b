"""Shared test fixtures for the transcript_chunker test suite.

WHY: Several test modules need the same small transcripts — the worked
examples for block chunking, a lecture with several blocks, and raw
fragment dicts as the transcript source delivers them. Centralizing them
here keeps every module on the same data.

HOW: Pytest fixtures return fresh lists each time, so a test that
mutates its copy cannot leak into another. ``sample_transcript`` is
parametrized over a handful of shapes so property tests run against
each of them.

RULES:
- Offsets and durations are milliseconds, as the transcript source supplies
- SCENARIO_* data matches the documented worked examples exactly
- Tests reach this data through fixtures only
"""

from typing import Any, Callable, Dict, List

import pytest

from transcript_chunker.config import ChunkerSettings
from transcript_chunker.core.ir import TimedFragment


# ---------------------------------------------------------------------------
# Worked examples
# ---------------------------------------------------------------------------

# Two fragments; the second closes the block but no fragment follows it.
SCENARIO_A: List[Dict[str, Any]] = [
    {"text": "Hello", "offset": 0,    "duration": 2000},
    {"text": "world", "offset": 2000, "duration": 9000},
]

# Three 4s fragments: one header for all three.
SCENARIO_B: List[Dict[str, Any]] = [
    {"text": "one",   "offset": 0,    "duration": 4000},
    {"text": "two",   "offset": 4000, "duration": 4000},
    {"text": "three", "offset": 8000, "duration": 4000},
]

# A lecture-style transcript with several blocks.
LECTURE: List[Dict[str, Any]] = [
    {"text": "Welcome back everyone.",          "offset": 0,     "duration": 3000},
    {"text": "Today we cover sorting.",         "offset": 3000,  "duration": 4000},
    {"text": "Let's start with insertion sort", "offset": 7000,  "duration": 4000},
    {"text": "which builds the output",         "offset": 11000, "duration": 3500},
    {"text": "one element at a time.",          "offset": 14500, "duration": 3000},
    {"text": "Its worst case is quadratic",     "offset": 17500, "duration": 4000},
    {"text": "but it is fast on small inputs.", "offset": 21500, "duration": 2500},
]

# Uneven durations, including zero-length fragments.
IRREGULAR_DURATIONS = [300, 2500, 0, 7100, 900, 4400, 100, 6000, 2000, 0, 3300]


def _make_fragments(entries: List[Dict[str, Any]]) -> List[TimedFragment]:
    return [TimedFragment.from_dict(e) for e in entries]


def _uniform(count: int, duration_ms: int, start_ms: int = 0) -> List[TimedFragment]:
    """Back-to-back fragments of equal duration, texts "f0", "f1", ..."""
    return [
        TimedFragment(text="f{}".format(i), offset_ms=start_ms + i * duration_ms, duration_ms=duration_ms)
        for i in range(count)
    ]


def _irregular() -> List[TimedFragment]:
    return [
        TimedFragment(text="x{}".format(i), offset_ms=i * 1700, duration_ms=d)
        for i, d in enumerate(IRREGULAR_DURATIONS)
    ]


_SAMPLE_TRANSCRIPTS: Dict[str, Callable[[], List[TimedFragment]]] = {
    "uniform-1s": lambda: _uniform(20, 1000),
    "uniform-4s": lambda: _uniform(15, 4000),
    "uniform-12s": lambda: _uniform(7, 12_000),
    "tenth-seconds": lambda: _uniform(35, 100),
    "lecture": lambda: _make_fragments(LECTURE),
    "irregular": _irregular,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def uniform_fragments():
    """Factory for back-to-back equal-duration fragments."""
    return _uniform


@pytest.fixture(params=sorted(_SAMPLE_TRANSCRIPTS))
def sample_transcript(request):
    """Each sample transcript shape in turn."""
    return _SAMPLE_TRANSCRIPTS[request.param]()


@pytest.fixture
def scenario_a_entries():
    return [dict(e) for e in SCENARIO_A]


@pytest.fixture
def scenario_a():
    return _make_fragments(SCENARIO_A)


@pytest.fixture
def scenario_b():
    return _make_fragments(SCENARIO_B)


@pytest.fixture
def lecture_fragments():
    return _make_fragments(LECTURE)


@pytest.fixture
def lecture_entries():
    """Raw fragment dicts, as saved from the transcript source."""
    return [dict(e) for e in LECTURE]


@pytest.fixture
def default_settings():
    return ChunkerSettings(threshold_seconds=10.0, timestamp_interval=5)
