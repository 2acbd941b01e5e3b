"""Transcript Chunker — timestamped block formatting for transcripts.

WHY: Transcript sources deliver a long list of short timed fragments.
Pasted as-is they read like a wall of captions with no way to find your
place. This package groups fragments into readable blocks and prefixes
each block with a compact relative timestamp.

HOW: Three-stage pipeline — load (fragment JSON), chunk (core), format
(pluggable formatters). Each stage is independently testable.

RULES:
- All formatters consume the same list of TimedFragment objects
- The chunker is a pure function; settings are passed in explicitly
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
