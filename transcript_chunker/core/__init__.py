"""Core chunking and intermediate representation modules.

WHY: The core package is the stable heart of the project — the fragment
dataclasses and the block chunking logic. Every formatter, the CLI and
the HTTP API go through it.

HOW: ir.py defines the data structures, chunker.py groups fragments into
timestamped blocks, loader.py parses and validates fragment JSON.

RULES:
- IR dataclasses are the contract — change with care
- Chunking is format-agnostic — no formatter-specific logic here
- Nothing in core performs I/O except loader.py
"""
