"""Core model, parsing, serialization, and interpolation modules.

WHY: The core package contains the stable heart of the converter: the
PitchTier model and everything that reads, writes, or resamples it. These
are consumed by all formatters and the CLI.

HOW: ir.py defines the data structures, parser.py builds them from Praat
text, serializer.py writes them back, interpolation.py converts between
control points and dense frames, errors.py holds the exception types.

RULES:
- The model is the contract; change with care
- Parsing accepts both Praat text variants; serialization emits only one
- Interpolation never raises for missing data; NaN marks it
"""
