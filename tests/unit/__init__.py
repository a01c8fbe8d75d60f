"""Unit tests.

Purpose
- Verify a single shapekit module in isolation.

Guidelines
- No real file or process I/O and no real waiting; patch at the boundary.
- Prefer behavior-centric assertions over implementation details.
"""
