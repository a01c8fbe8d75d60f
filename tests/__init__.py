"""shapekit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/function (no real I/O).
- integration/  : Real interactions with the filesystem and child processes.

General guidance
- Keep unit fast and deterministic; fake `asyncio.sleep` rather than waiting.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Tests that wait for real time use @pytest.mark.slow.
"""
