"""Core utilities and shared infrastructure.

- config: Codec options and their validation
- constants: Wire-format names, CRS strings, reserved keys
- exceptions: Error taxonomy
"""
