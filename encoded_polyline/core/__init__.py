"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Wire-format constants, integer limits, strategy enum
- exceptions: Custom exception hierarchy
- validation: Precision and strategy argument checks
"""
