"""Bounds, sequences, and float and integer 2D vectors as small numeric value types."""

__version__ = "0.1.0"
__all__ = ["bounds", "seqs", "float_vec2", "int_vec2"]