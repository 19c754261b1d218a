"""Random generator, bump heap, block merge sort primitives and a window-lift statechart model."""

__version__ = "0.1.0"