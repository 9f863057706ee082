"""Computational kernels for spatial point patterns: distances, close pairs,
distance transforms, coverage areas, component labelling and optimal assignment."""

__version__ = "0.1.0"