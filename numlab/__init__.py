"""Numerical methods: interpolation, quadrature, linear systems, approximation, ODEs and roots."""

__version__ = "0.1.0"