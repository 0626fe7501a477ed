"""Small numerical methods: decompositions, determinants, interpolation, integration and root finding."""

__version__ = "0.1.0"