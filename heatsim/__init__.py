"""Heatmap loading, CSR diffusion matrices and an implicit heat solver setup."""

__version__ = "0.1.0"
__all__ = ["pgm", "csr", "solver", "cli"]