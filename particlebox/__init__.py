"""A 2D particle sandbox: vectors, bodies under gravity with floor bounces, and a pygame viewer."""

__version__ = "0.1.0"
__all__ = ["vec", "model", "sim", "render", "app"]