"""A ring of spring-linked bodies under Verlet integration, with a pygame viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]