"""Dollar-sign string templates with mappings, mappers and safe substitution."""

__version__ = "0.1.0"
__all__ = ["template"]