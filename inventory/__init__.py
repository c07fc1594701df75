"""Product catalogue, stock levels and settings of a single kirana shop."""

from . import errors, formatters, models, service, storage, validation

__all__ = ["errors", "formatters", "models", "service", "storage", "validation"]
