class ValidationError(ValueError):
    """User input rejected before any write happens."""


class EmptyExportError(ValueError):
    """Export requested while there are no entries to write."""
