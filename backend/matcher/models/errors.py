class InputError(ValueError):
    """Raised when the caller hands the matcher text, patterns or settings it cannot index."""
