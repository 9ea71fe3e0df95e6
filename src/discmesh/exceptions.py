class InvalidGeometry(ValueError):
    """Raised when the input parameters can not describe a proper disc."""
