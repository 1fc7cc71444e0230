class InvalidArgument(ValueError):
    """Raised when an operation is called with an argument that violates its preconditions."""
