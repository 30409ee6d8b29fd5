class PathViolation(ValueError):
    """A path resolves outside the workspace root or into a protected location."""
