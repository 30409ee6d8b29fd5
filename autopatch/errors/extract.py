class ExtractError(ValueError):
    """Non-empty input produced no usable file blocks."""
