"""Define constants relating to reference frames."""

DEFAULT_FRAME = "world"
"""Reference frame assumed for spatial states when none is specified."""
