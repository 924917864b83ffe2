"""Base exceptions shared across the tabfret package."""


class ProfileError(ValueError):
    """Raised when an instrument profile is constructed from invalid values."""
