"""Structured error hierarchy for corestab."""


class CorestabError(Exception):
    """Base for all corestab errors."""

    pass


class InvalidSubsetIndex(CorestabError):
    """A subset index falls outside [0, 2**size) for the addressed tier."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Subset index {index} out of range for a set of size {size}")


class ValidationError(CorestabError):
    """Tier list or win matrix failed input validation."""

    pass


class InstanceLoadError(CorestabError):
    """Instance description could not be turned into a StabilityInstance."""

    pass
