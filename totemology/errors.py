"""Exceptions raised by the renderer and image writer."""


class InvalidInputError(ValueError):
    """A row cannot be rendered (empty, negative values or zero height)."""


class ResourceError(OSError):
    """The image could not be written to its target location."""
