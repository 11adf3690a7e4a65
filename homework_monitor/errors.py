"""Exceptions raised while analyzing a frame."""


class MonitorError(Exception):
    """Base class for homework-monitor errors."""


class ConfigurationError(MonitorError):
    """A required setting (the vision API credential) is missing."""


class InvalidInputError(MonitorError):
    """The frame is empty, a placeholder, or too short to be an image.

    Expected while the camera warms up; callers treat it as flow control.
    """


class EmptyResponseError(MonitorError):
    """The vision service answered without a text payload."""
