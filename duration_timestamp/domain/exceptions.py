"""Timestamp domain errors"""


class TimestampError(ValueError):
    """Base class for every timestamp failure"""


class ValidationError(TimestampError):
    """A timestamp's total disagrees with the sum of its units"""


class ParseError(TimestampError):
    """No timestamp could be extracted from the input"""


class RenderError(TimestampError):
    """A timestamp could not be rendered in the requested format"""
