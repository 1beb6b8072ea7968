# exception types raised by the coder

"""
Error taxonomy for the predictive coder.
 - ConfigError: bad predictor name or quantization level count
 - InputError: missing/unreadable image, empty or malformed grid
 - DimensionMismatchError: statistics over grids of different size
"""


class CodingError(ValueError):
    """Base class for every error raised by the coder."""


class ConfigError(CodingError):
    pass


class InputError(CodingError):
    pass


class DimensionMismatchError(CodingError):
    pass
