class QRCodeError(ValueError):
    """Base class of errors caused by the data or options of an encode call.

    Inherits from ValueError, so callers catching ValueError keep working.
    """


class InvalidCharacter(QRCodeError):
    """Data contains a character no available mode can represent"""


class DataTooLong(QRCodeError):
    """No version of the requested symbology has enough capacity"""


class UnsupportedConfiguration(QRCodeError):
    """Requested option is not legal for the symbology or version"""


class InternalInvariantViolation(AssertionError):
    """Static tables or placement bookkeeping are inconsistent.

    This is a defect of the encoder itself, never of the input.
    """
