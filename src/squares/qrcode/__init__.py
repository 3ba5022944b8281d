from .errors import (
    QRCodeError, InvalidCharacter, DataTooLong, UnsupportedConfiguration,
    InternalInvariantViolation
)
from .qrcode import (
    QRCode, encode_standard, encode_standard_with_options, encode_micro,
    encode_micro_with_options, encode_rmqr, encode_rmqr_with_options
)
from .segments import Segment
from .versions import Version
