import logging

from . import bitwriter, segments, versions
from .errors import DataTooLong, InvalidCharacter, UnsupportedConfiguration


logger = logging.getLogger(__name__)

rmqr_strategies = {
    "width": lambda v: (v.width, v.height, v.area),
    "height": lambda v: (v.height, v.width, v.area),
    "area": lambda v: (v.area, v.width, v.height)
}

DEFAULT_STRATEGY = "area"


def fits(plan, version, ec_level):
    for segment in plan:
        if segment.char_count >= 1 << versions.length_bits(segment.mode,
                                                            version):
            return False
    needed = bitwriter.bit_length(plan, version)
    return needed <= versions.data_capacity(version, ec_level)


def _first_fitting(units, candidates, ec_level):
    # versions sharing count field widths share the optimal plan
    plans = {}
    for version in candidates:
        length_class = (versions.mode_bits(version),
                        versions.length_bits_class(version))
        if length_class not in plans:
            try:
                plans[length_class] = segments.optimize(units, version)
            except InvalidCharacter:
                # a mode missing from small Micro QR versions
                plans[length_class] = None
        plan = plans[length_class]
        if plan is not None and fits(plan, version, ec_level):
            return version, plan
    return None, None


def select_qr(units, ec_level):
    candidates = [versions.qr_version(n) for n in range(1, 41)]
    return _first_fitting(units, candidates, ec_level)


def select_micro(units, ec_level):
    candidates = [
        versions.micro_version(n) for n in range(1, 5)
        if versions.has_ec_level(versions.micro_version(n), ec_level)
    ]
    return _first_fitting(units, candidates, ec_level)


def select_rmqr(units, ec_level, strategy=None):
    if strategy is None:
        strategy = DEFAULT_STRATEGY
    try:
        key = rmqr_strategies[strategy]
    except KeyError:
        raise UnsupportedConfiguration(
            "Unknown rMQR strategy {!r}, expected one of {}".format(
                strategy, ", ".join(sorted(rmqr_strategies))
            )
        ) from None
    candidates = sorted(versions.rmqr_versions(), key=key)
    return _first_fitting(units, candidates, ec_level)


def select(data, ec_level, kind="qr", strategy=None, encoding="iso-8859-1",
           kanji=False):
    """Return the smallest version holding data and its segments"""
    versions.check_kind(kind)
    versions.check_ec_level(kind, ec_level)
    if strategy is not None and kind != "rmqr":
        raise UnsupportedConfiguration(
            "Strategy applies to rMQR codes only"
        )
    units = segments.classify(data, encoding, kanji)
    if kind == "qr":
        version, plan = select_qr(units, ec_level)
    elif kind == "micro":
        version, plan = select_micro(units, ec_level)
    else:
        version, plan = select_rmqr(units, ec_level, strategy)
    if version is None:
        raise DataTooLong(
            "Data of {} characters does not fit in any {} code at error "
            "correction level {}".format(len(units), kind, ec_level)
        )
    logger.debug(
        "Selected version %s-%s, %d of %d data bits used", version, ec_level,
        bitwriter.bit_length(plan, version),
        versions.data_capacity(version, ec_level)
    )
    return version, plan
