import argparse
import logging
import sys

from squares.qrcode import QRCode, QRCodeError
from squares.image import QrStyle, image_classes, save


logger = logging.getLogger(__name__)

parser = argparse.ArgumentParser(
    description="Generate an image of QR, Micro QR or rMQR code",
)
parser.add_argument(
    "--file-type",
    type=str,
    default=None,
    choices=sorted(image_classes),
    help="Generated image filetype. Taken from the output path "
         "extension by default."
)
parser.add_argument(
    "--symbol",
    type=str,
    default="qr",
    choices=["qr", "micro", "rmqr"],
    help="Symbology used."
)
parser.add_argument(
    "--ec-level",
    type=str,
    default=None,
    choices=["L", "M", "Q", "H"],
    help="Error correction level. M for QR and rMQR codes and L for "
         "Micro QR codes by default."
)
parser.add_argument(
    "--version",
    type=str,
    default=None,
    help="Force a version, e.g. 7, M3 or R11x43."
)
parser.add_argument(
    "--strategy",
    type=str,
    default=None,
    choices=["width", "height", "area"],
    help="Which dimension to minimize when selecting rMQR size."
)
parser.add_argument(
    "--encoding",
    type=str,
    default="iso-8859-1",
    help="Character encoding of byte mode segments."
)
parser.add_argument(
    "--kanji",
    action="store_true",
    help="Allow Shift JIS kanji mode."
)
parser.add_argument(
    "--shape",
    type=str,
    default="square",
    choices=["square", "round"],
    help="Shape of dark modules."
)
parser.add_argument(
    "--width",
    type=lambda x: int(x) > 0 and int(x),
    default=720,
    help="Image width in pixels."
)
parser.add_argument(
    "--quiet-zone",
    type=float,
    default=2.0,
    help="Light margin around the symbol, in modules."
)
parser.add_argument(
    "--color",
    type=str,
    default="#000000",
    help="Colour of dark modules."
)
parser.add_argument(
    "--background",
    type=str,
    default="#ffffff",
    help="Background colour."
)
parser.add_argument(
    "--verbose",
    action="store_true",
    help="Log encoder decisions."
)
parser.add_argument(
    "content",
    type=str,
    help="Content of the symbol."
)
parser.add_argument(
    "out",
    type=str,
    help="Output path."
)


def main(cmd_args=None):
    if cmd_args is None:
        args = parser.parse_args()
    else:
        args = parser.parse_args(cmd_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s"
    )
    try:
        code = QRCode(
            args.content,
            ec_level=args.ec_level,
            kind=args.symbol,
            strategy=args.strategy,
            version=args.version,
            encoding=args.encoding,
            kanji=args.kanji
        )
        style = QrStyle(
            color=args.color,
            background_color=args.background,
            shape=args.shape,
            width=args.width,
            quiet_zone=args.quiet_zone
        )
        logger.info("Encoded %s code version %s-%s", code.kind, code.version,
                    code.ec_level)
        save(code, args.out, style, args.file_type)
    except (QRCodeError, ValueError) as error:
        print("error: {}".format(error), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
