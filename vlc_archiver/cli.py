import argparse
import logging
import sys

import yaml

from . import archive
from .config_loader import load_config
from .errors import ConfigError, EmptyPathError, VlcError

logger = logging.getLogger("vlc_archiver")

COMMANDS = {
    "pack": archive.pack,
    "unpack": archive.unpack,
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="vlc-archiver",
        description="A simple archiver using a variable-length code",
    )
    ap.add_argument("--config", help="YAML config file (default: $VLC_ARCHIVER_CONFIG)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = ap.add_subparsers(dest="command", required=True)
    pack = sub.add_parser("pack", aliases=["vlc"], help="Pack file using variable-length code")
    pack.add_argument("file_path", nargs="?", default="")
    unpack = sub.add_parser("unpack", aliases=["vlcUnpack"], help="Unpack file using variable-length code")
    unpack.add_argument("file_path", nargs="?", default="")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    command = {"vlc": "pack", "vlcUnpack": "unpack"}.get(args.command, args.command)

    try:
        config = load_config(args.config)
    except (ConfigError, OSError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("ERROR: %s", e)
        return 1

    level = logging.DEBUG if args.verbose else config["logging"]["level"]
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        output_path = COMMANDS[command](args.file_path, config=config)
    except (EmptyPathError, VlcError, OSError, UnicodeError) as e:
        logger.error("ERROR: %s", e)
        return 1
    logger.debug("%s finished: %s", command, output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
