"""
File-level pack and unpack on top of the Compressor.

Packing ``notes.txt`` writes ``notes.vlc`` and unpacking ``notes.vlc``
writes ``notes.txt``, next to the input unless an output directory is
configured.
"""

import logging
from pathlib import Path

from .compression import Compressor
from .config_loader import load_config
from .errors import EmptyPathError

logger = logging.getLogger("vlc_archiver")


def _replace_extension(path, extension):
    return Path(path).stem + "." + extension.lstrip(".")


def packed_file_name(path, extension="vlc"):
    return _replace_extension(path, extension)


def unpacked_file_name(path, extension="txt"):
    return _replace_extension(path, extension)


def _output_path(input_path, file_name, output_dir):
    directory = Path(output_dir) if output_dir else input_path.parent
    output_path = directory / file_name
    if output_path.resolve() == input_path.resolve():
        logger.warning("Output %s overwrites the input file", output_path)
    return output_path


def _check_path(path):
    if path is None or str(path) == "":
        raise EmptyPathError()
    return Path(path)


def pack(path, compressor=None, config=None):
    """
    Packs a text file.

    Parameters:
    path (str | Path): The text file to pack.
    compressor (Compressor, optional): Defaults to the configured method.
    config (dict, optional): Loaded config, see ``load_config``.

    Returns:
    Path: Where the packed file was written.
    """
    input_path = _check_path(path)
    settings = (config or load_config())["archiver"]
    compressor = compressor or Compressor(settings["method"])

    data = input_path.read_bytes()
    logger.info("Read %d bytes from file %s", len(data), input_path)

    packed = compressor.compress(data.decode(settings["encoding"]))
    logger.debug("Encoded data: %s", packed)

    output_path = _output_path(
        input_path,
        packed_file_name(input_path, settings["packed_extension"]),
        settings["output_dir"],
    )
    output_path.write_bytes(packed.encode("ascii"))
    logger.info("Packed file saved as %s", output_path)
    return output_path


def unpack(path, compressor=None, config=None):
    """
    Unpacks a packed file back to text.

    Parameters:
    path (str | Path): The packed file.
    compressor (Compressor, optional): Defaults to the configured method.
    config (dict, optional): Loaded config, see ``load_config``.

    Returns:
    Path: Where the text file was written.
    """
    input_path = _check_path(path)
    settings = (config or load_config())["archiver"]
    compressor = compressor or Compressor(settings["method"])

    data = input_path.read_bytes()
    logger.info("Read %d bytes from file %s", len(data), input_path)

    # non-ASCII bytes become U+FFFD and are rejected as malformed hex chunks
    text = compressor.decompress(data.decode("ascii", errors="replace"))

    output_path = _output_path(
        input_path,
        unpacked_file_name(input_path, settings["unpacked_extension"]),
        settings["output_dir"],
    )
    output_path.write_bytes(text.encode(settings["encoding"]))
    logger.info("File successfully unpacked: %s", output_path)
    return output_path
