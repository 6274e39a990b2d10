# config_loader.py
import codecs
import copy
import logging
import os

import yaml

from .compression import Compressor
from .errors import ConfigError

CONFIG_ENV_VAR = "VLC_ARCHIVER_CONFIG"

DEFAULT_CONFIG = {
    "archiver": {
        "method": "vlc",
        "packed_extension": "vlc",
        "unpacked_extension": "txt",
        "output_dir": None,
        "encoding": "utf-8",
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(config_path=None):
    """
    Loads the YAML config on top of the defaults.

    The path falls back to $VLC_ARCHIVER_CONFIG; with neither set the
    defaults are returned as they are.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return config

    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Invalid config format in {config_path}")

    for section, values in loaded.items():
        if section not in config:
            raise ConfigError(f"Unknown config section: {section}")
        if not isinstance(values, dict):
            raise ConfigError(f"Config section {section} must be a mapping")
        for key in values:
            if key not in config[section]:
                raise ConfigError(f"Unknown config key: {section}.{key}")
        config[section].update(values)

    method = str(config["archiver"]["method"]).lower()
    if method not in Compressor.VALID_METHODS:
        raise ConfigError(f"Unsupported compression method: {method}")
    config["archiver"]["method"] = method

    archiver = config["archiver"]
    for key in ("packed_extension", "unpacked_extension"):
        if not isinstance(archiver[key], str) or not archiver[key].strip("."):
            raise ConfigError(f"archiver.{key} must be a non-empty string")
    if archiver["output_dir"] is not None and not isinstance(archiver["output_dir"], str):
        raise ConfigError("archiver.output_dir must be a string or null")
    try:
        codecs.lookup(str(archiver["encoding"]))
    except LookupError:
        raise ConfigError(f"Unknown text encoding: {archiver['encoding']}") from None

    level = config["logging"]["level"]
    if isinstance(level, bool) or not isinstance(level, (int, str)):
        raise ConfigError(f"Invalid logging level: {level!r}")
    if isinstance(level, str):
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown logging level: {level}")
    config["logging"]["level"] = level
    return config
