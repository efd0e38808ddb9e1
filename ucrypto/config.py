"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

Configuration settings for ucrypto.
"""

import logging
import os

from appdirs import AppDirs

from ucrypto import UCryptoError
from ucrypto.util import helpers


# Look for the configuration file in an OS-appropriate location.
_ad = AppDirs("UCrypto", False)
CONFIG_DIR = _ad.user_config_dir

# The configuration file name.
CONFIG_NAME = "ucrypto.conf"
CONFIG_PATH = os.path.join(CONFIG_DIR, CONFIG_NAME)

# Environment variable overriding CONFIG_PATH.
CONFIG_ENV = "UCRYPTO_CONFIG"

DEFAULT_PRIME_ROUNDS = 25
DEFAULT_PRIME_BITS = 1024
DEFAULT_PRIME_ATTEMPTS = 100000

logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str): A string which is a key for the logLevelMap. Case-insensitive.
    """
    return logLevelMap[s.strip().lower()]


def parseLogLevel(s):
    """
    Parse a log level specifier. Either a single level, e.g. "debug", or a
    comma-separated list of module:level pairs, e.g. "PRIME:debug,ECDSA:info".

    Args:
        s (str): The specifier.

    Returns:
        int or None: The default level, if one was given.
        dict: Module name -> level.
    """
    try:
        if any(ch in s for ch in (",", ":")):
            pairs = (p.split(":") for p in s.split(",") if p.strip())
            return None, {k.strip(): logLvl(v) for k, v in pairs}
        return logLvl(s), {}
    except (KeyError, ValueError):
        raise UCryptoError(f"malformed loglevel specifier: {s}")


def _positiveInt(cfg, key, default):
    if key not in cfg:
        return default
    try:
        v = int(cfg[key])
    except ValueError:
        raise UCryptoError(f"{key} must be an integer, got {cfg[key]!r}")
    if v <= 0:
        raise UCryptoError(f"{key} must be positive, got {v}")
    return v


class Config:
    """
    Config holds the engine tunables. Values come from the INI-formatted file
    at path, when it exists, and fall back to the module defaults otherwise.
    """

    keys = ("primerounds", "primebits", "primeattempts", "loglevel")

    def __init__(self, path=None):
        self.path = path or os.environ.get(CONFIG_ENV) or CONFIG_PATH
        cfg = {}
        if os.path.isfile(self.path):
            cfg = helpers.readINI(self.path, self.keys)
        self.primeRounds = _positiveInt(cfg, "primerounds", DEFAULT_PRIME_ROUNDS)
        self.primeBits = _positiveInt(cfg, "primebits", DEFAULT_PRIME_BITS)
        self.primeAttempts = _positiveInt(cfg, "primeattempts", DEFAULT_PRIME_ATTEMPTS)
        self.logLevel = logging.INFO
        self.moduleLevels = {}
        if cfg.get("loglevel"):
            lvl, self.moduleLevels = parseLogLevel(cfg["loglevel"])
            if lvl is not None:
                self.logLevel = lvl

    def prepareLogging(self, filepath=None):
        """
        Set up logging with the configured levels.

        Args:
            filepath (str): Optional rotating log file path.
        """
        helpers.prepareLogging(filepath, self.logLevel, self.moduleLevels)


_config = None


def load(path=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to `load` return
    the same instance until `reset` is called.

    Args:
        path (str): Optional configuration file path, only used for the
            first load.

    Returns:
        Config: The current configuration.
    """
    global _config
    if not _config:
        _config = Config(path)
    return _config


def reset():
    """
    Forget the loaded configuration, so the next `load` reads it again.
    """
    global _config
    _config = None
