"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

Logging setup and small file utilities.
"""

import configparser
import logging
from logging import Handler, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Dict, Iterable, List, Optional, Union


LOG_FORMAT = "%(asctime)s %(module)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("ucrypto")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: List[Handler] = []


LogSettings.root.setLevel(logging.NOTSET)


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Prepare for using getLogger. Logs to stderr, and additionally to a
    rotating log file when filepath is provided. Loggers already handed out by
    getLogger have their levels reset according to logLvl and lvlMap.
    Handlers installed by an earlier call are replaced, so calling this more
    than once does not duplicate output.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level used for all loggers without
            entries in the lvlMap.
        lvlMap: Logger name -> level. Merged into the stored level dict.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))

    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    LogSettings.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)
    if filepath:
        fileHandler = RotatingFileHandler(
            filepath, mode="a", maxBytes=5 * 1024 * 1024, backupCount=2
        )
        fileHandler.setFormatter(formatter)
        LogSettings.handlers.append(fileHandler)
    if not sys.executable.endswith("pythonw.exe"):
        # No console under pythonw on windows.
        printHandler = logging.StreamHandler()
        printHandler.setFormatter(formatter)
        LogSettings.handlers.append(printHandler)
    for handler in LogSettings.handlers:
        LogSettings.root.addHandler(handler)


def getLogger(name: str) -> Logger:
    """
    Gets a named logger below the package root logger. If the name has a log
    level registered with prepareLogging, that level will be used, otherwise
    the default is used.

    Args:
        name: The logger name.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l


def readINI(path: Union[Path, str], keys: Iterable[str]) -> Dict[str, str]:
    """
    Attempt to read the specified keys from the INI-formatted configuration
    file. All sections are searched, and a file without any section header is
    accepted. If a key is not discovered, it will not be present in the
    result.

    Args:
        path: The path to the INI configuration file.
        keys: Keys to search for. Matching is case-insensitive.

    Returns:
        Discovered keys and values.
    """
    keys = {k.lower() for k in keys}
    config = configparser.ConfigParser(strict=False)
    with open(path) as f:
        # configparser refuses sectionless files.
        config.read_string("[ucrypto]\n" + f.read())
    res = {}
    for section in config.sections():
        for k in config[section]:
            if k in keys:
                res[k] = config[section][k]
    return res
