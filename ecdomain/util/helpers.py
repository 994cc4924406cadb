"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
Copyright (c) 2026, the ecdomain developers
See LICENSE for details
"""

import configparser
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import platform
import sys
import traceback
from typing import Dict, Iterable, Optional, Union

from appdirs import AppDirs  # type: ignore

from ecdomain import ECDomainError


LOG_FORMAT = "%(asctime)s %(module)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 2


def formatTraceback(err: Exception) -> str:
    """
    Format a traceback for an error so that it can go into logs.

    Args:
        err: The error the traceback is extracted from.

    Returns:
        The __str__() of the error, followed by the standard formatting
            of the traceback on the following lines.
    """
    return "".join(traceback.format_exception(type(err), err, err.__traceback__))


def mkdir(path: Union[Path, str]) -> bool:
    """
    Create the directory if it doesn't exist.

    Args:
        path: the directory path.

    Returns:
        False if a file is in the way, True otherwise.
    """
    if os.path.isdir(path):
        return True
    if os.path.isfile(path):
        return False
    os.makedirs(path)
    return True


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("ecdomain")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: list = []


LogSettings.root.setLevel(logging.NOTSET)


def parseLogLevel(lvl: Union[int, str]) -> int:
    """
    Convert a level name such as "debug" or "WARNING" to its logging
    constant. Integers are passed through.

    Args:
        lvl: The level name or number.

    Returns:
        The numeric logging level.
    """
    if isinstance(lvl, int):
        return lvl
    n = logging.getLevelName(lvl.strip().upper())
    if not isinstance(n, int):
        raise ECDomainError(f"unknown log level {lvl!r}")
    return n


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Prepare for using getLogger. Logs to stdout. If filepath is provided, log
    outputs will be saved to a rotating log file at the specified location. Any
    loggers, both future loggers and those already created, will have their
    levels set according to the new logLvl and lvlMap. Handlers installed by
    an earlier call are replaced.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level used for all new loggers without
            entries in the lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
    """
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = []
    if filepath:
        logDir = os.path.dirname(os.path.abspath(filepath))
        try:
            if not mkdir(logDir):
                raise ECDomainError(f"log directory {logDir} is a file")
            handlers.append(
                RotatingFileHandler(
                    filepath,
                    mode="a",
                    maxBytes=LOG_FILE_MAX_BYTES,
                    backupCount=LOG_FILE_BACKUPS,
                )
            )
        except OSError as e:
            # The current handlers are still installed, so this is logged.
            LogSettings.root.error(
                f"unable to open log file {filepath}: {formatTraceback(e)}"
            )
            raise ECDomainError(f"unable to open log file {filepath}: {e}") from e
    if not sys.executable.endswith("pythonw.exe"):
        # pythonw on windows has no stdout.
        handlers.append(logging.StreamHandler())

    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    LogSettings.handlers = handlers
    for handler in handlers:
        handler.setFormatter(formatter)
        LogSettings.root.addHandler(handler)

    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))


def getLogger(name: str) -> Logger:
    """
    Gets a named logger. If the name has a log level registered with
    prepareLogging, that level will be used, otherwise the default is used.

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
    file. All sections will be searched. A dict with discovered keys and
    values will be returned. If a key is not discovered, it will not be
    present in the result.

    Args:
        path: The path to the INI configuration file.
        keys: Keys to search for.

    Returns:
        Discovered keys and values.
    """
    config = configparser.ConfigParser(strict=False)
    # configparser requires a section header, so one is prepended for
    # sectionless files.
    with open(path) as f:
        config.read_string("[ecdomain]\n" + f.read())
    keys = set(keys)
    res = {}
    for section in config.sections():
        for k in config[section]:
            if k in keys:
                res[k] = config[section][k]
    return res


def appDataDir(appName: str) -> str:
    """
    appDataDir returns an operating system specific directory to be used for
    storing application data for an application.

    Args:
        appName: The name of the app whose data directory is wanted.

    Returns:
        The path of the wanted data directory.
    """
    if appName == "" or appName == ".":
        return "."

    # A leading period is a POSIX convention added below, not part of the name.
    appName = appName.lstrip(".")
    appNameUpper = appName.capitalize()
    appNameLower = appName.lower()

    homeDir = os.path.expanduser("~")
    if homeDir == "":
        homeDir = os.getenv("HOME", "")

    opSys = platform.system()
    if opSys == "Windows":
        return AppDirs(appNameUpper, "").user_data_dir

    if homeDir != "":
        if opSys == "Darwin":
            return os.path.join(homeDir, "Library", "Application Support", appNameUpper)
        return os.path.join(homeDir, "." + appNameLower)

    return "."
