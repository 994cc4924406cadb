"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, the Decred developers
Copyright (c) 2026, the ecdomain developers
See LICENSE for details

Configuration settings for ecdomain. Only logging is configurable. The curve
registry is fixed and no setting changes it.
"""

import os

from ecdomain import ECDomainError
from ecdomain.util import helpers


APP_NAME = "ecdomain"
CONFIG_NAME = "ecdomain.conf"
DATA_DIR_ENV = "ECDOMAIN_APPDATA"

log = helpers.getLogger("CONFIG")

KEY_LOG_LEVEL = "loglevel"
KEY_LOG_FILE = "logfile"
KEY_DEBUG_LEVELS = "debuglevels"
KEYS = (KEY_LOG_LEVEL, KEY_LOG_FILE, KEY_DEBUG_LEVELS)

DEFAULTS = {
    KEY_LOG_LEVEL: "info",
    KEY_LOG_FILE: "",
    KEY_DEBUG_LEVELS: "",
}


def dataDir():
    """
    The directory holding the configuration file. The environment variable
    ECDOMAIN_APPDATA overrides the OS-specific default.
    """
    override = os.getenv(DATA_DIR_ENV)
    if override:
        return override
    return helpers.appDataDir(APP_NAME)


def configPath():
    return os.path.join(dataDir(), CONFIG_NAME)


def parseDebugLevels(s):
    """
    Parse per-logger levels from a comma-separated list of name:LEVEL pairs,
    e.g. "CURVE:debug,CONFIG:warning".

    Args:
        s (str): The raw setting.

    Returns:
        dict: Logger name to numeric level.
    """
    levels = {}
    for pair in s.split(","):
        pair = pair.strip()
        if not pair:
            continue
        name, sep, lvl = pair.partition(":")
        if not sep or not name.strip():
            raise ECDomainError(f"invalid debuglevels entry {pair!r}")
        levels[name.strip()] = helpers.parseLogLevel(lvl)
    return levels


class ECConfig:
    """
    ECConfig is the configuration settings. The configuration file is
    INI-formatted, with or without section headers.
    """

    def __init__(self, path=None):
        self.path = path if path else configPath()
        self.file = dict(DEFAULTS)
        if os.path.isfile(self.path):
            self.file.update(helpers.readINI(self.path, KEYS))
        else:
            log.debug(f"no configuration file at {self.path}, using defaults")
        self.normalize()

    def normalize(self):
        """
        Check the settings, converting them to their parsed forms.
        """
        self.logLevel = helpers.parseLogLevel(self.file[KEY_LOG_LEVEL])
        self.logFile = self.file[KEY_LOG_FILE].strip() or None
        self.debugLevels = parseDebugLevels(self.file[KEY_DEBUG_LEVELS])

    def get(self, k):
        """
        Retrieve the raw setting.

        Args:
            k (str): The setting key.

        Returns:
            str: The setting, or None if the key is unknown.
        """
        return self.file.get(k)

    def set(self, k, v):
        """
        Change a setting. The new value is validated immediately, but is not
        applied to logging until apply is called.

        Args:
            k (str): The setting key.
            v (str): The value.
        """
        if k not in DEFAULTS:
            raise ECDomainError(f"unknown configuration key {k!r}")
        old = self.file[k]
        self.file[k] = v
        try:
            self.normalize()
        except ECDomainError:
            self.file[k] = old
            raise

    def apply(self):
        """
        Configure logging from the settings. The log file directory is created
        if needed. If the log file cannot be opened, ECDomainError is raised and
        the current logging setup is left in place.
        """
        helpers.prepareLogging(
            filepath=self.logFile, logLvl=self.logLevel, lvlMap=self.debugLevels
        )


ecConfig = None


def load(path=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to the modular `load`
    function will return the same instance.

    Args:
        path (str): Optional configuration file path, used on the first call.

    Returns:
        ECConfig: The configuration.
    """
    global ecConfig
    if not ecConfig:
        ecConfig = ECConfig(path)
    return ecConfig
