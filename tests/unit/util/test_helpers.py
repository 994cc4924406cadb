"""
Copyright (c) 2020, the Decred developers
Copyright (c) 2026, the ecdomain developers
See LICENSE for details
"""

import logging
import os
import os.path
import platform

from appdirs import AppDirs
import pytest

from ecdomain import ECDomainError
from ecdomain.util import helpers


def test_formatTraceback():
    try:
        raise ECDomainError("errmsg")
    except ECDomainError as e:
        tb = helpers.formatTraceback(e)
    assert tb.startswith("Traceback")
    assert tb.rstrip().endswith("ecdomain.ECDomainError: errmsg")
    assert "test_formatTraceback" in tb


def test_mkdir(tmp_path):
    fpath = tmp_path / "test_file"
    fpath.touch()
    assert not helpers.mkdir(fpath)
    dpath = tmp_path / "test_dir"
    assert helpers.mkdir(dpath)
    assert os.path.isdir(dpath)
    assert helpers.mkdir(dpath)


def test_parseLogLevel():
    assert helpers.parseLogLevel("debug") == logging.DEBUG
    assert helpers.parseLogLevel(" Warning ") == logging.WARNING
    assert helpers.parseLogLevel(logging.ERROR) == logging.ERROR
    with pytest.raises(ECDomainError):
        helpers.parseLogLevel("loud")


def test_prepareLogging(tmp_path):
    path = tmp_path / "test.log"
    helpers.prepareLogging(filepath=path)
    logger = helpers.getLogger("1")
    logger1 = logger
    assert logger.getEffectiveLevel() == logging.INFO
    assert logger.name == "ecdomain.1"

    logger.info("something")
    assert path.is_file()
    assert "something" in path.read_text()

    helpers.prepareLogging(filepath=path, logLvl=logging.DEBUG)
    logger = helpers.getLogger("2")
    assert logger.getEffectiveLevel() == logging.DEBUG
    # Handlers are replaced, not stacked.
    assert len(helpers.LogSettings.root.handlers) == len(helpers.LogSettings.handlers)

    helpers.prepareLogging(
        filepath=path,
        logLvl=logging.INFO,
        lvlMap={"1": logging.NOTSET, "3": logging.WARNING},
    )
    logger = helpers.getLogger("3")
    assert logger.getEffectiveLevel() == logging.WARNING
    assert logger1.level == logging.NOTSET

    # Leave the module-level defaults as they were.
    helpers.LogSettings.moduleLevels.clear()
    helpers.prepareLogging()


def test_readINI(tmp_path):
    path = tmp_path / "test.conf"
    path.write_text(
        "loglevel=debug\n"
        "ignored=1\n"
        "[Application Options]\n"
        "logfile = /var/log/ecdomain.log\n"
    )
    res = helpers.readINI(path, ["loglevel", "logfile", "debuglevels"])
    assert res == {"loglevel": "debug", "logfile": "/var/log/ecdomain.log"}


def test_appDataDir(monkeypatch):
    """
    Tests appDataDir to ensure it gives expected results for various operating
    systems.
    """
    appName = "myapp"
    appNameUpper = appName.capitalize()
    homeDir = os.path.expanduser("~")

    assert helpers.appDataDir("") == "."
    assert helpers.appDataDir(".") == "."

    monkeypatch.setattr(platform, "system", lambda: "Windows")
    assert helpers.appDataDir(appName) == AppDirs(appNameUpper, "").user_data_dir

    monkeypatch.setattr(platform, "system", lambda: "Darwin")
    assert helpers.appDataDir(appName) == os.path.join(
        homeDir, "Library", "Application Support", appNameUpper
    )

    monkeypatch.setattr(platform, "system", lambda: "Linux")
    assert helpers.appDataDir(appName) == os.path.join(homeDir, ".myapp")
    assert helpers.appDataDir(".MyApp") == os.path.join(homeDir, ".myapp")

    monkeypatch.setattr(os.path, "expanduser", lambda p: "")
    monkeypatch.setenv("HOME", "")
    assert helpers.appDataDir(appName) == "."
