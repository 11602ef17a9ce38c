"""
Tests for selfupgrade.exceptions module.
"""

from __future__ import annotations

import pytest

from selfupgrade.exceptions import (
    ConfigError,
    SelfUpgradeError,
    UpgradeInProgress,
    UpgradeUnsupported,
    VersionUnknown,
    VersionUpToDate,
)


@pytest.mark.parametrize(
    "exc_type, message",
    [
        (VersionUpToDate, "current version is up to date"),
        (VersionUnknown, "couldn't fetch release information"),
        (UpgradeUnsupported, "upgrade unsupported"),
        (UpgradeInProgress, "upgrade already in progress"),
    ],
)
def test_default_messages(exc_type, message):
    err = exc_type()
    assert str(err) == message
    assert isinstance(err, SelfUpgradeError)


def test_custom_message():
    assert str(VersionUpToDate("latest is v1.2.3")) == "latest is v1.2.3"


def test_catch_all_with_base_class():
    with pytest.raises(SelfUpgradeError):
        raise ConfigError("bad config")
