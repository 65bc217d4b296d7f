"""Tests for identity-level set/remove actions."""

import logging

import pytest

from peertime.actions import (
    Identity,
    assign_timezone,
    clear_timezone,
    current_timezone,
)
from peertime.registry import TimezoneRegistry
from peertime.storage import MemoryBlobStore, PersistenceError


class _ReadOnlyStore(MemoryBlobStore):
    def set(self, value: str) -> None:
        raise PersistenceError("read-only")


@pytest.fixture
def alice() -> Identity:
    return Identity(id="516002221809205249", name="alice")


class TestIdentity:
    def test_display_name_falls_back_to_id(self):
        assert Identity(id="42").display_name == "42"
        assert Identity(id="42", name="bob").display_name == "bob"


class TestAssign:
    def test_assign_and_read(self, alice: Identity):
        registry = TimezoneRegistry()
        assert assign_timezone(registry, alice, "Asia/Tokyo") is True
        assert current_timezone(registry, alice) == "Asia/Tokyo"

    def test_assign_logs_name(self, alice: Identity, caplog: pytest.LogCaptureFixture):
        registry = TimezoneRegistry()
        with caplog.at_level(logging.INFO, logger="peertime.actions"):
            assign_timezone(registry, alice, "Europe/Berlin")
        assert "Set timezone for alice to Europe/Berlin" in caplog.text

    def test_off_catalog_zone_still_stored(
        self, alice: Identity, caplog: pytest.LogCaptureFixture
    ):
        registry = TimezoneRegistry()
        with caplog.at_level(logging.INFO, logger="peertime.actions"):
            assign_timezone(registry, alice, "Asia/Taipei")
        assert current_timezone(registry, alice) == "Asia/Taipei"
        assert "not in the catalog" in caplog.text

    def test_persist_failure_reported(self, alice: Identity):
        registry = TimezoneRegistry(_ReadOnlyStore())
        assert assign_timezone(registry, alice, "Asia/Tokyo") is False
        assert current_timezone(registry, alice) == "Asia/Tokyo"


class TestClear:
    def test_clear(self, alice: Identity, caplog: pytest.LogCaptureFixture):
        registry = TimezoneRegistry()
        assign_timezone(registry, alice, "Asia/Tokyo")
        with caplog.at_level(logging.INFO, logger="peertime.actions"):
            assert clear_timezone(registry, alice) is True
        assert current_timezone(registry, alice) is None
        assert "Removed timezone for alice" in caplog.text

    def test_clear_unset_is_noop(self, alice: Identity):
        registry = TimezoneRegistry()
        assert clear_timezone(registry, alice) is True
        assert current_timezone(registry, alice) is None
