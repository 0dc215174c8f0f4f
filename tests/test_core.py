"""
Tests for shared core helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest
from combinators import LCR

import pizzeria
from pizzeria import _types as T

from conftest import NOW


class TestExports:
    def test_core_exports_only_own_helpers(self):
        assert set(T.__all__) == {"LCR", "ID", "Clock", "utcnow", "require_aware", "freeze"}
        assert T.LCR is LCR

    def test_root_package_reexports_core(self):
        assert pizzeria.LCR is LCR
        assert pizzeria.utcnow is T.utcnow


class TestTime:
    def test_utcnow_is_aware(self):
        assert T.utcnow().utcoffset() == timedelta(0)

    def test_require_aware(self):
        T.require_aware(NOW, "at")
        T.require_aware(NOW.astimezone(timezone(timedelta(hours=-5))), "at")
        with pytest.raises(ValueError, match="at must be timezone-aware"):
            T.require_aware(datetime(2025, 6, 14, 18, 30), "at")


class TestFreeze:
    def test_freeze_copies_and_blocks_writes(self):
        source = {"basil": 1}
        frozen = T.freeze(source)
        source["basil"] = 2

        assert frozen == {"basil": 1}
        with pytest.raises(TypeError):
            frozen["basil"] = 3
