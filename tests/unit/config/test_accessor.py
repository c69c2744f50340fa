"""
Tests for envcast.config.accessor.

Accessors must see the environment as it is at call time.
"""

import numpy as np
import pytest

from envcast import EnvAccessor, EnvVarError, resolve_accessor


class TestEnvAccessor:
    """Test re-evaluating accessors."""

    def test_callables(self, varname, env, monkeypatch):
        """Test that changes are seen without rebuilding the accessor."""
        key = varname()
        num_threads = resolve_accessor(key, 8)
        assert num_threads() == 8
        env(**{key: "16"})
        assert num_threads() == 16
        monkeypatch.delenv(key)
        assert num_threads() == 8

    def test_explicit_store_is_live(self):
        """Test that a mutable store is re-read on every call."""
        store = {}
        debug = resolve_accessor("DEBUG", False, environ=store)
        assert debug() is False
        store["DEBUG"] = "yes"
        assert debug() is True
        assert debug.get() is True

    def test_fixed_width(self):
        """Test an accessor with a width hint."""
        accessor = resolve_accessor("LEVEL", None, as_type="u8", environ={"LEVEL": "3"})
        value = accessor()
        assert type(value) is np.uint8
        assert value == 3

    def test_failures_propagate(self):
        """Test that malformed values raise on each call."""
        accessor = resolve_accessor("N", 1, environ={"N": "x"})
        with pytest.raises(EnvVarError):
            accessor()

    @pytest.mark.parametrize("default, as_type", [
        ([1, 2], None),
        ({"a": 1}, None),
        (None, list[int]),
    ])
    def test_collections_rejected(self, default, as_type):
        """Test that only scalar targets are allowed."""
        with pytest.raises(TypeError, match="scalar"):
            resolve_accessor("X", default, as_type=as_type)

    def test_unsupported_default_rejected_eagerly(self):
        """Test that the target is checked when the accessor is built."""
        with pytest.raises(TypeError):
            resolve_accessor("X", object())

    def test_repr(self):
        """Test the readable representation."""
        accessor = EnvAccessor("TIMEOUT", 10)
        assert repr(accessor) == "EnvAccessor('TIMEOUT', int, default=10)"
