"""Tests for volatility resolution.

**Feature: journal-chart**
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from journalchart.errors import InvalidArgumentError
from journalchart.market.volatility import (
    BUILTIN_VOLATILITY,
    DEFAULT_TABLE,
    DEFAULT_VOLATILITY,
    VolatilityTable,
    resolve_volatility,
)


class TestVolatilityResolution:
    """
    **Feature: journal-chart, Property 4: Stable Volatility Resolution**

    *For any* symbol, resolution returns the table coefficient for an exact
    match and the default coefficient otherwise, identically on every call.
    """

    def test_builtin_coefficients(self):
        assert resolve_volatility("MES") == 0.015
        assert resolve_volatility("MNQ") == 0.020
        assert resolve_volatility("CL") == 0.025
        assert resolve_volatility("ZN") == 0.006

    def test_unknown_symbol_uses_default(self):
        assert resolve_volatility("UNKNOWN_SYM") == DEFAULT_VOLATILITY == 0.015
        assert resolve_volatility("") == 0.015

    def test_lookup_is_case_sensitive(self):
        assert "mnq" not in DEFAULT_TABLE
        assert resolve_volatility("mnq") == DEFAULT_VOLATILITY

    @given(symbol=st.text(max_size=12))
    @settings(max_examples=100)
    def test_resolution_is_stable(self, symbol: str):
        first = resolve_volatility(symbol)
        assert resolve_volatility(symbol) == first
        assert first == BUILTIN_VOLATILITY.get(symbol, DEFAULT_VOLATILITY)

    def test_coefficients_in_expected_band(self):
        for symbol in DEFAULT_TABLE.symbols():
            assert 0.006 <= DEFAULT_TABLE.resolve(symbol) <= 0.025


class TestVolatilityTable:
    """Injected and overridden tables."""

    def test_injected_table(self):
        table = VolatilityTable({"BTC": 0.03}, default=0.01)

        assert resolve_volatility("BTC", table) == 0.03
        assert resolve_volatility("MES", table) == 0.01
        assert len(table) == 1

    def test_empty_table_falls_back_to_its_own_default(self):
        table = VolatilityTable({}, default=0.02)

        assert resolve_volatility("MES", table) == 0.02

    def test_overrides_return_new_table(self):
        table = DEFAULT_TABLE.with_overrides({"MES": 0.03, "BTC": 0.04})

        assert table.resolve("MES") == 0.03
        assert table.resolve("BTC") == 0.04
        assert table.resolve("CL") == 0.025
        assert DEFAULT_TABLE.resolve("MES") == 0.015
        assert "BTC" not in DEFAULT_TABLE

    def test_builtin_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            BUILTIN_VOLATILITY["MES"] = 1.0

    @pytest.mark.parametrize("value", [0, -0.01, 0.6, float("nan"), float("inf"), "fast", None])
    def test_rejects_bad_coefficients(self, value):
        with pytest.raises(InvalidArgumentError):
            VolatilityTable({"XYZ": value})

    def test_rejects_bad_default(self):
        with pytest.raises(InvalidArgumentError):
            VolatilityTable({}, default=0)

    def test_symbols_sorted(self):
        assert DEFAULT_TABLE.symbols() == sorted(BUILTIN_VOLATILITY)
