"""Tests for conversion into ILS."""
import pytest

from currency import EXCHANGE_RATES, is_supported_currency, supported_currencies, to_ils


def test_ils_stays_the_same():
    assert to_ils(100, "ILS") == 100


def test_missing_currency_stays_the_same():
    assert to_ils(100, None) == 100
    assert to_ils(100) == 100


def test_unknown_currency_passes_through():
    """Unknown codes are returned unconverted, no error."""
    assert to_ils(100, "XYZ") == 100
    assert not is_supported_currency("XYZ")


def test_usd_conversion():
    assert to_ils(100, "USD") == pytest.approx(366.3, abs=1)
    assert to_ils(100, "USD") == 366.3004


def test_eur_conversion():
    assert to_ils(100, "EUR") == pytest.approx(396.8, abs=1)


def test_zero_rate_passes_through(monkeypatch):
    """A zero rate is treated like an unknown code."""
    monkeypatch.setitem(EXCHANGE_RATES, "ZZZ", 0)
    assert to_ils(50, "ZZZ") == 50
    assert not is_supported_currency("ZZZ")


def test_supported_currencies_is_a_copy():
    table = supported_currencies()
    table["USD"] = 1
    assert EXCHANGE_RATES["USD"] == 0.273
    assert is_supported_currency("JPY")
