"""Tests for warehouse and shipping method tables."""

from shipwire.core.warehouses import SHIPPING_METHODS, code_of, label_of


def test_code_of_passes_through_known_and_unknown_codes():
    assert code_of("01") == "01"
    assert code_of("07") == "07"


def test_code_of_defaults_to_00():
    assert code_of(None) == "00"
    assert code_of("") == "00"


def test_label_of_known_codes():
    assert label_of("01") == "01 - Shipwire Chicago"
    assert label_of("02") == "02 - Shipwire Los Angeles"


def test_label_of_unknown_code_is_none():
    assert label_of("07") is None
    assert label_of(None) is None


def test_shipping_methods_order():
    assert list(SHIPPING_METHODS.items()) == [
        ("1 Day Service", "1D"),
        ("2 Day Service", "2D"),
        ("Ground Service", "GD"),
        ("Freight Service", "FT"),
    ]
