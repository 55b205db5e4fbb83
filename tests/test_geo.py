"""Tests for geographic helpers."""
import pytest

from exceptions import ValidationError
from utils.geo import haversine_km, lookup_city, validate_coordinates


def test_haversine_riyadh_to_jeddah():
    riyadh = lookup_city("Riyadh")
    jeddah = lookup_city("Jeddah")

    assert 840 <= haversine_km(*riyadh, *jeddah) <= 850


def test_haversine_is_symmetric_and_zero_for_same_point():
    assert haversine_km(24.0, 46.0, 21.0, 39.0) == haversine_km(21.0, 39.0, 24.0, 46.0)
    assert haversine_km(24.0, 46.0, 24.0, 46.0) == 0


def test_haversine_returns_whole_kilometres():
    assert isinstance(haversine_km(24.0, 46.0, 24.0, 47.0), int)


@pytest.mark.parametrize("name", ["riyadh", "Riyadh", " RIYADH "])
def test_lookup_city_case_insensitive(name):
    assert lookup_city(name) == (24.7136, 46.6753)


def test_lookup_city_by_display_name():
    assert lookup_city("Al Bahah") == (20.0129, 41.4677)


def test_lookup_unknown_city():
    assert lookup_city("Atlantis") is None
    assert lookup_city(None) is None


def test_validate_coordinates_absent():
    assert validate_coordinates(None, None) is None
    assert validate_coordinates("", "") is None


def test_validate_coordinates_parses_strings():
    assert validate_coordinates("24.5", "46.1") == (24.5, 46.1)


@pytest.mark.parametrize("lat, lng", [(24.0, None), (91.0, 46.0), (24.0, 181.0), ("north", 46.0)])
def test_validate_coordinates_rejects(lat, lng):
    with pytest.raises(ValidationError):
        validate_coordinates(lat, lng)
