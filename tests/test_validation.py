"""Tests for input validation."""
from datetime import datetime, timedelta

import pytest

from config import get_settings
from exceptions import ValidationError
from utils.date_helpers import parse_date, today_in_timezone
from utils.validation import (
    parse_amount,
    validate_email,
    validate_load_attributes,
    validate_phone_number,
    validate_pickup_date,
    validate_positive_amount,
)


@pytest.fixture
def permissive(monkeypatch):
    monkeypatch.setattr(get_settings(), "permissive_numeric_input", True)


@pytest.mark.parametrize("phone", ["0512345678", "051 234 5678", "051-234-5678"])
def test_phone_number_accepted(phone):
    assert validate_phone_number(phone) == "0512345678"


@pytest.mark.parametrize("phone", ["1234567890", "051234567", "05123456789", "+966512345678", ""])
def test_phone_number_rejected(phone):
    with pytest.raises(ValidationError):
        validate_phone_number(phone)


def test_email_normalized():
    assert validate_email("  Driver@Example.COM ") == "driver@example.com"


def test_email_rejected():
    with pytest.raises(ValidationError):
        validate_email("not-an-email")


def test_pickup_date_today_is_allowed():
    today = today_in_timezone()

    assert validate_pickup_date(today.isoformat()) == today


def test_pickup_date_in_past_rejected():
    yesterday = today_in_timezone() - timedelta(days=1)

    with pytest.raises(ValidationError, match="in the past"):
        validate_pickup_date(yesterday)


def test_pickup_date_malformed():
    with pytest.raises(ValidationError):
        validate_pickup_date("next tuesday")


def test_parse_date_accepts_datetime():
    assert parse_date(datetime(2030, 1, 2, 15, 30)).isoformat() == "2030-01-02"


@pytest.mark.parametrize("value, expected", [(5, 5.0), ("12.5", 12.5), (" 7 ", 7.0)])
def test_parse_amount_strict(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize("value", ["abc", "-1", 0, "", None, True, "nan", "inf"])
def test_parse_amount_strict_rejects(value):
    with pytest.raises(ValidationError):
        parse_amount(value, "Price")


@pytest.mark.parametrize("value", ["abc", "-1", "", None, "nan", "inf"])
def test_parse_amount_permissive_coerces_to_zero(permissive, value):
    assert parse_amount(value, "Price") == 0.0


def test_parse_amount_permissive_keeps_valid_values(permissive):
    assert parse_amount("250", "Price") == 250.0


def test_positive_amount_allow_zero():
    assert validate_positive_amount(0, "Distance", allow_zero=True) == 0.0

    with pytest.raises(ValidationError):
        validate_positive_amount(-1, "Distance", allow_zero=True)


def test_load_attributes_defaults(load_attributes):
    del load_attributes["body_type"]

    fields = validate_load_attributes(load_attributes)

    assert fields["body_type"] == "flatbed"
    assert fields["load_type"] == "general"
    assert fields["package_type"] is None
    assert fields["receiver_address"] is None


def test_load_attributes_strip_strings(load_attributes):
    load_attributes.update(origin="  Riyadh ", description="   ", receiver_name=" Khalid ")

    fields = validate_load_attributes(load_attributes)

    assert fields["origin"] == "Riyadh"
    assert fields["description"] is None
    assert fields["receiver_name"] == "Khalid"


def test_load_attributes_fill_known_city_coordinates(load_attributes):
    load_attributes.update(origin="Dammam", destination="khobar")

    fields = validate_load_attributes(load_attributes)

    assert fields["origin_lat"] == pytest.approx(26.4207)
    assert fields["dest_lng"] == pytest.approx(50.1971)
    assert 20 <= fields["distance"] <= 30


def test_load_attributes_keep_manual_distance_for_unknown_cities(load_attributes):
    load_attributes.update(origin="Farm 12", destination="Depot 4", distance="75")

    fields = validate_load_attributes(load_attributes)

    assert fields["distance"] == 75.0
    assert fields["origin_lat"] is None


def test_load_attributes_reject_half_coordinates(load_attributes):
    load_attributes["origin_lat"] = 24.5

    with pytest.raises(ValidationError, match="latitude and longitude"):
        validate_load_attributes(load_attributes)


def test_load_attributes_reject_unknown_body_type(load_attributes):
    load_attributes["body_type"] = "spaceship"

    with pytest.raises(ValidationError, match="body type"):
        validate_load_attributes(load_attributes)


def test_load_attributes_ignore_unknown_fields(load_attributes):
    load_attributes["status"] = "completed"
    load_attributes["driver_id"] = "driver-000a"

    fields = validate_load_attributes(load_attributes)

    assert "status" not in fields
    assert "driver_id" not in fields


def test_parse_date_accepts_iso_timestamp():
    assert parse_date("2030-01-02T08:15:00").isoformat() == "2030-01-02"


@pytest.mark.parametrize("value", ["2030-01-02garbage", "2030-01-02 extra", "02/01/2030"])
def test_parse_date_rejects_trailing_text(value):
    with pytest.raises(ValidationError):
        parse_date(value, "Pickup date")
