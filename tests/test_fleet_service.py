"""Tests for trucks and sub-drivers."""
import pytest

from exceptions import (
    PermissionDeniedError,
    SubDriverNotFoundError,
    TruckNotFoundError,
    ValidationError,
)
from services import FleetService
from tests.conftest import DRIVER_A_ID
from utils.date_helpers import today_in_timezone


@pytest.fixture
def fleet(db_session, users):
    return FleetService(db_session)


@pytest.fixture
def truck_attributes():
    return {
        "plate_number": "abc 1234",
        "brand": "Volvo",
        "model_year": "2019",
        "truck_type": "lorry",
        "capacity": "12.5",
    }


def test_add_truck(fleet, driver_a, truck_attributes):
    truck = fleet.add_truck(driver_a, truck_attributes)

    assert truck.driver_id == DRIVER_A_ID
    assert truck.plate_number == "ABC 1234"
    assert truck.model_year == 2019
    assert truck.truck_type == "lorry"
    assert truck.capacity == 12.5


def test_add_truck_defaults_type(fleet, driver_a):
    truck = fleet.add_truck(driver_a, {"plate_number": "XYZ 1"})

    assert truck.truck_type == "trella"
    assert truck.capacity is None
    assert truck.model_year is None


@pytest.mark.parametrize("override", [
    {"plate_number": ""},
    {"truck_type": "hovercraft"},
    {"model_year": "1900"},
    {"model_year": "old"},
    {"capacity": "heavy"},
])
def test_add_truck_rejects_invalid(fleet, driver_a, truck_attributes, override):
    truck_attributes.update(override)

    with pytest.raises(ValidationError):
        fleet.add_truck(driver_a, truck_attributes)


def test_model_year_next_year_allowed(fleet, driver_a, truck_attributes):
    truck_attributes["model_year"] = today_in_timezone().year + 1

    assert fleet.add_truck(driver_a, truck_attributes).model_year == today_in_timezone().year + 1


def test_shipper_cannot_add_truck(fleet, shipper, truck_attributes):
    with pytest.raises(PermissionDeniedError):
        fleet.add_truck(shipper, truck_attributes)


def test_trucks_are_scoped_to_driver(fleet, driver_a, driver_b, truck_attributes):
    truck = fleet.add_truck(driver_a, truck_attributes)

    assert [t.id for t in fleet.list_trucks(driver_a)] == [truck.id]
    assert fleet.list_trucks(driver_b) == []

    with pytest.raises(PermissionDeniedError):
        fleet.delete_truck(driver_b, truck.id)


def test_delete_truck(fleet, driver_a, admin, truck_attributes):
    mine_id = fleet.add_truck(driver_a, truck_attributes).id
    other_id = fleet.add_truck(driver_a, {"plate_number": "XYZ 1"}).id

    fleet.delete_truck(driver_a, mine_id)
    fleet.delete_truck(admin, other_id)

    assert fleet.list_trucks(driver_a) == []
    with pytest.raises(TruckNotFoundError):
        fleet.delete_truck(driver_a, mine_id)


def test_sub_drivers(fleet, driver_a, driver_b):
    sub_driver = fleet.add_sub_driver(
        driver_a, {"full_name": " Faisal ", "phone": "055-123-4567", "license_number": "L-77"}
    )

    assert sub_driver.full_name == "Faisal"
    assert sub_driver.phone == "0551234567"
    assert [s.id for s in fleet.list_sub_drivers(driver_a)] == [sub_driver.id]

    with pytest.raises(PermissionDeniedError):
        fleet.delete_sub_driver(driver_b, sub_driver.id)

    sub_driver_id = sub_driver.id
    fleet.delete_sub_driver(driver_a, sub_driver_id)
    assert fleet.list_sub_drivers(driver_a) == []

    with pytest.raises(SubDriverNotFoundError):
        fleet.delete_sub_driver(driver_a, sub_driver_id)


def test_sub_driver_requires_valid_phone(fleet, driver_a):
    with pytest.raises(ValidationError):
        fleet.add_sub_driver(driver_a, {"full_name": "Faisal", "phone": "12345"})
