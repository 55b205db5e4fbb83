"""Tests for dashboard metrics."""
import pytest

from exceptions import PermissionDeniedError
from metrics import MetricsCollector
from tests.conftest import DRIVER_A_ID, DRIVER_B_ID


def test_marketplace_metrics(db_session, lifecycle, shipper, driver_a, admin, load_attributes):
    delivered = lifecycle.post_load(shipper, load_attributes)
    hauling = lifecycle.post_load(shipper, load_attributes)
    lifecycle.post_load(shipper, load_attributes)
    withdrawn = lifecycle.post_load(shipper, load_attributes)

    lifecycle.accept_load(delivered.id, driver_a)
    lifecycle.complete_load(delivered.id, driver_a)
    lifecycle.accept_load(hauling.id, driver_a)
    lifecycle.cancel_load(withdrawn.id, shipper)

    metrics = MetricsCollector(db_session).get_marketplace_metrics(admin)

    assert metrics.to_dict() == {
        "total_users": 4,
        "total_drivers": 2,
        "total_shippers": 1,
        "active_loads": 2,
        "completed_trips": 1,
    }


def test_marketplace_metrics_admin_only(db_session, shipper):
    with pytest.raises(PermissionDeniedError):
        MetricsCollector(db_session).get_marketplace_metrics(shipper)


def test_driver_metrics(db_session, lifecycle, shipper, driver_a, load_attributes):
    first = lifecycle.post_load(shipper, load_attributes)
    second = lifecycle.post_load(shipper, load_attributes)
    lifecycle.accept_load(first.id, driver_a)
    lifecycle.complete_load(first.id, driver_a)
    lifecycle.accept_load(second.id, driver_a)

    collector = MetricsCollector(db_session)

    assert collector.get_driver_metrics(DRIVER_A_ID).to_dict() == {
        "active_loads": 1,
        "completed_trips": 1,
    }
    assert collector.get_driver_metrics(DRIVER_B_ID).to_dict() == {
        "active_loads": 0,
        "completed_trips": 0,
    }
