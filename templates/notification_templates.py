"""Notification texts for load lifecycle events."""

from typing import Any, Dict


class NotificationTemplate:
    """Base class for notification templates."""

    def __init__(self, data: Dict[str, Any]):
        self.data = data

    def route(self) -> str:
        origin = self.data.get("origin", "")
        destination = self.data.get("destination", "")
        return f"{origin} → {destination}"

    def render_title(self) -> str:
        """Render notification title."""
        raise NotImplementedError

    def render_body(self) -> str:
        """Render notification body."""
        raise NotImplementedError


class LoadAcceptedTemplate(NotificationTemplate):
    """Sent to the shipper when a driver accepts a load."""

    def render_title(self) -> str:
        return "Load accepted"

    def render_body(self) -> str:
        driver_name = self.data.get("driver_name") or "A driver"
        driver_phone = self.data.get("driver_phone")
        contact = f" ({driver_phone})" if driver_phone else ""
        return f"{driver_name}{contact} accepted your load {self.route()}."


class LoadCompletedTemplate(NotificationTemplate):
    """Sent to the shipper when the driver delivers."""

    def render_title(self) -> str:
        return "Load delivered"

    def render_body(self) -> str:
        driver_name = self.data.get("driver_name") or "The driver"
        completed_at = self.data.get("completed_at", "")
        return f"{driver_name} completed delivery of {self.route()} at {completed_at}."


class AssignmentReleasedTemplate(NotificationTemplate):
    """Sent when an in-progress assignment is cancelled."""

    def render_title(self) -> str:
        return "Assignment released"

    def render_body(self) -> str:
        released_by = self.data.get("released_by", "")
        return (
            f"The assignment for load {self.route()} was released by the {released_by}. "
            "The load is available again."
        )


class LoadCancelledTemplate(NotificationTemplate):
    """Sent to the shipper when an admin cancels a load."""

    def render_title(self) -> str:
        return "Load cancelled"

    def render_body(self) -> str:
        return f"Your load {self.route()} was cancelled by an administrator."


class BidReceivedTemplate(NotificationTemplate):
    """Sent to the shipper when a driver bids."""

    def render_title(self) -> str:
        return "New bid"

    def render_body(self) -> str:
        driver_name = self.data.get("driver_name") or "A driver"
        price = self.data.get("price", 0.0)
        return f"{driver_name} offered {price:,.2f} for your load {self.route()}."


def get_notification_template(template_type: str, data: Dict[str, Any]) -> NotificationTemplate:
    """
    Get notification template by type.

    Args:
        template_type: accepted, completed, released, cancelled or bid
        data: Template data dictionary

    Returns:
        NotificationTemplate instance

    Raises:
        ValueError: If template type is unknown
    """
    templates = {
        "accepted": LoadAcceptedTemplate,
        "completed": LoadCompletedTemplate,
        "released": AssignmentReleasedTemplate,
        "cancelled": LoadCancelledTemplate,
        "bid": BidReceivedTemplate,
    }

    template_class = templates.get(template_type.lower())

    if not template_class:
        raise ValueError(f"Unknown template type: {template_type}")

    return template_class(data)
