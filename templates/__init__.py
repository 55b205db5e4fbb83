"""Notification templates."""
from templates.notification_templates import (
    NotificationTemplate,
    LoadAcceptedTemplate,
    LoadCompletedTemplate,
    AssignmentReleasedTemplate,
    LoadCancelledTemplate,
    BidReceivedTemplate,
    get_notification_template,
)

__all__ = [
    "NotificationTemplate",
    "LoadAcceptedTemplate",
    "LoadCompletedTemplate",
    "AssignmentReleasedTemplate",
    "LoadCancelledTemplate",
    "BidReceivedTemplate",
    "get_notification_template",
]
