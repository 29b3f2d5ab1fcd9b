"""
Form Submission Cycle

Contact and order-tracking forms share one small state machine:

    IDLE -> SUBMITTING -> SUCCESS | ERROR

The submit button is disabled while submitting; the message line reflects
the outcome. There is no retry and no validation beyond required fields
(plus an email shape check on the contact form).
"""

import logging
import re
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence

from ..api.errors import APIError, AuthenticationExpired
from ..api.storefront import ContentService
from ..models import OrderTracking
from ..normalization import normalize_order_tracking, unwrap_item

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


class FormStatus(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class FormSubmission:
    """
    Generic single-request form.

    Subclasses set the labels/messages and override handle_response to keep
    whatever the response carries.
    """

    required_fields: Sequence[str] = ()
    idle_label = "Submit"
    submitting_label = "Submitting…"
    success_message = "Submitted successfully."
    error_message = "Something went wrong. Please try again."

    def __init__(self, submit: Callable[..., Any]):
        self._submit = submit
        self.status = FormStatus.IDLE
        self.error: Optional[str] = None
        self.redirect_to: Optional[str] = None

    @property
    def button_disabled(self) -> bool:
        return self.status == FormStatus.SUBMITTING

    @property
    def button_label(self) -> str:
        return self.submitting_label if self.status == FormStatus.SUBMITTING else self.idle_label

    @property
    def message(self) -> str:
        if self.status == FormStatus.SUCCESS:
            return self.success_message
        if self.status == FormStatus.ERROR:
            return self.error or self.error_message
        return ""

    def validate(self, fields: Dict[str, Any]) -> Optional[str]:
        """Return a problem description, or None when the fields are acceptable."""
        for name in self.required_fields:
            value = fields.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                return f"{name.replace('_', ' ').capitalize()} is required"
        return None

    def handle_response(self, body: Any) -> None:
        """Hook for subclasses; called with the response body on success."""

    def submit(self, **fields: Any) -> bool:
        """
        Validate and send the form.

        Returns:
            True when the request succeeded
        """
        if self.button_disabled:
            return False

        problem = self.validate(fields)
        if problem:
            self.status = FormStatus.ERROR
            self.error = problem
            return False

        self.status = FormStatus.SUBMITTING
        self.error = None
        try:
            body = self._submit(**fields)
            self.handle_response(body)
            self.status = FormStatus.SUCCESS
            return True
        except AuthenticationExpired as e:
            self.redirect_to = e.login_route
            self.status = FormStatus.ERROR
            return False
        except APIError as e:
            logger.error("Form submission failed: %s", e.message)
            self.status = FormStatus.ERROR
            return False
        finally:
            # Never leave the button disabled after the request ends
            if self.status == FormStatus.SUBMITTING:
                self.status = FormStatus.ERROR


class ContactForm(FormSubmission):
    """POST /api/v1/contact; any reachable response counts as sent."""

    required_fields = ("name", "email", "message")
    idle_label = "Send Message"
    submitting_label = "Sending…"
    success_message = "Message sent successfully."
    error_message = "Failed to send. Please try again."

    def __init__(self, content: ContentService):
        super().__init__(content.send_contact)

    def validate(self, fields: Dict[str, Any]) -> Optional[str]:
        problem = super().validate(fields)
        if problem:
            return problem
        if not _EMAIL_PATTERN.match(str(fields["email"]).strip()):
            return "Please enter a valid email address"
        return None


class OrderTrackingForm(FormSubmission):
    """GET /api/v1/orders/track?number=..."""

    required_fields = ("number",)
    idle_label = "Track"
    submitting_label = "Checking…"
    success_message = ""
    error_message = "Could not look up that order. Please try again."
    prompt = "Enter your order number to see updates."

    def __init__(self, content: ContentService):
        super().__init__(content.track_order)
        self.result: Optional[OrderTracking] = None
        self._number = ""

    def submit(self, **fields: Any) -> bool:
        self._number = str(fields.get("number") or "").strip()
        self.result = None
        return super().submit(**fields)

    def handle_response(self, body: Any) -> None:
        self.result = normalize_order_tracking(unwrap_item(body), self._number)

    @property
    def message(self) -> str:
        if self.status == FormStatus.SUCCESS and self.result is None:
            return "No order found for that number."
        if self.status in (FormStatus.IDLE, FormStatus.SUCCESS) and self.result is None:
            return self.prompt
        return super().message

    def track(self, number: str) -> Optional[OrderTracking]:
        """Submit an order number and return the tracking view (None if not found or failed)."""
        self.submit(number=number)
        return self.result
