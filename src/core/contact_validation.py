"""
Validation pass for the contact form.

Each field validator appends at most one human-readable message to a shared
list. A validation pass runs every field validator in a fixed order and never
stops early, so the user sees all problems at once.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

from .predicates import is_not_empty, is_valid_email

# Error messages shown to the user
MSG_NAME_MISSING = "Please enter a name"
MSG_EMAIL_MISSING = "Please enter a valid email address"
MSG_EMAIL_INVALID = "Invalid email address"
MSG_MOBILE_MISSING = "Please enter a valid mobile number"
MSG_MESSAGE_MISSING = "Please enter your message"

ERROR_HEADING = "There were errors while processing this contact form. Please correct it and submit again."


class ContactField(Enum):
    """Contact form field roles with the object name used to locate each widget."""

    FIRST_NAME = ("fname", "First name")
    LAST_NAME = ("lname", "Last name")
    EMAIL = ("email", "Email")
    MOBILE = ("mobile", "Mobile")
    MESSAGE = ("msg", "Message")

    def __init__(self, object_name: str, label: str) -> None:
        self.object_name = object_name
        self.label = label


@dataclass(frozen=True)
class ContactFormData:
    """Raw field values read from the form at submit time."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    mobile: str = ""
    message: str = ""

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> ContactFormData:
        """
        Build form data from a mapping keyed by field object name.

        Missing keys are treated as empty fields.
        """
        return cls(
            first_name=values.get(ContactField.FIRST_NAME.object_name, ""),
            last_name=values.get(ContactField.LAST_NAME.object_name, ""),
            email=values.get(ContactField.EMAIL.object_name, ""),
            mobile=values.get(ContactField.MOBILE.object_name, ""),
            message=values.get(ContactField.MESSAGE.object_name, ""),
        )

    def to_mapping(self) -> dict[str, str]:
        """Return the values keyed by field object name."""
        return {
            ContactField.FIRST_NAME.object_name: self.first_name,
            ContactField.LAST_NAME.object_name: self.last_name,
            ContactField.EMAIL.object_name: self.email,
            ContactField.MOBILE.object_name: self.mobile,
            ContactField.MESSAGE.object_name: self.message,
        }


def validate_name(first_name: str, last_name: str, messages: list[str]) -> None:
    """Append an error if the first name is blank. The last name is optional."""
    if not is_not_empty(first_name):
        messages.append(MSG_NAME_MISSING)


def validate_email(email: str, messages: list[str]) -> None:
    """Append an error if the email is blank or does not match the pattern."""
    if not is_not_empty(email):
        messages.append(MSG_EMAIL_MISSING)
    elif not is_valid_email(email):
        messages.append(MSG_EMAIL_INVALID)


def validate_mobile(mobile: str, messages: list[str]) -> None:
    if not is_not_empty(mobile):
        messages.append(MSG_MOBILE_MISSING)


def validate_message(message: str, messages: list[str]) -> None:
    if not is_not_empty(message):
        messages.append(MSG_MESSAGE_MISSING)


def validate_fields(data: ContactFormData) -> list[tuple[ContactField, str]]:
    """
    Run one validation pass and report which field produced each message.

    Args:
        data: Field values read from the form

    Returns:
        (field, message) pairs in field order (name, email, mobile, message)
    """
    checks: list[tuple[ContactField, Callable[[list[str]], None]]] = [
        (ContactField.FIRST_NAME, lambda messages: validate_name(data.first_name, data.last_name, messages)),
        (ContactField.EMAIL, lambda messages: validate_email(data.email, messages)),
        (ContactField.MOBILE, lambda messages: validate_mobile(data.mobile, messages)),
        (ContactField.MESSAGE, lambda messages: validate_message(data.message, messages)),
    ]

    errors: list[tuple[ContactField, str]] = []
    for field, check in checks:
        messages: list[str] = []
        check(messages)
        errors.extend((field, message) for message in messages)
    return errors


def validate_contact_form(data: ContactFormData) -> list[str]:
    """
    Run one validation pass over the contact form.

    Args:
        data: Field values read from the form

    Returns:
        Error messages in field order (name, email, mobile, message);
        empty if the form is valid
    """
    return [message for _field, message in validate_fields(data)]


def render_error_html(messages: list[str]) -> str:
    """
    Render error messages as a bold heading followed by a bulleted list.

    Returns:
        The HTML fragment, or an empty string if there are no messages
    """
    if not messages:
        return ""

    parts = [f"<p><strong>{html.escape(ERROR_HEADING)}</strong></p>", "<ul>"]
    parts.extend(f"<li>{html.escape(message)}</li>" for message in messages)
    parts.append("</ul>")
    return "".join(parts)
