# core/validators.py

"""
Field validators for the student registration form.

Each validator strips surrounding whitespace, checks the value against its
format rule, and returns the stripped value. Failures raise `ValidationError`
carrying the exact message shown to the user.

`validate_student_fields()` applies the rules in the order the form reports
them, stopping at the first failure so only one message is shown at a time:

    1. all fields present
    2. name
    3. student ID
    4. contact number
    5. email address

Everything here is pure; must never import from models!
"""

import re

from core.exceptions import ValidationError

NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
STUDENT_ID_PATTERN = re.compile(r"^[0-9]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
CONTACT_PATTERN = re.compile(r"^[0-9]{10,}$")

REQUIRED_FIELDS_MESSAGE = "All fields are required. Empty rows are not allowed."
NAME_MESSAGE = "Student Name must contain only letters and spaces."
STUDENT_ID_MESSAGE = "Student ID must contain only numbers."
CONTACT_MESSAGE = "Contact Number must be at least 10 digits and numbers only."
EMAIL_MESSAGE = "Please enter a valid email address."


def _require(pattern: re.Pattern[str], value: str, message: str) -> str:
    value = value.strip()
    if not pattern.fullmatch(value):
        raise ValidationError(message)
    return value


def validate_required_fields(*fields: str) -> None:
    if any(not field.strip() for field in fields):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)


def validate_name_input(name: str) -> str:
    return _require(NAME_PATTERN, name, NAME_MESSAGE)


def validate_student_id_input(student_id: str) -> str:
    return _require(STUDENT_ID_PATTERN, student_id, STUDENT_ID_MESSAGE)


def validate_contact_input(contact: str) -> str:
    return _require(CONTACT_PATTERN, contact, CONTACT_MESSAGE)


def validate_email_input(email: str) -> str:
    """
    Validates a student email address.

    Ensures the email:
        - Has no whitespace
        - Contains exactly one '@' with non-empty text on both sides
        - Contains at least one '.' after the '@' with text following it

    The address is not lowercased; it is stored as entered, minus surrounding
    whitespace.

    Args:
        email: The input email string to validate.

    Returns:
        The stripped email address.

    Raises:
        ValidationError: If the email does not conform to the expected format.
    """
    return _require(EMAIL_PATTERN, email, EMAIL_MESSAGE)


def validate_student_fields(
    name: str, student_id: str, email: str, contact: str
) -> tuple[str, str, str, str]:
    """
    Validates all four form fields in display order.

    Args:
        name (str): Raw student name.
        student_id (str): Raw student ID.
        email (str): Raw email address.
        contact (str): Raw contact number.

    Returns:
        The stripped `(name, student_id, email, contact)` tuple.

    Raises:
        ValidationError: On the first failing rule.

    Notes:
        - Contact is checked before email, matching the order in which the form reports errors.
    """
    validate_required_fields(name, student_id, email, contact)

    name = validate_name_input(name)
    student_id = validate_student_id_input(student_id)
    contact = validate_contact_input(contact)
    email = validate_email_input(email)

    return name, student_id, email, contact
