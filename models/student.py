# models/student.py

"""
Represents one student row in the registry.

Stores the four form fields (name, student ID, email, contact number) along with
a synthetic `id` used to address the row across edits and deletions. The `id`
lives only for the session; it is never written to storage.

Includes functionality for:
- Building a validated record from raw form input
- Validating each field on assignment via property setters
- Serializing to and from the stored camelCase layout
"""

from __future__ import annotations

from typing import Any

from core.utils import generate_record_id
from core.validators import (
    validate_contact_input,
    validate_email_input,
    validate_name_input,
    validate_student_fields,
    validate_student_id_input,
)
from models.schemas import StudentRecordSchema


class StudentRecord:

    def __init__(
        self,
        name: str,
        student_id: str,
        email: str,
        contact: str,
        id: str | None = None,
    ):
        self._id: str = id or generate_record_id()
        # fields use property setters for validation
        self.name = name
        self.student_id = student_id
        self.email = email
        self.contact = contact

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = validate_name_input(name)

    @property
    def student_id(self) -> str:
        return self._student_id

    @student_id.setter
    def student_id(self, student_id: str) -> None:
        self._student_id = validate_student_id_input(student_id)

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, email: str) -> None:
        self._email = validate_email_input(email)

    @property
    def contact(self) -> str:
        return self._contact

    @contact.setter
    def contact(self, contact: str) -> None:
        self._contact = validate_contact_input(contact)

    # === public classmethods ===

    @classmethod
    def from_form(
        cls,
        name: str,
        student_id: str,
        email: str,
        contact: str,
        id: str | None = None,
    ) -> StudentRecord:
        """
        Builds a `StudentRecord` from raw form input.

        Args:
            name (str): Raw student name.
            student_id (str): Raw student ID.
            email (str): Raw email address.
            contact (str): Raw contact number.
            id (str | None): Optional synthetic id to reuse, e.g. when replacing a row being edited.

        Returns:
            A new `StudentRecord` with stripped field values.

        Raises:
            ValidationError: On the first failing rule, checked in form order.
        """
        name, student_id, email, contact = validate_student_fields(
            name, student_id, email, contact
        )

        return cls(name, student_id, email, contact, id=id)

    # === persistence and import ===

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self._name,
            "studentId": self._student_id,
            "email": self._email,
            "contact": self._contact,
        }

    @classmethod
    def from_dict(cls, data: Any) -> StudentRecord:
        """
        Deserializes a stored record.

        Raises:
            pydantic.ValidationError: If the entry is not an object, misses a field, or fails a format rule.
        """
        schema = StudentRecordSchema.model_validate(data)

        return cls(
            name=schema.name,
            student_id=schema.student_id,
            email=schema.email,
            contact=schema.contact,
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        # rows compare by content; the synthetic id is session-scoped
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"StudentRecord({self._name}, {self._student_id}, {self._email}, {self._contact})"

    def __str__(self) -> str:
        return f"STUDENT: {self._name} - (ID: {self._student_id})"
