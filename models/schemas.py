# models/schemas.py

"""
Pydantic schemas for the persisted form of registry records.

The stored layout uses the camelCase keys written by the original web form
(`studentId`), while Python code uses snake_case (`student_id`).
`CamelCaseBaseModel` maps between the two:

- Input: camelCase or snake_case keys are accepted.
- Output: call `model_dump(by_alias=True)` to write camelCase keys back.
"""

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator
from pydantic.alias_generators import to_camel

from core.validators import (
    validate_contact_input,
    validate_email_input,
    validate_name_input,
    validate_student_id_input,
)


class CamelCaseBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class StudentRecordSchema(CamelCaseBaseModel):
    """
    Schema check for one stored student record.

    Stored entries are re-validated against the same rules as form input, so a
    hand-edited or corrupted storage file cannot put malformed rows in the table.
    Field order matches the stored layout: name, studentId, email, contact.
    """

    name: StrictStr
    student_id: StrictStr
    email: StrictStr
    contact: StrictStr

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return validate_name_input(value)

    @field_validator("student_id")
    @classmethod
    def check_student_id(cls, value: str) -> str:
        return validate_student_id_input(value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return validate_email_input(value)

    @field_validator("contact")
    @classmethod
    def check_contact(cls, value: str) -> str:
        return validate_contact_input(value)
