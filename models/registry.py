# models/registry.py

"""
The StudentRegistry is the controller behind the registration form and the "source of truth" for the table.

It owns one `RecordStore` (the rows and their persistence) and one `EditorState` (whether the form
creates a new row or updates an existing one), and exposes the handful of operations a presentation
layer needs: submit the form, request an edit, request a delete, and load the stored rows.

Every operation returns a `Response` and never raises. Validation failures are also kept as the
current `error_message` so the form can show a single message at a time. After every operation that
changes the rows, registered listeners are called so the presentation layer can re-render.

If the backing store fails on write, the in-memory change is kept and the failure is reported; the
next load will use whatever the store still holds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from core.exceptions import PersistenceError, ValidationError
from core.response import ErrorCode, Response
from core.storage import KeyValueStore
from models.editor_state import EditorMode, EditorState
from models.record_store import STORAGE_KEY, RecordStore
from models.student import StudentRecord

logger = logging.getLogger(__name__)

Listener = Callable[["StudentRegistry"], None]

EMPTY_FORM = {"name": "", "student_id": "", "email": "", "contact": ""}


class StudentRegistry:

    def __init__(
        self,
        backing_store: KeyValueStore,
        key: str = STORAGE_KEY,
        enforce_unique_student_id: bool = False,
    ):
        self._store = RecordStore(backing_store, key)
        self._editor = EditorState()
        self._error_message: str | None = None
        self._listeners: list[Listener] = []
        self._enforce_unique_student_id = enforce_unique_student_id

    # === properties ===

    # --- core data structures ---

    @property
    def records(self) -> list[StudentRecord]:
        return self._store.records

    @property
    def editor_state(self) -> EditorState:
        return self._editor

    # --- form state ---

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def mode(self) -> EditorMode:
        return self._editor.mode

    @property
    def editing_index(self) -> int | None:
        """The current table position of the row being edited, or None while creating."""
        if self._editor.record_id is None:
            return None

        try:
            return self._store.index_of(self._editor.record_id)
        except KeyError:
            return None

    @property
    def form_values(self) -> dict[str, str]:
        """Pre-fill values for the form: the edited row's fields, or blanks while creating."""
        if self._editor.record_id is None:
            return dict(EMPTY_FORM)

        record = self._store.find_by_id(self._editor.record_id)

        if record is None:
            return dict(EMPTY_FORM)

        return {
            "name": record.name,
            "student_id": record.student_id,
            "email": record.email,
            "contact": record.contact,
        }

    # === listeners ===

    def add_listener(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Listener %r failed during data-changed notification", listener)

    # === persistence and import ===

    def request_initial_load(self) -> Response:
        """
        Loads the stored rows into memory and resets the form.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the stored rows were read, even if some were dropped or none exist.
                    - False if the backing store cannot be read or holds undecodable data.
                - detail (str | None):
                    - On success, a summary of loaded and dropped rows.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.PERSISTENCE_FAILED` if the backing store cannot be read.
                    - `ErrorCode.INVALID_INPUT` if the stored value is not a JSON list.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[StudentRecord]): The loaded rows.
                        - "rejected" (list[Any]): Stored entries that failed validation and were dropped.
                    - On failure:
                        - None

        Notes:
            - This method replaces the in-memory rows and resets the editor to `Creating`.
            - On failure the in-memory rows are left untouched.
            - Listeners are notified on success.
        """
        try:
            rejected = self._store.load()

        except PersistenceError as e:
            return Response.fail(
                detail=f"Failed to read stored records: {e}",
                error=ErrorCode.PERSISTENCE_FAILED,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Stored records could not be decoded: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        self._editor.reset()
        self._error_message = None
        self._notify()

        detail = f"Loaded {len(self._store)} student record(s)."
        if rejected:
            detail += f" Dropped {len(rejected)} malformed record(s)."

        return Response.succeed(
            detail=detail,
            data={
                "records": self._store.records,
                "rejected": rejected,
            },
        )

    # === data manipulators ===

    def submit_form(
        self, name: str, student_id: str, email: str, contact: str
    ) -> Response:
        """
        Validates the form fields and either adds a new row or updates the row being edited.

        Args:
            name (str): Raw student name.
            student_id (str): Raw student ID.
            email (str): Raw email address.
            contact (str): Raw contact number.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the row was added or updated and persisted.
                    - False if validation fails, the edited row no longer exists, or persisting fails.
                - detail (str | None):
                    - On success, a simple confirmation message.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if a field fails its rule or the student ID is taken.
                    - `ErrorCode.NOT_FOUND` if the edited row has disappeared.
                    - `ErrorCode.PERSISTENCE_FAILED` if the backing store rejects the write.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the edited row cannot be found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success, or on persistence failure:
                        - "record" (StudentRecord): The added or updated row.
                        - "index" (int): The row's position in the table.
                    - On other failures:
                        - None

        Notes:
            - On validation failure nothing is mutated and the editor state is unchanged.
            - An update keeps the row's synthetic id and position, then resets the editor to `Creating`.
            - If persisting fails the in-memory change is kept and listeners are still notified.
        """
        self._error_message = None
        editing_id = self._editor.record_id

        try:
            record = StudentRecord.from_form(
                name, student_id, email, contact, id=editing_id
            )

            if self._enforce_unique_student_id:
                self.require_unique_student_id(record.student_id, exclude_id=editing_id)

            if editing_id is None:
                self._store.append(record)
                index = len(self._store) - 1
                detail = "Student successfully added to the registry."
            else:
                index = self._store.index_of(editing_id)
                self._store.replace_at(index, record)
                self._editor.reset()
                detail = "Student successfully updated."

        except ValidationError as e:
            self._error_message = str(e)
            return Response.fail(
                detail=str(e),
                error=ErrorCode.VALIDATION_FAILED,
            )

        except KeyError:
            self._editor.reset()
            self._error_message = "The student being edited no longer exists."
            return Response.fail(
                detail=self._error_message,
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        return self._persist_and_notify(
            detail,
            data={
                "record": record,
                "index": index,
            },
        )

    def request_edit(self, index: int) -> Response:
        """
        Selects the row at `index` for editing.

        Args:
            index (int): The row's position in the table.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the row exists and the editor now targets it.
                    - False if no row exists at `index`.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if `index` is out of bounds.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no row exists at `index`
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The selected row.
                        - "form_values" (dict[str, str]): The field values to pre-fill.
                    - On failure:
                        - None

        Notes:
            - This method does not mutate the rows, so listeners are not notified.
            - Requesting an edit while already editing simply switches the target.
        """
        try:
            record = self._store[index]

        except IndexError as e:
            self._error_message = str(e)
            return Response.fail(
                detail=str(e),
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        self._editor.start_editing(record.id)
        self._error_message = None

        return Response.succeed(
            data={
                "record": record,
                "form_values": self.form_values,
            },
        )

    def cancel_edit(self) -> Response:
        if self._editor.is_creating:
            return Response.succeed(detail="No edit in progress. No changes made.")

        self._editor.reset()
        self._error_message = None

        return Response.succeed(detail="Edit cancelled.")

    def request_delete(self, index: int) -> Response:
        """
        Removes the row at `index` and persists the remaining rows.

        Args:
            index (int): The row's position in the table.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the row was removed and the change persisted.
                    - False if no row exists at `index` or persisting fails.
                - detail (str | None):
                    - On success, a simple confirmation message.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if `index` is out of bounds.
                    - `ErrorCode.PERSISTENCE_FAILED` if the backing store rejects the write.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no row exists at `index`
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success, or on persistence failure:
                        - "record" (StudentRecord): The removed row.
                    - On other failures:
                        - None

        Notes:
            - Later rows shift down by one position.
            - If the removed row was being edited, the editor is reset to `Creating`. Otherwise the editor keeps its target.
        """
        try:
            record = self._store.delete_at(index)

        except IndexError as e:
            self._error_message = str(e)
            return Response.fail(
                detail=str(e),
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        if self._editor.is_editing_record(record.id):
            self._editor.reset()

        self._error_message = None

        return self._persist_and_notify(
            "Student successfully removed from the registry.",
            data={
                "record": record,
            },
        )

    # === data validators ===

    def require_unique_student_id(
        self, student_id: str, exclude_id: str | None = None
    ) -> None:
        """
        Validates that no other row shares the given student ID.

        Args:
            student_id (str): The student ID to check.
            exclude_id (str | None): Synthetic id of a row to ignore, usually the row being edited.

        Raises:
            ValidationError: If another row already uses the student ID.
        """
        if any(r.id != exclude_id for r in self._store.find_by_student_id(student_id)):
            raise ValidationError(
                f"A student with the ID '{student_id.strip()}' already exists."
            )

    # === helper methods ===

    def _persist_and_notify(self, detail: str, data: dict) -> Response:
        try:
            self._store.persist()

        except PersistenceError as e:
            logger.error("Failed to persist student records: %s", e)
            self._error_message = f"Changes could not be saved: {e}"
            self._notify()

            return Response.fail(
                detail=self._error_message,
                error=ErrorCode.PERSISTENCE_FAILED,
                data=data,
            )

        self._notify()

        return Response.succeed(detail=detail, data=data)

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"StudentRegistry({self._store!r}, {self._editor!r})"
