"""Append-only audit trail for student operations.

Each call writes one line to the audit file, for example::

    INFO: 2026/10/19 14:03:11 main.py:88: Created student with enrollment number: 3f0c...

Audit writes are fire-and-forget. Only opening the file is allowed to fail
loudly, which happens once when the application is built.
"""

import logging
from typing import Optional

from student_store.utils import now_log_str

AUDIT_LOGGER_NAME = "student_store.audit"

logger = logging.getLogger(__name__)


class _AuditFormatter(logging.Formatter):
    def __init__(self, prefix: str = "INFO: ") -> None:
        super().__init__(fmt=prefix + "%(asctime)s %(filename)s:%(lineno)d: %(message)s")

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:  # noqa: N802
        return now_log_str()


class AuditLog:
    def __init__(self, path: str, name: str = AUDIT_LOGGER_NAME) -> None:
        # Opens the file immediately; an unwritable path raises OSError here.
        self._handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        self._handler.setFormatter(_AuditFormatter())
        # Unregistered logger: one per audit file, never shared through the root.
        self._logger = logging.Logger(name, level=logging.INFO)
        self._logger.addHandler(self._handler)

    def _emit(self, message: str, *args: object) -> None:
        try:
            # stacklevel=3 points the file:line prefix at whoever called the public method
            self._logger.info(message, *args, stacklevel=3)
        except Exception:
            logger.exception("audit write failed: %s", message)

    def close(self) -> None:
        self._logger.removeHandler(self._handler)
        self._handler.close()

    def created(self, student_id: str) -> None:
        self._emit("Created student with enrollment number: %s", student_id)

    def fetched_all(self) -> None:
        self._emit("Fetched all students")

    def fetched(self, student_id: str) -> None:
        self._emit("Fetched student with enrollment number: %s", student_id)

    def deleted(self, student_id: str) -> None:
        self._emit("Soft deleted student with enrollment number: %s", student_id)

    def not_found(self, student_id: str) -> None:
        self._emit("Student not found with enrollment number: %s", student_id)

    def decode_error(self, reason: object) -> None:
        self._emit("Error decoding request body: %s", reason)

    def server_starting(self, port: int) -> None:
        self._emit("Server starting on port %d", port)
