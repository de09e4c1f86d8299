import threading
from typing import Dict, List

from student_store.models import Student
from student_store.utils import new_student_id


class StudentNotFoundError(LookupError):
    def __init__(self, student_id: str):
        super().__init__(student_id)
        self.student_id = student_id


class StudentStore:
    """In-memory student records guarded by a single lock.

    Records are never removed; deleting one only sets ``is_deleted``.
    Every read returns a copy so callers cannot touch stored state.
    """

    def __init__(self) -> None:
        self._students: Dict[str, Student] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)

    def insert(self, student: Student) -> str:
        student_id = new_student_id()
        record = student.model_copy(
            update={"enrollment_number": student_id, "is_deleted": False}
        )
        with self._lock:
            self._students[student_id] = record
        return student_id

    def list_active(self) -> List[Student]:
        with self._lock:
            return [s.model_copy() for s in self._students.values() if not s.is_deleted]

    def get(self, student_id: str) -> Student:
        with self._lock:
            student = self._students.get(student_id)
            if student is None or student.is_deleted:
                raise StudentNotFoundError(student_id)
            return student.model_copy()

    def soft_delete(self, student_id: str) -> None:
        with self._lock:
            student = self._students.get(student_id)
            if student is None or student.is_deleted:
                raise StudentNotFoundError(student_id)
            self._students[student_id] = student.model_copy(update={"is_deleted": True})
