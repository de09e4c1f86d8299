import uuid
from datetime import datetime
from typing import Optional


def new_student_id() -> str:
    return str(uuid.uuid4())


def now_log_str(dt: Optional[datetime] = None) -> str:
    # Local wall clock, same layout as a Go log.Ldate|log.Ltime prefix
    if dt is None:
        dt = datetime.now().astimezone()
    return dt.strftime("%Y/%m/%d %H:%M:%S")
