from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from student_store.audit import AuditLog
from student_store.config import Settings
from student_store.models import CreatedResponse, Student
from student_store.state import StudentNotFoundError, StudentStore

STUDENTS_PATH = "/student/v1/students"


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[StudentStore] = None,
    audit: Optional[AuditLog] = None,
) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()
    if store is None:
        store = StudentStore()
    owns_audit = audit is None
    if audit is None:
        # Refuse to build the app when the audit file cannot be opened
        audit = AuditLog(settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_audit:
            audit.close()

    app = FastAPI(title="Student Service", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.audit = audit

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    def validation_exception_handler(request: Request, exc: RequestValidationError):
        audit.decode_error("; ".join(err.get("msg", "") for err in exc.errors()))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request body",
                "detail": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.post(STUDENTS_PATH, response_model=CreatedResponse)
    def create_student(student: Student):
        student_id = store.insert(student)
        audit.created(student_id)
        return CreatedResponse(id=student_id, enrollment_number=student_id)

    @app.get(STUDENTS_PATH, response_model=List[Student])
    def get_all_students():
        students = store.list_active()
        audit.fetched_all()
        return students

    @app.get(STUDENTS_PATH + "/{student_id}", response_model=Student)
    def get_student(student_id: str):
        try:
            student = store.get(student_id)
        except StudentNotFoundError:
            audit.not_found(student_id)
            raise HTTPException(status_code=404, detail="Student not found")
        audit.fetched(student_id)
        return student

    @app.delete(
        STUDENTS_PATH + "/{student_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
    )
    def delete_student(student_id: str):
        try:
            store.soft_delete(student_id)
        except StudentNotFoundError:
            audit.not_found(student_id)
            raise HTTPException(status_code=404, detail="Student not found")
        audit.deleted(student_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


def main() -> None:
    settings = Settings.from_env()
    app = create_app(settings)
    app.state.audit.server_starting(settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
