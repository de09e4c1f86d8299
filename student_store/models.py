from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Student(BaseModel):
    # Strict types: "20" is not an age. Only the wire names are accepted as input.
    model_config = ConfigDict(strict=True, extra="ignore")

    enrollment_number: str = Field(default="", alias="enrollmentNumber")
    name: str = ""
    age: int = 0
    class_: str = Field(default="", alias="class")
    subject: str = ""
    is_deleted: bool = Field(default=False, alias="isDeleted")

    @field_validator("*", mode="before")
    @classmethod
    def null_is_zero_value(cls, value, info: ValidationInfo):
        # A JSON null leaves the field at its zero value
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class CreatedResponse(BaseModel):
    id: str
    enrollment_number: str = Field(alias="enrollmentNumber")

    model_config = ConfigDict(populate_by_name=True)
