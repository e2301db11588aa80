from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class ValidationStatus(str, Enum):
    VALID = "valid"
    INCORRECT = "incorrect"
    EXPIRED = "expired"


class GenerateCodeRequest(BaseModel):
    rut: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"rut": "12345678-9"}
        }
    )


class CustomerNotFound(BaseModel):
    rut: str = Field(..., exclude=True)
    message: str


class GeneratedCode(BaseModel):
    code: str
    expires_at: datetime = Field(..., alias="expiresAt")

    model_config = ConfigDict(populate_by_name=True)


class CodeValidation(BaseModel):
    status: ValidationStatus = Field(..., exclude=True)
    valid: bool
    message: str
