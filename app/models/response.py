import uuid

from app.models.camel_model import CamelModel


class Post(CamelModel):
    id: str
    author: str
    title: str
    content: str
    created: str


class ErrorResponse(CamelModel):
    status: int
    id: uuid.UUID
    message: str


class ValidationErrorResponse(ErrorResponse):
    errors: list[dict]
