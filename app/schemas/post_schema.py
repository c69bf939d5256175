from datetime import datetime

from app.models.camel_model import CamelModel


class CreateAuthor(CamelModel):
    first_name: str
    last_name: str


class UpdateAuthor(CamelModel):
    first_name: str | None = None
    last_name: str | None = None


class CreatePost(CamelModel):
    author: CreateAuthor
    title: str
    content: str
    created: datetime | None = None


class UpdatePost(CamelModel):
    id: str | None = None
    author: UpdateAuthor | None = None
    title: str | None = None
    content: str | None = None
