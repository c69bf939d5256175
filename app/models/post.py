from app.models.camel_model import CamelModel


class Author(CamelModel):
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Post(CamelModel):
    id: str
    author: Author
    title: str
    content: str
    created: str
