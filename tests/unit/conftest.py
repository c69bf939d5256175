import pytest

from app.repositories.post_repository import PostRepository
from app.services.post_service import PostService


@pytest.fixture
def post_repository(initialize_posts_table) -> PostRepository:
    return PostRepository()


@pytest.fixture
def post_service() -> PostService:
    return PostService()
