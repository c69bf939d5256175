import os
import random
import uuid
from datetime import timezone

os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-central-1")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ["STAGE"] = "test"

import boto3
import pendulum
import pytest
from moto import mock_aws

from app.models.post import Author, Post
from app.repositories.post_repository import PostRepository
from app.settings import Settings

POST_TITLES = [
    "Here and Now",
    "Testing Data",
    "Oh No, Hippos!",
    "Title Four",
    "Coding for Animals",
]


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def dynamodb_resource(settings: Settings):
    with mock_aws():
        yield boto3.Session().resource("dynamodb", region_name=settings.aws_region)


@pytest.fixture
def posts_table(dynamodb_resource, settings: Settings):
    return dynamodb_resource.Table(settings.posts_table_name)


@pytest.fixture
def make_post(faker):
    def make() -> Post:
        return Post(
            id=str(uuid.uuid4()),
            author=Author(first_name=faker.first_name(), last_name=faker.last_name()),
            title=random.choice(POST_TITLES),
            content=faker.paragraph(),
            created=pendulum.instance(
                faker.past_datetime(start_date="-7d", tzinfo=timezone.utc)
            ).to_iso8601_string(),
        )

    return make


@pytest.fixture
def posts(make_post) -> list[Post]:
    posts = []
    for _ in range(10):
        posts.append(make_post())
    return posts


@pytest.fixture
def initialize_posts_table(dynamodb_resource, posts: list[Post]):
    repository = PostRepository()
    repository.create_table()
    repository.create_posts([post.model_dump() for post in posts])
