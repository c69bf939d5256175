import uuid
from typing import Any

import pendulum
from aws_lambda_powertools import Logger

from app.exceptions import PostNotFoundException, PostValidationException
from app.models.post import Post
from app.models.response import Post as PostResponse
from app.repositories.post_repository import PostRepository


class PostService:
    ERROR_ID_MISMATCH = "The post id in the path and in the request body must match"
    ERROR_POST_NOT_FOUND = "The requested post was not found"

    def __init__(self):
        self._logger = Logger(utc=True)
        self._repo = PostRepository()

    def get_post_by_id(self, post_id: str) -> Post:
        item = self._repo.get_post_by_id(post_id)
        if not item:
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        return Post(**item)

    def post_to_response(self, post: Post) -> PostResponse:
        return PostResponse(
            id=post.id,
            author=post.author.full_name,
            title=post.title,
            content=post.content,
            created=post.created,
        )

    def create_post(self, data: dict[str, Any]) -> Post:
        created = data.get("created")
        data.update(
            {
                "id": str(uuid.uuid4()),
                "created": (
                    pendulum.instance(created) if created else pendulum.now("UTC")
                ).to_iso8601_string(),
            }
        )
        post = Post(**data)
        self._repo.create_post(post.model_dump())
        self._logger.info(f"Post created: {post.id=}")
        return post

    def delete_post(self, post_id: str):
        if not self._repo.delete_post(post_id):
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        self._logger.info(f"Post deleted: {post_id=}")

    def get_post(self, post_id: str) -> PostResponse:
        return self.post_to_response(self.get_post_by_id(post_id))

    def get_posts(self) -> list[PostResponse]:
        posts = [Post(**item) for item in self._repo.list_posts()]
        posts.sort(key=lambda post: pendulum.parse(post.created), reverse=True)
        return [self.post_to_response(post) for post in posts]

    def update_post(self, post_id: str, data: dict[str, Any]):
        body_id = data.pop("id", None)
        data = {k: v for k, v in data.items() if v != {}}
        if body_id is not None and body_id != post_id:
            self._logger.warning(f"Post id mismatch: {post_id=} {body_id=}")
            raise PostValidationException(self.ERROR_ID_MISMATCH)
        if not data:
            self.get_post_by_id(post_id)
            return
        if not self._repo.update_post(post_id, data):
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        self._logger.info(f"Post updated: {post_id=}")
