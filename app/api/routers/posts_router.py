from fastapi import APIRouter, Depends, Response, status

from app.deps import post_service
from app.models.response import Post as PostResponse
from app.schemas.post_schema import CreatePost, UpdatePost
from app.services.post_service import PostService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(
    create_model: CreatePost,
    response: Response,
    service: PostService = Depends(post_service),
) -> PostResponse:
    post = service.create_post(create_model.model_dump())
    response.headers["Location"] = f"/posts/{post.id}"
    return service.post_to_response(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_post(post_id: str, service: PostService = Depends(post_service)):
    service.delete_post(post_id)


@router.get("/{post_id}", status_code=status.HTTP_200_OK)
def get_post(post_id: str, service: PostService = Depends(post_service)) -> PostResponse:
    return service.get_post(post_id)


@router.get("", status_code=status.HTTP_200_OK)
def get_posts(service: PostService = Depends(post_service)) -> list[PostResponse]:
    return service.get_posts()


@router.put(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def update_post(
    update_model: UpdatePost,
    post_id: str,
    service: PostService = Depends(post_service),
):
    service.update_post(
        post_id, update_model.model_dump(exclude_unset=True, exclude_none=True)
    )
