from typing import List

from fastapi import APIRouter, Body, Depends, Response, status
from pydantic import ValidationError

from api.dependencies.collections import get_post_collection
from api.exceptions import PostNotFoundError, PostValidationError
from api.schemas.PostSchema import REQUIRED_FIELDS, PostCreate, PostUpdate, first_invalid_field
from dbase.collections.PostCollection import PostCollection
from dbase.models.PostModel import PostRepresentation, to_representation

router = APIRouter(prefix="/posts", tags=["posts"])


def _parse(schema, payload: dict):
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise PostValidationError(f"Invalid `{first_invalid_field(exc)}` in request body")


@router.get("", response_model=List[PostRepresentation])
@router.get("/", response_model=List[PostRepresentation], include_in_schema=False)
def list_posts(posts: PostCollection = Depends(get_post_collection)):
    return [to_representation(post) for post in posts.list()]


@router.get("/{post_id}", response_model=PostRepresentation)
def get_post(post_id: str, posts: PostCollection = Depends(get_post_collection)):
    post = posts.get(post_id)
    if post is None:
        raise PostNotFoundError(post_id)
    return to_representation(post)


@router.post("", response_model=PostRepresentation, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=PostRepresentation, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_post(payload: dict = Body(...), posts: PostCollection = Depends(get_post_collection)):
    for field in REQUIRED_FIELDS:
        if field not in payload:
            raise PostValidationError(f"Missing `{field}` in request body")

    data = _parse(PostCreate, payload)
    post = posts.create(data.title, data.content, data.author)
    return to_representation(post)


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_post(post_id: str, payload: dict = Body(...), posts: PostCollection = Depends(get_post_collection)):
    body_id = payload.get("id")
    if not (post_id and body_id and post_id == body_id):
        raise PostValidationError(f"Request path id ({post_id}) and request body id ({body_id}) must match")

    changes = _parse(PostUpdate, payload).changes()
    if posts.update(post_id, changes) is None:
        raise PostNotFoundError(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_post(post_id: str, posts: PostCollection = Depends(get_post_collection)):
    # absent posts are fine, delete is idempotent
    posts.delete(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
