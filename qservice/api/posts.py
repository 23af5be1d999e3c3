"""
Posts API endpoints.

Create, read, update and delete posts; list an author's posts newest first.
Every success response is wrapped as ``{"success": true, "data": ...}``.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from qservice.domain import PostRepository
from qservice.errors import CommonValidationCode, EntityPrefix, ErrorDetail, ValidationError, error_codes
from qservice.usecases import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsByAuthorUseCase,
    UpdatePostUseCase,
)
from .deps import get_post_repository

router = APIRouter(tags=["posts"])

REQUIRED_POST_FIELDS = ("title", "content", "authorId")
_ENTITY = EntityPrefix.POST.value


def _ok(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


def _require_fields(payload: Dict[str, Any]) -> None:
    missing = [name for name in REQUIRED_POST_FIELDS if not payload.get(name)]
    if not missing:
        return
    raise ValidationError(
        code=error_codes.validation(CommonValidationCode.REQUIRED_FIELDS, _ENTITY),
        message=f"Missing required fields: {', '.join(missing)}",
        details=[
            ErrorDetail(
                code=error_codes.validation(CommonValidationCode.REQUIRED, _ENTITY),
                field=name,
                message=f"Field '{name}' is required",
            )
            for name in missing
        ],
    )


@router.post("/posts", status_code=status.HTTP_201_CREATED)
def create_post_endpoint(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    posts: PostRepository = Depends(get_post_repository),
):
    payload = payload or {}
    _require_fields(payload)
    created = CreatePostUseCase(posts).handle({k: payload[k] for k in REQUIRED_POST_FIELDS})
    return _ok(created.to_json())


@router.get("/posts/{post_id}")
def get_post_endpoint(post_id: str, posts: PostRepository = Depends(get_post_repository)):
    return _ok(GetPostUseCase(posts).handle({"id": post_id}).to_json())


@router.get("/authors/{author_id}/posts")
def get_author_posts_endpoint(author_id: str, posts: PostRepository = Depends(get_post_repository)):
    found = ListPostsByAuthorUseCase(posts).handle({"authorId": author_id})
    return _ok([p.to_json() for p in found])


@router.patch("/posts/{post_id}")
def update_post_endpoint(
    post_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    posts: PostRepository = Depends(get_post_repository),
):
    changes = {k: v for k, v in (payload or {}).items() if k in ("title", "content")}
    updated = UpdatePostUseCase(posts).handle({"id": post_id, **changes})
    return _ok(updated.to_json())


@router.delete("/posts/{post_id}")
def delete_post_endpoint(post_id: str, posts: PostRepository = Depends(get_post_repository)):
    return _ok(DeletePostUseCase(posts).handle({"id": post_id}).to_json())
