from fastapi import APIRouter
from pydantic import BaseModel, Field

from careerhub.core.modules.post.models import Post, PostCreate, PostRecord, PostUpdate
from careerhub.web.deps import AppDep, AuthTokenDep
from careerhub.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["posts"])


class DeletePostResponse(BaseModel):
    message: str = Field("Post deleted successfully", description="Confirmation message")


@router.get(
    "/posts",
    summary="List posts",
    description="Get all listings, newest first.",
    operation_id="listPosts",
    responses={200: {"model": list[Post], "description": "All posts"}},
)
async def list_posts(app: AppDep) -> list[PostRecord]:
    return await app.get_posts()


@router.get(
    "/posts/{post_id}",
    summary="Get post",
    description="Get a single listing by its ID.",
    operation_id="getPost",
    responses={
        200: {"model": Post, "description": "Post details"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def get_post(post_id: str, app: AppDep) -> PostRecord:
    return await app.get_post(post_id)


@router.post(
    "/posts",
    summary="Create post",
    description="Create a listing. The ID and publication date are assigned by the server and the post is placed first.",
    operation_id="createPost",
    status_code=201,
    responses={
        201: {"model": Post, "description": "Post created"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        500: {"model": ErrorResponse, "description": "Post could not be saved"},
    },
)
async def create_post(request: PostCreate, app: AppDep, auth_token: AuthTokenDep) -> PostRecord:
    return await app.create_post(auth_token, request)


@router.put(
    "/posts/{post_id}",
    summary="Update post",
    description=(
        "Partially update a listing. Only the fields provided are changed, all other fields "
        "and the post's position in the list stay as they are. The ID and publication date cannot be changed."
    ),
    operation_id="updatePost",
    responses={
        200: {"model": Post, "description": "Post updated"},
        400: {"model": ErrorResponse, "description": "Merged post is invalid"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Post not found"},
        500: {"model": ErrorResponse, "description": "Post could not be saved"},
    },
)
async def update_post(post_id: str, request: PostUpdate, app: AppDep, auth_token: AuthTokenDep) -> PostRecord:
    return await app.update_post(auth_token, post_id, request)


@router.delete(
    "/posts/{post_id}",
    summary="Delete post",
    description="Delete a listing.",
    operation_id="deletePost",
    responses={
        200: {"description": "Post deleted"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Post not found"},
        500: {"model": ErrorResponse, "description": "Post could not be saved"},
    },
)
async def delete_post(post_id: str, app: AppDep, auth_token: AuthTokenDep) -> DeletePostResponse:
    await app.delete_post(auth_token, post_id)
    return DeletePostResponse()
