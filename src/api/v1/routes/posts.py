"""Post API routes: posts, likes and comments."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_post_service
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.post import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    PostCreate,
    PostResponse,
)
from domain.entities.post import Comment, Like, Post
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


def _like_response(like: Like) -> LikeResponse:
    return LikeResponse(user=like.user_id, date=like.date)


def _comment_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        user=comment.user_id,
        text=comment.text,
        name=comment.name,
        avatar=comment.avatar,
        date=comment.date,
    )


def _post_response(post: Post) -> PostResponse:
    return PostResponse(
        id=post.id,
        user=post.user_id,
        text=post.text,
        name=post.name,
        avatar=post.avatar,
        likes=[_like_response(like) for like in post.likes],
        comments=[_comment_response(comment) for comment in post.comments],
        date=post.date,
    )


@router.post(
    "",
    response_model=PostResponse,
    summary="Create a post",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
    },
)
async def create_post(
    body: PostCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a post signed with the caller's current name and avatar."""
    post = await service.create(user.id, body.text)
    return _post_response(post)


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List all posts",
)
async def list_posts(
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """Get all posts, newest first."""
    posts = await service.get_all()
    return [_post_response(post) for post in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses={
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def get_post(
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Get a single post by id."""
    post = await service.get_by_id(post_id)
    return _post_response(post)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
    responses={
        401: {"model": ErrorResponse, "description": "User not authorized"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def delete_post(
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete one of the caller's posts."""
    await service.delete(post_id, user.id)
    return MessageResponse(msg="Post removed")


@router.put(
    "/like/{post_id}",
    response_model=list[LikeResponse],
    summary="Like a post",
    responses={
        400: {"model": ErrorResponse, "description": "Post already liked"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def like_post(
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Like a post. Returns the post's likes, newest first."""
    likes = await service.like(post_id, user.id)
    return [_like_response(like) for like in likes]


@router.put(
    "/unlike/{post_id}",
    response_model=list[LikeResponse],
    summary="Unlike a post",
    responses={
        400: {"model": ErrorResponse, "description": "Post has not yet been liked"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def unlike_post(
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Remove the caller's like. Returns the remaining likes."""
    likes = await service.unlike(post_id, user.id)
    return [_like_response(like) for like in likes]


@router.post(
    "/comment/{post_id}",
    response_model=list[CommentResponse],
    summary="Comment on a post",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def add_comment(
    post_id: str,
    body: CommentCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Comment on a post. Returns the post's comments, newest first."""
    comments = await service.add_comment(post_id, user.id, body.text)
    return [_comment_response(comment) for comment in comments]


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=list[CommentResponse],
    summary="Delete a comment",
    responses={
        401: {"model": ErrorResponse, "description": "User not authorized"},
        404: {"model": ErrorResponse, "description": "Post or comment not found"},
    },
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Delete one of the caller's comments. Returns the remaining comments."""
    comments = await service.delete_comment(post_id, comment_id, user.id)
    return [_comment_response(comment) for comment in comments]
