# blog_api/api/v1/routers/comments.py
from fastapi import APIRouter, Depends, status

from blog_api.api.v1.deps import get_current_identity
from blog_api.api.v1.serializers import comment_to_dict
from blog_api.core.ids import parse_id
from blog_api.core.policy import Identity
from blog_api.schemas.comment import CommentCreateIn
from blog_api.services import content

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("/{post_id}")
async def list_comments(post_id: str):
    """
    List the comments of a post, oldest first.
    An unknown post simply has no comments.
    """
    rows = await content.list_by_post(parse_id(post_id))
    return [comment_to_dict(c) for c in rows]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_comment(body: CommentCreateIn, current: Identity = Depends(get_current_identity)):
    """
    Add a comment to an existing post.

    Raises:
        MalformedIdError (400): If postId is not a valid id
        NotFoundError (404): If the post does not exist
    """
    comment = await content.create_comment(body.content, parse_id(body.postId), current.user_id)
    return {"message": "Comment added successfully", "comment": comment_to_dict(comment)}


@router.delete("/{comment_id}")
async def delete_comment(comment_id: str, current: Identity = Depends(get_current_identity)):
    """
    Delete a comment (author or admin only).

    Raises:
        ForbiddenError (403): If caller is neither author nor admin
        NotFoundError (404): If the comment does not exist
    """
    await content.delete_comment(parse_id(comment_id), current)
    return {"message": "Comment deleted successfully"}
