"""
Board Gateway - Content Post Service
=====================================

What:  ResourceService for the `content_posts` table. Content posts need no
       behavior beyond the shared capped CRUD, so this module only configures
       the instance.

Row-count ceiling: 5 content posts.
"""

from gateway.models.content_post import ContentPost
from gateway.schemas.content import ContentPostResponse
from gateway.services.resource_service import ResourceService

CONTENT_POST_LIMIT = 5

content_service = ResourceService(
    model=ContentPost,
    response_model=ContentPostResponse,
    label="content post",
    limit=CONTENT_POST_LIMIT,
    limit_message="Total content posts already reached its limit.",
)
