# blog/services.py

"""
BLOG ADMIN WRITES

Audit actions:
- create:  blog_post_published when created published, else blog_post_created
- update:  blog_post_published on a draft -> published transition, else blog_post_updated
- delete:  blog_post_deleted
"""

from __future__ import annotations

import logging

from django.db import transaction

from audit.services import (
    log_blog_post_created,
    log_blog_post_deleted,
    log_blog_post_published,
    log_blog_post_updated,
)

from .models import BlogPost

logger = logging.getLogger(__name__)


@transaction.atomic
def create_post(*, actor, serializer) -> BlogPost:
    post = serializer.save(author=actor)
    if post.published:
        log_blog_post_published(actor, post.pk, post.title)
    else:
        log_blog_post_created(actor, post.pk, post.title)
    logger.info("Blog post created", extra={"post_id": str(post.pk), "published": post.published})
    return post


@transaction.atomic
def update_post(*, actor, serializer) -> BlogPost:
    was_published = bool(serializer.instance.published)
    post = serializer.save()
    if post.published and not was_published:
        log_blog_post_published(actor, post.pk, post.title)
    else:
        log_blog_post_updated(actor, post.pk, post.title)
    return post


@transaction.atomic
def delete_post(*, actor, post: BlogPost) -> None:
    post_id, title = post.pk, post.title
    post.delete()
    log_blog_post_deleted(actor, post_id, title)
