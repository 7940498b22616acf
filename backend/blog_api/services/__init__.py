"""
Services Module

Stores and helpers behind the API routers:
- identity: user accounts (Identity Store)
- content: posts and comments (Content Store)
- pagination: page windows, pagination envelopes and comment-count enrichment
"""
from . import content, identity, pagination

__all__ = ["content", "identity", "pagination"]
