"""Crawl permission checks for llms.txt and robots.txt."""

# Lazy imports to avoid requiring all dependencies at import time
# Use explicit imports when needed:
# from citeready.crawler.permissions import PermissionResolver, resolve_permission
# from citeready.crawler.cache import PermissionCache

__all__ = [
    # Permissions
    "PermissionResolver",
    "PermissionDecision",
    "PermissionSource",
    "DirectiveVerdict",
    "parse_directives",
    "resolve_permission",
    "get_origin",
    # Cache
    "PermissionCache",
]
