"""Insights resource handler."""

from discovery_mcp.data.cache import insights_cache


class ResourceNotFoundError(Exception):
    """Resource not found in cache."""

    pass


def read_insights_resource(uri: str) -> tuple[str, str]:
    """
    Serve a cached insights result only. O(1), no recomputation.

    Args:
        uri: Resource URI (e.g., insights://3f2a9c01d4e5b6a7)

    Returns:
        Tuple of (json_text, mime_type)

    Raises:
        ResourceNotFoundError: If resource not in cache
    """
    json_text = insights_cache.get_text(uri)

    if json_text is None:
        raise ResourceNotFoundError(
            f"Resource not cached. Call get_discovery_insights first: {uri}"
        )

    return json_text, "application/json"
