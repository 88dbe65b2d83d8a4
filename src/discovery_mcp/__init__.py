"""Discovery Insights MCP Server."""

import os


def get_server_version() -> str:
    """Get version with fallback for dev mode."""
    if version := os.environ.get("SERVER_VERSION"):
        return version
    try:
        from importlib.metadata import version as pkg_version

        return pkg_version("discovery-insights-mcp")
    except Exception:
        return "dev"


SERVER_VERSION = get_server_version()
# Bump when output schema changes materially (new fields, renamed fields, structure changes)
# v1: Strategy profile, focus areas and action plan
# v2: Added input_summary, status_message and missing_data suggestions
# v3: Added guided questions, answer-triggered suggestions and insights:// resource
SCHEMA_VERSION = "3"
