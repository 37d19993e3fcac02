"""URL-related utility functions for the FogBugz client."""

API_PATH = "api.asp"
DEFAULT_PAGE = "default.asp"


def build_base_url(protocol: str, host: str) -> str:
    """Build the root URL of a FogBugz install.

    Args:
        protocol: "https" or "http"
        host: Host name, optionally with a port or a path prefix

    Returns:
        The base URL without a trailing slash, e.g. ``https://zzz.fogbugz.com``
    """
    host = host.strip().rstrip("/")
    if "://" in host:
        host = host.split("://", 1)[1]
    return f"{protocol}://{host}"


def build_api_url(base_url: str) -> str:
    """Return the legacy XML API endpoint for an install."""
    return f"{base_url}/{API_PATH}"


def build_filter_url(base_url: str, filter_id: str) -> str:
    """Return the web URL that shows a saved filter."""
    return f"{base_url}/{DEFAULT_PAGE}?pgx=LF&ixFilter={filter_id}"


def build_case_url(base_url: str, case_id: str) -> str:
    """Return the web URL of a case."""
    return f"{base_url}/{DEFAULT_PAGE}?{case_id}"


def build_project_url(base_url: str, project_id: str) -> str:
    """Return the web URL of a project's settings page."""
    return f"{base_url}/{DEFAULT_PAGE}?pgx=FS&ixProject={project_id}"


def build_area_url(base_url: str, area_id: str) -> str:
    """Return the web URL of an area's settings page."""
    return f"{base_url}/{DEFAULT_PAGE}?pgx=FS&ixArea={area_id}"
