"""Input checks shared by services."""

from src.labnotebook.core.config import Settings
from src.labnotebook.core.exceptions import InvalidArgumentError


def clean_name(name: str, settings: Settings, what: str = "Name") -> str:
    """Strip a record name and enforce the configured length bounds."""
    name = name.strip()
    if len(name) < settings.name_min_length:
        raise InvalidArgumentError(
            f"{what} must be at least {settings.name_min_length} characters"
        )
    if len(name) > settings.name_max_length:
        raise InvalidArgumentError(
            f"{what} must be at most {settings.name_max_length} characters"
        )
    return name


def check_query(query: object, settings: Settings) -> str | None:
    """A search query is None or a string no longer than the configured bound."""
    if query is None:
        return None
    if not isinstance(query, str):
        raise InvalidArgumentError(f"Query must be a string, got {type(query).__name__}")
    if len(query.strip()) > settings.search_query_max_length:
        raise InvalidArgumentError(
            f"Query must be at most {settings.search_query_max_length} characters"
        )
    return query
