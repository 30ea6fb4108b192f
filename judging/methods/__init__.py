"""Ranking methods for turning judges' scores into a final ranking."""

from judging.aggregate import RankingError

from .base import RankingMethod

DEFAULT_METHOD = "spearman"

# Ranking method registry - import methods here to register them
_ranking_methods: dict[str, type[RankingMethod]] = {}


class UnknownMethodError(RankingError):
    """Raised when a ranking method key is not registered."""
    pass


def register_ranking_method(method_class: type[RankingMethod]) -> type[RankingMethod]:
    """Decorator to register a ranking method class under its key."""
    _ranking_methods[method_class.key] = method_class
    return method_class


def get_ranking_method(method: str | RankingMethod = DEFAULT_METHOD) -> RankingMethod:
    """Return an instance of the ranking method with the given key.

    A RankingMethod instance is passed through unchanged.

    Raises:
        UnknownMethodError: If no method is registered under the key
    """
    if isinstance(method, RankingMethod):
        return method
    try:
        method_class = _ranking_methods[method]
    except KeyError:
        known = ", ".join(sorted(_ranking_methods)) or "none"
        raise UnknownMethodError(
            f"Unknown ranking method {method!r} (available: {known})"
        ) from None
    return method_class()


def get_all_ranking_methods() -> list[RankingMethod]:
    """Return instances of all registered ranking methods."""
    return [method_class() for method_class in _ranking_methods.values()]
