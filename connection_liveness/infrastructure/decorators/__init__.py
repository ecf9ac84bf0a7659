"""Infrastructure layer decorators."""

from .error_handler import handle_collaborator_errors

__all__ = [
    "handle_collaborator_errors",
]
