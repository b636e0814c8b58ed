"""User identity interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IdentityProvider(Protocol):
    """Interface for resolving the default user identifier."""

    def current_user(self) -> str:
        """Return the default user. Raises IdentityResolutionError on failure."""
        ...
