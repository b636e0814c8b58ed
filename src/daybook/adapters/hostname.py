"""Host name adapter - default user identity."""

import logging
import socket

logger = logging.getLogger(__name__)


class IdentityResolutionError(OSError):
    """Raised when no default user identifier can be determined."""

    pass


class HostnameIdentity:
    """
    Uses the machine's host name as the user identifier.

    Implements IdentityProvider protocol.
    """

    def current_user(self) -> str:
        try:
            name = socket.gethostname()
        except OSError as e:
            logger.error(f"Host name lookup failed: {e}")
            raise IdentityResolutionError(f"Could not read host name: {e}") from e
        if not name:
            raise IdentityResolutionError("Host name is empty")
        return name
