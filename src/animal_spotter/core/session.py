"""Session state for an authenticated Animal Spotter client."""

import logging
from typing import Dict, Optional

from .errors import ErrorKind, FetchError
from .models import Bearer

logger = logging.getLogger(__name__)


class Session:
    """
    Holds the bearer token for one logical session.

    The slot is in memory only and is overwritten by every successful
    sign-in. It is not locked; concurrent sign-ins race.
    """

    def __init__(self, bearer: Optional[Bearer] = None):
        self._bearer = bearer

    @property
    def bearer(self) -> Optional[Bearer]:
        return self._bearer

    @bearer.setter
    def bearer(self, value: Optional[Bearer]) -> None:
        self._bearer = value
        logger.debug("Session bearer %s", "set" if value is not None else "cleared")

    @property
    def token(self) -> Optional[str]:
        return self._bearer.token if self._bearer is not None else None

    @property
    def is_authenticated(self) -> bool:
        return self._bearer is not None

    def clear(self) -> None:
        self.bearer = None

    def authorization_header(self) -> Dict[str, str]:
        """
        Build the ``Authorization`` header for the held bearer.

        Raises:
            FetchError: With ``ErrorKind.NO_AUTH`` if no bearer is held.
        """
        if self._bearer is None:
            raise FetchError(ErrorKind.NO_AUTH)
        return {"Authorization": f"Bearer {self._bearer.token}"}

    def __repr__(self) -> str:
        return f"Session(authenticated={self.is_authenticated})"
