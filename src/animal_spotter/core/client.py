"""
Animal Spotter API client.

This module provides the async client for the Animal Spotter API: sign-up,
sign-in, listing animal names, fetching sighting details and downloading
sighting images. Every call is a single request with no retries.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from .. import USER_AGENT
from ..config.settings import DEFAULT_BASE_URL, SpotterSettings
from .errors import (
    DecodingError,
    EncodingError,
    ErrorKind,
    FetchError,
    MissingDataError,
    NetworkError,
    StatusCodeError,
)
from .models import IMAGE_DECODE_ERRORS, Animal, AnimalImage, Bearer, HTTPMethod, User
from .session import Session

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

SIGN_UP_PATH = "/users/signup"
SIGN_IN_PATH = "/users/login"
ALL_ANIMALS_PATH = "/animals/all"

_ANIMAL_NAMES = TypeAdapter(List[str])


@dataclass
class SpotterClientConfig:
    """Configuration for the Animal Spotter client."""
    base_url: str = DEFAULT_BASE_URL
    # None keeps the transport default
    timeout_seconds: Optional[float] = None
    user_agent: str = USER_AGENT


class SpotterClient:
    """
    Client for the Animal Spotter API.

    The client owns a ``Session`` holding the bearer token obtained by
    ``sign_in``. Pass a session explicitly to share it between clients.

    Authenticated fetches and ``fetch_image`` raise ``FetchError``; sign-up
    and sign-in raise the generic ``SpotterError`` subclasses.
    """

    def __init__(
        self,
        config: Optional[SpotterClientConfig] = None,
        session: Optional[Session] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or SpotterClientConfig()
        self.session = session if session is not None else Session()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "SpotterClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Create the HTTP client on first use."""
        if self._client is None:
            options = {
                "base_url": self.config.base_url,
                "headers": {"User-Agent": self.config.user_agent},
                "transport": self._transport,
            }
            if self.config.timeout_seconds is not None:
                options["timeout"] = httpx.Timeout(self.config.timeout_seconds)
            self._client = httpx.AsyncClient(**options)
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _send(
        self,
        method: HTTPMethod,
        url: Union[str, httpx.URL],
        headers: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> httpx.Response:
        response = await self._get_client().request(
            method.value, url, headers=headers, content=content
        )
        logger.debug(f"{method.value} {response.request.url} -> {response.status_code}")
        return response

    # ==================== Accounts ====================

    async def sign_up(self, user: User) -> None:
        """
        Register a new user.

        Raises:
            EncodingError: If the user cannot be encoded.
            NetworkError: If the request fails in transport.
            StatusCodeError: If the server answers with anything but 200.
        """
        await self._post_credentials(SIGN_UP_PATH, user)
        logger.debug(f"Signed up user {user.username}")

    async def sign_in(self, user: User) -> Bearer:
        """
        Sign in and store the returned bearer in the session.

        Raises:
            EncodingError: If the user cannot be encoded.
            NetworkError: If the request fails in transport.
            StatusCodeError: If the server answers with anything but 200.
            MissingDataError: If the server sends no body.
            DecodingError: If the body is not a bearer object.
        """
        response = await self._post_credentials(SIGN_IN_PATH, user)

        if not response.content:
            logger.error("Sign-in response contained no data")
            raise MissingDataError(status=response.status_code)

        try:
            bearer = Bearer.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Error decoding bearer object: {e}")
            raise DecodingError(original_error=e) from e

        self.session.bearer = bearer
        logger.debug(f"Signed in user {user.username}")
        return bearer

    async def _post_credentials(self, path: str, user: User) -> httpx.Response:
        try:
            body = user.model_dump_json().encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.error(f"Error encoding user object: {e}")
            raise EncodingError(original_error=e) from e

        try:
            response = await self._send(HTTPMethod.POST, path, headers=JSON_HEADERS, content=body)
        except httpx.TransportError as e:
            logger.warning(f"Request to {path} failed: {e}")
            raise NetworkError(f"Request to {path} failed: {e}", original_error=e) from e

        if response.status_code != 200:
            logger.warning(f"Server responded to {path} with status {response.status_code}")
            raise StatusCodeError(response.status_code)

        return response

    # ==================== Animals ====================

    async def fetch_all_animal_names(self) -> List[str]:
        """
        Fetch the names of all sighted animals.

        Raises:
            FetchError: ``NO_AUTH``, ``OTHER_ERROR``, ``BAD_AUTH``,
                ``BAD_DATA`` or ``NO_DECODE``.
        """
        body = await self._fetch_authorized(ALL_ANIMALS_PATH, "animal names")
        try:
            return _ANIMAL_NAMES.validate_json(body)
        except ValidationError as e:
            logger.error(f"Error decoding animal names: {e}")
            raise FetchError(ErrorKind.NO_DECODE, original_error=e) from e

    async def fetch_details(self, animal_name: str) -> Animal:
        """
        Fetch the sighting record for ``animal_name``.

        Raises:
            FetchError: ``NO_AUTH``, ``OTHER_ERROR``, ``BAD_AUTH``,
                ``BAD_DATA`` or ``NO_DECODE``.
        """
        path = f"/animals/{quote(animal_name, safe='')}"
        body = await self._fetch_authorized(path, f"details for {animal_name}")
        try:
            return Animal.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Error decoding animal object {animal_name}: {e}")
            raise FetchError(
                ErrorKind.NO_DECODE, details={"animal": animal_name}, original_error=e
            ) from e

    async def _fetch_authorized(self, path: str, description: str) -> bytes:
        """GET ``path`` with the session's bearer and return the body."""
        if not self.session.is_authenticated:
            logger.warning(f"Cannot fetch {description}: not signed in")
            raise FetchError(ErrorKind.NO_AUTH)

        try:
            response = await self._send(
                HTTPMethod.GET, path, headers=self.session.authorization_header()
            )
        except httpx.TransportError as e:
            logger.warning(f"Error receiving {description}: {e}")
            raise FetchError(ErrorKind.OTHER_ERROR, original_error=e) from e

        if response.status_code == 401:
            logger.warning("Server responded with 401 status code (not authorized)")
            raise FetchError(ErrorKind.BAD_AUTH, status=401)

        if not response.content:
            logger.warning(f"Server responded with no data for {description}")
            raise FetchError(ErrorKind.BAD_DATA, status=response.status_code)

        return response.content

    # ==================== Images ====================

    async def fetch_image(self, url: str) -> AnimalImage:
        """
        Download and verify the image at ``url``. No authentication is sent.

        Raises:
            FetchError: ``BAD_URL``, ``OTHER_ERROR`` or ``BAD_DATA``.
        """
        image_url = self._parse_image_url(url)

        try:
            response = await self._send(HTTPMethod.GET, image_url)
        except httpx.TransportError as e:
            logger.warning(f"Error receiving image data from {url}: {e}")
            raise FetchError(ErrorKind.OTHER_ERROR, details={"url": url}, original_error=e) from e

        if not response.content:
            logger.warning(f"{image_url.host} responded with no image data")
            raise FetchError(ErrorKind.BAD_DATA, status=response.status_code, details={"url": url})

        try:
            return AnimalImage.from_bytes(response.content)
        except IMAGE_DECODE_ERRORS as e:
            logger.warning(f"Image data from {url} is incomplete or corrupted: {e}")
            raise FetchError(
                ErrorKind.BAD_DATA,
                "Image data is incomplete or corrupted",
                status=response.status_code,
                details={"url": url},
                original_error=e,
            ) from e

    @staticmethod
    def _parse_image_url(url: str) -> httpx.URL:
        """Accept only absolute http(s) URLs with a host."""
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            logger.warning(f"Malformed image URL {url!r}: {e}")
            raise FetchError(ErrorKind.BAD_URL, details={"url": url}, original_error=e) from e

        if parsed.scheme not in ("http", "https") or not parsed.host:
            logger.warning(f"Malformed image URL {url!r}")
            raise FetchError(ErrorKind.BAD_URL, details={"url": url})

        return parsed


def create_spotter_client(
    settings: Optional[SpotterSettings] = None,
    session: Optional[Session] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SpotterClient:
    """Create a client configured from ``settings``."""
    settings = settings or SpotterSettings()
    config = SpotterClientConfig(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout,
    )
    return SpotterClient(config, session=session, transport=transport)
