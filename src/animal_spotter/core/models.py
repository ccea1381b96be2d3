"""
Data model for the Animal Spotter API.

Wire names follow the server's camelCase JSON; Python attributes are
snake_case and the wire names are accepted as aliases.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Any, Union

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Raised by AnimalImage.from_bytes for payloads that are not a usable image.
# DecompressionBombError is not an OSError subclass.
IMAGE_DECODE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)


class HTTPMethod(str, Enum):
    """HTTP methods used by the client."""
    GET = "GET"
    POST = "POST"


class User(BaseModel):
    """Credentials submitted for sign-up and sign-in."""
    username: str
    password: str = Field(repr=False)


class Bearer(BaseModel):
    """Token returned by a successful sign-in."""
    token: str = Field(repr=False)


class Animal(BaseModel):
    """A single animal sighting."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    name: str
    time_seen: datetime = Field(alias="timeSeen")
    latitude: float
    longitude: float
    description: str
    image_url: str = Field(alias="imageURL")

    @field_validator("time_seen", mode="before")
    @classmethod
    def decode_time_seen(cls, v: Any) -> datetime:
        """Decode ``timeSeen`` as seconds since the Unix epoch."""
        if isinstance(v, datetime):
            return v
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("timeSeen must be a number of seconds since the epoch")
        try:
            return datetime.fromtimestamp(v, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            # pydantic only wraps ValueError into a ValidationError
            raise ValueError(f"timeSeen {v!r} is out of range: {e}") from e

    @field_serializer("time_seen")
    def encode_time_seen(self, v: datetime) -> float:
        return v.timestamp()


@dataclass(frozen=True)
class AnimalImage:
    """Verified image bytes for a sighting."""
    data: bytes
    format: str
    width: int
    height: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "AnimalImage":
        """
        Identify and verify image bytes.

        Raises:
            OSError: If Pillow cannot identify the data as an image
                (``PIL.UnidentifiedImageError`` is a subclass).
            SyntaxError: If the image data is truncated or corrupt.
            PIL.Image.DecompressionBombError: If the header claims more
                pixels than Pillow allows.
        """
        with Image.open(BytesIO(data)) as image:
            image_format = image.format or "UNKNOWN"
            width, height = image.size
            image.verify()
        return cls(data=data, format=image_format, width=width, height=height)

    def open(self) -> Image.Image:
        """Open the image with Pillow."""
        return Image.open(BytesIO(self.data))

    def save(self, path: Union[str, Path]) -> Path:
        """Write the raw image bytes to ``path``."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.data)
        return target

    def __repr__(self) -> str:
        return (
            f"AnimalImage(format={self.format!r}, width={self.width}, "
            f"height={self.height}, size={len(self.data)})"
        )
