"""Load a sighting together with its image."""

import logging
from dataclasses import dataclass
from typing import Optional

from .client import SpotterClient
from .errors import FetchError
from .models import Animal, AnimalImage

logger = logging.getLogger(__name__)


@dataclass
class AnimalDetail:
    """A sighting and, when it could be downloaded, its image."""
    animal: Animal
    image: Optional[AnimalImage] = None
    image_error: Optional[FetchError] = None

    @property
    def coordinates(self) -> str:
        return f"lat: {self.animal.latitude}, long: {self.animal.longitude}"


async def load_animal_detail(client: SpotterClient, animal_name: str) -> AnimalDetail:
    """
    Fetch the details for ``animal_name``, then its image.

    A failed detail fetch propagates. A failed image fetch does not; it is
    recorded on the returned ``AnimalDetail``.
    """
    animal = await client.fetch_details(animal_name)
    detail = AnimalDetail(animal=animal)

    try:
        detail.image = await client.fetch_image(animal.image_url)
    except FetchError as e:
        logger.warning(f"Could not load image for {animal.name}: {e}")
        detail.image_error = e

    return detail
