"""
Core components for Animal Spotter.

This package provides the data model, error types, session holder and the
async API client.
"""

from .errors import (
    SpotterError,
    ErrorKind,
    FetchError,
    EncodingError,
    DecodingError,
    MissingDataError,
    StatusCodeError,
    NetworkError,
    create_user_friendly_message,
)
from .models import HTTPMethod, User, Bearer, Animal, AnimalImage
from .session import Session
from .client import SpotterClient, SpotterClientConfig, create_spotter_client
from .detail import AnimalDetail, load_animal_detail

__all__ = [
    # Errors
    "SpotterError",
    "ErrorKind",
    "FetchError",
    "EncodingError",
    "DecodingError",
    "MissingDataError",
    "StatusCodeError",
    "NetworkError",
    "create_user_friendly_message",
    # Models
    "HTTPMethod",
    "User",
    "Bearer",
    "Animal",
    "AnimalImage",
    # Session
    "Session",
    # Client
    "SpotterClient",
    "SpotterClientConfig",
    "create_spotter_client",
    # Detail loading
    "AnimalDetail",
    "load_animal_detail",
]
