from craft_beer.core.exceptions import (
    CraftBeerError,
    MalformedRecord,
    ReadFailure,
    ResourceNotFound,
)

__all__ = [
    "CraftBeerError",
    "MalformedRecord",
    "ReadFailure",
    "ResourceNotFound",
]
