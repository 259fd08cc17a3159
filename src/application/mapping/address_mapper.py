"""Maps the cross-service address contract to the Order aggregate's Address."""

from domain.models import Address
from integration.models import AddressDto


def map_address(address: AddressDto) -> Address:
    """Convert a wire AddressDto into the local Address value object.

    Pure function: the shared contract's `state` becomes the local `region`,
    every other field is copied as is.
    """
    return Address(
        street=address.street,
        city=address.city,
        region=address.state,
        postal_code=address.postal_code,
        country=address.country,
    )
