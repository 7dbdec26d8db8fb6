"""Address formatting helpers."""

from ..models.location import FullAddress, Location


def _display_name(item: Location, language: str) -> str:
    return item.bn_name if language == "bn" else item.name


def format_address(
    address: FullAddress,
    language: str = "en",
    separator: str = ", ",
    include_upazila: bool = True,
    include_district: bool = True,
    include_division: bool = True
) -> str:
    """
    Format a full address, smallest unit first.

    Args:
        address: Resolved address hierarchy
        language: 'bn' for Bengali names, 'en' for English
        separator: String placed between parts
        include_upazila: Include the upazila name
        include_district: Include the district name
        include_division: Include the division name

    Returns:
        Formatted address string
    """
    parts = []
    if include_upazila:
        parts.append(_display_name(address.upazila, language))
    if include_district:
        parts.append(_display_name(address.district, language))
    if include_division:
        parts.append(_display_name(address.division, language))

    return separator.join(parts)


def format_address_english(address: FullAddress) -> str:
    return format_address(address, language="en")


def format_address_bengali(address: FullAddress) -> str:
    return format_address(address, language="bn")
