"""Input validation for city searches."""

from weather_lookup.constants import EMPTY_CITY_MESSAGE
from weather_lookup.exceptions import InvalidCityNameError


def is_valid_input(raw: str) -> bool:
    """Check that input has at least one non-whitespace character.

    Only leading and trailing whitespace is ignored. Internal whitespace,
    length and character set are not restricted.

    Args:
        raw: Raw user input.

    Returns:
        True if the stripped input is not empty.
    """
    return len(raw.strip()) > 0


def require_city_name(raw: str) -> str:
    """Return the stripped city name or raise if it is blank.

    Args:
        raw: Raw user input.

    Returns:
        The city name without surrounding whitespace.

    Raises:
        InvalidCityNameError: If the input is empty or whitespace only.
    """
    if not is_valid_input(raw):
        raise InvalidCityNameError(EMPTY_CITY_MESSAGE)
    return raw.strip()
