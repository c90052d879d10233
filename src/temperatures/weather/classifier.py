"""Classification of raw location strings."""

import re

from temperatures.weather.models import LocationKind

# [0-9] instead of \d: only ASCII digits are accepted
POSTAL_CODE_PATTERN = re.compile(r"[0-9]{8}")
COORDINATES_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?,-?[0-9]+(\.[0-9]+)?")


def classify(raw: str) -> LocationKind:
    """Classify a location string as a CEP, a coordinate pair or invalid.

    The whole string must match; surrounding whitespace is not trimmed.
    Geographic range is not checked here.
    """
    if POSTAL_CODE_PATTERN.fullmatch(raw):
        return LocationKind.POSTAL_CODE
    if COORDINATES_PATTERN.fullmatch(raw):
        return LocationKind.COORDINATES
    return LocationKind.INVALID
