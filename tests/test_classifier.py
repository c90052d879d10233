from __future__ import annotations

import pytest

from temperatures.weather.classifier import classify
from temperatures.weather.models import LocationKind


@pytest.mark.parametrize("raw", ["01001001", "00000000", "99999999", "12345678"])
def test_eight_digits_is_postal_code(raw: str) -> None:
    assert classify(raw) is LocationKind.POSTAL_CODE


@pytest.mark.parametrize(
    "raw",
    [
        "-23.55028,-46.63389",
        "23.55028,46.63389",
        "-0,-0",
        "0,0",
        "123.123456789012,-987.1",
        "91,181",
    ],
)
def test_signed_decimal_pair_is_coordinates(raw: str) -> None:
    assert classify(raw) is LocationKind.COORDINATES


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "0100100",
        "010010010",
        "01001-001",
        " 01001001",
        "01001001 ",
        "01001001\n",
        "０１００１００１",
        "-23.55028, -46.63389",
        "-23.55028",
        "+23.5,46.6",
        "23.,46.6",
        ".5,46.6",
        "-23.5;-46.6",
        "abc",
        "sao paulo",
    ],
)
def test_anything_else_is_invalid(raw: str) -> None:
    assert classify(raw) is LocationKind.INVALID
