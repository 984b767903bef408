"""Tests for address scoring."""

from __future__ import annotations

import pytest

from src.services.ip_resolution.core.models import AddressCandidate
from src.services.ip_resolution.core.scorer import OTHER_PRIORITY, REJECTED, score_address


def _score(text: str) -> int:
    return score_address(AddressCandidate.from_text(text))


class TestScoreAddress:
    """Test suite for score_address."""

    @pytest.mark.parametrize(
        "address,expected",
        [
            ("192.168.0.1", 100),
            ("192.168.255.254", 100),
            ("10.0.0.1", 50),
            ("10.255.255.255", 50),
            ("172.16.0.1", 30),
            ("172.31.255.254", 30),
        ],
    )
    def test_private_ranges(self, address: str, expected: int) -> None:
        """Private ranges rank home > corporate > docker-style."""
        assert _score(address) == expected

    @pytest.mark.parametrize("address", ["172.15.0.1", "172.32.0.1", "192.169.0.1", "11.0.0.1"])
    def test_range_boundaries_score_as_other(self, address: str) -> None:
        """Addresses just outside the private ranges are ordinary."""
        assert _score(address) == OTHER_PRIORITY

    def test_loopback_and_unspecified_rejected(self) -> None:
        """127.0.0.1 and 0.0.0.0 are never selectable."""
        assert _score("127.0.0.1") == REJECTED
        assert _score("0.0.0.0") == REJECTED

    def test_link_local_and_other_loopback_score_as_other(self) -> None:
        """Only the exact loopback address is rejected."""
        assert _score("169.254.10.20") == OTHER_PRIORITY
        assert _score("127.0.0.2") == OTHER_PRIORITY

    def test_public_address_scores_as_other(self) -> None:
        assert _score("8.8.8.8") == OTHER_PRIORITY


class TestAddressCandidate:
    """Test suite for AddressCandidate conversions."""

    def test_text_round_trips_host_order_value(self) -> None:
        candidate = AddressCandidate.from_text("192.168.1.20")

        assert candidate.value == 0xC0A80114
        assert candidate.text == "192.168.1.20"
