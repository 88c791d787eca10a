"""Unit tests for bill and brand records"""

import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal
from bonai_rewards.domain.models import BillRecord, BillStatus, EntryPhase, mask_card_number


@pytest.mark.parametrize(
    "card_number, expected",
    [
        ("4111111111115123", "**** **** **** 5123"),
        ("**** **** **** 5123", "**** **** **** 5123"),
        ("1234", "**** **** **** 1234"),
        ("abcdefg", "**** **** **** defg"),
    ],
)
def test_mask_keeps_last_four(card_number: str, expected: str):
    """Numbers of 4+ characters are masked down to their last 4"""
    assert mask_card_number(card_number) == expected


@pytest.mark.parametrize("card_number", ["", "1", "12", "123"])
def test_mask_short_input_echoed(card_number: str):
    """Shorter input comes back unchanged instead of raising"""
    assert mask_card_number(card_number) == card_number


def test_bill_record_exposes_masked_number_only_as_projection():
    bill = BillRecord(
        brand="Visa",
        card_number="4000123412345123",
        amount=Decimal("10.00"),
        due_date="Aug 15, 2025",
        status=BillStatus.PENDING,
        logo_url="https://example.com/visa.png",
    )

    assert bill.masked_number == "**** **** **** 5123"
    with pytest.raises(FrozenInstanceError):
        bill.brand = "Mastercard"


def test_entry_phases_are_ordered():
    assert EntryPhase.PENDING < EntryPhase.DELAYED < EntryPhase.RUNNING < EntryPhase.SETTLED
