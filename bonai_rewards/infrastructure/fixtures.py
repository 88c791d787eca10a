"""Seed data for the bill list and the brand picker"""

from decimal import Decimal
from typing import List

from bonai_rewards.domain.models import BillRecord, BillStatus, BrandRecord
from bonai_rewards.infrastructure.bill_store import BillCollection

VISA_LOGO_URL = "https://img.icons8.com/color/48/visa.png"
SEED_CARD_NUMBER = "**** **** **** 5123"


def seed_bills() -> List[BillRecord]:
    """Three sample bills, one per status"""
    return [
        BillRecord(
            brand="Visa",
            card_number=SEED_CARD_NUMBER,
            amount=Decimal("120.50"),
            due_date="Aug 15, 2025",
            status=BillStatus.PENDING,
            logo_url=VISA_LOGO_URL,
        ),
        BillRecord(
            brand="Visa",
            card_number=SEED_CARD_NUMBER,
            amount=Decimal("300.75"),
            due_date="Sep 15, 2025",
            status=BillStatus.PAID,
            logo_url=VISA_LOGO_URL,
        ),
        BillRecord(
            brand="Visa",
            card_number=SEED_CARD_NUMBER,
            amount=Decimal("89.99"),
            due_date="Oct 15, 2025",
            status=BillStatus.OVERDUE,
            logo_url=VISA_LOGO_URL,
        ),
    ]


def seed_bill_collection() -> BillCollection:
    return BillCollection(seed_bills())


BRANDS: List[BrandRecord] = [
    BrandRecord(name="Amazon", logo_url="https://img.icons8.com/color/96/amazon.png"),
    BrandRecord(
        name="Flipkart",
        logo_url="https://www.freepnglogos.com/uploads/flipkart-logo-png/flipkart-logo-icon-flat-style-png-4.png",
    ),
    BrandRecord(name="Swiggy", logo_url="https://icon2.cleanpng.com/20180406/iiq/avbtjg3a7.webp"),
    BrandRecord(
        name="Zomato",
        logo_url="https://upload.wikimedia.org/wikipedia/commons/7/75/Zomato_logo.png?20210726145438",
    ),
    BrandRecord(name="Google Pay", logo_url="https://img.icons8.com/color/96/google-pay.png"),
    BrandRecord(name="PhonePe", logo_url="https://static.cdnlogo.com/logos/p/92/phonepe_800.png"),
]
