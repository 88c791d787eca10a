"""GET /v1/bills - Bills shown on the reward screen"""

from typing import List
from fastapi import APIRouter, Depends

from bonai_rewards.api.dependencies import get_bill_collection
from bonai_rewards.presentation.schemas import BillSchema
from bonai_rewards.infrastructure.bill_store import BillCollection

router = APIRouter()


@router.get("/bills", response_model=List[BillSchema])
def list_bills(collection: BillCollection = Depends(get_bill_collection)):
    """Return bills in display order with masked card numbers"""
    return [
        BillSchema(
            brand=bill.brand,
            masked_number=bill.masked_number,
            amount=bill.amount,
            due_date=bill.due_date,
            status=bill.status.value,
            logo_url=bill.logo_url,
        )
        for bill in collection.list()
    ]
