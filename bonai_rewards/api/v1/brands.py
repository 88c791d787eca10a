"""POST /v1/brands/{index}/claim - Apply the reward to a brand"""

import logging
from fastapi import APIRouter, HTTPException, Request

from bonai_rewards.api.dependencies import get_request_id
from bonai_rewards.presentation.schemas import ConfirmationFrame
from bonai_rewards.domain.exceptions import BrandNotFoundError
from bonai_rewards.presentation.screens.brand_screen import BrandScreen

router = APIRouter()


@router.post("/brands/{index}/claim", response_model=ConfirmationFrame)
def claim_reward(index: int, request: Request):
    """
    Tap the brand at grid position index.

    Returns:
        The confirmation popup naming the chosen brand
    """
    try:
        confirmation = BrandScreen().tap(index)
    except BrandNotFoundError as e:
        logging.warning(f"Claim for unknown brand: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=404, detail=str(e))

    return confirmation.render()
