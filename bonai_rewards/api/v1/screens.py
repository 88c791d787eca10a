"""Screen frame endpoints - render screens at a point on a virtual clock"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from bonai_rewards.api.dependencies import get_bill_collection, get_request_id, get_scheduler, get_sequencer
from bonai_rewards.presentation.schemas import BrandGridFrame, RewardFrameRequest, RewardScreenFrame
from bonai_rewards.domain.animation import AnimationSequencer
from bonai_rewards.domain.exceptions import CardNotFoundError
from bonai_rewards.infrastructure.bill_store import BillCollection
from bonai_rewards.infrastructure.schedulers import ManualScheduler
from bonai_rewards.presentation.screens.brand_screen import BrandScreen
from bonai_rewards.presentation.screens.reward_screen import RewardScreen

router = APIRouter()


@router.post("/screens/reward/frame", response_model=RewardScreenFrame)
def render_reward_frame(
    request_body: RewardFrameRequest,
    request: Request,
    collection: BillCollection = Depends(get_bill_collection),
    scheduler: ManualScheduler = Depends(get_scheduler),
    sequencer: AnimationSequencer = Depends(get_sequencer),
):
    """
    Render the reward screen as it looks at_ms after mount.

    Flow:
    1. Mount a fresh screen on a virtual clock
    2. Replay card taps in time order (taps after at_ms are ignored)
    3. Advance to at_ms and render
    4. Tear the screen down
    """
    request_id = get_request_id(request)
    screen = RewardScreen(collection, sequencer)
    screen.mount()

    try:
        for tap in sorted(request_body.taps, key=lambda t: t.at_ms):
            if tap.at_ms > request_body.at_ms:
                break
            scheduler.advance_to(tap.at_ms)
            screen.tap_card(tap.index)

        scheduler.advance_to(request_body.at_ms)
        return screen.render()

    except CardNotFoundError as e:
        logging.warning(f"Tap on missing card: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    finally:
        screen.teardown()


@router.get("/screens/brands", response_model=BrandGridFrame)
def render_brand_grid():
    """Render the brand picker grid"""
    return BrandScreen().render()
