"""Reward screen: animated reward banner above the expandable bill list"""

import asyncio
import logging
from typing import List

from bonai_rewards.config import settings
from bonai_rewards.domain.animation import AnimationSequencer
from bonai_rewards.domain.exceptions import CardNotFoundError
from bonai_rewards.infrastructure.bill_store import BillCollection
from bonai_rewards.infrastructure.clients.images import ImageClient
from bonai_rewards.infrastructure.observability.metrics import render_duration_histogram
from bonai_rewards.presentation.schemas import BannerFrame, RewardScreenFrame
from bonai_rewards.presentation.screens.brand_screen import BrandScreen
from bonai_rewards.presentation.widgets.bill_card import BillCardView

logger = logging.getLogger(__name__)

BANNER_IMAGE_URL = "https://cdn-icons-png.flaticon.com/512/13374/13374615.png"


class RewardScreen:
    """
    Home screen. Reads the bill collection on every rebuild and owns one
    BillCardView per bill, keyed by list position.

    Lifecycle: mount() -> render()/tap_card()... -> teardown(). After
    teardown nothing scheduled by this screen runs again.
    """

    title = "Rewards"
    button_label = "Choose Brand"

    def __init__(self, collection: BillCollection, sequencer: AnimationSequencer):
        self.collection = collection
        self.sequencer = sequencer
        self.cards: List[BillCardView] = []
        self._mounted = False
        self._torn_down = False
        self._mounted_at_ms = 0.0

    @property
    def headline(self) -> str:
        return f"You've unlocked a ${settings.reward_amount} reward!"

    @property
    def mounted(self) -> bool:
        return self._mounted and not self._torn_down

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        self._mounted_at_ms = self.sequencer.scheduler.now_ms()

        self.collection.subscribe(self._on_bills_changed)
        self.sequencer.start_pulse()
        self.sequencer.schedule_banner_reveal()
        self._build_cards()

    def tap_card(self, index: int) -> None:
        if not 0 <= index < len(self.cards):
            raise CardNotFoundError(index)
        self.cards[index].tap()

    def choose_brand(self) -> BrandScreen:
        return BrandScreen()

    async def load_images(self, client: ImageClient) -> None:
        """Resolve every card logo; failures fall back to placeholders"""
        await asyncio.gather(*(card.logo.load(client) for card in self.cards))

    def teardown(self) -> None:
        if self._torn_down:
            return
        self._torn_down = True
        self.collection.unsubscribe(self._on_bills_changed)
        self.sequencer.dispose()
        logger.debug("Reward screen torn down", extra={"card_count": len(self.cards)})

    def render(self) -> RewardScreenFrame:
        with render_duration_histogram.labels(screen="reward").time():
            now_ms = self.sequencer.scheduler.now_ms()
            return RewardScreenFrame(
                title=self.title,
                at_ms=now_ms - self._mounted_at_ms,
                banner=self._render_banner(),
                button_label=self.button_label,
                cards=[card.render() for card in self.cards],
            )

    def _render_banner(self) -> BannerFrame:
        banner = self.sequencer.banner
        pulse = self.sequencer.pulse
        pulse_scale = pulse.scale if pulse is not None else 1.0

        if banner is None:
            visible, opacity, reveal_scale = False, 0.0, self.sequencer.timings.banner_start_scale
        else:
            visible, opacity, reveal_scale = banner.visible, banner.opacity, banner.scale

        return BannerFrame(
            image_url=BANNER_IMAGE_URL,
            visible=visible,
            opacity=opacity,
            scale=reveal_scale * pulse_scale,
            headline=self.headline,
        )

    def _build_cards(self) -> None:
        self.cards = [
            BillCardView(bill, index, self.sequencer)
            for index, bill in enumerate(self.collection.list())
        ]
        for card in self.cards:
            card.mount()

    def _on_bills_changed(self) -> None:
        if not self.mounted:
            return
        if tuple(card.bill for card in self.cards) == self.collection.list():
            return
        for card in self.cards:
            card.dispose()
        self._build_cards()
        logger.info("Bill list rebuilt", extra={"card_count": len(self.cards)})
