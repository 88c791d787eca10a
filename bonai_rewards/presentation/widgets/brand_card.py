"""Brand tile and the claim confirmation it opens"""

from bonai_rewards.config import settings
from bonai_rewards.domain.models import BrandRecord
from bonai_rewards.infrastructure.observability.logging import log_brand_claim
from bonai_rewards.infrastructure.observability.metrics import record_reward_claim
from bonai_rewards.presentation.schemas import BrandTileFrame, ConfirmationFrame
from bonai_rewards.presentation.widgets.logo import LogoView

CLAIM_MESSAGE = "Your reward has been applied to {name}"


class ClaimConfirmation:
    """Popup confirming a claimed reward; only ever open or closed"""

    def __init__(self, brand: BrandRecord):
        self.brand = brand
        self.is_open = True

    @property
    def message(self) -> str:
        return CLAIM_MESSAGE.format(name=self.brand.name)

    def dismiss(self) -> None:
        self.is_open = False

    def render(self) -> ConfirmationFrame:
        return ConfirmationFrame(open=self.is_open, message=self.message)


class BrandCardView:
    def __init__(self, brand: BrandRecord, index: int):
        self.brand = brand
        self.index = index
        self.logo = LogoView(brand.logo_url, brand.name)

    def tap(self) -> ClaimConfirmation:
        """Apply the reward to this brand and open the confirmation"""
        record_reward_claim(self.brand.name)
        log_brand_claim(self.brand.name, settings.reward_amount)
        return ClaimConfirmation(self.brand)

    def render(self) -> BrandTileFrame:
        return BrandTileFrame(index=self.index, name=self.brand.name, logo=self.logo.render())
