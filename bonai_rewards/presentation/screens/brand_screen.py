"""Brand picker: a two-column grid of brands that a reward can be applied to"""

from typing import List, Optional, Sequence

from bonai_rewards.domain.exceptions import BrandNotFoundError
from bonai_rewards.domain.models import BrandRecord
from bonai_rewards.infrastructure.fixtures import BRANDS
from bonai_rewards.infrastructure.observability.metrics import render_duration_histogram
from bonai_rewards.presentation.schemas import BrandGridFrame
from bonai_rewards.presentation.widgets.brand_card import BrandCardView, ClaimConfirmation

GRID_COLUMNS = 2


class BrandScreen:
    title = "Choose a Brand"

    def __init__(self, brands: Sequence[BrandRecord] = BRANDS):
        self.cards: List[BrandCardView] = [BrandCardView(brand, i) for i, brand in enumerate(brands)]
        self.confirmation: Optional[ClaimConfirmation] = None

    def tap(self, index: int) -> ClaimConfirmation:
        """Activate a brand tile and show its confirmation"""
        if not 0 <= index < len(self.cards):
            raise BrandNotFoundError(index)
        self.confirmation = self.cards[index].tap()
        return self.confirmation

    def dismiss(self) -> None:
        if self.confirmation is not None:
            self.confirmation.dismiss()

    def render(self) -> BrandGridFrame:
        with render_duration_histogram.labels(screen="brands").time():
            tiles = [card.render() for card in self.cards]
            rows = [tiles[i:i + GRID_COLUMNS] for i in range(0, len(tiles), GRID_COLUMNS)]
            confirmation = self.confirmation.render() if self.confirmation is not None else None
            return BrandGridFrame(
                title=self.title,
                columns=GRID_COLUMNS,
                rows=rows,
                confirmation=confirmation,
            )
