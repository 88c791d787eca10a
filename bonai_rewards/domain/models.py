"""Domain models - pure Python dataclasses representing bills, brands and animation state"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

MASK_PREFIX = "**** **** **** "


class BillStatus(str, Enum):
    """Payment status of a bill, valued by its display text"""

    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"


def mask_card_number(card_number: str) -> str:
    """
    Project a card number onto its display form.

    Numbers with at least 4 characters keep only the last 4 behind a fixed
    mask; shorter input is echoed unchanged.
    """
    if len(card_number) >= 4:
        return MASK_PREFIX + card_number[-4:]
    return card_number


@dataclass(frozen=True)
class BillRecord:
    """Credit card bill shown in the bill list"""

    brand: str
    card_number: str
    amount: Decimal
    due_date: str  # display string, never parsed
    status: BillStatus
    logo_url: str

    @property
    def masked_number(self) -> str:
        return mask_card_number(self.card_number)


@dataclass(frozen=True)
class BrandRecord:
    """Brand a reward can be redeemed with"""

    name: str
    logo_url: str


class EntryPhase(int, Enum):
    """Entrance lifecycle; ordered so phases only move forward"""

    PENDING = 0
    DELAYED = 1
    RUNNING = 2
    SETTLED = 3


class ExpansionPhase(str, Enum):
    COLLAPSED = "collapsed"
    EXPANDING = "expanding"
    EXPANDED = "expanded"
    COLLAPSING = "collapsing"


@dataclass(frozen=True)
class EntryUpdate:
    """Progress report pushed to entrance listeners"""

    index: int
    phase: EntryPhase
    progress: float
    offset_fraction: float
    opacity: float


@dataclass(frozen=True)
class CardFrame:
    """Animation values of one card sampled at a single instant"""

    index: int
    entry_phase: EntryPhase
    expansion_phase: ExpansionPhase
    offset_fraction: float
    opacity: float
    reveal_factor: float
    chevron_degrees: float
