"""Expandable bill card"""

from typing import Dict, Optional, Tuple

from bonai_rewards.domain.animation import AnimationSequencer, CardAnimationState, EntryListener
from bonai_rewards.domain.models import BillRecord, BillStatus
from bonai_rewards.presentation.schemas import BillCardFrame, DetailPanelFrame, StatusBadge
from bonai_rewards.presentation.widgets.logo import LogoView

# status -> (style, color)
STATUS_STYLES: Dict[BillStatus, Tuple[str, str]] = {
    BillStatus.PAID: ("success", "#4CAF50"),
    BillStatus.PENDING: ("warning", "#FF9800"),
    BillStatus.OVERDUE: ("danger", "#F44336"),
}


def format_amount(bill: BillRecord) -> str:
    return f"${bill.amount:.2f}"


def status_badge(status: BillStatus) -> StatusBadge:
    style, color = STATUS_STYLES[status]
    return StatusBadge(text=status.value, style=style, color=color)


class BillCardView:
    """
    One bill in the list. Tapping toggles the detail panel; the animation
    state lives in the sequencer under this card's list index.
    """

    def __init__(self, bill: BillRecord, index: int, sequencer: AnimationSequencer):
        self.bill = bill
        self.index = index
        self.logo = LogoView(bill.logo_url, bill.brand)
        self._sequencer = sequencer
        self._state: Optional[CardAnimationState] = None

    @property
    def disposed(self) -> bool:
        return self._state is not None and self._state.disposed

    def mount(self, listener: EntryListener | None = None) -> None:
        self._state = self._sequencer.schedule_entry(self.index, listener)

    def tap(self) -> None:
        if self._state is None or self._state.disposed:
            return
        self._sequencer.toggle_expansion(self.index)

    def dispose(self) -> None:
        if self._state is not None and not self._state.disposed:
            self._sequencer.dispose_card(self.index)

    def render(self) -> BillCardFrame:
        if self._state is None:
            self.mount()
        frame = self._sequencer.frame_of(self._state)

        return BillCardFrame(
            index=self.index,
            title=f"{self.bill.brand} Credit Card",
            masked_number=self.bill.masked_number,
            status=status_badge(self.bill.status),
            logo=self.logo.render(),
            entry_phase=frame.entry_phase.name.lower(),
            expansion_phase=frame.expansion_phase.value,
            expanded=self._state.expanded,
            opacity=frame.opacity,
            offset_fraction=frame.offset_fraction,
            chevron_degrees=frame.chevron_degrees,
            detail=DetailPanelFrame(
                amount_text=format_amount(self.bill),
                due_date=self.bill.due_date,
                reveal_factor=frame.reveal_factor,
                visible=frame.reveal_factor > 0.0,
            ),
        )
