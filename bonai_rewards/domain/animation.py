"""
Animation sequencing for the bill list and reward banner.

Each rendered card owns a CardAnimationState with two orthogonal machines:

    entry:      Pending -> Delayed -> Running -> Settled
    expansion:  Collapsed <-> Expanding/Collapsing -> Expanded/Collapsed

The banner gets an ambient pulse plus a one-shot reveal. Every callback is
scheduled through a CancellationToken owned by the card (or the sequencer),
so disposal turns anything still in flight into a no-op.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set

from bonai_rewards.config import Settings, settings
from bonai_rewards.domain.curves import EASE_IN, EASE_IN_OUT, EASE_OUT, ELASTIC_OUT, lerp
from bonai_rewards.domain.exceptions import CardNotFoundError
from bonai_rewards.domain.interpolation import AnimationStatus, Interpolation
from bonai_rewards.domain.models import CardFrame, EntryPhase, EntryUpdate, ExpansionPhase
from bonai_rewards.domain.scheduling import CancellationToken, Scheduler
from bonai_rewards.infrastructure.observability.logging import log_card_toggle
from bonai_rewards.infrastructure.observability.metrics import record_card_toggle, entry_settled_counter

logger = logging.getLogger(__name__)

EntryListener = Callable[[EntryUpdate], None]


@dataclass(frozen=True)
class AnimationTimings:
    """Durations in milliseconds plus the tween endpoints they drive"""

    entry_stagger_ms: float = 200.0
    entry_duration_ms: float = 600.0
    entry_offset_fraction: float = 0.2
    expansion_duration_ms: float = 300.0
    pulse_duration_ms: float = 2000.0
    pulse_min_scale: float = 0.8
    pulse_max_scale: float = 1.2
    banner_delay_ms: float = 300.0
    banner_duration_ms: float = 800.0
    banner_start_scale: float = 0.5
    frame_interval_ms: float = 16.0

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "AnimationTimings":
        return cls(
            entry_stagger_ms=config.entry_stagger_ms,
            entry_duration_ms=config.entry_duration_ms,
            entry_offset_fraction=config.entry_offset_fraction,
            expansion_duration_ms=config.expansion_duration_ms,
            pulse_duration_ms=config.pulse_duration_ms,
            pulse_min_scale=config.pulse_min_scale,
            pulse_max_scale=config.pulse_max_scale,
            banner_delay_ms=config.banner_delay_ms,
            banner_duration_ms=config.banner_duration_ms,
            banner_start_scale=config.banner_start_scale,
            frame_interval_ms=config.frame_interval_ms,
        )


@dataclass(eq=False)
class CardAnimationState:
    """Mutable animation record of one rendered card"""

    index: int
    token: CancellationToken
    entry: Interpolation
    expansion: Interpolation
    entry_phase: EntryPhase = EntryPhase.PENDING
    expansion_phase: ExpansionPhase = ExpansionPhase.COLLAPSED
    expanded: bool = False
    listeners: List[EntryListener] = field(default_factory=list)

    @property
    def disposed(self) -> bool:
        return self.token.cancelled

    def advance_entry(self, phase: EntryPhase) -> bool:
        """Move the entry phase forward; earlier phases are refused"""
        if phase <= self.entry_phase:
            return False
        self.entry_phase = phase
        return True

    def dispose(self) -> None:
        self.entry.dispose()
        self.expansion.dispose()
        self.token.cancel()
        self.listeners.clear()


class PulseAnimation:
    """Auto-reversing scale loop for the banner image"""

    def __init__(self, interpolation: Interpolation, timings: AnimationTimings):
        self.interpolation = interpolation
        self._timings = timings

    @property
    def running(self) -> bool:
        return self.interpolation.is_animating and not self.interpolation.disposed

    @property
    def scale(self) -> float:
        t = EASE_IN_OUT.transform(self.interpolation.value)
        return lerp(self._timings.pulse_min_scale, self._timings.pulse_max_scale, t)


class BannerReveal:
    """One-shot fade and elastic scale-in of the reward banner"""

    def __init__(self, interpolation: Interpolation, timings: AnimationTimings):
        self.interpolation = interpolation
        self.phase = EntryPhase.PENDING
        self._timings = timings

    @property
    def visible(self) -> bool:
        return self.phase >= EntryPhase.RUNNING

    @property
    def opacity(self) -> float:
        return EASE_OUT.transform(self.interpolation.value)

    @property
    def scale(self) -> float:
        # elastic curve overshoots past the resting scale before settling
        t = ELASTIC_OUT.transform(self.interpolation.value)
        return lerp(self._timings.banner_start_scale, 1.0, t)


class AnimationSequencer:
    """
    Drives entrance, expansion and banner animations on a Scheduler.

    Cards are keyed by their position in the rendered list. The sequencer is
    created by a screen on mount and disposed on teardown.
    """

    def __init__(self, scheduler: Scheduler, timings: AnimationTimings | None = None):
        self.scheduler = scheduler
        self.timings = timings or AnimationTimings.from_settings()
        self._cards: Dict[int, CardAnimationState] = {}
        self._retired: Set[int] = set()
        self._token = CancellationToken("sequencer")
        self._pulse: Optional[PulseAnimation] = None
        self._banner: Optional[BannerReveal] = None

    @property
    def disposed(self) -> bool:
        return self._token.cancelled

    @property
    def card_indexes(self) -> List[int]:
        return sorted(self._cards)

    # -- cards --------------------------------------------------------------

    def mount(self, index: int) -> CardAnimationState:
        """Create the animation state for a card entering the list"""
        if index < 0:
            raise ValueError(f"Card index must be non-negative, got {index}")

        state = self._cards.get(index)
        if state is not None:
            return state

        token = CancellationToken(f"card-{index}")
        if self.disposed:
            token.cancel()

        state = CardAnimationState(
            index=index,
            token=token,
            entry=self._interpolation(self.timings.entry_duration_ms, token),
            expansion=self._interpolation(self.timings.expansion_duration_ms, token),
        )
        state.entry.add_status_listener(lambda status: self._on_entry_status(state, status))
        state.entry.add_listener(lambda _value: self._emit_entry(state))
        state.expansion.add_status_listener(lambda status: self._on_expansion_status(state, status))

        self._cards[index] = state
        self._retired.discard(index)
        return state

    def schedule_entry(self, index: int, listener: EntryListener | None = None) -> CardAnimationState:
        """
        Stagger the card's entrance by index * entry_stagger_ms.

        Calling again for a card that is already scheduled only attaches the
        listener; the timeline is never restarted.
        """
        state = self.mount(index)
        if listener is not None and not state.disposed:
            state.listeners.append(listener)

        if state.entry_phase != EntryPhase.PENDING or state.disposed:
            return state

        self._set_entry_phase(state, EntryPhase.DELAYED)
        state.token.schedule(
            self.scheduler,
            index * self.timings.entry_stagger_ms,
            lambda: self._start_entry(state),
        )
        return state

    def toggle_expansion(self, index: int) -> None:
        """Flip a card between expanded and collapsed, retargeting mid-flight"""
        state = self._cards.get(index)
        if state is None:
            if index in self._retired or self.disposed:
                logger.debug("Ignoring toggle on disposed card", extra={"card_index": index})
                return
            raise CardNotFoundError(index)
        if state.disposed:
            return

        state.expanded = not state.expanded
        if state.expanded:
            state.expansion_phase = ExpansionPhase.EXPANDING
            state.expansion.forward()
        else:
            state.expansion_phase = ExpansionPhase.COLLAPSING
            state.expansion.reverse()

        # a retarget with nothing left to travel settles on the spot
        if not state.expansion.is_animating:
            self._snap_expansion(state)

        direction = "expand" if state.expanded else "collapse"
        record_card_toggle(direction)
        log_card_toggle(index, direction, state.expansion.value)

    def sample(self, index: int) -> CardFrame:
        return self.frame_of(self._card(index))

    def frame_of(self, state: CardAnimationState) -> CardFrame:
        entry_progress = state.entry.value
        reveal = EASE_IN_OUT.transform(state.expansion.value)
        return CardFrame(
            index=state.index,
            entry_phase=state.entry_phase,
            expansion_phase=state.expansion_phase,
            offset_fraction=self._entry_offset(entry_progress),
            opacity=EASE_IN.transform(entry_progress),
            reveal_factor=reveal,
            chevron_degrees=180.0 * reveal,
        )

    def dispose_card(self, index: int) -> None:
        state = self._cards.pop(index, None)
        if state is None:
            return
        state.dispose()
        self._retired.add(index)

    def dispose_cards(self) -> None:
        """Drop every card, e.g. before the list is rebuilt with new items"""
        for index in list(self._cards):
            self.dispose_card(index)

    # -- banner -------------------------------------------------------------

    def start_pulse(self) -> PulseAnimation:
        if self._pulse is None:
            interpolation = self._interpolation(self.timings.pulse_duration_ms, self._token)
            self._pulse = PulseAnimation(interpolation, self.timings)
            interpolation.repeat()
        return self._pulse

    def schedule_banner_reveal(self) -> BannerReveal:
        if self._banner is not None:
            return self._banner

        interpolation = self._interpolation(self.timings.banner_duration_ms, self._token)
        banner = BannerReveal(interpolation, self.timings)
        self._banner = banner
        if self.disposed:
            return banner

        def settle(status: AnimationStatus) -> None:
            if status == AnimationStatus.COMPLETED:
                banner.phase = EntryPhase.SETTLED

        def start() -> None:
            banner.phase = EntryPhase.RUNNING
            interpolation.forward()

        interpolation.add_status_listener(settle)
        banner.phase = EntryPhase.DELAYED
        self._token.schedule(self.scheduler, self.timings.banner_delay_ms, start)
        return banner

    @property
    def pulse(self) -> Optional[PulseAnimation]:
        return self._pulse

    @property
    def banner(self) -> Optional[BannerReveal]:
        return self._banner

    # -- teardown -----------------------------------------------------------

    def dispose(self) -> None:
        """Cancel everything in flight; later callbacks become no-ops"""
        if self.disposed:
            return
        self.dispose_cards()
        if self._pulse is not None:
            self._pulse.interpolation.dispose()
        if self._banner is not None:
            self._banner.interpolation.dispose()
        self._token.cancel()
        logger.debug("Animation sequencer disposed")

    # -- internals ----------------------------------------------------------

    def _card(self, index: int) -> CardAnimationState:
        state = self._cards.get(index)
        if state is None:
            raise CardNotFoundError(index)
        return state

    def _interpolation(self, duration_ms: float, token: CancellationToken) -> Interpolation:
        return Interpolation(
            self.scheduler,
            duration_ms,
            token,
            frame_interval_ms=self.timings.frame_interval_ms,
        )

    def _entry_offset(self, progress: float) -> float:
        return lerp(self.timings.entry_offset_fraction, 0.0, EASE_OUT.transform(progress))

    def _start_entry(self, state: CardAnimationState) -> None:
        self._set_entry_phase(state, EntryPhase.RUNNING)
        state.entry.forward()

    def _on_entry_status(self, state: CardAnimationState, status: AnimationStatus) -> None:
        if status == AnimationStatus.COMPLETED:
            self._set_entry_phase(state, EntryPhase.SETTLED)
            entry_settled_counter.inc()

    def _set_entry_phase(self, state: CardAnimationState, phase: EntryPhase) -> None:
        if state.advance_entry(phase):
            self._emit_entry(state)

    def _emit_entry(self, state: CardAnimationState) -> None:
        if state.disposed or not state.listeners:
            return
        progress = state.entry.value
        update = EntryUpdate(
            index=state.index,
            phase=state.entry_phase,
            progress=progress,
            offset_fraction=self._entry_offset(progress),
            opacity=EASE_IN.transform(progress),
        )
        for listener in list(state.listeners):
            listener(update)

    def _on_expansion_status(self, state: CardAnimationState, status: AnimationStatus) -> None:
        if status in (AnimationStatus.COMPLETED, AnimationStatus.DISMISSED):
            self._snap_expansion(state)

    def _snap_expansion(self, state: CardAnimationState) -> None:
        state.expansion_phase = ExpansionPhase.EXPANDED if state.expanded else ExpansionPhase.COLLAPSED
