"""
League Entity - Aggregate Root

One draft: the ordered participants, the turn cursor, the lifecycle state and
the allocation set that keeps every pool item on at most one roster.

Every public method runs under the League's own lock, so commands arriving
concurrently from different participants are applied one at a time.
"""

import logging
import threading
import uuid
from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Optional, Set, Tuple

from ..exceptions import (
    DuplicateAllocationError,
    InvalidStateError,
    ItemNotFoundError,
    LeagueDraftError,
    LeagueInactiveError,
    NotOwnedError,
    ParticipantNotFoundError,
    RosterFullError,
)
from ..services.pick_resolver import PickResolver
from ..services.turn_order import TurnOrder
from .item import DraftItem
from .league_state import LeagueState
from .outcomes import PickOutcome, TradeResult, TurnAnnouncement, WaiverResult
from .participant import Participant

if TYPE_CHECKING:
    from ...application.interfaces import IItemPool

logger = logging.getLogger(__name__)


class League:
    """
    A draft league.

    Participants pick in strict round-robin order. A participant whose roster
    reached `target_count` is skipped; once every roster is full the League
    completes. Leagues with no `output` use their DraftGuild's default output.
    """

    def __init__(
        self,
        participants: Iterable[Hashable],
        target_count: int,
        pool: "IItemPool",
        output: Optional[object] = None,
        *,
        name: Optional[str] = None,
        max_queue_size: Optional[int] = None
    ):
        identities = list(participants)
        if not identities:
            raise ValueError("A League needs at least one participant")
        if len(set(identities)) != len(identities):
            raise ValueError("Participants must be unique")

        self._turn_order = TurnOrder(target_count)
        self._resolver = PickResolver(pool)
        self.name = name or uuid.uuid4().hex
        self.output = output
        self.max_queue_size = max_queue_size

        self._participants: List[Participant] = [
            Participant(identity=identity, max_queue_size=max_queue_size)
            for identity in identities
        ]
        self._state = LeagueState.CREATED
        self._current_seat = 0
        self._allocated: Set[str] = set()
        self._total_picks = 0
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return (
            f"League(name={self.name!r}, state={self._state.value}, "
            f"participants={len(self._participants)}, target_count={self.target_count})"
        )

    # ===================
    # State Queries
    # ===================

    @property
    def state(self) -> LeagueState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == LeagueState.ACTIVE

    @property
    def is_complete(self) -> bool:
        return self._state == LeagueState.COMPLETE

    @property
    def target_count(self) -> int:
        return self._turn_order.target_count

    @property
    def pool(self) -> "IItemPool":
        return self._resolver.pool

    @property
    def total_picks(self) -> int:
        return self._total_picks

    @property
    def mutex(self) -> threading.RLock:
        """The League lock, for callers that need several reads to agree"""
        return self._lock

    @property
    def participants(self) -> Tuple[Hashable, ...]:
        """Identities in turn order"""
        with self._lock:
            return tuple(p.identity for p in self._participants)

    @property
    def allocated(self) -> frozenset:
        with self._lock:
            return frozenset(self._allocated)

    def current_turn(self) -> Hashable:
        """Get the identity currently on the clock"""
        with self._lock:
            self._require_active()
            return self._participants[self._current_seat].identity

    def player_queue(self, identity: Hashable) -> List[str]:
        with self._lock:
            return list(self._get_participant(identity).queue)

    def player_roster(self, identity: Hashable) -> List[DraftItem]:
        with self._lock:
            return list(self._get_participant(identity).roster)

    def rosters(self) -> Dict[Hashable, List[DraftItem]]:
        """Every roster keyed by identity, in turn order"""
        with self._lock:
            return {p.identity: list(p.roster) for p in self._participants}

    def all_picks(self) -> List[DraftItem]:
        with self._lock:
            return [item for p in self._participants for item in p.roster]

    def available_items(self) -> List[str]:
        """Pool identifiers not allocated in this League"""
        with self._lock:
            return [i for i in self.pool.list_available() if i not in self._allocated]

    # ===================
    # Lifecycle
    # ===================

    def add_participant(self, identity: Hashable) -> None:
        """Append a participant to the turn order before the draft starts"""
        with self._lock:
            if self._state != LeagueState.CREATED:
                raise InvalidStateError(
                    f"Cannot add participants to League {self.name} once it is {self._state.value}"
                )
            if any(p.identity == identity for p in self._participants):
                raise ValueError(f"{identity} is already in League {self.name}")
            self._participants.append(
                Participant(identity=identity, max_queue_size=self.max_queue_size)
            )

    def activate(self) -> TurnAnnouncement:
        """Start the draft and put the first participant on the clock"""
        with self._lock:
            self._transition(LeagueState.ACTIVE)
            self._current_seat = 0
            first = self._participants[0]
            first.on_the_clock = True
            return TurnAnnouncement(
                league_name=self.name, participant=first.identity, output=self.output
            )

    def _transition(self, target_state: LeagueState) -> None:
        if not self._state.can_transition_to(target_state):
            raise InvalidStateError(
                f"League {self.name} cannot go from {self._state.value} to {target_state.value}"
            )
        logger.info(f"League {self.name}: {self._state.value} -> {target_state.value}")
        self._state = target_state

    def _require_active(self) -> None:
        if self._state != LeagueState.ACTIVE:
            raise LeagueInactiveError(f"League {self.name} is {self._state.value}, not active")

    def _require_exchange(self, action: str) -> None:
        if not self._state.allows_exchange:
            raise InvalidStateError(
                f"Cannot {action} in League {self.name} before the draft starts"
            )

    # ===================
    # Turn Engine
    # ===================

    def lock(self) -> PickOutcome:
        """
        Resolve the pick of the participant on the clock.

        Queued requests are taken from the front until one resolves. Requests
        that fail are consumed and reported in `rejected`. If none resolves the
        turn stays where it is. A successful pick is removed from every
        participant's queue.

        Raises:
            LeagueInactiveError: the League is not active; nothing is changed.
        """
        with self._lock:
            self._require_active()
            participant = self._participants[self._current_seat]
            rejected: List[Tuple[str, LeagueDraftError]] = []
            consumed: List[str] = []
            try:
                while True:
                    identifier = participant.first_in_queue()
                    if identifier is None:
                        break
                    consumed.append(identifier)
                    try:
                        item = self._resolver.resolve(identifier, self._allocated)
                    except (ItemNotFoundError, DuplicateAllocationError) as e:
                        logger.warning(f"League {self.name}: skipped queued pick {identifier}: {e}")
                        rejected.append((identifier, e))
                        continue
                    return self._allocate(participant, identifier, item, rejected)
            except Exception:
                # A failing pool must not eat the queue
                participant.queue.extendleft(reversed(consumed))
                raise

            logger.info(f"League {self.name}: no pick available for {participant.identity}")
            return PickOutcome(
                league_name=self.name,
                participant=participant.identity,
                next_participant=participant.identity,
                rejected=rejected
            )

    def lock_queued(self) -> List[PickOutcome]:
        """
        Keep locking while whoever is on the clock has picks queued.

        Always makes at least one attempt. Stops after a pick that leaves the
        next participant with an empty queue, after a failed attempt, or when
        the draft finishes.
        """
        with self._lock:
            outcomes = [self.lock()]
            while outcomes[-1].picked and not outcomes[-1].draft_finished:
                if not self._participants[self._current_seat].has_queued_picks:
                    break
                outcomes.append(self.lock())
            return outcomes

    def skip_turn(self) -> TurnAnnouncement:
        """Pass the turn on without a pick, e.g. for an absent participant"""
        with self._lock:
            self._require_active()
            skipped = self._participants[self._current_seat]
            next_participant = self._advance()
            logger.info(f"League {self.name}: skipped {skipped.identity}")
            return TurnAnnouncement(
                league_name=self.name, participant=next_participant.identity, output=self.output
            )

    def _allocate(
        self,
        participant: Participant,
        identifier: str,
        item: DraftItem,
        rejected: List[Tuple[str, LeagueDraftError]]
    ) -> PickOutcome:
        participant.lock_in(item)
        self._claim(identifier)
        self._total_picks += 1
        pick_number = self._total_picks
        logger.info(f"League {self.name}: pick {pick_number} {identifier} -> {participant.identity}")

        next_participant = self._advance()
        return PickOutcome(
            league_name=self.name,
            participant=participant.identity,
            item=item,
            next_participant=next_participant.identity if next_participant else None,
            draft_finished=next_participant is None,
            pick_number=pick_number,
            rejected=rejected
        )

    def _advance(self) -> Optional[Participant]:
        """Move the cursor to the next eligible seat; complete when none is left"""
        self._participants[self._current_seat].on_the_clock = False
        seat = self._turn_order.next_seat(self._participants, self._current_seat)
        if seat is None:
            self._transition(LeagueState.COMPLETE)
            return None
        self._current_seat = seat
        self._participants[seat].on_the_clock = True
        return self._participants[seat]

    def _claim(self, identifier: str) -> None:
        """Record an allocation and drop the identifier from every queue"""
        self._allocated.add(identifier)
        for participant in self._participants:
            if participant.discard_from_queue(identifier):
                logger.debug(
                    f"League {self.name}: removed {identifier} from {participant.identity}'s queue"
                )

    def _settle(self) -> Optional[Participant]:
        """Re-check the cursor after a roster changed outside the turn order"""
        self._participants[self._current_seat].on_the_clock = False
        seat = self._turn_order.settle_seat(self._participants, self._current_seat)
        if seat is None:
            self._transition(LeagueState.COMPLETE)
            return None
        self._current_seat = seat
        self._participants[seat].on_the_clock = True
        return self._participants[seat]

    # ===================
    # Queues
    # ===================

    def add_to_player_queue(self, identity: Hashable, identifier: str) -> List[str]:
        """Queue a pick request for a participant and return the new queue"""
        with self._lock:
            participant = self._get_participant(identity)
            participant.add_to_player_queue(identifier)
            return list(participant.queue)

    def delete_from_player_queue(self, identity: Hashable, identifier: str) -> List[str]:
        with self._lock:
            participant = self._get_participant(identity)
            participant.delete_from_player_queue(identifier)
            return list(participant.queue)

    def clear_player_queue(self, identity: Hashable) -> List[str]:
        """Empty a participant's queue and return the removed requests"""
        with self._lock:
            return self._get_participant(identity).clear_player_queue()

    # ===================
    # Exchange
    # ===================

    def waiver(self, identity: Hashable, drop_identifier: str, pickup_identifier: str) -> WaiverResult:
        """
        Exchange a rostered item for an unallocated one from the pool.

        The picked-up item takes the dropped item's roster slot. The dropped
        item is handed back in the result and its identifier becomes available.

        Raises:
            InvalidStateError: the draft has not started.
            NotOwnedError: drop_identifier is not on the participant's roster.
            DuplicateAllocationError: pickup_identifier is allocated.
            ItemNotFoundError: pickup_identifier is not in the pool.
        """
        with self._lock:
            self._require_exchange("waiver")
            participant = self._get_participant(identity)
            index = participant.roster_index(drop_identifier)
            if index is None:
                raise NotOwnedError(f"{identity} does not own {drop_identifier}")

            picked_up = self._resolver.resolve(pickup_identifier, self._allocated)

            dropped = participant.replace_at(index, picked_up)
            self._allocated.discard(drop_identifier)
            self._claim(pickup_identifier)
            logger.info(
                f"League {self.name}: {identity} waived {drop_identifier} for {pickup_identifier}"
            )
            return WaiverResult(
                league_name=self.name,
                participant=identity,
                dropped=dropped,
                picked_up=picked_up,
                roster=tuple(participant.roster)
            )

    def trade(
        self,
        identity_a: Hashable,
        item_a: str,
        identity_b: Hashable,
        item_b: str
    ) -> TradeResult:
        """
        Swap item_a (owned by identity_a) with item_b (owned by identity_b).

        Each incoming item takes the slot of the outgoing one, so repeating the
        trade in reverse restores both rosters exactly.
        """
        with self._lock:
            if identity_a == identity_b:
                raise ValueError("A participant cannot trade with themselves")
            participant_a = self._get_participant(identity_a)
            participant_b = self._get_participant(identity_b)

            index_a = participant_a.roster_index(item_a)
            if index_a is None:
                raise NotOwnedError(f"{identity_a} does not own {item_a}")
            index_b = participant_b.roster_index(item_b)
            if index_b is None:
                raise NotOwnedError(f"{identity_b} does not own {item_b}")

            outgoing_a = participant_a.roster[index_a]
            outgoing_b = participant_b.roster[index_b]
            participant_a.replace_at(index_a, outgoing_b)
            participant_b.replace_at(index_b, outgoing_a)
            logger.info(
                f"League {self.name}: {identity_a} traded {item_a} to {identity_b} for {item_b}"
            )
            return TradeResult(
                league_name=self.name,
                participant_a=identity_a,
                item_a=outgoing_a,
                participant_b=identity_b,
                item_b=outgoing_b,
                roster_a=tuple(participant_a.roster),
                roster_b=tuple(participant_b.roster)
            )

    def assign_pick(self, identity: Hashable, identifier: str) -> PickOutcome:
        """
        Allocate an item directly to a participant, outside the turn order.

        Meant for organizers filling in picks of skipped participants. While the
        draft is running the cursor is re-checked afterwards, which can finish
        the draft.
        """
        with self._lock:
            self._require_exchange("assign picks")
            participant = self._get_participant(identity)
            if participant.roster_size >= self.target_count:
                raise RosterFullError(
                    f"{identity} already has {self.target_count} picks in League {self.name}"
                )
            item = self._resolver.resolve(identifier, self._allocated)

            participant.lock_in(item)
            self._claim(identifier)
            self._total_picks += 1
            pick_number = self._total_picks
            logger.info(f"League {self.name}: assigned {identifier} to {identity}")

            next_participant = None
            draft_finished = False
            if self._state == LeagueState.ACTIVE:
                on_the_clock = self._settle()
                if on_the_clock is None:
                    draft_finished = True
                else:
                    next_participant = on_the_clock.identity
            return PickOutcome(
                league_name=self.name,
                participant=identity,
                item=item,
                next_participant=next_participant,
                draft_finished=draft_finished,
                pick_number=pick_number
            )

    def _get_participant(self, identity: Hashable) -> Participant:
        for participant in self._participants:
            if participant.identity == identity:
                return participant
        raise ParticipantNotFoundError(f"{identity} is not in League {self.name}")
