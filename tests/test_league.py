import pytest

from src.league_draft.application.interfaces import IItemPool
from src.league_draft.domain.entities.league import League
from src.league_draft.domain.entities.league_state import LeagueState
from src.league_draft.domain.exceptions import (
    DuplicateAllocationError,
    InvalidStateError,
    ItemNotFoundError,
    LeagueInactiveError,
    ParticipantNotFoundError,
    QueueFullError,
)


class BrokenPool(IItemPool):
    """Pool whose backing store is down"""

    def fetch(self, identifier):
        raise RuntimeError("catalog unavailable")

    def list_available(self):
        return []


def test_new_league_requires_participants(pool):
    with pytest.raises(ValueError):
        League([], 2, pool)


def test_new_league_rejects_duplicate_participants(pool):
    with pytest.raises(ValueError):
        League(["p1", "p1"], 2, pool)


def test_new_league_requires_positive_target(pool):
    with pytest.raises(ValueError):
        League(["p1"], 0, pool)


def test_new_league_starts_created(make_league):
    league = make_league()
    assert league.state == LeagueState.CREATED
    assert not league.is_active
    assert league.name  # generated when not given
    assert league.participants == ("p1", "p2")


def test_activate_puts_first_participant_on_clock(make_league):
    league = make_league(output=1234)
    announcement = league.activate()

    assert league.state == LeagueState.ACTIVE
    assert announcement.participant == "p1"
    assert announcement.output == 1234
    assert league.current_turn() == "p1"


def test_activate_twice_fails(active_league):
    with pytest.raises(InvalidStateError):
        active_league.activate()
    assert active_league.state == LeagueState.ACTIVE


def test_current_turn_requires_active_league(make_league):
    with pytest.raises(LeagueInactiveError):
        make_league().current_turn()


def test_add_participant_only_before_activation(make_league):
    league = make_league()
    league.add_participant("p3")
    assert league.participants == ("p1", "p2", "p3")

    with pytest.raises(ValueError):
        league.add_participant("p3")

    league.activate()
    with pytest.raises(InvalidStateError):
        league.add_participant("p4")


def test_lock_on_inactive_league_changes_nothing(make_league):
    league = make_league()
    league.add_to_player_queue("p1", "Pikachu")

    with pytest.raises(LeagueInactiveError):
        league.lock()

    assert league.player_queue("p1") == ["Pikachu"]
    assert league.player_roster("p1") == []
    assert league.allocated == frozenset()
    assert league.state == LeagueState.CREATED


def test_two_participant_draft_scenario(make_league):
    league = make_league(["P1", "P2"], target_count=1)
    assert league.activate().participant == "P1"

    league.add_to_player_queue("P1", "Pikachu")
    first = league.lock()
    assert first.item.name == "Pikachu"
    assert first.next_participant == "P2"
    assert not first.draft_finished
    assert league.state == LeagueState.ACTIVE

    league.add_to_player_queue("P2", "Pikachu")
    league.add_to_player_queue("P2", "Quaxly")
    second = league.lock()
    assert second.item.name == "Quaxly"
    assert second.rejected_identifiers == ["Pikachu"]
    assert isinstance(second.rejected[0][1], DuplicateAllocationError)
    assert second.draft_finished
    assert second.next_participant is None
    assert league.state == LeagueState.COMPLETE


def test_lock_with_empty_queue_keeps_turn(active_league):
    outcome = active_league.lock()

    assert not outcome.picked
    assert outcome.next_participant == "p1"
    assert active_league.current_turn() == "p1"
    assert active_league.total_picks == 0


def test_lock_consumes_invalid_requests(active_league):
    active_league.add_to_player_queue("p1", "Mewtwo")
    active_league.add_to_player_queue("p1", "Mew")

    outcome = active_league.lock()

    assert not outcome.picked
    assert outcome.rejected_identifiers == ["Mewtwo", "Mew"]
    assert all(isinstance(e, ItemNotFoundError) for _, e in outcome.rejected)
    assert active_league.player_queue("p1") == []
    assert active_league.current_turn() == "p1"


def test_queue_order_is_pick_order(make_league):
    league = make_league(["p1"], target_count=2)
    league.activate()
    league.add_to_player_queue("p1", "Raichu")
    league.add_to_player_queue("p1", "Pikachu")

    first = league.lock()
    assert first.item.name == "Raichu"
    assert first.next_participant == "p1"

    second = league.lock()
    assert second.item.name == "Pikachu"
    assert second.draft_finished
    assert [item.name for item in league.player_roster("p1")] == ["Raichu", "Pikachu"]


def test_turn_skips_full_rosters(make_league):
    league = make_league(["p1", "p2", "p3"], target_count=2)
    league.activate()
    league.assign_pick("p2", "Raichu")
    league.assign_pick("p2", "Eldegoss")
    assert league.current_turn() == "p1"

    league.add_to_player_queue("p1", "Pikachu")
    outcome = league.lock()

    assert outcome.next_participant == "p3"
    assert league.current_turn() == "p3"


def test_completed_league_stays_complete(make_league):
    league = make_league(["p1"], target_count=1)
    league.activate()
    league.add_to_player_queue("p1", "Pikachu")
    assert league.lock().draft_finished

    with pytest.raises(LeagueInactiveError):
        league.lock()
    with pytest.raises(InvalidStateError):
        league.activate()
    with pytest.raises(LeagueInactiveError):
        league.skip_turn()
    assert league.is_complete


def test_full_draft_never_allocates_twice(make_league, pool):
    participants = ["p1", "p2", "p3"]
    league = make_league(participants, target_count=2)
    names = pool.list_available()
    for offset, identity in enumerate(participants):
        for name in names[offset:] + names[:offset]:
            league.add_to_player_queue(identity, name)
    league.activate()

    outcomes = []
    for _ in range(20):
        if not league.is_active:
            break
        outcome = league.lock()
        outcomes.append(outcome)
        if league.is_active:
            current = league.current_turn()
            assert len(league.player_roster(current)) < league.target_count

    picked = [o.item.name for o in outcomes if o.picked]
    assert len(picked) == 6
    assert len(set(picked)) == 6
    assert [o.pick_number for o in outcomes if o.picked] == [1, 2, 3, 4, 5, 6]
    assert league.is_complete
    assert all(len(roster) == 2 for roster in league.rosters().values())
    assert league.allocated == frozenset(picked)


def test_lock_queued_chains_through_queues(active_league):
    for name in ["Pikachu", "Quaxly"]:
        active_league.add_to_player_queue("p1", name)
    for name in ["Pikachu", "Raichu"]:
        active_league.add_to_player_queue("p2", name)

    outcomes = active_league.lock_queued()

    assert [(o.participant, o.item.name) for o in outcomes] == [
        ("p1", "Pikachu"),
        ("p2", "Raichu"),
        ("p1", "Quaxly"),
    ]
    # p2's Pikachu left the queue when p1 took it
    assert outcomes[1].rejected_identifiers == []
    assert active_league.current_turn() == "p2"
    assert active_league.is_active


def test_lock_queued_with_empty_queue(active_league):
    outcomes = active_league.lock_queued()
    assert len(outcomes) == 1
    assert not outcomes[0].picked


def test_lock_restores_queue_when_pool_fails():
    league = League(["p1", "p2"], 1, BrokenPool())
    league.activate()
    league.add_to_player_queue("p1", "Pikachu")
    league.add_to_player_queue("p1", "Quaxly")

    with pytest.raises(RuntimeError):
        league.lock()

    assert league.player_queue("p1") == ["Pikachu", "Quaxly"]
    assert league.current_turn() == "p1"
    assert league.total_picks == 0


def test_skip_turn(active_league):
    announcement = active_league.skip_turn()
    assert announcement.participant == "p2"
    assert active_league.current_turn() == "p2"

    assert active_league.skip_turn().participant == "p1"


def test_skip_turn_requires_active_league(make_league):
    with pytest.raises(LeagueInactiveError):
        make_league().skip_turn()


def test_queue_operations_work_in_any_state(make_league):
    league = make_league(max_queue_size=2)
    assert league.add_to_player_queue("p1", "Pikachu") == ["Pikachu"]
    assert league.add_to_player_queue("p1", "Quaxly") == ["Pikachu", "Quaxly"]
    with pytest.raises(QueueFullError):
        league.add_to_player_queue("p1", "Raichu")

    league.activate()
    assert league.delete_from_player_queue("p1", "Pikachu") == ["Quaxly"]
    assert league.clear_player_queue("p1") == ["Quaxly"]
    assert league.clear_player_queue("p1") == []


def test_queue_operations_unknown_participant(active_league):
    with pytest.raises(ParticipantNotFoundError):
        active_league.add_to_player_queue("nobody", "Pikachu")
    with pytest.raises(ParticipantNotFoundError):
        active_league.player_roster("nobody")


def test_available_items_excludes_allocated(active_league, pool):
    active_league.add_to_player_queue("p1", "Pikachu")
    active_league.lock()

    available = active_league.available_items()
    assert "Pikachu" not in available
    assert len(available) == len(pool) - 1


def test_skip_turn_passes_over_full_rosters(make_league):
    league = make_league(["p1", "p2", "p3"], target_count=1)
    league.activate()
    league.assign_pick("p2", "Raichu")

    assert league.skip_turn().participant == "p3"


def test_all_picks_in_turn_order(active_league):
    active_league.add_to_player_queue("p1", "Pikachu")
    active_league.add_to_player_queue("p2", "Quaxly")
    active_league.lock_queued()

    assert [item.name for item in active_league.all_picks()] == ["Pikachu", "Quaxly"]


def test_pick_leaves_every_queue(active_league):
    active_league.add_to_player_queue("p1", "Pikachu")
    active_league.add_to_player_queue("p1", "Pikachu")
    active_league.add_to_player_queue("p2", "Pikachu")
    active_league.add_to_player_queue("p2", "Quaxly")

    active_league.lock()

    assert active_league.player_queue("p1") == []
    assert active_league.player_queue("p2") == ["Quaxly"]


def test_pick_made_before_queueing_is_still_rejected(active_league):
    active_league.add_to_player_queue("p1", "Pikachu")
    active_league.lock()

    active_league.add_to_player_queue("p2", "Pikachu")
    outcome = active_league.lock()

    assert outcome.rejected_identifiers == ["Pikachu"]
    assert not outcome.picked
