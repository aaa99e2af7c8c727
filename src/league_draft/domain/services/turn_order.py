"""
Turn Order Domain Service

Round-robin seat advancement over a fixed participant sequence.
"""

from typing import Optional, Sequence

from ..entities.participant import Participant


class TurnOrder:
    """
    Strict round-robin that skips participants whose roster is full.

    The order is the same every round; hosts wanting another order pre-order
    the participant sequence.
    """

    def __init__(self, target_count: int):
        if target_count < 1:
            raise ValueError("Target count must be positive")
        self.target_count = target_count

    def is_eligible(self, participant: Participant) -> bool:
        return participant.roster_size < self.target_count

    def next_seat(self, participants: Sequence[Participant], current_seat: int) -> Optional[int]:
        """
        Get the first eligible seat after current_seat, wrapping around.

        The current seat itself is considered last, so a lone participant with
        room left keeps the turn. Returns None when every roster is full.
        """
        count = len(participants)
        for offset in range(1, count + 1):
            seat = (current_seat + offset) % count
            if self.is_eligible(participants[seat]):
                return seat
        return None

    def settle_seat(self, participants: Sequence[Participant], current_seat: int) -> Optional[int]:
        """Keep current_seat if still eligible, otherwise move to the next one"""
        if self.is_eligible(participants[current_seat]):
            return current_seat
        return self.next_seat(participants, current_seat)
