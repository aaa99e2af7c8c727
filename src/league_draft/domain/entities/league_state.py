"""
League State Value Object

Lifecycle of a League with its one-way transition rules.
"""

from enum import Enum
from typing import List


class LeagueState(Enum):
    """Lifecycle states of a League"""
    CREATED = "created"
    ACTIVE = "active"
    COMPLETE = "complete"

    @property
    def next_states(self) -> List["LeagueState"]:
        """Get valid next states from current state"""
        transitions = {
            self.CREATED: [self.ACTIVE],
            self.ACTIVE: [self.COMPLETE],
            self.COMPLETE: []
        }
        return transitions.get(self, [])

    def can_transition_to(self, target_state: "LeagueState") -> bool:
        """Check if can transition to target state"""
        return target_state in self.next_states

    @property
    def allows_exchange(self) -> bool:
        """Waivers and admin picks happen once the draft has started"""
        return self in [self.ACTIVE, self.COMPLETE]
