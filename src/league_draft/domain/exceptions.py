"""
Domain Exceptions

Rule violations raised by the draft core. The host maps each kind to a reply;
none of them is fatal and none leaves a League partially mutated.
"""


class LeagueDraftError(Exception):
    """Base exception for all league draft errors"""
    pass


class InvalidStateError(LeagueDraftError):
    """Raised when a lifecycle operation is attempted from the wrong state"""
    pass


class LeagueInactiveError(LeagueDraftError):
    """Raised when a turn operation is attempted while the League is not active"""
    pass


class ItemNotFoundError(LeagueDraftError):
    """Raised when an identifier is absent from the item pool"""
    pass


class DuplicateAllocationError(LeagueDraftError):
    """Raised when an identifier is already allocated to some roster"""
    pass


class NotOwnedError(LeagueDraftError):
    """Raised when a waiver or trade names an item missing from the claimed roster"""
    pass


class NotQueuedError(LeagueDraftError):
    """Raised when deleting an identifier that is not in the queue"""
    pass


class QueueFullError(LeagueDraftError):
    """Raised when a pick queue has reached its configured maximum"""
    pass


class RosterFullError(LeagueDraftError):
    """Raised when allocating to a roster that already reached the target count"""
    pass


class ParticipantNotFoundError(LeagueDraftError):
    """Raised when an identity does not belong to the League"""
    pass


class DuplicateLeagueError(LeagueDraftError):
    """Raised when a League name is already in use in a DraftGuild"""
    pass


class LeagueNotFoundError(LeagueDraftError):
    """Raised when a DraftGuild has no League with the given name"""
    pass
