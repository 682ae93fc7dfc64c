"""
ParticipantPair Value Object - the unordered pair of users in a conversation.

(A, B) and (B, A) compare equal and share one key, which the storage layer
keeps unique.
"""

from dataclasses import dataclass

from konektz.domain.value_objects.user_id import UserId

PAIR_KEY_SEPARATOR = ":"
# Name of the storage constraint that keeps pair keys unique
PAIR_KEY_CONSTRAINT = "uq_conversations_pair_key"


@dataclass(frozen=True)
class ParticipantPair:
    first: UserId
    second: UserId

    def __post_init__(self):
        if self.first == self.second:
            raise ValueError("A conversation needs two distinct participants")
        # Keep the pair sorted so equality ignores argument order
        if self.second.value < self.first.value:
            first, second = self.second, self.first
            object.__setattr__(self, "first", first)
            object.__setattr__(self, "second", second)

    @property
    def key(self) -> str:
        return f"{self.first.value}{PAIR_KEY_SEPARATOR}{self.second.value}"

    def __contains__(self, user_id: UserId) -> bool:
        return user_id in (self.first, self.second)

    def __str__(self) -> str:
        return self.key
