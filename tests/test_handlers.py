"""Application handlers against in-memory repositories."""

import asyncio
import logging

import pytest

from konektz.application.commands.conversations import (
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
    RestoreConversationCommand,
    RestoreConversationHandler,
)
from konektz.domain.entities.conversation import Conversation
from konektz.domain.entities.user import User
from konektz.domain.exceptions import ConflictError
from konektz.domain.ports.repositories import ConversationRepository, UserRepository
from konektz.domain.value_objects import UserEmail
from konektz.domain.value_objects.participant_pair import PAIR_KEY_CONSTRAINT


class InMemoryUserRepository(UserRepository):
    def __init__(self, *users):
        self._users = {user.id: user for user in users}

    async def get_by_id(self, user_id):
        return self._users.get(user_id)

    async def get_by_email(self, email):
        return next((u for u in self._users.values() if u.email == email), None)

    async def exists(self, username, email):
        return any(u.username == username or u.email == email for u in self._users.values())

    async def add(self, user):
        self._users[user.id] = user


class InMemoryConversationRepository(ConversationRepository):
    """Stores conversations; add and save_flags can be told to fail."""

    def __init__(self, add_error=None, stale_writes=0):
        self.conversations = {}
        self.add_error = add_error
        self.stale_writes = stale_writes
        self.pair_lookups = 0

    async def get_by_id(self, conversation_id):
        stored = self.conversations.get(conversation_id)
        return Conversation(**vars(stored)) if stored else None

    async def get_by_pair(self, pair):
        self.pair_lookups += 1
        return next((c for c in self.conversations.values() if c.pair == pair), None)

    async def add(self, conversation):
        if self.add_error:
            raise self.add_error
        self.conversations[conversation.id] = conversation

    async def list_summaries(self, user_id):
        return []

    async def save_flags(self, conversation):
        if self.stale_writes:
            self.stale_writes -= 1
            return False
        conversation.version += 1
        self.conversations[conversation.id] = Conversation(**vars(conversation))
        return True

    async def destroy(self, conversation):
        return self.conversations.pop(conversation.id, None) is not None


@pytest.fixture()
def alice():
    return User.create("alice", UserEmail("alice@x.com"), "hash")


@pytest.fixture()
def bob():
    return User.create("bob", UserEmail("bob@x.com"), "hash")


def test_conflict_on_another_constraint_is_not_a_lost_race(alice, bob):
    conversations = InMemoryConversationRepository(
        add_error=ConflictError(constraint="uq_users_email")
    )
    handler = FindOrCreateConversationHandler(
        conversations, InMemoryUserRepository(alice, bob)
    )

    with pytest.raises(ConflictError):
        asyncio.run(
            handler.execute(
                FindOrCreateConversationCommand(user_id=alice.id, participant_id=bob.id)
            )
        )
    # Only the lookup before the insert
    assert conversations.pair_lookups == 1


def test_pair_key_conflict_returns_the_winner(alice, bob):
    conversations = InMemoryConversationRepository(
        add_error=ConflictError(constraint=PAIR_KEY_CONSTRAINT)
    )
    handler = FindOrCreateConversationHandler(
        conversations, InMemoryUserRepository(alice, bob)
    )
    winner = Conversation.create(bob.id, alice.id)

    async def scenario():
        # The winner lands between our lookup and our insert
        original_get_by_pair = conversations.get_by_pair

        async def get_by_pair(pair):
            found = await original_get_by_pair(pair)
            conversations.conversations[winner.id] = winner
            return found

        conversations.get_by_pair = get_by_pair
        return await handler.execute(
            FindOrCreateConversationCommand(user_id=alice.id, participant_id=bob.id)
        )

    resolution = asyncio.run(scenario())
    assert resolution.created is False
    assert resolution.conversation.id == winner.id


def test_restore_retries_stale_write_and_logs(alice, bob, caplog):
    conversations = InMemoryConversationRepository(stale_writes=2)
    conversation = Conversation.create(alice.id, bob.id)
    conversation.hide_for(alice.id)
    conversations.conversations[conversation.id] = conversation
    handler = RestoreConversationHandler(conversations)

    with caplog.at_level(logging.DEBUG, logger="konektz"):
        restored = asyncio.run(
            handler.execute(
                RestoreConversationCommand(conversation_id=conversation.id, user_id=alice.id)
            )
        )

    assert restored.is_visible_to(alice.id)
    messages = [r.getMessage() for r in caplog.records]
    assert sum("Retrying restore" in m for m in messages) == 2
    assert f"Restored conversation {conversation.id.value}" in messages


def test_restore_gives_up_after_repeated_stale_writes(alice, bob):
    conversations = InMemoryConversationRepository(stale_writes=100)
    conversation = Conversation.create(alice.id, bob.id)
    conversation.hide_for(bob.id)
    conversations.conversations[conversation.id] = conversation

    with pytest.raises(ConflictError):
        asyncio.run(
            RestoreConversationHandler(conversations).execute(
                RestoreConversationCommand(conversation_id=conversation.id, user_id=bob.id)
            )
        )
