"""
Races between requests, driven through the application handlers.

Each coroutine gets its own session, the same way each request gets its own
session from the container.
"""

import asyncio

from sqlalchemy import func, select

from konektz.application.commands.conversations import (
    DeleteConversationCommand,
    DeleteConversationHandler,
    DeleteOutcome,
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
)
from konektz.domain.entities.conversation import Conversation
from konektz.domain.entities.message import Message
from konektz.domain.entities.user import User
from konektz.domain.exceptions import ConflictError
from konektz.domain.value_objects import UserEmail
from konektz.infrastructure.persistence import (
    Database,
    SqlAlchemyConversationRepository,
    SqlAlchemyMessageRepository,
    SqlAlchemyUserRepository,
)
from konektz.infrastructure.persistence.models import ConversationRecord, MessageRecord


async def _setup(database_url):
    database = Database(database_url)
    await database.create_schema()
    users = [
        User.create(name, UserEmail(f"{name}@x.com"), "not-a-real-hash")
        for name in ("alice", "bob")
    ]
    async with database.session() as session:
        repository = SqlAlchemyUserRepository(session)
        for user in users:
            await repository.add(user)
    return database, users


async def _count(database, model):
    async with database.session() as session:
        return await session.scalar(select(func.count()).select_from(model))


def test_concurrent_find_or_create_yields_one_row(database_url):
    async def scenario():
        database, (alice, bob) = await _setup(database_url)

        async def resolve(user, other):
            async with database.session() as session:
                handler = FindOrCreateConversationHandler(
                    SqlAlchemyConversationRepository(session),
                    SqlAlchemyUserRepository(session),
                )
                return await handler.execute(
                    FindOrCreateConversationCommand(user_id=user.id, participant_id=other.id)
                )

        results = await asyncio.gather(
            *(resolve(alice, bob) if i % 2 else resolve(bob, alice) for i in range(8))
        )
        rows = await _count(database, ConversationRecord)
        await database.dispose()
        return results, rows

    results, rows = asyncio.run(scenario())

    assert rows == 1
    assert len({r.conversation.id for r in results}) == 1
    assert sum(r.created for r in results) == 1


def test_pair_key_is_unique_in_storage(database_url):
    async def scenario():
        database, (alice, bob) = await _setup(database_url)
        error = None
        async with database.session() as session:
            repository = SqlAlchemyConversationRepository(session)
            await repository.add(Conversation.create(alice.id, bob.id))
            try:
                await repository.add(Conversation.create(bob.id, alice.id))
            except ConflictError as e:
                error = e
        rows = await _count(database, ConversationRecord)
        await database.dispose()
        return error, rows

    error, rows = asyncio.run(scenario())
    assert isinstance(error, ConflictError)
    assert rows == 1


def test_concurrent_delete_by_both_destroys_once(database_url):
    async def scenario():
        database, (alice, bob) = await _setup(database_url)
        conversation = Conversation.create(alice.id, bob.id)
        async with database.session() as session:
            await SqlAlchemyConversationRepository(session).add(conversation)
            await SqlAlchemyMessageRepository(session).add(
                Message.create(conversation.id, alice.id, "bye")
            )

        async def delete(user):
            async with database.session() as session:
                handler = DeleteConversationHandler(SqlAlchemyConversationRepository(session))
                return await handler.execute(
                    DeleteConversationCommand(conversation_id=conversation.id, user_id=user.id)
                )

        outcomes = await asyncio.gather(delete(alice), delete(bob))
        counts = (
            await _count(database, ConversationRecord),
            await _count(database, MessageRecord),
        )
        await database.dispose()
        return outcomes, counts

    outcomes, counts = asyncio.run(scenario())

    assert sorted(outcomes) == [DeleteOutcome.DESTROYED, DeleteOutcome.HIDDEN]
    assert counts == (0, 0)


def test_stale_flag_write_is_rejected(database_url):
    async def scenario():
        database, (alice, bob) = await _setup(database_url)
        conversation = Conversation.create(alice.id, bob.id)
        async with database.session() as session:
            repository = SqlAlchemyConversationRepository(session)
            await repository.add(conversation)

            first = await repository.get_by_id(conversation.id)
            second = await repository.get_by_id(conversation.id)
            first.hide_for(alice.id)
            second.hide_for(bob.id)
            results = (
                await repository.save_flags(first),
                await repository.save_flags(second),
                await repository.destroy(second),
            )
            stored = await repository.get_by_id(conversation.id)
        await database.dispose()
        return results, stored

    (first_saved, second_saved, destroyed), stored = asyncio.run(scenario())

    assert first_saved is True
    assert second_saved is False
    assert destroyed is False
    assert stored.deleted_by_one and not stored.deleted_by_two
    assert stored.version == 1
