"""
Test suite for ChatMessageCRUD.

Append ordering, contiguous paging, index and id lookups, feedback attachment.

System role: Verification of transcript persistence
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from legalaid.boundary.db.CRUD.chat_message_crud import chat_message_crud
from legalaid.boundary.db.CRUD.chat_session_crud import chat_session_crud
from legalaid.boundary.db.models import ChatSessionModel
from legalaid.core.session import generate_session_id


@pytest.fixture
async def chat_session(test_async_db: AsyncSession) -> ChatSessionModel:
    return await chat_session_crud.create(test_async_db, session_id=generate_session_id(), context={})


async def _append_many(db: AsyncSession, chat_session: ChatSessionModel, count: int) -> list:
    messages = []
    for i in range(count):
        role = "user" if i % 2 == 0 else "assistant"
        messages.append(
            await chat_message_crud.append(db, chat_session.id, role=role, content=f"m{i}", language="en")
        )
    return messages


class TestAppend:
    @pytest.mark.asyncio
    async def test_append_should_assign_increasing_sequence(
        self, test_async_db: AsyncSession, chat_session: ChatSessionModel
    ) -> None:
        first, second = await _append_many(test_async_db, chat_session, 2)

        assert second.seq > first.seq
        assert isinstance(first.message_id, uuid.UUID)
        assert first.message_id != second.message_id

    @pytest.mark.asyncio
    async def test_append_should_store_audio_and_metadata(
        self, test_async_db: AsyncSession, chat_session: ChatSessionModel
    ) -> None:
        message = await chat_message_crud.append(
            test_async_db,
            chat_session.id,
            role="assistant",
            content="reply",
            language="tw",
            audio_url="data:audio/wav;base64,AAAA",
            metadata={"legalTopic": "divorce", "confidence": 0.25},
        )

        assert message.audio_url == "data:audio/wav;base64,AAAA"
        assert message.message_metadata == {"legalTopic": "divorce", "confidence": 0.25}


class TestPaging:
    @pytest.mark.asyncio
    async def test_get_page_should_return_contiguous_slice(
        self, test_async_db: AsyncSession, chat_session: ChatSessionModel
    ) -> None:
        await _append_many(test_async_db, chat_session, 5)

        page = await chat_message_crud.get_page(test_async_db, chat_session.id, offset=1, limit=3)

        assert [m.content for m in page] == ["m1", "m2", "m3"]
        assert await chat_message_crud.count_for_session(test_async_db, chat_session.id) == 5

    @pytest.mark.asyncio
    async def test_get_page_past_end_should_be_empty(
        self, test_async_db: AsyncSession, chat_session: ChatSessionModel
    ) -> None:
        await _append_many(test_async_db, chat_session, 2)

        assert list(await chat_message_crud.get_page(test_async_db, chat_session.id, offset=5, limit=10)) == []

    @pytest.mark.asyncio
    async def test_get_by_index(self, test_async_db: AsyncSession, chat_session: ChatSessionModel) -> None:
        await _append_many(test_async_db, chat_session, 3)

        message = await chat_message_crud.get_by_index(test_async_db, chat_session.id, 2)

        assert message.content == "m2"
        assert await chat_message_crud.get_by_index(test_async_db, chat_session.id, 3) is None

    @pytest.mark.asyncio
    async def test_get_by_message_id_should_be_scoped_to_session(
        self, test_async_db: AsyncSession, chat_session: ChatSessionModel
    ) -> None:
        (message,) = await _append_many(test_async_db, chat_session, 1)
        other = await chat_session_crud.create(test_async_db, session_id=generate_session_id(), context={})

        found = await chat_message_crud.get_by_message_id(test_async_db, chat_session.id, message.message_id)
        missing = await chat_message_crud.get_by_message_id(test_async_db, other.id, message.message_id)

        assert found is message
        assert missing is None


class TestFeedback:
    @pytest.mark.asyncio
    async def test_add_feedback_should_attach_to_message(
        self, test_async_db: AsyncSession, chat_session: ChatSessionModel
    ) -> None:
        _, reply = await _append_many(test_async_db, chat_session, 2)

        entry = await chat_message_crud.add_feedback(
            test_async_db,
            reply,
            rating=5,
            helpful=True,
            feedback="Very clear",
            rater_id="user-1",
        )

        assert entry.message_seq == reply.seq
        assert [f.rating for f in reply.feedback] == [5]

        page = await chat_message_crud.get_page(test_async_db, chat_session.id, offset=1, limit=1)
        assert page[0].feedback[0].feedback == "Very clear"
