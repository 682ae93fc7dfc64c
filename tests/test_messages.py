"""Sending and listing messages."""

import uuid


def _send(client, user, conversation_id, content):
    return client.post(
        f"/conversations/{conversation_id}/messages",
        headers=user.headers,
        json={"content": content},
    )


def test_send_returns_stored_message(client, alice, conversation_id):
    res = _send(client, alice, conversation_id, "  hello bob  ")
    assert res.status_code == 201
    message = res.json()["message"]
    assert message["content"] == "hello bob"
    assert message["conversationId"] == conversation_id
    assert message["senderId"] == alice.id
    assert message["senderName"] == "alice"
    assert message["createdAt"]
    assert message["updatedAt"]


def test_messages_are_oldest_first(client, alice, bob, conversation_id):
    _send(client, alice, conversation_id, "one")
    _send(client, bob, conversation_id, "two")
    _send(client, alice, conversation_id, "three")

    res = client.get(f"/conversations/{conversation_id}/messages", headers=alice.headers)
    assert res.status_code == 200
    messages = res.json()["messages"]
    assert [m["content"] for m in messages] == ["one", "two", "three"]
    assert [m["senderName"] for m in messages] == ["alice", "bob", "alice"]
    assert set(messages[0]) == {
        "id",
        "conversationId",
        "senderId",
        "senderName",
        "content",
        "createdAt",
    }


def test_empty_content(client, alice, conversation_id):
    for content in ("", "   \n\t", None):
        res = _send(client, alice, conversation_id, content)
        assert res.status_code == 400
        assert res.json() == {"status": "error", "message": "content is required"}


def test_missing_content_field(client, alice, conversation_id):
    res = client.post(
        f"/conversations/{conversation_id}/messages", headers=alice.headers, json={}
    )
    assert res.status_code == 400
    assert res.json()["message"] == "content is required"


def test_outsider_cannot_send_whatever_the_content(client, carol, conversation_id):
    for content in ("hi", ""):
        res = _send(client, carol, conversation_id, content)
        assert res.status_code == 404
        assert res.json()["message"] == "Conversation not found"


def test_outsider_cannot_list(client, carol, conversation_id):
    res = client.get(f"/conversations/{conversation_id}/messages", headers=carol.headers)
    assert res.status_code == 404


def test_unknown_conversation(client, alice):
    res = _send(client, alice, str(uuid.uuid4()), "hi")
    assert res.status_code == 404
    res = client.get(f"/conversations/{uuid.uuid4()}/messages", headers=alice.headers)
    assert res.status_code == 404


def test_participant_who_deleted_can_still_read_and_send(
    client, alice, bob, conversation_id
):
    _send(client, bob, conversation_id, "are you there?")
    client.delete(f"/conversations/{conversation_id}", headers=alice.headers)

    res = client.get(f"/conversations/{conversation_id}/messages", headers=alice.headers)
    assert res.status_code == 200
    assert [m["content"] for m in res.json()["messages"]] == ["are you there?"]

    assert _send(client, alice, conversation_id, "yes").status_code == 201


def test_wrong_content_type_is_rejected(client, alice, conversation_id):
    res = client.post(
        f"/conversations/{conversation_id}/messages",
        headers=alice.headers,
        json={"content": {"nested": True}},
    )
    assert res.status_code == 400
    assert res.json()["status"] == "error"


def test_timestamps_keep_utc_offset_after_reading_back(client, alice, conversation_id):
    sent = _send(client, alice, conversation_id, "hi").json()["message"]

    listed = client.get(
        f"/conversations/{conversation_id}/messages", headers=alice.headers
    ).json()["messages"]
    inbox = client.get("/conversations", headers=alice.headers).json()["conversations"]

    assert sent["createdAt"].endswith("Z")
    assert listed[0]["createdAt"] == sent["createdAt"]
    assert inbox[0]["lastMessageTime"] == sent["createdAt"]
