"""Tests for the conversations router."""

from datetime import timedelta


def test_list_conversations(client, setup_conversation, setup_another_user):
    r = client.get("/conversations")
    assert r.status_code == 200
    rows = r.json()["conversations"]
    assert len(rows) == 1
    assert rows[0]["id"] == setup_conversation.id
    assert rows[0]["other_user_id"] == setup_another_user.id
    assert rows[0]["other_user_email"] == setup_another_user.email


def test_send_and_get_messages(
    client, as_user, setup_conversation, setup_user, setup_another_user
):
    r = client.post(
        f"/conversations/{setup_conversation.id}/send",
        json={"content": "hello", "type": "text"},
    )
    assert r.status_code == 201
    message = r.json()["message"]
    assert message["sender_id"] == setup_user.id
    assert message["is_read"] is False

    as_user(setup_another_user)
    r = client.get(f"/conversations/{setup_conversation.id}/messages")
    assert r.status_code == 200
    data = r.json()
    assert data["limit"] == 50
    assert data["offset"] == 0
    assert [m["content"] for m in data["messages"]] == ["hello"]
    assert data["messages"][0]["is_read"] is True
    assert data["messages"][0]["sender_email"] == setup_user.email


def test_get_messages_paging(
    client, setup_conversation, setup_another_user, message_factory
):
    for i in range(3):
        message_factory(
            setup_conversation, setup_another_user, f"m{i}", age=timedelta(minutes=5 - i)
        )
    r = client.get(
        f"/conversations/{setup_conversation.id}/messages",
        params={"limit": 2, "offset": 1},
    )
    assert [m["content"] for m in r.json()["messages"]] == ["m0", "m1"]


def test_get_messages_limit_out_of_range(client, setup_conversation):
    r = client.get(
        f"/conversations/{setup_conversation.id}/messages", params={"limit": 500}
    )
    assert r.status_code == 400


def test_send_blank_message(client, setup_conversation):
    r = client.post(f"/conversations/{setup_conversation.id}/send", json={"content": "  "})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Message content is required"}


def test_outsider_cannot_read_or_write(client, as_user, setup_conversation, user_factory):
    as_user(user_factory())
    r = client.get(f"/conversations/{setup_conversation.id}/messages")
    assert r.status_code == 403
    assert r.json()["error"] == "You do not have access to this conversation"

    r = client.post(f"/conversations/{setup_conversation.id}/send", json={"content": "x"})
    assert r.status_code == 403


def test_delete_conversation_hides_it(client, setup_conversation):
    r = client.post(f"/conversations/{setup_conversation.id}/delete")
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert client.get("/conversations").json()["conversations"] == []

    r = client.post(f"/conversations/{setup_conversation.id}/delete")
    assert r.status_code == 200


def test_out_of_range_conversation_id_is_rejected(client):
    assert client.get(f"/conversations/{2**70}/messages").status_code == 400
    assert client.post(
        f"/conversations/{2**70}/send", json={"content": "hi"}
    ).status_code == 400
    assert client.post(f"/conversations/{2**70}/delete").status_code == 400
