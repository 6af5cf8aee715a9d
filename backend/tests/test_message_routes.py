def test_user_message_gets_one_bot_reply(client):
    res = client.post("/api/users/1/messages", json={"content": "I'd like to book an appointment tomorrow"})

    assert res.status_code == 200
    messages = res.json()
    assert [m["isBot"] for m in messages] == [False, True]
    assert messages[1]["content"].startswith("I'd be happy to help you book an appointment")
    assert messages[1]["id"] > messages[0]["id"]


def test_bot_message_is_stored_without_reply(client):
    messages = client.post("/api/users/1/messages", json={"content": "Welcome!", "isBot": True}).json()

    assert len(messages) == 1
    assert messages[0]["isBot"] is True


def test_history_is_per_user_and_ordered(client):
    client.post("/api/users/1/messages", json={"content": "hello"})
    client.post("/api/users/2/messages", json={"content": "thank you"})
    client.post("/api/users/1/messages", json={"content": "where is my record?"})

    history = client.get("/api/users/1/messages").json()

    assert [m["content"] for m in history if not m["isBot"]] == ["hello", "where is my record?"]
    assert len(history) == 4
    assert client.get("/api/users/2/messages").json()[1]["content"].startswith("You're welcome")


def test_empty_message_rejected(client):
    assert client.post("/api/users/1/messages", json={"content": ""}).status_code == 400
    assert client.get("/api/users/abc/messages").status_code == 400


def test_blank_message_rejected(client):
    res = client.post("/api/users/1/messages", json={"content": "   "})

    assert res.status_code == 400
    assert client.get("/api/users/1/messages").json() == []


def test_message_is_trimmed(client):
    messages = client.post("/api/users/1/messages", json={"content": "  hello  "}).json()

    assert messages[0]["content"] == "hello"
