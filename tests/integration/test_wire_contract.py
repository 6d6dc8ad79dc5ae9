"""
Integration tests for the client -> backend exchange.

Both sides use the same contracts: the client validates and serializes a
payload, the backend parses the JSON, assigns identity and timestamps, and
sends the stored entity back.
"""

import json
from datetime import datetime, timezone

from emlinh_types import (
    ConversationListItemSchema,
    ConversationSchema,
    CreateConversationSchema,
    CreateMessageSchema,
    MessageSchema,
    UpdateConversationSchema,
)

SERVER_NOW = datetime(2025, 2, 1, 8, 0, tzinfo=timezone.utc)
NEW_MESSAGE_ID = "9b2f6c3e-4a1d-4e8b-9f00-1c2d3e4f5a6b"
NEW_CONVERSATION_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"


def _store(payload_wire, new_id):
    """What the backend does with a create payload."""
    return {**payload_wire, "id": new_id, "createdAt": SERVER_NOW, "updatedAt": SERVER_NOW}


class TestMessageExchange:
    def test_create_message_round_trip(self, ids):
        """Test a text message travels client -> backend -> client intact."""
        outgoing = CreateMessageSchema.parse(
            {
                "conversationId": ids["conversation"],
                "role": "user",
                "content": {"type": "text", "text": "Hello"},
            }
        )
        body = outgoing.to_json()

        received = CreateMessageSchema.parse_json(body)
        assert received == outgoing

        stored = MessageSchema.parse(_store(received.to_wire(), NEW_MESSAGE_ID))
        assert stored.status == "sent"
        assert stored.metadata.edited is False
        assert stored.metadata.mentions == []
        assert stored.metadata.reactions == {}

        echoed = MessageSchema.parse_json(stored.to_json())
        assert echoed == stored
        assert json.loads(stored.to_json())["content"] == {"type": "text", "text": "Hello"}

    def test_code_message_with_reactions(self, ids):
        outgoing = CreateMessageSchema.parse(
            {
                "conversationId": ids["conversation"],
                "userId": ids["author"],
                "role": "assistant",
                "content": {
                    "type": "code",
                    "codeBlock": {"language": "python", "code": "print('hi')"},
                },
                "metadata": {"reactions": {"🔥": [ids["user"]]}, "tokenCount": 42},
            }
        )
        received = CreateMessageSchema.parse_json(outgoing.to_json())
        assert received.content.code_block.language == "python"
        assert received.metadata.reactions == {"🔥": [ids["user"]]}

    def test_rejected_payload_lists_all_problems(self):
        """Test the backend can answer with every violation at once."""
        result = CreateMessageSchema.safe_parse(
            {"conversationId": "nope", "role": "robot", "content": {"type": "text"}}
        )
        assert not result.success
        problems = result.error.to_list()
        assert {problem["code"] for problem in problems} == {
            "invalid_format",
            "invalid_enum_value",
            "required",
        }
        json.dumps(problems)


class TestConversationExchange:
    def test_create_update_and_list(self, ids):
        created = CreateConversationSchema.parse_json(
            json.dumps({"title": "Trip planning", "userId": ids["user"], "type": "task"})
        )
        conversation = ConversationSchema.parse(
            _store(created.to_wire(), NEW_CONVERSATION_ID)
        )
        assert conversation.settings.temperature == 0.7

        update = UpdateConversationSchema.parse_json('{"status": "archived"}')
        changes = update.to_wire()
        archived = ConversationSchema.parse({**conversation.to_wire(), **changes})
        assert archived.status == "archived"
        assert archived.type == "task"

        item = ConversationListItemSchema.parse(
            {**archived.to_wire(), "messageCount": 3, "lastMessagePreview": "Booked!"}
        )
        assert item.to_wire()["status"] == "archived"
        assert "settings" not in item.to_wire()
