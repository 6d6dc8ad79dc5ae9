"""
Core pytest configuration and fixtures for emlinh-types testing.

This module provides shared identifiers, timestamps and minimal valid wire
payloads for each entity, so tests only spell out what they vary.
"""

from datetime import datetime, timezone
from typing import Any, Dict

import pytest

# ===== IDENTIFIERS =====

USER_ID = "123e4567-e89b-12d3-a456-426614174000"
CONVERSATION_ID = "123e4567-e89b-12d3-a456-426614174001"
AUTHOR_ID = "123e4567-e89b-12d3-a456-426614174002"
MESSAGE_ID = "123e4567-e89b-12d3-a456-426614174003"
SESSION_ID = "123e4567-e89b-12d3-a456-426614174004"
CONTEXT_ID = "123e4567-e89b-12d3-a456-426614174005"

CREATED_AT = datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)
UPDATED_AT = datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def ids() -> Dict[str, str]:
    """Well-formed UUIDs, one per entity kind."""
    return {
        "user": USER_ID,
        "conversation": CONVERSATION_ID,
        "author": AUTHOR_ID,
        "message": MESSAGE_ID,
        "session": SESSION_ID,
        "context": CONTEXT_ID,
    }


@pytest.fixture
def timestamps() -> Dict[str, datetime]:
    """Server-assigned timestamps in wire form."""
    return {"createdAt": CREATED_AT, "updatedAt": UPDATED_AT}


# ===== TEST DATA FIXTURES =====


@pytest.fixture
def user_data(timestamps) -> Dict[str, Any]:
    """Minimal valid User payload."""
    return {"id": USER_ID, "username": "testuser", **timestamps}


@pytest.fixture
def message_data(timestamps) -> Dict[str, Any]:
    """Minimal valid Message payload."""
    return {
        "id": MESSAGE_ID,
        "conversationId": CONVERSATION_ID,
        "role": "user",
        "content": {"type": "text", "text": "Hello"},
        **timestamps,
    }


@pytest.fixture
def conversation_data(timestamps) -> Dict[str, Any]:
    """Minimal valid Conversation payload."""
    return {
        "id": CONVERSATION_ID,
        "title": "Trip planning",
        "userId": USER_ID,
        **timestamps,
    }


@pytest.fixture
def session_data(timestamps) -> Dict[str, Any]:
    """Minimal valid Session payload."""
    return {"id": SESSION_ID, "userId": USER_ID, **timestamps}


@pytest.fixture
def file_metadata() -> Dict[str, Any]:
    return {
        "source": "file",
        "file": {
            "filename": "test.ts",
            "path": "/src/test.ts",
            "size": 1024,
            "mimeType": "text/typescript",
        },
    }


@pytest.fixture
def context_data(timestamps, file_metadata) -> Dict[str, Any]:
    """Minimal valid Context payload."""
    return {
        "id": CONTEXT_ID,
        "title": "Test Context",
        "source": "file",
        "dataType": "code",
        "content": 'const hello = "world";',
        "metadata": file_metadata,
        **timestamps,
    }


# ===== CONFIGURATION =====


def pytest_configure(config):
    """Pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
