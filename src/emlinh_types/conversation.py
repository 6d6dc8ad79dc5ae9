"""
Conversation contracts, including the lightweight list item used when a
client renders the conversation sidebar without loading full conversations.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from .base import ALL_FIELDS, ContractModel, derive
from .formats import Uuid
from .schema import Schema

# --- Constants ---
ConversationStatus = Literal["active", "archived", "deleted"]
ConversationType = Literal["chat", "task", "brainstorm", "code_review"]
ConversationPriority = Literal["low", "medium", "high"]

DEFAULT_MODEL = "gpt-4"
DEFAULT_TEMPERATURE = 0.7
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0


# --- Models ---
class ConversationSettings(ContractModel):
    """LLM settings applied to every turn of a conversation."""

    model: str = DEFAULT_MODEL
    temperature: StrictFloat = Field(
        DEFAULT_TEMPERATURE, ge=MIN_TEMPERATURE, le=MAX_TEMPERATURE
    )
    max_tokens: Optional[StrictInt] = Field(None, gt=0)
    system_prompt: Optional[str] = None
    auto_save: StrictBool = True
    notifications: StrictBool = True


class ConversationMetadata(ContractModel):
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    priority: ConversationPriority = "medium"
    is_starred: StrictBool = False
    is_pinned: StrictBool = False
    message_count: StrictInt = 0
    last_message_at: Optional[datetime] = None
    total_tokens: StrictInt = 0


class Conversation(ContractModel):
    """Represents a complete chat conversation session."""

    id: Uuid
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    user_id: Uuid
    type: ConversationType = "chat"
    status: ConversationStatus = "active"
    settings: ConversationSettings = Field(default_factory=ConversationSettings)
    metadata: ConversationMetadata = Field(default_factory=ConversationMetadata)
    created_at: datetime
    updated_at: datetime
    archived_at: Optional[datetime] = None


CreateConversation = derive(
    Conversation,
    "CreateConversation",
    omit={"id", "created_at", "updated_at", "archived_at"},
    doc="Payload for starting a conversation.",
)

UpdateConversation = derive(
    Conversation,
    "UpdateConversation",
    omit={"id", "user_id", "created_at"},
    make_optional=ALL_FIELDS,
    doc="Partial conversation update; ownership cannot change.",
)

ConversationListItem = derive(
    Conversation,
    "ConversationListItem",
    pick=["id", "title", "type", "status", "created_at", "updated_at"],
    extend={
        "message_count": (StrictInt, Field(...)),
        "last_message_at": (Optional[datetime], Field(None)),
        "last_message_preview": (Optional[str], Field(None)),
    },
    doc="Summary row for conversation lists; not a full Conversation.",
)


# --- Schemas ---
ConversationStatusSchema: Schema[ConversationStatus] = Schema(
    ConversationStatus, name="ConversationStatus"
)
ConversationTypeSchema: Schema[ConversationType] = Schema(
    ConversationType, name="ConversationType"
)
ConversationPrioritySchema: Schema[ConversationPriority] = Schema(
    ConversationPriority, name="ConversationPriority"
)
ConversationSettingsSchema: Schema[ConversationSettings] = Schema(ConversationSettings)
ConversationMetadataSchema: Schema[ConversationMetadata] = Schema(ConversationMetadata)
ConversationSchema: Schema[Conversation] = Schema(Conversation)
CreateConversationSchema = Schema(CreateConversation)
UpdateConversationSchema = Schema(UpdateConversation)
ConversationListItemSchema = Schema(ConversationListItem)
