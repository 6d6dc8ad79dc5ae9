"""
Shared data contracts between the EmLinh desktop client and the AI service.

Every contract is published twice: as a type (``User``, a pydantic model or a
typing alias) for static use, and as a schema (``UserSchema``) exposing
``parse``, ``safe_parse``, ``parse_json``, ``is_valid`` and ``json_schema``.
Both applications import the same definitions, so they agree on wire shapes.

Examples
--------
>>> from emlinh_types import CreateMessageSchema
>>> message = CreateMessageSchema.parse({
...     "conversationId": "123e4567-e89b-12d3-a456-426614174001",
...     "role": "user",
...     "content": {"type": "text", "text": "Hello"},
... })
>>> message.status
'sent'
"""

import logging

from .base import ALL_FIELDS, ContractModel, derive
from .context import (
    ApiSource,
    Context,
    ContextChunk,
    ContextChunkSchema,
    ContextDataType,
    ContextDataTypeSchema,
    ContextMetadata,
    ContextMetadataSchema,
    ContextPayload,
    ContextPayloadSchema,
    ContextSchema,
    ContextSearchQuery,
    ContextSearchQuerySchema,
    ContextSource,
    ContextSourceSchema,
    CreateContext,
    CreateContextSchema,
    DatabaseContextMetadata,
    DatabaseContextMetadataSchema,
    DatabaseSource,
    FileContextMetadata,
    FileContextMetadataSchema,
    FileSource,
    SystemSource,
    UpdateContext,
    UpdateContextSchema,
    UserInputSource,
    WebContextMetadata,
    WebContextMetadataSchema,
    WebSource,
)
from .conversation import (
    Conversation,
    ConversationListItem,
    ConversationListItemSchema,
    ConversationMetadata,
    ConversationMetadataSchema,
    ConversationPriority,
    ConversationPrioritySchema,
    ConversationSchema,
    ConversationSettings,
    ConversationSettingsSchema,
    ConversationStatus,
    ConversationStatusSchema,
    ConversationType,
    ConversationTypeSchema,
    CreateConversation,
    CreateConversationSchema,
    UpdateConversation,
    UpdateConversationSchema,
)
from .errors import ValidationError, Violation
from .formats import Email, Url, Uuid
from .message import (
    CodeBlock,
    CodeBlockSchema,
    CodeContent,
    CreateMessage,
    CreateMessageSchema,
    FileAttachment,
    FileAttachmentSchema,
    FileContent,
    ImageContent,
    Message,
    MessageContent,
    MessageContentSchema,
    MessageContentType,
    MessageContentTypeSchema,
    MessageMetadata,
    MessageMetadataSchema,
    MessageSchema,
    MessageStatus,
    MessageStatusSchema,
    SystemContent,
    SystemMessageLevel,
    SystemMessageLevelSchema,
    TextContent,
    UpdateMessage,
    UpdateMessageSchema,
)
from .schema import ParseResult, Schema
from .session import (
    CreateSession,
    CreateSessionSchema,
    Session,
    SessionMetadata,
    SessionMetadataSchema,
    SessionSchema,
    SessionStatus,
    SessionStatusSchema,
    UpdateSession,
    UpdateSessionSchema,
)
from .user import (
    ASSISTANT_ROLE,
    SYSTEM_ROLE,
    USER_ROLE,
    CreateUser,
    CreateUserSchema,
    Theme,
    ThemeSchema,
    UpdateUser,
    UpdateUserSchema,
    User,
    UserPreferences,
    UserPreferencesSchema,
    UserProfile,
    UserProfileSchema,
    UserRole,
    UserRoleSchema,
    UserSchema,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Every contract and its schema, grouped by module.
__all__ = [
    # core
    "ALL_FIELDS",
    "ContractModel",
    "ParseResult",
    "Schema",
    "ValidationError",
    "Violation",
    "derive",
    "Email",
    "Url",
    "Uuid",
    # user
    "ASSISTANT_ROLE",
    "SYSTEM_ROLE",
    "USER_ROLE",
    "CreateUser",
    "CreateUserSchema",
    "Theme",
    "ThemeSchema",
    "UpdateUser",
    "UpdateUserSchema",
    "User",
    "UserPreferences",
    "UserPreferencesSchema",
    "UserProfile",
    "UserProfileSchema",
    "UserRole",
    "UserRoleSchema",
    "UserSchema",
    # message
    "CodeBlock",
    "CodeBlockSchema",
    "CodeContent",
    "CreateMessage",
    "CreateMessageSchema",
    "FileAttachment",
    "FileAttachmentSchema",
    "FileContent",
    "ImageContent",
    "Message",
    "MessageContent",
    "MessageContentSchema",
    "MessageContentType",
    "MessageContentTypeSchema",
    "MessageMetadata",
    "MessageMetadataSchema",
    "MessageSchema",
    "MessageStatus",
    "MessageStatusSchema",
    "SystemContent",
    "SystemMessageLevel",
    "SystemMessageLevelSchema",
    "TextContent",
    "UpdateMessage",
    "UpdateMessageSchema",
    # conversation
    "Conversation",
    "ConversationListItem",
    "ConversationListItemSchema",
    "ConversationMetadata",
    "ConversationMetadataSchema",
    "ConversationPriority",
    "ConversationPrioritySchema",
    "ConversationSchema",
    "ConversationSettings",
    "ConversationSettingsSchema",
    "ConversationStatus",
    "ConversationStatusSchema",
    "ConversationType",
    "ConversationTypeSchema",
    "CreateConversation",
    "CreateConversationSchema",
    "UpdateConversation",
    "UpdateConversationSchema",
    # session
    "CreateSession",
    "CreateSessionSchema",
    "Session",
    "SessionMetadata",
    "SessionMetadataSchema",
    "SessionSchema",
    "SessionStatus",
    "SessionStatusSchema",
    "UpdateSession",
    "UpdateSessionSchema",
    # context
    "ApiSource",
    "Context",
    "ContextChunk",
    "ContextChunkSchema",
    "ContextDataType",
    "ContextDataTypeSchema",
    "ContextMetadata",
    "ContextMetadataSchema",
    "ContextPayload",
    "ContextPayloadSchema",
    "ContextSchema",
    "ContextSearchQuery",
    "ContextSearchQuerySchema",
    "ContextSource",
    "ContextSourceSchema",
    "CreateContext",
    "CreateContextSchema",
    "DatabaseContextMetadata",
    "DatabaseContextMetadataSchema",
    "DatabaseSource",
    "FileContextMetadata",
    "FileContextMetadataSchema",
    "FileSource",
    "SystemSource",
    "UpdateContext",
    "UpdateContextSchema",
    "UserInputSource",
    "WebContextMetadata",
    "WebContextMetadataSchema",
    "WebSource",
]
