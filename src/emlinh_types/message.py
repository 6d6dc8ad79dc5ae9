"""
Message contracts.

Message content is a tagged union on ``type``: exactly one variant shape is
valid for each tag, and pydantic resolves the tag before it looks at the rest
of the body, so a bad tag is reported once instead of as a pile of missing
fields from unrelated variants.
"""

from datetime import datetime
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from .base import ALL_FIELDS, ContractModel, derive
from .formats import Url, Uuid
from .schema import Schema
from .user import UserRole

# --- Constants ---
MessageContentType = Literal["text", "image", "file", "code", "system"]
MessageStatus = Literal["pending", "sent", "delivered", "read", "failed"]
SystemMessageLevel = Literal["info", "warning", "error"]

DEFAULT_MESSAGE_STATUS = "sent"


# --- Value objects ---
class FileAttachment(ContractModel):
    """A file uploaded alongside a message."""

    id: str
    name: str
    type: str = Field(..., description="MIME type of the file.")
    size: StrictInt = Field(..., description="Size in bytes.")
    url: Url
    thumbnail_url: Optional[Url] = None


class CodeBlock(ContractModel):
    language: str
    code: str
    filename: Optional[str] = None


class MessageMetadata(ContractModel):
    """Edit history, threading and reactions of a message."""

    edited: StrictBool = False
    edited_at: Optional[datetime] = None
    reply_to_id: Optional[Uuid] = None
    mentions: List[Uuid] = Field(default_factory=list)
    reactions: Dict[str, List[Uuid]] = Field(
        default_factory=dict,
        description="Reaction key (usually an emoji) to the ids of users who reacted.",
    )
    token_count: Optional[StrictInt] = None
    processing_time: Optional[StrictFloat] = Field(None, description="Milliseconds.")


# --- Content variants ---
class TextContent(ContractModel):
    type: Literal["text"] = "text"
    text: str


class ImageContent(ContractModel):
    type: Literal["image"] = "image"
    image_url: Url
    alt: Optional[str] = None
    caption: Optional[str] = None


class FileContent(ContractModel):
    type: Literal["file"] = "file"
    attachment: FileAttachment


class CodeContent(ContractModel):
    type: Literal["code"] = "code"
    code_block: CodeBlock


class SystemContent(ContractModel):
    type: Literal["system"] = "system"
    system_message: str
    level: SystemMessageLevel = "info"


MessageContent = Annotated[
    Union[TextContent, ImageContent, FileContent, CodeContent, SystemContent],
    Field(discriminator="type"),
]


# --- Entity ---
class Message(ContractModel):
    """A single message within a conversation."""

    id: Uuid
    conversation_id: Uuid
    user_id: Optional[Uuid] = None
    role: UserRole
    content: MessageContent
    metadata: MessageMetadata = Field(default_factory=MessageMetadata)
    status: MessageStatus = DEFAULT_MESSAGE_STATUS
    created_at: datetime
    updated_at: datetime


CreateMessage = derive(
    Message,
    "CreateMessage",
    omit={"id", "created_at", "updated_at"},
    doc="Payload for posting a message; identity and timestamps are server-assigned.",
)

# Owner references are immutable: a message never moves to another
# conversation or changes author.
UpdateMessage = derive(
    Message,
    "UpdateMessage",
    omit={"id", "conversation_id", "user_id", "created_at"},
    make_optional=ALL_FIELDS,
    doc="Partial message update; fields left out are not touched.",
)


# --- Schemas ---
MessageContentTypeSchema: Schema[MessageContentType] = Schema(
    MessageContentType, name="MessageContentType"
)
MessageStatusSchema: Schema[MessageStatus] = Schema(MessageStatus, name="MessageStatus")
SystemMessageLevelSchema: Schema[SystemMessageLevel] = Schema(
    SystemMessageLevel, name="SystemMessageLevel"
)
FileAttachmentSchema: Schema[FileAttachment] = Schema(FileAttachment)
CodeBlockSchema: Schema[CodeBlock] = Schema(CodeBlock)
MessageMetadataSchema: Schema[MessageMetadata] = Schema(MessageMetadata)
MessageContentSchema: Schema[MessageContent] = Schema(MessageContent, name="MessageContent")
MessageSchema: Schema[Message] = Schema(Message)
CreateMessageSchema = Schema(CreateMessage)
UpdateMessageSchema = Schema(UpdateMessage)
