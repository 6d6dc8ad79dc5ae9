"""
Context contracts: material handed to the AI service alongside a prompt.

Context metadata is a tagged union on ``source``. Sources with a rich
description (file, web, database) carry it as a nested value object under a
key named after the source; the others inline their few fields.
"""

from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from .base import ALL_FIELDS, ContractModel, derive
from .formats import Url, Uuid
from .schema import Schema

# --- Constants ---
ContextSource = Literal["file", "web", "database", "api", "user_input", "system"]
ContextDataType = Literal["text", "code", "image", "document", "structured"]

DEFAULT_SEARCH_LIMIT = 10
DEFAULT_MIN_RELEVANCE = 0.3
DEFAULT_RELEVANCE_THRESHOLD = 0.5


# --- Value objects ---
class FileContextMetadata(ContractModel):
    filename: str
    path: str
    size: StrictInt
    mime_type: str
    encoding: Optional[str] = None
    language: Optional[str] = None
    line_count: Optional[StrictInt] = None


class WebContextMetadata(ContractModel):
    url: Url
    title: Optional[str] = None
    domain: str
    scraped_at: datetime
    content_type: Optional[str] = None


class DatabaseContextMetadata(ContractModel):
    table: str
    # "schema" would shadow BaseModel.schema; only the wire key keeps the name.
    schema_name: Optional[str] = Field(None, alias="schema")
    query: Optional[str] = None
    row_count: Optional[StrictInt] = None


class ContextChunk(ContractModel):
    """A slice of a large context, indexed in document order."""

    id: str
    index: StrictInt
    content: str
    start_offset: Optional[StrictInt] = None
    end_offset: Optional[StrictInt] = None
    tokens: Optional[StrictInt] = None


# --- Metadata variants ---
class FileSource(ContractModel):
    source: Literal["file"] = "file"
    file: FileContextMetadata


class WebSource(ContractModel):
    source: Literal["web"] = "web"
    web: WebContextMetadata


class DatabaseSource(ContractModel):
    source: Literal["database"] = "database"
    database: DatabaseContextMetadata


class ApiSource(ContractModel):
    source: Literal["api"] = "api"
    endpoint: str
    method: str
    response_time: Optional[StrictFloat] = Field(None, description="Milliseconds.")


class UserInputSource(ContractModel):
    source: Literal["user_input"] = "user_input"
    input_type: str
    timestamp: datetime


class SystemSource(ContractModel):
    source: Literal["system"] = "system"
    component: str
    version: Optional[str] = None


ContextMetadata = Annotated[
    Union[FileSource, WebSource, DatabaseSource, ApiSource, UserInputSource, SystemSource],
    Field(discriminator="source"),
]


# --- Entity ---
class Context(ContractModel):
    id: Uuid
    title: str
    description: Optional[str] = None
    source: ContextSource
    data_type: ContextDataType
    content: str
    chunks: Optional[List[ContextChunk]] = None
    metadata: ContextMetadata
    tags: List[str] = Field(default_factory=list)
    relevance_score: Optional[StrictFloat] = Field(None, ge=0.0, le=1.0)
    tokens: Optional[StrictInt] = None
    created_at: datetime
    updated_at: datetime
    expires_at: Optional[datetime] = None


CreateContext = derive(
    Context,
    "CreateContext",
    omit={"id", "created_at", "updated_at"},
    doc="Payload for registering a context; identity and timestamps are server-assigned.",
)

UpdateContext = derive(
    Context,
    "UpdateContext",
    omit={"id", "created_at"},
    make_optional=ALL_FIELDS,
    doc="Partial context update; fields left out are not touched.",
)


# --- Requests ---
class ContextSearchQuery(ContractModel):
    """Search over stored contexts, paged with ``limit`` / ``offset``."""

    query: str
    sources: Optional[List[ContextSource]] = None
    data_types: Optional[List[ContextDataType]] = None
    tags: Optional[List[str]] = None
    limit: StrictInt = Field(DEFAULT_SEARCH_LIMIT, gt=0)
    offset: StrictInt = Field(0, ge=0)
    min_relevance: StrictFloat = Field(DEFAULT_MIN_RELEVANCE, ge=0.0, le=1.0)


class ContextPayload(ContractModel):
    """Contexts sent along with a request to the AI service."""

    contexts: List[Context]
    max_tokens: Optional[StrictInt] = Field(None, gt=0)
    relevance_threshold: StrictFloat = Field(DEFAULT_RELEVANCE_THRESHOLD, ge=0.0, le=1.0)
    include_metadata: StrictBool = True
    chunk_size: Optional[StrictInt] = Field(None, gt=0)


# --- Schemas ---
ContextSourceSchema: Schema[ContextSource] = Schema(ContextSource, name="ContextSource")
ContextDataTypeSchema: Schema[ContextDataType] = Schema(
    ContextDataType, name="ContextDataType"
)
FileContextMetadataSchema: Schema[FileContextMetadata] = Schema(FileContextMetadata)
WebContextMetadataSchema: Schema[WebContextMetadata] = Schema(WebContextMetadata)
DatabaseContextMetadataSchema: Schema[DatabaseContextMetadata] = Schema(
    DatabaseContextMetadata
)
ContextChunkSchema: Schema[ContextChunk] = Schema(ContextChunk)
ContextMetadataSchema: Schema[ContextMetadata] = Schema(ContextMetadata, name="ContextMetadata")
ContextSchema: Schema[Context] = Schema(Context)
CreateContextSchema = Schema(CreateContext)
UpdateContextSchema = Schema(UpdateContext)
ContextSearchQuerySchema: Schema[ContextSearchQuery] = Schema(ContextSearchQuery)
ContextPayloadSchema: Schema[ContextPayload] = Schema(ContextPayload)
