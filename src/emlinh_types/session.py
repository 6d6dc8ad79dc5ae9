"""Session contracts."""

from datetime import datetime
from typing import Literal, Optional

from .base import ALL_FIELDS, ContractModel, derive
from .formats import Uuid
from .schema import Schema

# --- Constants ---
SessionStatus = Literal["active", "inactive", "expired"]


# --- Models ---
class SessionMetadata(ContractModel):
    """Client details recorded when a session starts. All free-form."""

    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    platform: Optional[str] = None
    device_id: Optional[str] = None
    location: Optional[str] = None


class Session(ContractModel):
    id: Uuid
    user_id: Uuid
    status: SessionStatus = "active"
    metadata: Optional[SessionMetadata] = None
    created_at: datetime
    updated_at: datetime
    expires_at: Optional[datetime] = None
    last_accessed_at: Optional[datetime] = None


CreateSession = derive(
    Session,
    "CreateSession",
    omit={"id", "created_at", "updated_at", "last_accessed_at"},
)

UpdateSession = derive(
    Session,
    "UpdateSession",
    omit={"id", "user_id", "created_at"},
    make_optional=ALL_FIELDS,
)


# --- Schemas ---
SessionStatusSchema: Schema[SessionStatus] = Schema(SessionStatus, name="SessionStatus")
SessionMetadataSchema: Schema[SessionMetadata] = Schema(SessionMetadata)
SessionSchema: Schema[Session] = Schema(Session)
CreateSessionSchema = Schema(CreateSession)
UpdateSessionSchema = Schema(UpdateSession)
