"""
User contracts: the role enumeration shared with messages, profile and
preference value objects, the User entity and its create / update payloads.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, StrictBool

from .base import ALL_FIELDS, ContractModel, derive
from .formats import Email, Url, Uuid
from .schema import Schema

# --- Constants ---
USER_ROLE = "user"
ASSISTANT_ROLE = "assistant"
SYSTEM_ROLE = "system"

DEFAULT_TIMEZONE = "Asia/Ho_Chi_Minh"
DEFAULT_LANGUAGE = "vi"

UserRole = Literal[USER_ROLE, ASSISTANT_ROLE, SYSTEM_ROLE]
Theme = Literal["light", "dark", "auto"]


# --- Models ---
class UserPreferences(ContractModel):
    """Per-user application settings."""

    language: str = DEFAULT_LANGUAGE
    theme: Theme = "auto"
    notifications: StrictBool = True
    auto_save: StrictBool = True


class UserProfile(ContractModel):
    """Public profile information."""

    display_name: Optional[str] = None
    avatar: Optional[Url] = None
    bio: Optional[str] = None
    timezone: str = DEFAULT_TIMEZONE


class User(ContractModel):
    """A person or agent taking part in conversations."""

    id: Uuid
    email: Optional[Email] = None
    username: str = Field(..., min_length=1)
    role: UserRole = USER_ROLE
    profile: Optional[UserProfile] = None
    preferences: UserPreferences = Field(default_factory=UserPreferences)
    created_at: datetime
    updated_at: datetime
    last_active_at: Optional[datetime] = None
    is_active: StrictBool = True


CreateUser = derive(
    User,
    "CreateUser",
    omit={"id", "created_at", "updated_at", "last_active_at"},
    doc="Payload for registering a user; identity and timestamps are server-assigned.",
)

UpdateUser = derive(
    User,
    "UpdateUser",
    omit={"id", "created_at"},
    make_optional=ALL_FIELDS,
    doc="Partial user update; fields left out are not touched.",
)


# --- Schemas ---
UserRoleSchema: Schema[UserRole] = Schema(UserRole, name="UserRole")
ThemeSchema: Schema[Theme] = Schema(Theme, name="Theme")
UserPreferencesSchema: Schema[UserPreferences] = Schema(UserPreferences)
UserProfileSchema: Schema[UserProfile] = Schema(UserProfile)
UserSchema: Schema[User] = Schema(User)
CreateUserSchema = Schema(CreateUser)
UpdateUserSchema = Schema(UpdateUser)
