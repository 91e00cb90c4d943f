"""Wire messages produced by the message builders.

Every message is a validated, frozen Pydantic model. Optional fields left
unset by the builder stay ``None`` and are omitted when sent.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict


class MessageType(str, Enum):
    """Segment message kinds."""

    ALIAS = "alias"
    GROUP = "group"
    IDENTIFY = "identify"
    PAGE = "page"
    SCREEN = "screen"
    TRACK = "track"


class Message(BaseModel):
    """Fields shared by all message kinds."""

    model_config = ConfigDict(frozen=True)

    type: MessageType
    message_id: Optional[str] = None
    timestamp: Optional[datetime] = None
    anonymous_id: Optional[str] = None
    user_id: Optional[str] = None
    context: Optional[Dict[str, Any]] = None
    integrations_enabled: Optional[Dict[str, bool]] = None
    integration_options: Optional[Dict[str, Dict[str, Any]]] = None

    @property
    def integrations(self) -> Optional[Dict[str, Any]]:
        """Wire-level ``integrations`` map: flags and option maps merged."""
        if not self.integrations_enabled and not self.integration_options:
            return None
        merged: Dict[str, Any] = dict(self.integrations_enabled or {})
        merged.update(self.integration_options or {})
        return merged


class AliasMessage(Message):
    """Merges a previous identity into ``user_id``."""

    type: Literal[MessageType.ALIAS] = MessageType.ALIAS
    previous_id: str


class GroupMessage(Message):
    """Associates a user with a group."""

    type: Literal[MessageType.GROUP] = MessageType.GROUP
    group_id: str
    traits: Optional[Dict[str, Any]] = None


class IdentifyMessage(Message):
    """Ties a user to their traits."""

    type: Literal[MessageType.IDENTIFY] = MessageType.IDENTIFY
    traits: Optional[Dict[str, Any]] = None


class PageMessage(Message):
    """Records a web page view."""

    type: Literal[MessageType.PAGE] = MessageType.PAGE
    name: str
    properties: Optional[Dict[str, Any]] = None


class ScreenMessage(Message):
    """Records a mobile screen view."""

    type: Literal[MessageType.SCREEN] = MessageType.SCREEN
    name: str
    properties: Optional[Dict[str, Any]] = None


class TrackMessage(Message):
    """Records an action the user performed."""

    type: Literal[MessageType.TRACK] = MessageType.TRACK
    event: str
    properties: Optional[Dict[str, Any]] = None
