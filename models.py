from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Language = Literal["en", "af"]
Role = Literal["user", "assistant", "system"]
Action = Literal[
    "general_info",
    "list_services",
    "estimate_flow",
    "booking_flow",
    "status_lookup",
    "tips",
    "insurance_info",
]


class Attachment(BaseModel):
    """Photo attached to a chat message, inlined as a data: URL."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: str
    data_url: str = Field(alias="dataUrl")


class Message(BaseModel):
    role: Role
    content: str
    attachments: Optional[List[Attachment]] = None


class AgentInput(BaseModel):
    """Request body for POST /api/chat."""
    language: Optional[Language] = None
    messages: List[Message]


class AgentOutput(BaseModel):
    """Response body for POST /api/chat."""
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    language: Language
    action: Optional[Action] = None
    fields_requested: Optional[List[str]] = Field(default=None, alias="fieldsRequested")
    suggestions: Optional[List[str]] = None

    def to_payload(self) -> dict:
        """JSON-ready dict with wire names, unset optionals dropped"""
        return self.model_dump(by_alias=True, exclude_none=True)
