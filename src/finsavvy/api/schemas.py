"""API schemas: OpenAI-compatible chat plus session and summary payloads."""

from typing import Literal

from pydantic import BaseModel, Field

from ..models import Intent, Message, ProfileSummary, StreakSummary, UserStreak

MODEL_NAME = "finsavvy-advisor"


class ChatMessage(BaseModel):
    """OpenAI-compatible message format."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """OpenAI-compatible chat completion request.

    Only the last user message is processed; earlier turns live in the
    server-side session.
    """

    model: str = MODEL_NAME
    messages: list[ChatMessage] = Field(min_length=1)
    stream: bool = True
    user: str | None = Field(
        default=None, description="User ID, used to key the session, profile and streak"
    )
    temperature: float | None = Field(default=None, ge=0, le=2)
    max_tokens: int | None = None


class DeltaContent(BaseModel):
    """Delta content in streaming response."""

    content: str | None = None
    role: str | None = None


class ChatCompletionChoice(BaseModel):
    """Single choice in completion response."""

    index: int = 0
    delta: DeltaContent | None = None
    message: ChatMessage | None = None
    finish_reason: str | None = None


class ChatCompletionChunk(BaseModel):
    """Streaming response chunk."""

    id: str
    object: str = "chat.completion.chunk"
    created: int
    model: str
    choices: list[ChatCompletionChoice]


class Usage(BaseModel):
    """Token usage information (always zero; replies are templated)."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompletionResponse(BaseModel):
    """Non-streaming response, extended with the advisor's quick replies."""

    id: str
    object: str = "chat.completion"
    created: int
    model: str
    choices: list[ChatCompletionChoice]
    usage: Usage | None = None
    suggested_replies: list[str] = Field(default_factory=list)
    intent: Intent | None = None
    committed: bool = True


class SessionRequest(BaseModel):
    user: str
    name: str | None = None


class SessionResponse(BaseModel):
    greeting: Message
    streak: UserStreak
    committed: bool


class ProfileSummaryResponse(ProfileSummary):
    user: str


class StreakSummaryResponse(StreakSummary):
    user: str


class MessageHistoryResponse(BaseModel):
    user: str
    messages: list[Message]
