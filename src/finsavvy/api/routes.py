"""FastAPI route handlers."""

import asyncio
import logging
import time
import uuid

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from ..agent.engine import AdvisorEngine
from ..config import settings
from ..storage import PersistenceError, UserRecordStore
from ..tools.market_data import create_market_data
from .auth import verify_token
from .database import get_store
from .schemas import (
    MODEL_NAME,
    ChatCompletionChoice,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    MessageHistoryResponse,
    ProfileSummaryResponse,
    SessionRequest,
    SessionResponse,
    StreakSummaryResponse,
    Usage,
)
from .streaming import stream_response

router = APIRouter()

# Engine bound to the active store, created on first use
_engine: AdvisorEngine | None = None

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def get_engine() -> AdvisorEngine:
    """Get or create the advisor engine."""
    global _engine
    if _engine is None:
        _engine = AdvisorEngine(
            UserRecordStore(get_store()),
            market_data=create_market_data(settings.market_data_source),
            max_sessions=settings.max_sessions,
        )
    return _engine


def reset_engine():
    """Drop the cached engine so the next request binds to the current store."""
    global _engine
    _engine = None


@router.post("/v1/chat/completions")
async def chat_completions(
    request: ChatCompletionRequest,
    token: str = Depends(verify_token),
):
    """OpenAI-compatible chat completion endpoint.

    Supports both streaming and non-streaming responses.
    Uses the `user` field as the user id for the session, profile and streak.
    Requests without `user` are answered statelessly.

    Engine calls block on the store and market data, so they run in a worker
    thread to keep the event loop free.
    """
    user_text = next((m.content for m in reversed(request.messages) if m.role == "user"), None)
    if user_text is None:
        raise HTTPException(status_code=400, detail="No user message to process")

    engine = get_engine()
    if request.user:
        result = await asyncio.to_thread(engine.process_turn, request.user, user_text)
    else:
        result = await asyncio.to_thread(engine.process_anonymous_turn, user_text)
    logger.info("Processed turn for %s: %s", request.user or "anonymous caller", result.intent)

    if settings.response_delay_seconds:
        await asyncio.sleep(settings.response_delay_seconds)

    if request.stream:
        logger.info("Streaming response")
        return StreamingResponse(
            stream_response(result, request.model),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "X-Accel-Buffering": "no",
            },
        )

    logger.info("Non-streaming response")
    return ChatCompletionResponse(
        id=f"chatcmpl-{uuid.uuid4().hex[:12]}",
        created=int(time.time()),
        model=request.model,
        choices=[
            ChatCompletionChoice(
                index=0,
                message=ChatMessage(role="assistant", content=result.response_text),
                finish_reason="stop",
            )
        ],
        usage=Usage(),
        suggested_replies=result.suggested_replies,
        intent=result.intent,
        committed=result.committed,
    )


@router.post("/v1/sessions", response_model=SessionResponse)
async def start_session(request: SessionRequest, token: str = Depends(verify_token)):
    """Open a session: update the streak and return the greeting."""
    started = await asyncio.to_thread(
        get_engine().start_session, request.user, name=request.name
    )
    return SessionResponse(
        greeting=started.greeting, streak=started.streak, committed=started.committed
    )


@router.get("/v1/users/{user_id}/profile", response_model=ProfileSummaryResponse)
async def get_profile(user_id: str, token: str = Depends(verify_token)):
    """Summary of the stored financial profile (defaults when none is stored)."""
    try:
        summary = await asyncio.to_thread(get_engine().profile_summary, user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    return ProfileSummaryResponse(user=user_id, **summary.model_dump())


@router.get("/v1/users/{user_id}/streak", response_model=StreakSummaryResponse)
async def get_streak(user_id: str, token: str = Depends(verify_token)):
    """Current and longest streak, and whether the streak is still alive."""
    try:
        summary = await asyncio.to_thread(get_engine().streak_summary, user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    return StreakSummaryResponse(user=user_id, **summary.model_dump())


@router.get("/v1/users/{user_id}/messages", response_model=MessageHistoryResponse)
async def get_messages(user_id: str, token: str = Depends(verify_token)):
    """Transcript of the user's current session."""
    return MessageHistoryResponse(user=user_id, messages=get_engine().transcript(user_id))


@router.get("/v1/models")
async def list_models(token: str = Depends(verify_token)):
    """List available models (OpenAI-compatible)."""
    return {
        "object": "list",
        "data": [
            {
                "id": MODEL_NAME,
                "object": "model",
                "created": 1700000000,
                "owned_by": "finsavvy",
            }
        ],
    }
