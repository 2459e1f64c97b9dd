"""SSE streaming of advisor replies.

Replies are complete before streaming starts, so they are sent line by line
as Server-Sent Events compatible with the OpenAI chunk format.
"""

import logging
import time
import uuid
from collections.abc import AsyncGenerator

from ..models import TurnResult
from .schemas import MODEL_NAME, ChatCompletionChoice, ChatCompletionChunk, DeltaContent

logger = logging.getLogger(__name__)

CHAT_COMPLETION_PREFIX = "chatcmpl-"


def _sse(chunk: ChatCompletionChunk) -> str:
    return "data: " + chunk.model_dump_json(exclude_unset=True) + "\n\n"


async def stream_response(
    result: TurnResult,
    model_name: str = MODEL_NAME,
) -> AsyncGenerator[str, None]:
    """
    Stream a turn result as OpenAI-compatible SSE chunks.

    Each chunk carries one line of the reply (newline included) so markdown
    renders incrementally without breaking mid-line. The assistant role is
    only set on the first chunk.

    Args:
        result: The processed turn.
        model_name: The name of the model to display in the response chunks.

    Yields:
        OpenAI-compatible SSE data strings ("data: {...}\\n\\n").
    """
    response_id = f"{CHAT_COMPLETION_PREFIX}{uuid.uuid4().hex[:12]}"
    is_first_chunk = True

    for line in result.response_text.splitlines(keepends=True):
        delta_kwargs = {"content": line}
        if is_first_chunk:
            delta_kwargs["role"] = "assistant"
            is_first_chunk = False

        chunk = ChatCompletionChunk(
            id=response_id,
            object="chat.completion.chunk",
            created=int(time.time()),
            model=model_name,
            choices=[
                ChatCompletionChoice(index=0, delta=DeltaContent(**delta_kwargs), finish_reason=None)
            ],
        )
        yield _sse(chunk)

    # Final chunk closes the choice
    chunk = ChatCompletionChunk(
        id=response_id,
        object="chat.completion.chunk",
        created=int(time.time()),
        model=model_name,
        choices=[ChatCompletionChoice(delta=DeltaContent(), index=0, finish_reason="stop")],
    )
    logger.info("Streamed reply %s", response_id)
    yield _sse(chunk)
    yield "data: [DONE]\n\n"
