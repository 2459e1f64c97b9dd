import json

import pytest

from src.finsavvy.api.schemas import ChatCompletionChunk
from src.finsavvy.api.streaming import stream_response
from src.finsavvy.models import TurnResult


async def _collect(result, **kwargs):
    chunks = []
    lines = []
    async for line in stream_response(result, **kwargs):
        lines.append(line)
        if line.startswith("data: ") and line.strip() != "data: [DONE]":
            chunks.append(json.loads(line[6:]))
    return chunks, lines


@pytest.mark.asyncio
async def test_openai_schema_compliance():
    """Verify that all generated chunks are valid ChatCompletionChunk objects."""
    chunks, _ = await _collect(TurnResult(response_text="Hello\nWorld"))
    for chunk_data in chunks:
        # This will raise a pydantic.ValidationError if not compliant
        ChatCompletionChunk(**chunk_data)
        assert chunk_data["object"] == "chat.completion.chunk"


@pytest.mark.asyncio
async def test_one_chunk_per_line():
    """Verify each line of the reply is its own chunk, newlines kept."""
    chunks, _ = await _collect(TurnResult(response_text="**Title**\n\n• one\n• two"))
    contents = [c["choices"][0]["delta"].get("content") for c in chunks[:-1]]
    assert contents == ["**Title**\n", "\n", "• one\n", "• two"]
    assert "".join(contents) == "**Title**\n\n• one\n• two"


@pytest.mark.asyncio
async def test_role_only_on_first_chunk():
    """Verify the assistant role is sent once."""
    chunks, _ = await _collect(TurnResult(response_text="a\nb\nc"))
    roles = [c["choices"][0]["delta"].get("role") for c in chunks]
    assert roles[0] == "assistant"
    assert all(role is None for role in roles[1:])


@pytest.mark.asyncio
async def test_stop_chunk_and_done_marker():
    """Verify the stream closes with a stop chunk and the [DONE] sentinel."""
    chunks, lines = await _collect(TurnResult(response_text="Hello"), model_name="custom-model")
    assert chunks[-1]["choices"][0]["finish_reason"] == "stop"
    assert chunks[-1]["choices"][0]["delta"] == {}
    assert lines[-1] == "data: [DONE]\n\n"
    assert {c["model"] for c in chunks} == {"custom-model"}
    assert len({c["id"] for c in chunks}) == 1
