import json
from typing import AsyncIterator, Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, ConfigDict, Field

from model_arena.const import (
    HTTP_ERROR, MODEL_ID_FIELD, SYSTEM_ROLE, CHAT_SYSTEM_PROMPT, STREAMING_MEDIA_TYPE,
    CACHE_CONTROL_NO_CACHE, SSE_DATA_PREFIX
)
from model_arena.shared.gateway_client import ChatStream
from model_arena.shared.logging import LoggingManager


class Message(BaseModel):
    """A chat message."""

    role: str
    content: str


class ChatRequest(BaseModel):
    """Chat request for a gateway model."""

    model_config = ConfigDict(populate_by_name=True)

    messages: List[Message]
    model_id: Optional[str] = Field(default=None, alias=MODEL_ID_FIELD)


class ChatRouter:
    """Router for the chat endpoint."""

    def __init__(self, catalog, gateway_client):
        self.catalog = catalog
        self.gateway_client = gateway_client
        self.logger = LoggingManager.get_logger(__name__)
        self.router = APIRouter(tags=["chat"])
        self.router.post("/api/chat")(self.chat)

    @classmethod
    def get_router(cls, catalog, gateway_client) -> APIRouter:
        """Get the router instance."""
        return cls(catalog, gateway_client).router

    def build_messages(self, request: ChatRequest) -> List[Dict[str, Any]]:
        messages = [{"role": SYSTEM_ROLE, "content": CHAT_SYSTEM_PROMPT}]
        messages.extend(msg.model_dump() for msg in request.messages)
        return messages

    async def chat(self, request: ChatRequest) -> StreamingResponse:
        """Stream a chat completion from the gateway."""
        try:
            model = self.catalog.resolve_chat_model(request.model_id)
            messages = self.build_messages(request)
            self.logger.info(f"Chat router - Streaming chat for model: {model}")
            stream = await self.gateway_client.open_chat(model, messages)
        except Exception as e:
            self.logger.error(f"Error in chat API: {str(e)}")
            raise HTTPException(status_code=HTTP_ERROR, detail="Failed to generate response")

        return StreamingResponse(
            self._stream(stream),
            media_type=STREAMING_MEDIA_TYPE,
            headers={"Cache-Control": CACHE_CONTROL_NO_CACHE, "X-Accel-Buffering": "no"}
        )

    async def _stream(self, stream: ChatStream) -> AsyncIterator[bytes]:
        try:
            async for chunk in stream.aiter_bytes():
                yield chunk
        except Exception as e:
            # Headers are already sent, so the failure is reported as a final event
            self.logger.error(f"Error while streaming: {str(e)}")
            error = {"error": "Failed to generate response", "details": str(e)}
            yield f"{SSE_DATA_PREFIX} {json.dumps(error)}\n\n".encode("utf-8")
