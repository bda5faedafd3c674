import json
from typing import Any, AsyncIterator, Dict, List, Optional

import httpx

from model_arena.const import (
    ACCEPT_HEADER, AUTHORIZATION_HEADER, CONTENT_TYPE_JSON, SSE_DATA_PREFIX, SSE_DONE
)
from .config import Config
from .exceptions import GatewayError
from .logging import LoggingManager

logger = LoggingManager.get_logger(__name__)


def parse_event_line(line: str) -> Optional[Any]:
    """Decode one server-sent event line, returning SSE_DONE on the terminator."""
    line = line.strip()
    if not line.startswith(SSE_DATA_PREFIX):
        return None
    data = line[len(SSE_DATA_PREFIX):].strip()
    if data == SSE_DONE:
        return SSE_DONE
    try:
        return json.loads(data)
    except json.JSONDecodeError:
        logger.warning(f"Skipping undecodable gateway event: {data}")
        return None


class ChatStream:
    """An upstream chat completion whose status was already checked.

    Owns the HTTP client and the streamed response; both are closed once
    iteration ends or aclose() is called.
    """

    def __init__(self, client: httpx.AsyncClient, response: httpx.Response):
        self._client = client
        self.response = response

    async def aiter_bytes(self) -> AsyncIterator[bytes]:
        """Yield the raw server-sent event bytes."""
        try:
            async for chunk in self.response.aiter_bytes():
                yield chunk
        except httpx.HTTPError as e:
            raise GatewayError(f"Gateway chat stream failed: {str(e)}", cause=e) from e
        finally:
            await self.aclose()

    async def aiter_events(self) -> AsyncIterator[Dict[str, Any]]:
        """Yield each decoded event payload until the [DONE] terminator."""
        try:
            async for line in self.response.aiter_lines():
                event = parse_event_line(line)
                if event == SSE_DONE:
                    break
                if event is not None:
                    yield event
        except httpx.HTTPError as e:
            raise GatewayError(f"Gateway chat stream failed: {str(e)}", cause=e) from e
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        await self.response.aclose()
        await self._client.aclose()


class GatewayClient:
    """Async client for the OpenAI-compatible model gateway."""

    def __init__(self, config: Optional[Config] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or Config()
        self._transport = transport
        self.logger = logger

    def _headers(self) -> Dict[str, str]:
        headers = {ACCEPT_HEADER: CONTENT_TYPE_JSON}
        if self.config.gateway_api_key:
            headers[AUTHORIZATION_HEADER] = f"Bearer {self.config.gateway_api_key}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.gateway_url,
            headers=self._headers(),
            timeout=httpx.Timeout(self.config.request_timeout),
            transport=self._transport,
        )

    async def list_models(self) -> List[Dict[str, Any]]:
        """List the models the gateway routes to."""
        try:
            async with self._client() as client:
                response = await client.get("/models")
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            raise GatewayError(
                f"Gateway model listing failed: {e.response.status_code}",
                status_code=e.response.status_code,
                cause=e
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise GatewayError(f"Gateway model listing failed: {str(e)}", cause=e) from e

        models = body.get("data", body.get("models", [])) if isinstance(body, dict) else body
        self.logger.debug(f"Gateway listed {len(models)} models")
        return models

    async def open_chat(
        self,
        model: str,
        messages: List[Dict[str, Any]],
        **kwargs
    ) -> ChatStream:
        """
        Start a streamed chat completion and check the upstream status.

        Raises:
            GatewayError: If the gateway is unreachable or answers with an error status.
        """
        payload = {"model": model, "messages": messages, "stream": True, **kwargs}
        client = self._client()
        request = client.build_request("POST", "/chat/completions", json=payload)
        try:
            response = await client.send(request, stream=True)
        except httpx.HTTPError as e:
            await client.aclose()
            raise GatewayError(f"Gateway chat request failed: {str(e)}", cause=e) from e

        if response.status_code >= 400:
            await response.aread()
            await response.aclose()
            await client.aclose()
            raise GatewayError(
                f"Gateway chat request failed: {response.status_code}",
                status_code=response.status_code
            )
        return ChatStream(client, response)

    async def stream_chat_events(
        self,
        model: str,
        messages: List[Dict[str, Any]],
        **kwargs
    ) -> AsyncIterator[Dict[str, Any]]:
        """Stream a chat completion and yield each decoded event payload."""
        stream = await self.open_chat(model, messages, **kwargs)
        async for event in stream.aiter_events():
            yield event
