"""httpx-backed registration transport.

Posts the registration as JSON to the instance's runner service::

    POST /api/actions/runner.v1.RunnerService/Register
    {"name": ..., "token": ..., "version": ..., "labels": ["ubuntu:host", ...]}

and reads back ``{"runner": {"id", "uuid", "name", "token", "labels"}}``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from runner_register.models import RegisteredRunner, RegistrationRequest
from runner_register.protocol import TransportError, TransportUnavailableError

logger = logging.getLogger("runner_register.client")

REGISTER_PATH = "/api/actions/runner.v1.RunnerService/Register"


def _extract_error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text if text else response.reason_phrase
    if isinstance(body, dict):
        for key in ("msg", "message", "detail"):
            if body.get(key) is not None:
                return str(body[key])
    return str(body)


def _raise_for_status(response: httpx.Response) -> None:
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        request = exc.request
        detail = _extract_error_detail(response)
        raise TransportError(
            f"{request.method} {request.url.path} -> {response.status_code}: {detail}",
            status_code=response.status_code,
        ) from exc


class HttpRegistrationClient:
    """Registers runners over HTTP.

    Args:
        base_url: Instance address, e.g. ``http://localhost:3000``.
        client: Optional pre-built ``httpx.AsyncClient``; it is not closed by
            :meth:`aclose`.
        timeout_s: Request timeout when the client is created here.

    An owned client is only created on the first :meth:`register` call, so an
    invalid address surfaces as a :class:`TransportError` from that call.
    """

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout_s: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            try:
                self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self._timeout_s)
            except httpx.InvalidURL as exc:
                raise TransportError(f"invalid instance address {self.base_url!r}: {exc}") from exc
        return self._client

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpRegistrationClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def register(self, request: RegistrationRequest) -> RegisteredRunner:
        payload: dict[str, Any] = {
            "name": request.name,
            "token": request.token,
            "version": request.version,
            "labels": request.label_strings(),
        }
        logger.debug("POST %s%s", self.base_url, REGISTER_PATH)
        try:
            r = await self._get_client().post(REGISTER_PATH, json=payload)
        except httpx.InvalidURL as exc:
            raise TransportError(f"invalid instance address {self.base_url!r}: {exc}") from exc
        except httpx.TransportError as exc:
            raise TransportUnavailableError(f"cannot reach {self.base_url}: {exc}") from exc
        _raise_for_status(r)

        try:
            body = r.json()
        except ValueError as exc:
            raise TransportError(f"invalid response from {self.base_url}: not JSON") from exc
        data = body.get("runner") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise TransportError(f"invalid response from {self.base_url}: missing runner")
        try:
            runner = RegisteredRunner.model_validate(data)
        except ValidationError as exc:
            raise TransportError(f"invalid response from {self.base_url}: {exc}") from exc
        return runner.model_copy(update={"address": request.instance_addr})
