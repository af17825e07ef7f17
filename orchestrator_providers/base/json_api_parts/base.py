"""BaseJsonApiProvider: shared ``execute`` flow for JSON-over-HTTPS vendors.

Purpose:
- Run the serialize, transmit, check status, decode, price, wrap sequence
  once for every vendor adapter. Subclasses only describe their wire format.

External dependencies:
- None directly. I/O goes through the injected :class:`JsonTransport`
  (``HttpxTransport`` by default).

Failure semantics:
- Non-2xx responses raise :class:`ProviderHTTPError`; undecodable bodies
  raise :class:`MalformedResponseError`. Transport exceptions propagate
  unchanged. Every failure is logged as ``execute.error`` before it
  propagates. There are no retries and no partial responses.

Timeout strategy:
- None here. The transport's configured timeout is the only deadline.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional

from ..errors import ProviderError, classify_exception
from ..http import HttpxTransport, JsonTransport
from ..interfaces import HasDescriptor, LLMProvider
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import ProviderDescriptor, Request, Response, Usage
from ..utils.exchange import decode_wire, elapsed_ms, ensure_success
from ..utils.prompting import compute_cost, estimate_request_cost, probe_availability
from .parsed_completion import ParsedCompletion


class BaseJsonApiProvider(HasDescriptor, LLMProvider):
    """Reusable base class for adapters that POST JSON to a vendor endpoint.

    Subclasses must implement:
    - ``vendor_label``: display name used in error messages.
    - ``_endpoint()``: absolute URL for the generation call.
    - ``_headers()``: vendor auth/version headers (never logged).
    - ``_build_body(request)``: vendor request body as a plain dict.
    - ``_parse_payload(payload)``: validate the decoded JSON and return a
      :class:`ParsedCompletion`; raise ``ValueError`` (or let pydantic raise
      ``ValidationError``) when required fields are missing.

    ``_params()`` may be overridden to add query-string parameters.
    """

    vendor_label: str = ""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str,
        descriptor: ProviderDescriptor,
        transport: Optional[JsonTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._descriptor = descriptor
        self._transport: JsonTransport = transport if transport is not None else HttpxTransport()
        self._logger = get_logger(f"orchestrator_providers.{descriptor.name}")

    # ----- Descriptor -----
    @property
    def descriptor(self) -> ProviderDescriptor:
        return self._descriptor

    @property
    def model(self) -> str:
        return self._model

    @property
    def base_url(self) -> str:
        return self._base_url

    # ----- Abstract surface -----
    def _endpoint(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def _headers(self) -> Dict[str, str]:  # pragma: no cover - abstract
        raise NotImplementedError

    def _params(self) -> Optional[Dict[str, str]]:
        return None

    def _build_body(self, request: Request) -> Dict[str, Any]:  # pragma: no cover - abstract
        raise NotImplementedError

    def _parse_payload(self, payload: Any) -> ParsedCompletion:  # pragma: no cover - abstract
        raise NotImplementedError

    def _log_extra(self) -> Mapping[str, Any]:
        """Extra adapter-specific fields merged into every log context."""
        return {}

    # ----- Contract -----
    async def execute(self, request: Request) -> Response:
        """Send ``request`` to the vendor and return the normalized response."""
        ctx = LogContext(provider=self.name, model=self._model, extra=dict(self._log_extra()))
        body = self._build_body(request)
        self._log_start(ctx, request)
        try:
            started = time.perf_counter()
            raw = await self._transport.post_json(
                self._endpoint(), body, headers=self._headers(), params=self._params()
            )
            ensure_success(raw, vendor=self.vendor_label, provider=self.name, model=self._model)
            parsed = decode_wire(
                raw.text,
                self._parse_payload,
                vendor=self.vendor_label,
                provider=self.name,
                model=self._model,
            )
            latency = elapsed_ms(started)
        except ProviderError as exc:
            self._log_error(ctx, exc, exc.code.value)
            raise
        except Exception as exc:
            self._log_error(ctx, exc, classify_exception(exc).value)
            raise

        usage = Usage(
            input_tokens=parsed.input_tokens,
            output_tokens=parsed.output_tokens,
            cost=compute_cost(parsed.input_tokens, parsed.output_tokens, self.cost_per_1m_tokens),
        )
        response = Response(
            content=parsed.content,
            tool_calls=parsed.tool_calls or None,
            usage=usage,
            latency=latency,
            model=self._model,
            provider=self.name,
        )
        self._log_end(ctx, response)
        return response

    def estimate_cost(self, request: Request) -> float:
        return estimate_request_cost(request, self.cost_per_1m_tokens)

    async def check_availability(self) -> bool:
        return await probe_availability(self, self._logger)

    # ----- Logging helpers -----
    def _log_start(self, ctx: LogContext, request: Request) -> None:
        normalized_log_event(
            self._logger,
            "execute.start",
            ctx,
            phase="start",
            attempt=1,
            emitted=None,
            tokens=None,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            context_docs=len(request.context),
            has_tools=request.has_tools,
            stream=request.stream,
        )

    def _log_end(self, ctx: LogContext, response: Response) -> None:
        normalized_log_event(
            self._logger,
            "execute.end",
            ctx,
            phase="finalize",
            attempt=1,
            emitted=bool(response.content or response.tool_calls),
            tokens={
                "prompt": response.usage.input_tokens,
                "completion": response.usage.output_tokens,
                "total": response.usage.total_tokens,
            },
            latency_ms=response.latency,
            cost=response.usage.cost,
            tool_calls=len(response.tool_calls or ()),
        )

    def _log_error(self, ctx: LogContext, exc: BaseException, code: str) -> None:
        normalized_log_event(
            self._logger,
            "execute.error",
            ctx,
            phase="finalize",
            attempt=1,
            emitted=False,
            tokens=None,
            error_code=code,
            level=logging.ERROR,
            error=type(exc).__name__,
            status_code=getattr(exc, "status_code", None),
        )


__all__ = ["BaseJsonApiProvider"]
