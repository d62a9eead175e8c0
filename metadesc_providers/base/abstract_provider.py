"""AbstractProvider: shared request engine for all vendor adapters.

Purpose:
- Implement ``ProviderInterface`` once: prompt validation, URL and header
  construction, transport invocation, JSON decoding, error normalization and
  logging. Concrete providers only fill in vendor hooks.

Hooks (template methods):
- ``get_summary_endpoint()``           path appended to the API base (required)
- ``build_summary_request_body(p)``    JSON payload for generation (required)
- ``parse_summary(data)``              decoded success body -> text (required)
- ``parse_model_list(data)``           decoded models body -> descriptors (required)
- ``extract_error_message(data)``      decoded error body (or ``None``) -> text (required)
- ``get_api_base()`` / ``get_models_endpoint()`` / ``prepare_headers(h)`` (optional)

Hooks signal a vendor shape mismatch by raising the error returned from
``parse_error()`` / ``model_list_error()``; any other exception raised inside a
hook is converted here as well.

Request lifecycle:
    Idle -> Building -> Sent -> Decoded -> Parsed -> Done
    with terminal failures TransportFailed | HttpError | DecodeFailed | ParseFailed.
    Each terminal failure maps to one ``ErrorCode``. No retries at this layer.

Concurrency:
- ``api_key`` / ``model`` are instance state set before a call. Per-call
  overrides run on a shallow request-scoped copy (``with_config``) so the
  shared instance is never mutated mid-request.

Security:
- The API key is only ever placed in request headers. Every surfaced message
  passes through ``redact_secret``; log context carries no credentials.
"""

from __future__ import annotations

import copy
import json
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional

from pydantic import ValidationError

from ..config import get_provider_config
from .constants import (
    AUTHORIZATION_HEADER,
    CONTENT_TYPE_HEADER,
    JSON_CONTENT_TYPE,
    MAX_ERROR_BODY_CHARS,
    MSG_BUILD_REQUEST,
    MSG_DECODE,
    MSG_EMPTY_PROMPT,
    MSG_EMPTY_SUMMARY,
    MSG_HTTP_FALLBACK,
    MSG_MISSING_API_KEY,
    MSG_PARSE_MODELS,
    MSG_PARSE_SUMMARY,
    MSG_TRANSPORT,
)
from .dto import SummaryRequestDTO
from .errors import ErrorCode, ProviderError, classify_exception, is_retryable_status, status_category
from .http import HttpResponse, HttpTransport, HttpxTransport
from .logging import LogContext, get_logger, normalized_log_event
from .models import HttpExchange, ModelDescriptor, ModelListResult, SummaryResult
from .timeouts import get_timeout_config
from .utils.redaction import redact_secret


def _coerce_non_empty_str(candidate: Any, fallback: str) -> str:
    """Return a stripped string derived from ``candidate`` or ``fallback`` when blank."""
    if candidate is None:
        return fallback
    coerced = str(candidate).strip()
    return coerced or fallback


def _normalize_base(url: str) -> str:
    return url.rstrip("/") + "/" if url else url


class AbstractProvider(ABC):
    """Base class for vendor adapters implementing ``ProviderInterface``.

    Subclasses declare their identity through class constants and implement
    the vendor hooks; they never perform I/O themselves.
    """

    NAME: ClassVar[str] = ""
    TITLE: ClassVar[str] = ""
    DEFAULT_MODEL: ClassVar[str] = ""
    API_KEY_URL: ClassVar[str] = ""
    API_BASE: ClassVar[str] = ""
    # Top-level key holding the model array in the vendor's model-list response
    MODELS_FIELD: ClassVar[str] = "data"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        """Resolve configuration and prepare the transport.

        Explicit arguments win over environment and config-file values, which
        win over the built-in defaults (see ``metadesc_providers.config``).
        """
        cfg = get_provider_config(
            self.NAME,
            overrides={
                "api_key": api_key,
                "model": model,
                "base_url": base_url,
                "timeout_seconds": timeout_seconds,
            },
        )
        self._api_key: str = cfg.get("api_key") or ""
        self._model: str = _coerce_non_empty_str(cfg.get("model"), self.DEFAULT_MODEL)
        self._base_url: str = _normalize_base(_coerce_non_empty_str(cfg.get("base_url"), self.API_BASE))
        self._timeout_seconds: Optional[float] = cfg.get("timeout_seconds")
        self._headers: Dict[str, str] = dict(headers or {})
        self._transport: HttpTransport = transport if transport is not None else HttpxTransport(purpose=self.NAME)
        self._logger = get_logger(f"metadesc_providers.{self.NAME}")

    def __repr__(self) -> str:
        key_state = "set" if self._api_key else "missing"
        return f"<{type(self).__name__} name={self.NAME!r} model={self._model!r} api_key={key_state}>"

    # ----- Identity -----
    def get_name(self) -> str:
        return self.NAME

    def get_title(self) -> str:
        return self.TITLE

    def get_default_model(self) -> str:
        return self.DEFAULT_MODEL

    def get_url_api_key(self) -> str:
        return self.API_KEY_URL

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier (alias of ``get_name()``)."""
        return self.NAME

    # ----- Configuration -----
    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def model(self) -> str:
        return self._model

    def set_api_key(self, api_key: Optional[str]) -> None:
        self._api_key = api_key or ""

    def set_model(self, model: Optional[str]) -> None:
        """Select a model; blank or ``None`` restores the provider default."""
        self._model = _coerce_non_empty_str(model, self.DEFAULT_MODEL)

    def configure(self, api_key: Optional[str] = None, model: Optional[str] = None) -> "AbstractProvider":
        """Apply the given settings in place (``None`` leaves a value unchanged)."""
        if api_key is not None:
            self.set_api_key(api_key)
        if model is not None:
            self.set_model(model)
        return self

    def with_config(self, api_key: Optional[str] = None, model: Optional[str] = None) -> "AbstractProvider":
        """Return a request-scoped copy carrying the overrides.

        The original instance is untouched, so one configured provider can
        serve calls with different keys or models from several threads.
        """
        if api_key is None and model is None:
            return self
        scoped = copy.copy(self)
        scoped._headers = dict(self._headers)
        return scoped.configure(api_key=api_key, model=model)

    def get_request_timeout(self, operation: str = "summary") -> float:
        """Timeout (seconds) for ``operation`` (``"summary"`` or ``"models"``)."""
        if self._timeout_seconds:
            return float(self._timeout_seconds)
        cfg = get_timeout_config()
        return cfg.models_timeout_seconds if operation == "models" else cfg.http_timeout_seconds

    # ----- Vendor hooks -----
    def get_api_base(self) -> str:
        """Vendor root URL ending with ``/``."""
        return self._base_url

    @abstractmethod
    def get_summary_endpoint(self) -> str:
        """Path (relative to the API base) of the generation endpoint."""

    def get_models_endpoint(self) -> str:
        """Path (relative to the API base) of the model-list endpoint."""
        return "models"

    @abstractmethod
    def build_summary_request_body(self, prompt: str) -> Dict[str, Any]:
        """Return the JSON payload for a generation request."""

    @abstractmethod
    def parse_summary(self, data: Any) -> str:
        """Extract the generated text from a decoded success response."""

    @abstractmethod
    def parse_model_list(self, data: Any) -> List[ModelDescriptor]:
        """Extract selectable models from a decoded model-list response."""

    @abstractmethod
    def extract_error_message(self, data: Optional[Any]) -> str:
        """Return the vendor's error text from a decoded error body, or ``""``.

        ``data`` is ``None`` when the error body was not valid JSON.
        """

    def prepare_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Adjust default headers for non-standard auth schemes."""
        return headers

    # ----- Helpers for hooks -----
    def parse_error(self, detail: Optional[str] = None) -> ProviderError:
        """Error to raise from ``parse_summary`` when the shape does not match."""
        message = MSG_PARSE_SUMMARY.format(provider=self.TITLE)
        return self._error(ErrorCode.PARSE, message if not detail else f"{message} ({detail})")

    def model_list_error(self) -> ProviderError:
        """Error to raise from ``parse_model_list`` when the model array is missing."""
        return self._error(
            ErrorCode.PARSE,
            MSG_PARSE_MODELS.format(provider=self.TITLE, field=self.MODELS_FIELD),
        )

    def model_entries(self, data: Any) -> List[Any]:
        """Return the raw model array under ``MODELS_FIELD`` or raise ``model_list_error()``."""
        entries = data.get(self.MODELS_FIELD) if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise self.model_list_error()
        return entries

    def skip_model_entry(self, entry: Any, reason: str) -> None:
        """Record a model-list entry dropped by ``parse_model_list``."""
        self._logger.debug("%s: skipping model entry (%s): %.200r", self.NAME, reason, entry)

    @staticmethod
    def nested_error_message(data: Optional[Any]) -> str:
        """Common ``{"error": {"message": ...}}`` / ``{"error": "..."}`` extraction."""
        if not isinstance(data, dict):
            return ""
        err = data.get("error")
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            return err["message"]
        if isinstance(err, str):
            return err
        msg = data.get("message")
        return msg if isinstance(msg, str) else ""

    # ----- Request building -----
    def _url(self, endpoint: str) -> str:
        return self.get_api_base() + endpoint.lstrip("/")

    def build_headers(self) -> Dict[str, str]:
        """Default JSON + Bearer headers, static extras, then vendor overrides."""
        headers: Dict[str, str] = {
            CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE,
            AUTHORIZATION_HEADER: f"Bearer {self._api_key}",
        }
        headers.update(self._headers)
        return dict(self.prepare_headers(headers))

    def build_summary_request(self, prompt: str) -> HttpExchange:
        """Plan the generation call without sending it (used by dry runs)."""
        return self._plan("POST", self.get_summary_endpoint, lambda: self.build_summary_request_body(prompt))

    def build_models_request(self) -> HttpExchange:
        return self._plan("GET", self.get_models_endpoint)

    def _plan(
        self,
        method: str,
        endpoint: Callable[[], str],
        body: Optional[Callable[[], Any]] = None,
    ) -> HttpExchange:
        """Assemble an exchange; any hook failure becomes a VALIDATION error."""
        try:
            return HttpExchange(
                method=method,
                url=self._url(endpoint()),
                headers=self.build_headers(),
                body=body() if body is not None else None,
            )
        except ProviderError:
            raise
        except Exception as exc:
            detail = redact_secret(f"{type(exc).__name__}: {exc}", [self._api_key])
            raise self._error(
                ErrorCode.VALIDATION, MSG_BUILD_REQUEST.format(provider=self.TITLE, detail=detail), raw=exc
            ) from exc

    # ----- Public operations -----
    def generate_summary(
        self,
        prompt: str,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
    ) -> SummaryResult:
        """Generate a meta-description candidate for ``prompt``.

        Returns a ``SummaryResult`` with trimmed text, or with a
        ``ProviderError`` whose code identifies the failing stage.
        """
        return self.with_config(api_key=api_key, model=model)._run_summary(prompt)

    def fetch_models(self, api_key: Optional[str] = None) -> ModelListResult:
        """Query the vendor for selectable models."""
        return self.with_config(api_key=api_key)._run_models()

    # ----- Engine -----
    def _run_summary(self, prompt: str) -> SummaryResult:
        ctx = LogContext(provider=self.NAME, model=self._model, operation="summary")
        t0 = time.perf_counter()
        try:
            self._validate_prompt(prompt)
            self._require_api_key()
            exchange = self.build_summary_request(prompt)
            normalized_log_event(self._logger, "summary.start", ctx, phase="start", prompt_chars=len(prompt))
            data = self._send(exchange, timeout=self.get_request_timeout("summary"))
            text = self._apply_hook(self.parse_summary, data, self.parse_error)
            if not isinstance(text, str):
                raise self.parse_error()
            text = text.strip()
            if not text:
                raise self._error(ErrorCode.PARSE, MSG_EMPTY_SUMMARY.format(provider=self.TITLE))
        except ProviderError as err:
            latency_ms = (time.perf_counter() - t0) * 1000.0
            self._log_failure("summary.error", ctx, err, latency_ms)
            return SummaryResult(provider=self.NAME, model=self._model, error=err, latency_ms=latency_ms)
        latency_ms = (time.perf_counter() - t0) * 1000.0
        normalized_log_event(
            self._logger, "summary.end", ctx, phase="finalize", emitted=True, latency_ms=latency_ms, summary_chars=len(text)
        )
        return SummaryResult(provider=self.NAME, model=self._model, text=text, latency_ms=latency_ms)

    def _run_models(self) -> ModelListResult:
        ctx = LogContext(provider=self.NAME, operation="models")
        t0 = time.perf_counter()
        try:
            self._require_api_key()
            exchange = self.build_models_request()
            normalized_log_event(self._logger, "models.start", ctx, phase="start")
            data = self._send(exchange, timeout=self.get_request_timeout("models"))
            models = self._apply_hook(self.parse_model_list, data, self.model_list_error)
            if not isinstance(models, list) or not all(isinstance(m, ModelDescriptor) for m in models):
                raise self.model_list_error()
        except ProviderError as err:
            self._log_failure("models.error", ctx, err, (time.perf_counter() - t0) * 1000.0)
            return ModelListResult(provider=self.NAME, error=err)
        normalized_log_event(
            self._logger,
            "models.end",
            ctx,
            phase="finalize",
            emitted=True,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
            model_count=len(models),
        )
        return ModelListResult(provider=self.NAME, models=models)

    def _validate_prompt(self, prompt: str) -> None:
        try:
            SummaryRequestDTO(prompt=prompt)
        except ValidationError as exc:
            raise self._error(ErrorCode.VALIDATION, MSG_EMPTY_PROMPT, raw=exc) from exc

    def _require_api_key(self) -> None:
        if not self._api_key or not self._api_key.strip():
            raise self._error(ErrorCode.VALIDATION, MSG_MISSING_API_KEY.format(provider=self.TITLE))

    def _send(self, exchange: HttpExchange, *, timeout: float) -> Any:
        """Invoke the transport and return the decoded JSON success body."""
        try:
            resp = self._transport.request(
                exchange.method,
                exchange.url,
                headers=exchange.headers,
                json_body=exchange.body,
                timeout=timeout,
            )
        except Exception as exc:
            # Any failure to complete the exchange is a transport failure.
            detail = redact_secret(str(exc) or type(exc).__name__, [self._api_key])
            raise self._error(
                ErrorCode.TRANSPORT,
                MSG_TRANSPORT.format(provider=self.TITLE, detail=detail),
                retryable=True,
                raw=exc,
            ) from exc
        if not resp.ok:
            raise self._http_error(resp)
        try:
            return json.loads(resp.body)
        except ValueError as exc:
            raise self._error(ErrorCode.DECODE, MSG_DECODE.format(provider=self.TITLE), raw=exc) from exc

    def _http_error(self, resp: HttpResponse) -> ProviderError:
        decoded: Optional[Any]
        try:
            decoded = json.loads(resp.body) if resp.body else None
        except ValueError:
            decoded = None
        try:
            message = self.extract_error_message(decoded)
        except Exception as exc:  # noqa: BLE001
            self._logger.debug("extract_error_message failed for %s: %s", self.NAME, type(exc).__name__)
            message = ""
        message = message.strip() if isinstance(message, str) else ""
        if not message and decoded is None:
            message = resp.text.strip()[:MAX_ERROR_BODY_CHARS]
        if not message:
            message = MSG_HTTP_FALLBACK.format(provider=self.TITLE, status=resp.status_code)
        return self._error(
            ErrorCode.HTTP,
            message,
            status_code=resp.status_code,
            retryable=is_retryable_status(resp.status_code),
        )

    def _apply_hook(self, hook: Callable[[Any], Any], data: Any, on_failure: Callable[[], ProviderError]) -> Any:
        """Run a parsing hook, converting unexpected exceptions to typed errors.

        Decoding failures inside a hook (e.g. a JSON string nested in the
        payload) stay DECODE; everything else is a PARSE failure.
        """
        try:
            return hook(data)
        except ProviderError:
            raise
        except Exception as exc:
            if classify_exception(exc) is ErrorCode.DECODE:
                raise self._error(ErrorCode.DECODE, MSG_DECODE.format(provider=self.TITLE), raw=exc) from exc
            err = on_failure()
            err.raw = exc
            raise err from exc

    def _error(
        self,
        code: ErrorCode,
        message: str,
        *,
        status_code: Optional[int] = None,
        retryable: bool = False,
        raw: Optional[Exception] = None,
    ) -> ProviderError:
        return ProviderError(
            code=code,
            message=redact_secret(message, [self._api_key]),
            provider=self.NAME,
            model=self._model,
            status_code=status_code,
            retryable=retryable,
            raw=raw,
        )

    def _log_failure(self, event: str, ctx: LogContext, err: ProviderError, latency_ms: float) -> None:
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="finalize",
            emitted=False,
            error_code=err.code.value,
            status_code=err.status_code,
            status_category=status_category(err.status_code) if err.status_code else None,
            retryable=err.retryable,
            message=err.message,
            latency_ms=latency_ms,
        )


__all__ = ["AbstractProvider"]
