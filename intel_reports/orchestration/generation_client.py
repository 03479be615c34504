"""
Client for the report generation service and interpretation of its responses.

The HTTP status decides success or failure; the body shape is checked
separately, so a 200 without a report is still a failure.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import aiohttp
from pydantic import ValidationError

from intel_reports.config.settings import ReportSettings
from intel_reports.errors import GenerationTransportError
from intel_reports.models.report import GeneratedReport, GenerationRequest, UsageInfo

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Intelligence report generated successfully"
FALLBACK_ERROR_MESSAGE = "Report generation failed"
TRANSPORT_ERROR_MESSAGE = "Failed to connect to report generation service"
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from server"


@dataclass
class GenerationResponse:
    """Status and decoded body of a generation service response."""
    status: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class OutcomeKind(str, Enum):
    """How a generation attempt ended."""
    SUCCESS = "success"
    REQUEST_ERROR = "request_error"
    UNEXPECTED_RESPONSE = "unexpected_response"
    TRANSPORT_ERROR = "transport_error"


@dataclass
class GenerationOutcome:
    kind: OutcomeKind
    message: str
    report: Optional[GeneratedReport] = None
    usage: Optional[UsageInfo] = None

    @property
    def succeeded(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS


def extract_error_message(body: Any) -> Optional[str]:
    """Pull a user-facing message out of {error: str} or {error: {message: str}}."""
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return message if isinstance(message, str) and message else None
    if isinstance(error, str) and error:
        return error
    return None


def interpret_response(response: GenerationResponse) -> GenerationOutcome:
    """Map a completed generation response onto its outcome."""
    if not response.ok:
        message = extract_error_message(response.body) or FALLBACK_ERROR_MESSAGE
        return GenerationOutcome(kind=OutcomeKind.REQUEST_ERROR, message=message)

    body = response.body if isinstance(response.body, dict) else {}
    raw_report = body.get("report")
    if not raw_report:
        return GenerationOutcome(kind=OutcomeKind.UNEXPECTED_RESPONSE, message=UNEXPECTED_RESPONSE_MESSAGE)

    try:
        report = GeneratedReport.model_validate(raw_report)
    except ValidationError as e:
        logger.warning(f"Generation service returned a malformed report: {e}")
        return GenerationOutcome(kind=OutcomeKind.UNEXPECTED_RESPONSE, message=UNEXPECTED_RESPONSE_MESSAGE)

    usage = None
    if body.get("usage"):
        try:
            usage = UsageInfo.model_validate(body["usage"])
        except ValidationError as e:
            logger.warning(f"Ignoring malformed usage metadata: {e}")

    return GenerationOutcome(kind=OutcomeKind.SUCCESS, message=SUCCESS_MESSAGE, report=report, usage=usage)


def transport_failure() -> GenerationOutcome:
    return GenerationOutcome(kind=OutcomeKind.TRANSPORT_ERROR, message=TRANSPORT_ERROR_MESSAGE)


def _decode_body(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


class GenerationServiceClient:
    """Sends generation requests to the external generation service."""

    def __init__(self, base_url: str, timeout_seconds: float = 300.0,
                 session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the generation client.

        Args:
            base_url: Base URL of the generation service.
            timeout_seconds: Total request timeout; expiry counts as a transport failure.
            session: Optional shared aiohttp session.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._session = session

    @classmethod
    def from_settings(cls, settings: ReportSettings) -> "GenerationServiceClient":
        return cls(settings.generation_service_url, timeout_seconds=settings.generation_timeout_seconds)

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        """
        Issue a generation request.

        Raises:
            GenerationTransportError: If the request never completed.
        """
        url = f"{self.base_url}/api/reports/generate"
        payload = request.to_payload()
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        logger.info(f"Requesting {request.report_type} report from {url}")

        try:
            if self._session is not None:
                return await self._post(self._session, url, payload, timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                return await self._post(session, url, payload, timeout)
        except asyncio.TimeoutError as e:
            raise GenerationTransportError(
                f"Generation request timed out after {self.timeout_seconds}s") from e
        except aiohttp.ClientError as e:
            raise GenerationTransportError(f"Generation request failed: {e}") from e

    async def _post(self, session, url: str, payload: dict, timeout) -> GenerationResponse:
        async with session.post(url, json=payload, timeout=timeout) as response:
            text = await response.text()
            return GenerationResponse(status=response.status, body=_decode_body(text))
