"""
Request executor.

Resolves a target, issues a single HTTP request over a fresh client,
validates the response and decodes the JSON body into the caller's type.
Nothing is retried; the first failure ends the call.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ...config.provider import NetworkConfig
from .endpoint import EndpointDescriptor, HTTPMethod, parse_url
from .errors import (
    DecodeFailure,
    DecodingError,
    InvalidResponse,
    InvalidTarget,
    ServerError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

TransportFactory = Callable[[], httpx.AsyncBaseTransport]

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


class TargetKind(str, Enum):
    """Where a resolved target came from."""

    ENDPOINT = "endpoint"
    RAW_URL = "raw_url"


@dataclass(frozen=True)
class ResolvedTarget:
    """The URL and method a request will be sent to."""

    kind: TargetKind
    url: httpx.URL
    method: HTTPMethod


def resolve_target(
    endpoint: Optional[EndpointDescriptor] = None,
    endpoint_url_string: Optional[str] = None,
) -> ResolvedTarget:
    """
    Pick the request target. An endpoint with a valid URL wins, then a raw
    URL string (always GET).

    Raises:
        InvalidTarget: If neither yields a valid URL
    """
    if endpoint is not None:
        url = parse_url(endpoint.url)
        method = _endpoint_method(endpoint)
        if url is not None and method is not None:
            return ResolvedTarget(TargetKind.ENDPOINT, url, method)
        logger.debug("Endpoint %r did not yield a valid URL", endpoint)

    url = parse_url(endpoint_url_string)
    if url is not None:
        return ResolvedTarget(TargetKind.RAW_URL, url, HTTPMethod.GET)

    raise InvalidTarget()


def _endpoint_method(endpoint: EndpointDescriptor) -> Optional[HTTPMethod]:
    try:
        return HTTPMethod(endpoint.method)
    except ValueError:
        logger.debug("Endpoint %r has unsupported method %r", endpoint, endpoint.method)
        return None


def classify_validation_error(error: ValidationError) -> DecodeFailure:
    """Map the first pydantic error onto a decode failure variant."""
    details = error.errors()
    if not details:
        return DecodeFailure.UNKNOWN

    first = details[0]
    error_type = first.get("type", "")
    if error_type in ("json_invalid", "json_type"):
        return DecodeFailure.DATA_CORRUPTED
    if error_type == "missing":
        return DecodeFailure.KEY_NOT_FOUND
    if error_type.endswith(("_type", "_parsing")) or error_type == "int_from_float":
        if first.get("input", ...) is None:
            return DecodeFailure.VALUE_NOT_FOUND
        return DecodeFailure.TYPE_MISMATCH
    return DecodeFailure.UNKNOWN


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{location}: {first.get('msg', '')} (type={first.get('type')})"


def decode(response_type: Type[T], data: bytes) -> T:
    """
    Decode a JSON payload into ``response_type``.

    Validation is strict: JSON values are never coerced across types,
    except integers filling float fields.

    Diagnostics are logged; the raised error carries no detail.

    Raises:
        DecodingError: For every decoding failure
    """
    try:
        return TypeAdapter(response_type).validate_json(data, strict=True)
    except ValidationError as e:
        failure = classify_validation_error(e)
        if failure is DecodeFailure.DATA_CORRUPTED:
            logger.debug("Decoding error: data corrupted, %s", _describe(e))
        elif failure is DecodeFailure.KEY_NOT_FOUND:
            logger.debug("Decoding error: key was not found, %s", _describe(e))
        elif failure is DecodeFailure.TYPE_MISMATCH:
            logger.debug("Decoding error: type mismatch, %s", _describe(e))
        elif failure is DecodeFailure.VALUE_NOT_FOUND:
            logger.debug("Decoding error: no value was found, %s", _describe(e))
        else:
            logger.debug("Decoding error: unrecognized validation error, %s", e)
        raise DecodingError() from None
    except Exception as e:
        logger.debug(
            "Decoding error: %s while decoding %s", type(e).__name__, response_type, exc_info=True
        )
        raise DecodingError() from None


class NetworkService:
    """Stateless executor for JSON requests."""

    def __init__(
        self,
        config: Optional[NetworkConfig] = None,
        transport_factory: Optional[TransportFactory] = None,
    ):
        """
        Initialize with injected config.

        Args:
            config: Timeouts and redirect policy, defaults to 15s/20s
            transport_factory: Builds the transport for each call's client
        """
        self.config = config or NetworkConfig()
        self.transport_factory = transport_factory

    async def request(
        self,
        response_type: Type[T],
        endpoint: Optional[EndpointDescriptor] = None,
        endpoint_url_string: Optional[str] = None,
        body: Optional[bytes] = None,
    ) -> T:
        """
        Issue one HTTP request and decode the JSON body into ``response_type``.

        Raises:
            InvalidTarget: No valid endpoint or raw URL
            InvalidResponse: The transport result is not a usable HTTP response
            ServerError: Status outside 200-299
            DecodingError: Body does not decode into ``response_type``
            httpx.TimeoutException: Request or resource timeout exceeded
            httpx.TransportError: Other transport failures
        """
        target = resolve_target(endpoint, endpoint_url_string)
        if target.kind is TargetKind.RAW_URL and body is not None:
            logger.warning("Body supplied for raw URL %s; sending it with GET", target.url)

        response = await self._send(target, body)

        if not isinstance(response, httpx.Response) or not isinstance(response.status_code, int):
            raise InvalidResponse()

        if not 200 <= response.status_code <= 299:
            logger.warning(
                "%s %s returned status %d", target.method.value, target.url, response.status_code
            )
            raise ServerError(response.status_code)

        return decode(response_type, response.content)

    async def _send(self, target: ResolvedTarget, body: Optional[bytes]) -> Any:
        client_kwargs: Dict[str, Any] = {
            "timeout": httpx.Timeout(self.config.request_timeout),
            "follow_redirects": self.config.follow_redirects,
        }
        if self.transport_factory is not None:
            client_kwargs["transport"] = self.transport_factory()

        async with httpx.AsyncClient(**client_kwargs) as client:
            request = client.build_request(
                target.method.value,
                target.url,
                headers=REQUEST_HEADERS,
                content=body,
            )
            logger.debug("Sending %s %s", request.method, request.url)
            try:
                return await asyncio.wait_for(
                    client.send(request), timeout=self.config.resource_timeout
                )
            except asyncio.TimeoutError:
                raise httpx.TimeoutException(
                    f"Resource timeout of {self.config.resource_timeout}s exceeded",
                    request=request,
                ) from None
            except (httpx.RemoteProtocolError, httpx.DecodingError) as e:
                logger.debug("Unusable response from %s: %s", request.url, e)
                raise InvalidResponse() from e


# Singleton instance
_instance = None


def get_network_service() -> NetworkService:
    """Get the network service singleton."""
    global _instance
    if _instance is None:
        _instance = NetworkService()
    return _instance
