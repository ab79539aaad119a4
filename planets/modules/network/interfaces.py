"""Network interfaces following Black Box Design principles."""
from typing import Optional, Protocol, Type, TypeVar, runtime_checkable

from .endpoint import EndpointDescriptor

T = TypeVar("T")


@runtime_checkable
class NetworkServiceProtocol(Protocol):
    """Protocol for request executors - allows swappable implementations."""

    async def request(
        self,
        response_type: Type[T],
        endpoint: Optional[EndpointDescriptor] = None,
        endpoint_url_string: Optional[str] = None,
        body: Optional[bytes] = None,
    ) -> T:
        """
        Issue one HTTP request and decode the JSON body.

        Args:
            response_type: Type the JSON body is decoded into
            endpoint: Structured target, tried first
            endpoint_url_string: Raw URL used when no usable endpoint is given
            body: Payload attached verbatim

        Returns:
            The decoded body

        Raises:
            NetworkError: InvalidTarget, InvalidResponse, ServerError or DecodingError
        """
        ...
