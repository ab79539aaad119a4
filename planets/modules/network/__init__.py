"""
Network Module - Black Box Interface

Purpose: Fetch JSON resources from a remote API and decode them into typed values
Interface: get_network_service(), NetworkService.request()
Hidden: Target resolution, transport configuration, response validation, decoding

Can be replaced with any implementation of NetworkServiceProtocol
(different HTTP client, offline fixtures, recorded responses).
"""

from .endpoint import APIEndpoint, EndpointDescriptor, HTTPMethod
from .errors import (
    DecodeFailure,
    DecodingError,
    InvalidResponse,
    InvalidTarget,
    NetworkError,
    NetworkErrorKind,
    ServerError,
)
from .interfaces import NetworkServiceProtocol
from .service import NetworkService, get_network_service

__all__ = [
    "APIEndpoint",
    "DecodeFailure",
    "DecodingError",
    "EndpointDescriptor",
    "HTTPMethod",
    "InvalidResponse",
    "InvalidTarget",
    "NetworkError",
    "NetworkErrorKind",
    "NetworkService",
    "NetworkServiceProtocol",
    "ServerError",
    "get_network_service",
]
