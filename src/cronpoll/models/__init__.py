"""Data models."""

from .ip_response import IPResponse, parse_ip_response

__all__ = [
    "IPResponse",
    "parse_ip_response"
]
