"""
Helpers for pulling client context out of FastAPI Request objects.

Captures the client IP address and user agent recorded with each login
session.
"""

from typing import Optional

from fastapi import Request


def get_client_ip(request: Request) -> Optional[str]:
    """
    Extract the client IP address from a FastAPI Request.

    Checks X-Forwarded-For and X-Real-IP before falling back to
    request.client.host.

    Args:
        request: FastAPI Request object

    Returns:
        Client IP address as string, or None if not available
    """
    if request is None:
        return None

    # Comma-separated list, first entry is the original client
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("X-Real-IP")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host

    return None


def get_user_agent(request: Request) -> Optional[str]:
    """Return the User-Agent header, or None if not present."""
    if request is None:
        return None

    return request.headers.get("User-Agent")
