"""
Client Module - Black Box Interface

Purpose: Talk to a session remote service from a web application
Interface: RemoteClient.begin(), RemoteClient.finish()
Hidden: HTTP transport, payload shapes
"""

from .client import RemoteClient, RemoteServiceError

__all__ = ["RemoteClient", "RemoteServiceError"]
