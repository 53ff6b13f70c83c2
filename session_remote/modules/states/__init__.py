"""
States Module - Black Box Interface

Purpose: REST API over individual session states
Interface: StatesService.call(method, path, body)
Hidden: Path matching, data validation

Served as its own app, separate from the begin/finish exchange.
"""

from .service import STATE_DATA, StateData, StatesService

__all__ = ["StatesService", "StateData", "STATE_DATA"]
