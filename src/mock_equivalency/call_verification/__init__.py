"""Received-call verification exports."""

from .received_calls import ReceivedCallsError, received

__all__ = ["ReceivedCallsError", "received"]
