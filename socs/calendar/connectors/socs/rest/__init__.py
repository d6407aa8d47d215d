"""SOCS REST connector."""

from .provider import SOCSCalendarConnector

__all__ = ["SOCSCalendarConnector"]
