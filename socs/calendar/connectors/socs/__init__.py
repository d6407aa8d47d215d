"""SOCS calendar feed connector implementation."""

from .rest.provider import SOCSCalendarConnector

__all__ = ["SOCSCalendarConnector"]
