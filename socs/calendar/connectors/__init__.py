"""Calendar feed connectors."""

from .socs import SOCSCalendarConnector

__all__ = ["SOCSCalendarConnector"]
