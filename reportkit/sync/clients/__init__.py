"""High-level clients."""

from .export_client import LeadExportClient

__all__ = ["LeadExportClient"]
