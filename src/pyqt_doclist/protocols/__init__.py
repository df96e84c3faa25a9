"""
Contracts consumed by the document list.

ABC-based document model and viewport contracts, plus the application
configuration hook.
"""

from .document_model import ContainerType, DocumentElement
from .viewport_metrics import ViewportMetricsProvider, ViewportMetricsABC, WidgetViewportMetrics
from .list_config import DocListConfig, set_doclist_config, get_doclist_config

__all__ = [
    "ContainerType",
    "DocumentElement",
    "ViewportMetricsProvider",
    "ViewportMetricsABC",
    "WidgetViewportMetrics",
    "DocListConfig",
    "set_doclist_config",
    "get_doclist_config",
]
