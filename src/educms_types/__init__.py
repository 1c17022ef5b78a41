"""Shared DTOs and table registry for the EduCMS backend and client."""

from educms_types.tables import (
    DASHBOARD_COUNTERS,
    FOREIGN_KEY_FIELDS,
    LOGICAL_TABLES,
    LogicalTable,
    PhysicalTable,
    TableSpec,
    resolve_table,
    routable_tables,
)
from educms_types.envelopes import (
    ApiResponse,
    DashboardStats,
    ErrorEnvelope,
    HealthStatus,
    TableProbe,
)

__all__ = [
    "DASHBOARD_COUNTERS",
    "FOREIGN_KEY_FIELDS",
    "LOGICAL_TABLES",
    "LogicalTable",
    "PhysicalTable",
    "TableSpec",
    "resolve_table",
    "routable_tables",
    "ApiResponse",
    "DashboardStats",
    "ErrorEnvelope",
    "HealthStatus",
    "TableProbe",
]
