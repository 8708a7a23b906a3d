"""
Domain models for health assessment reporting.

These models represent the core business concepts and are framework-agnostic.
They use Pydantic for validation but could be swapped to dataclasses if needed.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(str, Enum):
    """Three-tier classification outcome for a single metric."""

    OPTIMAL = "Optimal"
    NEEDS_ATTENTION = "NeedsAttention"
    SERIOUS_ISSUE = "SeriousIssue"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class OverallRisk(str, Enum):
    """Risk label aggregated from all metric statuses of one assessment."""

    LOW = "Low Risk"
    MODERATE = "Moderate Risk"
    HIGH = "High Risk"


class HealthMetric(BaseModel):
    """One evaluated metric of a health report."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: float = Field(description="Raw numeric reading, 0 for text-derived metrics")
    status: HealthStatus
    recommendation: str


class HealthReport(BaseModel):
    """Report computed from one client and one of their assessments. Never stored."""

    model_config = ConfigDict(frozen=True)

    client_id: UUID
    client_name: str
    assessment_date: datetime
    metrics: list[HealthMetric]
    overall_risk: OverallRisk
    recommendations: list[str] = Field(min_length=1)
