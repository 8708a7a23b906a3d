"""
Core services for the application.

This package contains the health report generator, the client use cases and
the repository they persist through.
"""

from .client_service import ClientService
from .health_assessment import HealthAssessmentService
from .repository import ClientRepository, InMemoryClientRepository

__all__ = [
    "ClientService",
    "HealthAssessmentService",
    "ClientRepository",
    "InMemoryClientRepository",
]
