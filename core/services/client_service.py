"""
Client and assessment use cases.

Maps requests to domain entities, persists them through a ClientRepository
and produces reports with the HealthAssessmentService. A missing client is
reported as None so the caller can decide how to answer; repository errors
propagate untouched.
"""

from uuid import UUID

import structlog

from core.domain.entities import Assessment, Client
from core.domain.models import HealthStatus
from core.domain.value_objects import (
    BloodPressure,
    BloodSugar,
    CholesterolTotal,
    DietQuality,
    ExerciseMinutes,
    SleepQuality,
    StressLevel,
)
from core.services.health_assessment import HealthAssessmentService
from core.services.repository import ClientRepository
from core.services.schemas import (
    AssessmentResponse,
    ClientResponse,
    CreateAssessmentRequest,
    CreateClientRequest,
    HealthReportResponse,
)

logger = structlog.get_logger(__name__)


class ClientService:
    """Application service behind the clients API."""

    def __init__(
        self,
        repository: ClientRepository,
        health_assessment_service: HealthAssessmentService | None = None,
    ) -> None:
        self.repository = repository
        self.health_assessment_service = health_assessment_service or HealthAssessmentService()
        self.logger = logger.bind(component="client_service")

    async def create_client(self, request: CreateClientRequest) -> ClientResponse:
        client = Client(
            name=request.name,
            date_of_birth=request.date_of_birth,
            gender=request.gender,
        )
        await self.repository.add(client)
        self.logger.info("client_created", client_id=str(client.id))
        return ClientResponse.from_client(client)

    async def get_all_clients(self) -> list[ClientResponse]:
        clients = await self.repository.get_all()
        return [ClientResponse.from_client(client) for client in clients]

    async def get_client_by_id(self, client_id: UUID) -> ClientResponse | None:
        client = await self.repository.get_by_id(client_id)
        if client is None:
            self.logger.info("client_not_found", client_id=str(client_id))
            return None
        return ClientResponse.from_client(client)

    async def delete_client(self, client_id: UUID) -> bool:
        deleted = await self.repository.delete(client_id)
        if deleted:
            self.logger.info("client_deleted", client_id=str(client_id))
        return deleted

    async def create_assessment_and_generate_report(
        self, client_id: UUID, request: CreateAssessmentRequest
    ) -> HealthReportResponse | None:
        """
        Record a new assessment for a client and return its health report.

        Returns:
            The report for the new assessment, or None if the client does not exist.
        """
        client = await self.repository.get_by_id(client_id)
        if client is None:
            self.logger.info("client_not_found", client_id=str(client_id))
            return None

        assessment = Assessment(
            client_id=client.id,
            blood_pressure=BloodPressure(
                systolic=request.systolic_bp, diastolic=request.diastolic_bp
            ),
            cholesterol_total=CholesterolTotal(value=request.cholesterol_total),
            blood_sugar=BloodSugar(value=request.blood_sugar),
            exercise_minutes=ExerciseMinutes(weekly_minutes=request.exercise_weekly_minutes),
            sleep_quality=SleepQuality(description=request.sleep_quality),
            stress_level=StressLevel(description=request.stress_level),
            diet_quality=DietQuality(description=request.diet_quality),
        )
        await self.repository.add_assessment(assessment)
        self.logger.info(
            "assessment_recorded", client_id=str(client.id), assessment_id=str(assessment.id)
        )

        return self._report(client, assessment)

    async def get_latest_report(self, client_id: UUID) -> HealthReportResponse | None:
        client = await self.repository.get_by_id(client_id)
        if client is None:
            self.logger.info("client_not_found", client_id=str(client_id))
            return None

        assessment = client.get_latest_assessment()
        if assessment is None:
            return None
        return self._report(client, assessment)

    async def get_assessments(self, client_id: UUID) -> list[AssessmentResponse] | None:
        client = await self.repository.get_by_id(client_id)
        if client is None:
            return None
        return [AssessmentResponse.from_assessment(a) for a in client.assessments]

    def _report(self, client: Client, assessment: Assessment) -> HealthReportResponse:
        report = self.health_assessment_service.generate_report(client, assessment)
        self.logger.info(
            "report_generated",
            client_id=str(client.id),
            assessment_id=str(assessment.id),
            overall_risk=report.overall_risk.value,
            flagged_metrics=sum(1 for m in report.metrics if m.status != HealthStatus.OPTIMAL),
        )
        return HealthReportResponse.from_report(report)
