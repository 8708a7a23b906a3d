"""
Tests for the client use cases in `core/services/client_service.py`.

These run against the in-memory repository; collaborator failures are
simulated with a repository stub that raises.
"""

from datetime import date
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from core.domain.models import Gender, HealthStatus, OverallRisk
from core.services.client_service import ClientService
from core.services.repository import InMemoryClientRepository
from core.services.schemas import CreateAssessmentRequest, CreateClientRequest


def _assessment_request(**overrides) -> CreateAssessmentRequest:
    values = {
        "systolic_bp": 110,
        "diastolic_bp": 70,
        "cholesterol_total": 180,
        "blood_sugar": 85,
        "exercise_weekly_minutes": 200,
        "sleep_quality": "8 hours, restful sleep",
        "stress_level": "Low self-reported stress",
        "diet_quality": "Balanced, nutrient-rich diet",
    }
    values.update(overrides)
    return CreateAssessmentRequest(**values)


@pytest.fixture
def service() -> ClientService:
    return ClientService(InMemoryClientRepository())


@pytest.fixture
async def client_id(service: ClientService) -> UUID:
    created = await service.create_client(
        CreateClientRequest(name="John Doe", date_of_birth=date(1980, 5, 14), gender=Gender.MALE)
    )
    return created.id


class _FailingRepository(InMemoryClientRepository):
    async def get_by_id(self, client_id):
        raise ConnectionError("store unavailable")


class TestClientUseCases:
    async def test_create_client_returns_response(self, service: ClientService) -> None:
        response = await service.create_client(
            CreateClientRequest(name="Jane", date_of_birth=date(1990, 1, 1), gender=Gender.FEMALE)
        )

        assert response.name == "Jane"
        assert response.gender == Gender.FEMALE
        assert response.assessment_count == 0
        assert response.age >= 0

    async def test_get_all_clients(self, service: ClientService, client_id: UUID) -> None:
        clients = await service.get_all_clients()
        assert [c.id for c in clients] == [client_id]

    async def test_get_unknown_client_returns_none(self, service: ClientService) -> None:
        assert await service.get_client_by_id(uuid4()) is None

    async def test_delete_client(self, service: ClientService, client_id: UUID) -> None:
        assert await service.delete_client(client_id) is True
        assert await service.get_client_by_id(client_id) is None
        assert await service.delete_client(client_id) is False

    async def test_repository_errors_propagate(self) -> None:
        service = ClientService(_FailingRepository())
        with pytest.raises(ConnectionError, match="store unavailable"):
            await service.create_assessment_and_generate_report(uuid4(), _assessment_request())


class TestAssessmentUseCases:
    async def test_create_assessment_for_unknown_client_returns_none(
        self, service: ClientService
    ) -> None:
        report = await service.create_assessment_and_generate_report(uuid4(), _assessment_request())
        assert report is None

    async def test_create_assessment_generates_report(
        self, service: ClientService, client_id: UUID
    ) -> None:
        report = await service.create_assessment_and_generate_report(client_id, _assessment_request())

        assert report is not None
        assert report.client_id == client_id
        assert report.client_name == "John Doe"
        assert len(report.metrics) == 7
        assert report.overall_risk == OverallRisk.LOW
        assert report.recommendations == ["Continue maintaining your healthy lifestyle!"]

    async def test_assessment_count_reflects_direct_writes(
        self, service: ClientService, client_id: UUID
    ) -> None:
        await service.create_assessment_and_generate_report(client_id, _assessment_request())
        await service.create_assessment_and_generate_report(client_id, _assessment_request())

        client = await service.get_client_by_id(client_id)

        assert client is not None
        assert client.assessment_count == 2

    async def test_serious_report_lists_every_metric(
        self, service: ClientService, client_id: UUID
    ) -> None:
        report = await service.create_assessment_and_generate_report(
            client_id,
            _assessment_request(
                systolic_bp=140,
                diastolic_bp=90,
                cholesterol_total=240,
                blood_sugar=126,
                exercise_weekly_minutes=50,
                sleep_quality="4 hours, severe sleep issues",
                stress_level="High chronic stress affecting well-being",
                diet_quality="Poor nutrition with deficiencies",
            ),
        )

        assert report is not None
        assert report.overall_risk == "High Risk"
        assert {m.status for m in report.metrics} == {HealthStatus.SERIOUS_ISSUE}
        assert len(report.recommendations) == 7

    async def test_latest_report_uses_most_recent_assessment(
        self, service: ClientService, client_id: UUID
    ) -> None:
        assert await service.get_latest_report(client_id) is None

        await service.create_assessment_and_generate_report(client_id, _assessment_request())
        latest = await service.create_assessment_and_generate_report(
            client_id, _assessment_request(systolic_bp=150)
        )

        report = await service.get_latest_report(client_id)

        assert report is not None
        assert latest is not None
        assert report.assessment_date == latest.assessment_date
        assert report.overall_risk == "Moderate Risk"

    async def test_latest_report_for_unknown_client(self, service: ClientService) -> None:
        assert await service.get_latest_report(uuid4()) is None

    async def test_get_assessments(self, service: ClientService, client_id: UUID) -> None:
        await service.create_assessment_and_generate_report(
            client_id, _assessment_request(sleep_quality="6 hours")
        )

        assessments = await service.get_assessments(client_id)

        assert assessments is not None
        assert len(assessments) == 1
        assert assessments[0].client_id == client_id
        assert assessments[0].sleep_quality == "6 hours"
        assert await service.get_assessments(uuid4()) is None


class TestCreateAssessmentRequest:
    WIRE_PAYLOAD = {
        "systolicBP": 120,
        "diastolicBP": 80,
        "cholesterolTotal": 200,
        "bloodSugar": 100,
        "exerciseWeeklyMinutes": 75,
        "sleepQuality": "6 hours",
        "stressLevel": "Moderate stress",
        "dietQuality": "Processed food",
    }

    def test_request_accepts_wire_aliases(self) -> None:
        request = CreateAssessmentRequest.model_validate(self.WIRE_PAYLOAD)
        assert request.systolic_bp == 120
        assert request.exercise_weekly_minutes == 75

    def test_request_allows_out_of_range_values(self) -> None:
        request = _assessment_request(systolic_bp=-10, blood_sugar=-1)
        assert request.blood_sugar == -1

    @pytest.mark.parametrize(
        "field,value",
        [
            ("systolicBP", True),
            ("diastolicBP", "70"),
            ("cholesterolTotal", 180.0),
            ("sleepQuality", 8),
        ],
    )
    def test_request_rejects_coercible_values(self, field: str, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CreateAssessmentRequest.model_validate({**self.WIRE_PAYLOAD, field: value})

        assert [error["loc"] for error in exc_info.value.errors()] == [(field,)]
