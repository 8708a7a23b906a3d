"""Request and response models exchanged with the client service.

Field names are snake_case in Python and camelCase on the wire. Requests
accept either form.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from core.domain.entities import Assessment, Client
from core.domain.models import Gender, HealthReport, HealthStatus, OverallRisk


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateClientRequest(_WireModel):
    name: str = Field(description="Full name, may be empty", examples=["John Doe"])
    date_of_birth: date = Field(examples=["1980-05-14"])
    gender: Gender


class CreateAssessmentRequest(_WireModel):
    """Raw readings for a new assessment. Values are not range-checked.

    Types are strict, so a JSON boolean or numeric string is rejected
    instead of being coerced into a reading.
    """

    systolic_bp: StrictInt = Field(alias="systolicBP", examples=[120])
    diastolic_bp: StrictInt = Field(alias="diastolicBP", examples=[80])
    cholesterol_total: StrictInt = Field(description="mg/dL", examples=[190])
    blood_sugar: StrictInt = Field(description="mg/dL", examples=[90])
    exercise_weekly_minutes: StrictInt = Field(examples=[150])
    sleep_quality: StrictStr = Field(examples=["7 hours, restful sleep"])
    stress_level: StrictStr = Field(examples=["Low self-reported stress"])
    diet_quality: StrictStr = Field(examples=["Balanced, nutrient-rich diet"])


class ClientResponse(_WireModel):
    id: UUID
    name: str
    date_of_birth: date
    gender: Gender
    age: int
    assessment_count: int

    @classmethod
    def from_client(cls, client: Client) -> "ClientResponse":
        return cls(
            id=client.id,
            name=client.name,
            date_of_birth=client.date_of_birth,
            gender=client.gender,
            age=client.calculate_age(),
            assessment_count=len(client.assessments),
        )


class AssessmentResponse(_WireModel):
    id: UUID
    client_id: UUID
    assessment_date: datetime
    systolic_bp: int = Field(alias="systolicBP")
    diastolic_bp: int = Field(alias="diastolicBP")
    cholesterol_total: int
    blood_sugar: int
    exercise_weekly_minutes: int
    sleep_quality: str
    stress_level: str
    diet_quality: str

    @classmethod
    def from_assessment(cls, assessment: Assessment) -> "AssessmentResponse":
        return cls(
            id=assessment.id,
            client_id=assessment.client_id,
            assessment_date=assessment.assessment_date,
            systolic_bp=assessment.blood_pressure.systolic,
            diastolic_bp=assessment.blood_pressure.diastolic,
            cholesterol_total=assessment.cholesterol_total.value,
            blood_sugar=assessment.blood_sugar.value,
            exercise_weekly_minutes=assessment.exercise_minutes.weekly_minutes,
            sleep_quality=assessment.sleep_quality.description,
            stress_level=assessment.stress_level.description,
            diet_quality=assessment.diet_quality.description,
        )


class HealthMetricResponse(_WireModel):
    name: str
    value: float
    status: HealthStatus
    recommendation: str


class HealthReportResponse(_WireModel):
    client_id: UUID
    client_name: str
    assessment_date: datetime
    metrics: list[HealthMetricResponse]
    overall_risk: OverallRisk
    recommendations: list[str]

    @classmethod
    def from_report(cls, report: HealthReport) -> "HealthReportResponse":
        return cls(
            client_id=report.client_id,
            client_name=report.client_name,
            assessment_date=report.assessment_date,
            metrics=[
                HealthMetricResponse(
                    name=m.name, value=m.value, status=m.status, recommendation=m.recommendation
                )
                for m in report.metrics
            ],
            overall_risk=report.overall_risk,
            recommendations=list(report.recommendations),
        )
