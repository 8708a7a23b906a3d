"""
Client aggregate root and its assessments.

A Client owns its assessment history. Assessments are immutable once created
and are only ever removed together with their client.
"""

from datetime import UTC, date, datetime
from uuid import UUID, uuid4

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, PrivateAttr

from core.domain.models import Gender
from core.domain.value_objects import (
    BloodPressure,
    BloodSugar,
    CholesterolTotal,
    DietQuality,
    ExerciseMinutes,
    SleepQuality,
    StressLevel,
)


class Assessment(BaseModel):
    """One set of biometric and lifestyle readings for a client.

    All seven inputs are required. A missing one raises a ValidationError
    (a ValueError) here, so a report is never built from a partial assessment.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    client_id: UUID
    # naive timestamps cannot be ordered against the UTC defaults
    assessment_date: AwareDatetime = Field(default_factory=lambda: datetime.now(UTC))

    blood_pressure: BloodPressure
    cholesterol_total: CholesterolTotal
    blood_sugar: BloodSugar
    exercise_minutes: ExerciseMinutes
    sleep_quality: SleepQuality
    stress_level: StressLevel
    diet_quality: DietQuality


class Client(BaseModel):
    """A person whose health is being assessed. Aggregate root for assessments."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    date_of_birth: date
    gender: Gender
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    _assessments: list[Assessment] = PrivateAttr(default_factory=list)

    @property
    def assessments(self) -> tuple[Assessment, ...]:
        """Assessment history, oldest first."""
        return tuple(sorted(self._assessments, key=lambda a: a.assessment_date))

    def add_assessment(
        self,
        blood_pressure: BloodPressure,
        cholesterol_total: CholesterolTotal,
        blood_sugar: BloodSugar,
        exercise_minutes: ExerciseMinutes,
        sleep_quality: SleepQuality,
        stress_level: StressLevel,
        diet_quality: DietQuality,
    ) -> Assessment:
        """Create an assessment for this client and append it to the history."""
        assessment = Assessment(
            client_id=self.id,
            blood_pressure=blood_pressure,
            cholesterol_total=cholesterol_total,
            blood_sugar=blood_sugar,
            exercise_minutes=exercise_minutes,
            sleep_quality=sleep_quality,
            stress_level=stress_level,
            diet_quality=diet_quality,
        )
        self._assessments.append(assessment)
        return assessment

    def attach_assessment(self, assessment: Assessment) -> None:
        """Append an assessment built elsewhere (e.g. loaded from storage)."""
        if assessment.client_id != self.id:
            raise ValueError(
                f"Assessment {assessment.id} belongs to client {assessment.client_id}, not {self.id}"
            )
        if any(existing.id == assessment.id for existing in self._assessments):
            return
        self._assessments.append(assessment)

    def calculate_age(self, today: date | None = None) -> int:
        """Whole years since date of birth, as of `today` (defaults to the current date)."""
        today = today or date.today()
        age = today.year - self.date_of_birth.year
        if (today.month, today.day) < (self.date_of_birth.month, self.date_of_birth.day):
            age -= 1
        return age

    def get_latest_assessment(self) -> Assessment | None:
        if not self._assessments:
            return None
        # reversed so the most recently added one wins a timestamp tie
        return max(reversed(self._assessments), key=lambda a: a.assessment_date)
