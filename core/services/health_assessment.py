"""
Rule-based health report generation.

Turns one assessment into seven evaluated metrics, an overall risk label and a
list of recommendations. Everything here is a pure function of its inputs:
the same client and assessment always produce the same report.
"""

from core.domain.entities import Assessment, Client
from core.domain.models import HealthMetric, HealthReport, HealthStatus, OverallRisk
from core.domain.value_objects import (
    BloodPressure,
    BloodSugar,
    CholesterolTotal,
    DietQuality,
    ExerciseMinutes,
    SleepQuality,
    StressLevel,
)

HEALTHY_LIFESTYLE_RECOMMENDATION = "Continue maintaining your healthy lifestyle!"

# Metric name -> status -> recommendation. Insertion order is report order.
RECOMMENDATIONS: dict[str, dict[HealthStatus, str]] = {
    "Blood Pressure": {
        HealthStatus.OPTIMAL: "Maintain current lifestyle",
        HealthStatus.NEEDS_ATTENTION: "Monitor regularly and consider lifestyle changes",
        HealthStatus.SERIOUS_ISSUE: "Consult physician immediately",
    },
    "Total Cholesterol": {
        HealthStatus.OPTIMAL: "Continue healthy diet",
        HealthStatus.NEEDS_ATTENTION: "Reduce saturated fats, increase exercise",
        HealthStatus.SERIOUS_ISSUE: "Consult physician for treatment options",
    },
    "Blood Sugar": {
        HealthStatus.OPTIMAL: "Maintain current diet and exercise",
        HealthStatus.NEEDS_ATTENTION: "Monitor carbohydrate intake",
        HealthStatus.SERIOUS_ISSUE: "Consult physician for diabetes screening",
    },
    "Exercise Minutes": {
        HealthStatus.OPTIMAL: "Great job maintaining regular exercise!",
        HealthStatus.NEEDS_ATTENTION: "Increase weekly exercise to at least 150 minutes",
        HealthStatus.SERIOUS_ISSUE: "Start with light exercise and gradually increase activity",
    },
    "Sleep Quality": {
        HealthStatus.OPTIMAL: "Keep up your consistent sleep routine",
        HealthStatus.NEEDS_ATTENTION: "Improve sleep hygiene and aim for 7-9 hours per night",
        HealthStatus.SERIOUS_ISSUE: "Consult a sleep specialist",
    },
    "Stress Level": {
        HealthStatus.OPTIMAL: "Continue your stress management practices",
        HealthStatus.NEEDS_ATTENTION: "Practice relaxation techniques and regular breaks",
        HealthStatus.SERIOUS_ISSUE: "Seek support from a mental health professional",
    },
    "Diet Quality": {
        HealthStatus.OPTIMAL: "Maintain your balanced, nutrient-rich diet",
        HealthStatus.NEEDS_ATTENTION: "Reduce processed foods and added sugars",
        HealthStatus.SERIOUS_ISSUE: "Consult a nutritionist to address deficiencies",
    },
}

METRIC_NAMES: tuple[str, ...] = tuple(RECOMMENDATIONS)


class HealthAssessmentService:
    """Evaluates assessments and builds health reports."""

    def generate_report(self, client: Client, assessment: Assessment) -> HealthReport:
        statuses = (
            (assessment.blood_pressure.systolic, self.evaluate_blood_pressure(assessment.blood_pressure)),
            (assessment.cholesterol_total.value, self.evaluate_cholesterol(assessment.cholesterol_total)),
            (assessment.blood_sugar.value, self.evaluate_blood_sugar(assessment.blood_sugar)),
            (
                assessment.exercise_minutes.weekly_minutes,
                self.evaluate_exercise(assessment.exercise_minutes),
            ),
            (0, self.evaluate_sleep(assessment.sleep_quality)),
            (0, self.evaluate_stress(assessment.stress_level)),
            (0, self.evaluate_diet(assessment.diet_quality)),
        )
        metrics = [
            self._build_metric(name, value, status)
            for name, (value, status) in zip(METRIC_NAMES, statuses, strict=True)
        ]

        return HealthReport(
            client_id=client.id,
            client_name=client.name,
            assessment_date=assessment.assessment_date,
            metrics=metrics,
            overall_risk=self.calculate_overall_risk(metrics),
            recommendations=self.generate_recommendations(metrics),
        )

    def evaluate_blood_pressure(self, blood_pressure: BloodPressure) -> HealthStatus:
        return blood_pressure.health_status()

    def evaluate_cholesterol(self, cholesterol: CholesterolTotal | int) -> HealthStatus:
        if isinstance(cholesterol, int):
            cholesterol = CholesterolTotal(value=cholesterol)
        return cholesterol.health_status()

    def evaluate_blood_sugar(self, blood_sugar: BloodSugar | int) -> HealthStatus:
        if isinstance(blood_sugar, int):
            blood_sugar = BloodSugar(value=blood_sugar)
        return blood_sugar.health_status()

    def evaluate_exercise(self, exercise: ExerciseMinutes) -> HealthStatus:
        return exercise.health_status()

    def evaluate_sleep(self, sleep: SleepQuality) -> HealthStatus:
        return sleep.health_status()

    def evaluate_stress(self, stress: StressLevel) -> HealthStatus:
        return stress.health_status()

    def evaluate_diet(self, diet: DietQuality) -> HealthStatus:
        return diet.health_status()

    @staticmethod
    def calculate_overall_risk(metrics: list[HealthMetric]) -> OverallRisk:
        """
        Aggregate metric statuses into a risk label.

        Two or more serious issues is high risk. One serious issue, or two or
        more metrics needing attention, is moderate risk. Anything else is low.
        """
        serious_count = sum(1 for m in metrics if m.status == HealthStatus.SERIOUS_ISSUE)
        attention_count = sum(1 for m in metrics if m.status == HealthStatus.NEEDS_ATTENTION)

        if serious_count >= 2:
            return OverallRisk.HIGH
        if serious_count == 1:
            return OverallRisk.MODERATE
        if attention_count >= 2:
            return OverallRisk.MODERATE
        return OverallRisk.LOW

    @staticmethod
    def generate_recommendations(metrics: list[HealthMetric]) -> list[str]:
        recommendations = [
            f"{m.name}: {m.recommendation}" for m in metrics if m.status != HealthStatus.OPTIMAL
        ]
        return recommendations or [HEALTHY_LIFESTYLE_RECOMMENDATION]

    @staticmethod
    def _build_metric(name: str, value: float, status: HealthStatus) -> HealthMetric:
        return HealthMetric(
            name=name,
            value=value,
            status=status,
            recommendation=RECOMMENDATIONS[name][status],
        )
