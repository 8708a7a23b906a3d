"""
End-to-end walkthrough of the assessment pipeline.

This script exercises:
1. Client creation through the client service
2. Recording assessments for a healthy, a mixed and an at-risk profile
3. Report generation with per-metric statuses and recommendations
4. Assessment history reconciliation

Run with: python demo_system.py
"""

import asyncio
from datetime import date

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from core.config import LoggingConfig
from core.domain.models import Gender, HealthStatus
from core.log_config import configure_logging
from core.services import ClientService, InMemoryClientRepository
from core.services.schemas import CreateAssessmentRequest, CreateClientRequest, HealthReportResponse

console = Console()

STATUS_STYLES = {
    HealthStatus.OPTIMAL: "green",
    HealthStatus.NEEDS_ATTENTION: "yellow",
    HealthStatus.SERIOUS_ISSUE: "red",
}

PROFILES = {
    "Healthy": CreateAssessmentRequest(
        systolic_bp=110,
        diastolic_bp=70,
        cholesterol_total=180,
        blood_sugar=85,
        exercise_weekly_minutes=200,
        sleep_quality="8 hours, restful sleep",
        stress_level="Low self-reported stress",
        diet_quality="Balanced, nutrient-rich diet",
    ),
    "Mixed": CreateAssessmentRequest(
        systolic_bp=125,
        diastolic_bp=75,
        cholesterol_total=210,
        blood_sugar=95,
        exercise_weekly_minutes=100,
        sleep_quality="6 hours, frequent disturbances",
        stress_level="Moderate self-reported stress",
        diet_quality="Processed or high-sugar diet",
    ),
    "At risk": CreateAssessmentRequest(
        systolic_bp=140,
        diastolic_bp=90,
        cholesterol_total=240,
        blood_sugar=126,
        exercise_weekly_minutes=50,
        sleep_quality="4 hours, severe sleep issues",
        stress_level="High chronic stress affecting well-being",
        diet_quality="Poor nutrition with deficiencies",
    ),
}


def render_report(title: str, report: HealthReportResponse) -> None:
    table = Table(title=f"{title}: {report.client_name}")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_column("Status")
    table.add_column("Recommendation")

    for metric in report.metrics:
        style = STATUS_STYLES[metric.status]
        table.add_row(
            metric.name,
            f"{metric.value:g}",
            f"[{style}]{metric.status.value}[/{style}]",
            metric.recommendation,
        )

    console.print(table)
    console.print(f"Overall risk: [bold]{report.overall_risk.value}[/bold]")
    for recommendation in report.recommendations:
        console.print(f"  - {recommendation}")


async def main() -> None:
    configure_logging(LoggingConfig(level="WARNING", format="console"))
    service = ClientService(InMemoryClientRepository())

    console.print(Panel("Creating client", style="blue"))
    client = await service.create_client(
        CreateClientRequest(name="John Doe", date_of_birth=date(1980, 5, 14), gender=Gender.MALE)
    )
    console.print(f"Created {client.name} ({client.age} years), id={client.id}")

    console.print(Panel("Generating reports", style="blue"))
    for title, request in PROFILES.items():
        report = await service.create_assessment_and_generate_report(client.id, request)
        if report is None:
            console.print(f"Client {client.id} disappeared", style="red")
            return
        render_report(title, report)

    console.print(Panel("Assessment history", style="blue"))
    refreshed = await service.get_client_by_id(client.id)
    if refreshed is not None:
        console.print(f"{refreshed.name} has {refreshed.assessment_count} assessments on record")


if __name__ == "__main__":
    asyncio.run(main())
