"""Clients API routes."""

from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from adapters.api.deps import get_client_service, require_token
from core.services.client_service import ClientService
from core.services.schemas import (
    AssessmentResponse,
    ClientResponse,
    CreateAssessmentRequest,
    CreateClientRequest,
    HealthReportResponse,
)

router = APIRouter(prefix="/api/clients", tags=["clients"], dependencies=[Depends(require_token)])


def _not_found(client_id: UUID) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Client {client_id} not found")


@router.get("", response_model=list[ClientResponse])
async def list_clients(service: ClientService = Depends(get_client_service)):
    return await service.get_all_clients()


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    response: Response,
    payload: CreateClientRequest = Body(...),
    service: ClientService = Depends(get_client_service),
):
    client = await service.create_client(payload)
    response.headers["Location"] = f"{router.prefix}/{client.id}"
    return client


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(client_id: UUID, service: ClientService = Depends(get_client_service)):
    client = await service.get_client_by_id(client_id)
    if client is None:
        raise _not_found(client_id)
    return client


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(client_id: UUID, service: ClientService = Depends(get_client_service)):
    if not await service.delete_client(client_id):
        raise _not_found(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{client_id}/assessments", response_model=HealthReportResponse)
async def create_assessment(
    client_id: UUID,
    payload: CreateAssessmentRequest = Body(...),
    service: ClientService = Depends(get_client_service),
):
    """
    Record an assessment for a client and return the generated health report.

    The report classifies seven metrics, assigns an overall risk and lists
    recommendations for every metric that is not optimal.
    """
    report = await service.create_assessment_and_generate_report(client_id, payload)
    if report is None:
        raise _not_found(client_id)
    return report


@router.get("/{client_id}/assessments", response_model=list[AssessmentResponse])
async def list_assessments(client_id: UUID, service: ClientService = Depends(get_client_service)):
    assessments = await service.get_assessments(client_id)
    if assessments is None:
        raise _not_found(client_id)
    return assessments


@router.get("/{client_id}/report", response_model=HealthReportResponse)
async def latest_report(client_id: UUID, service: ClientService = Depends(get_client_service)):
    """Health report of the client's most recent assessment."""
    report = await service.get_latest_report(client_id)
    if report is None:
        raise HTTPException(
            status_code=404, detail=f"No assessment found for client {client_id}"
        )
    return report
