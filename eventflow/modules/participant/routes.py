from fastapi import APIRouter, Depends
from eventflow.database.supabase_client import get_supabase
from eventflow.modules.participant.schemas import ParticipantDashboard, ParticipantActionResponse
from eventflow.modules.participant.service import ParticipantDashboardService
from eventflow.config.roles_config import PARTICIPANT
from eventflow.core.dependencies import require_role
from eventflow.core.notices import Notice
from eventflow.core.session import SessionUser
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/dashboard/participant", tags=["participant"])

require_participant = require_role([PARTICIPANT])


def get_participant_service(supabase: Client = Depends(get_supabase)) -> ParticipantDashboardService:
    return ParticipantDashboardService(supabase)


@router.get("", response_model=ParticipantDashboard)
async def participant_dashboard(
    search: str = "",
    type_id: Optional[str] = None,
    user: SessionUser = Depends(require_participant),
    service: ParticipantDashboardService = Depends(get_participant_service)
):
    """Active events (filterable by search term and type) and the participant's tickets"""
    return service.get_dashboard(user, search=search, type_id=type_id)


@router.post("/events/{event_id}/tickets", response_model=ParticipantActionResponse, status_code=201)
async def buy_ticket(
    event_id: str,
    user: SessionUser = Depends(require_participant),
    service: ParticipantDashboardService = Depends(get_participant_service)
):
    """Register for an event; a second registration is refused"""
    service.buy_ticket(user, event_id)
    return ParticipantActionResponse(
        notice=Notice(title="Ingresso adquirido!", description="Você foi inscrito no evento com sucesso."),
        dashboard=service.get_dashboard(user),
    )


@router.delete("/events/{event_id}/tickets", response_model=ParticipantActionResponse)
async def cancel_ticket(
    event_id: str,
    user: SessionUser = Depends(require_participant),
    service: ParticipantDashboardService = Depends(get_participant_service)
):
    """Cancel the participant's registration for an event"""
    service.cancel_ticket(user, event_id)
    return ParticipantActionResponse(
        notice=Notice(title="Inscrição cancelada", description="Seu ingresso foi cancelado."),
        dashboard=service.get_dashboard(user),
    )
