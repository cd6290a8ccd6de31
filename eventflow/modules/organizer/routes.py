from fastapi import APIRouter, Depends
from eventflow.database.supabase_client import get_supabase
from eventflow.modules.organizer.schemas import OrganizerDashboard, OrganizerActionResponse, EventParticipantsPage
from eventflow.modules.organizer.service import OrganizerDashboardService
from eventflow.modules.events.schemas import EventCreate, EventUpdate
from eventflow.config.roles_config import ORGANIZER
from eventflow.core.dependencies import require_role
from eventflow.core.formatting import ACTIVE
from eventflow.core.notices import Notice
from eventflow.core.session import SessionUser
from supabase import Client

router = APIRouter(prefix="/dashboard/organizer", tags=["organizer"])

require_organizer = require_role([ORGANIZER])


def get_organizer_service(supabase: Client = Depends(get_supabase)) -> OrganizerDashboardService:
    return OrganizerDashboardService(supabase)


def _refreshed(notice: Notice, service: OrganizerDashboardService, user: SessionUser) -> OrganizerActionResponse:
    return OrganizerActionResponse(notice=notice, dashboard=service.get_dashboard(user))


@router.get("", response_model=OrganizerDashboard)
async def organizer_dashboard(
    user: SessionUser = Depends(require_organizer),
    service: OrganizerDashboardService = Depends(get_organizer_service)
):
    """Organizer stats, event types and the organizer's events"""
    return service.get_dashboard(user)


@router.post("/events", response_model=OrganizerActionResponse, status_code=201)
async def create_event(
    event_data: EventCreate,
    user: SessionUser = Depends(require_organizer),
    service: OrganizerDashboardService = Depends(get_organizer_service)
):
    """Create an event; limited by the organizer's plan"""
    service.create_event(user, event_data)
    return _refreshed(
        Notice(title="Evento criado!", description="Seu evento foi criado com sucesso."),
        service, user,
    )


@router.put("/events/{event_id}", response_model=OrganizerActionResponse)
async def update_event(
    event_id: str,
    event_data: EventUpdate,
    user: SessionUser = Depends(require_organizer),
    service: OrganizerDashboardService = Depends(get_organizer_service)
):
    service.update_event(user, event_id, event_data)
    return _refreshed(
        Notice(title="Evento atualizado!", description="Suas alterações foram salvas."),
        service, user,
    )


@router.put("/events/{event_id}/toggle-status", response_model=OrganizerActionResponse)
async def toggle_event_status(
    event_id: str,
    user: SessionUser = Depends(require_organizer),
    service: OrganizerDashboardService = Depends(get_organizer_service)
):
    event = service.toggle_event_status(user, event_id)
    action = "ativado" if event.status == ACTIVE else "desativado"
    return _refreshed(
        Notice(title="Status atualizado", description=f"Evento {action} com sucesso."),
        service, user,
    )


@router.delete("/events/{event_id}", response_model=OrganizerActionResponse)
async def delete_event(
    event_id: str,
    user: SessionUser = Depends(require_organizer),
    service: OrganizerDashboardService = Depends(get_organizer_service)
):
    service.delete_event(user, event_id)
    return _refreshed(
        Notice(title="Evento excluído", description="O evento foi removido com sucesso."),
        service, user,
    )


@router.get("/events/{event_id}/participants", response_model=EventParticipantsPage)
async def event_participants(
    event_id: str,
    user: SessionUser = Depends(require_organizer),
    service: OrganizerDashboardService = Depends(get_organizer_service)
):
    """Participants registered for one of the organizer's events"""
    return service.get_participants(user, event_id)
