from fastapi import APIRouter, Depends
from eventflow.database.supabase_client import get_supabase
from eventflow.modules.admin.schemas import AdminDashboard, AdminActionResponse
from eventflow.modules.admin.service import AdminDashboardService
from eventflow.modules.plans.schemas import PlanCreate, PlanUpdate
from eventflow.modules.event_types.schemas import EventTypeCreate
from eventflow.config.roles_config import ADMIN
from eventflow.core.dependencies import require_role
from eventflow.core.formatting import ACTIVE
from eventflow.core.notices import Notice
from eventflow.core.session import SessionUser
from supabase import Client

router = APIRouter(prefix="/dashboard/admin", tags=["admin"])

require_admin = require_role([ADMIN])


def get_admin_service(supabase: Client = Depends(get_supabase)) -> AdminDashboardService:
    return AdminDashboardService(supabase)


def _refreshed(notice: Notice, service: AdminDashboardService, user: SessionUser) -> AdminActionResponse:
    return AdminActionResponse(notice=notice, dashboard=service.get_dashboard(user))


@router.get("", response_model=AdminDashboard)
async def admin_dashboard(
    user: SessionUser = Depends(require_admin),
    service: AdminDashboardService = Depends(get_admin_service)
):
    """Platform stats, users, events, plans and event types"""
    return service.get_dashboard(user)


@router.put("/users/{user_id}/toggle-active", response_model=AdminActionResponse)
async def toggle_user_active(
    user_id: str,
    user: SessionUser = Depends(require_admin),
    service: AdminDashboardService = Depends(get_admin_service)
):
    """Activate or deactivate a user (not yourself)"""
    updated = service.toggle_user_active(user_id, user)
    action = "ativado" if updated.active else "desativado"
    return _refreshed(
        Notice(title="Status atualizado", description=f"Usuário {action} com sucesso."),
        service, user,
    )


@router.put("/events/{event_id}/toggle-status", response_model=AdminActionResponse)
async def toggle_event_status(
    event_id: str,
    user: SessionUser = Depends(require_admin),
    service: AdminDashboardService = Depends(get_admin_service)
):
    """Flip any event between active and inactive"""
    event = service.events.toggle_status(event_id)
    action = "ativado" if event.status == ACTIVE else "desativado"
    return _refreshed(
        Notice(title="Status do evento atualizado", description=f"Evento {action} com sucesso."),
        service, user,
    )


@router.delete("/events/{event_id}", response_model=AdminActionResponse)
async def delete_event(
    event_id: str,
    user: SessionUser = Depends(require_admin),
    service: AdminDashboardService = Depends(get_admin_service)
):
    """Permanently delete any event"""
    service.events.delete_event(event_id)
    return _refreshed(
        Notice(title="Evento excluído", description="O evento foi removido permanentemente."),
        service, user,
    )


@router.post("/plans", response_model=AdminActionResponse, status_code=201)
async def create_plan(
    plan_data: PlanCreate,
    user: SessionUser = Depends(require_admin),
    service: AdminDashboardService = Depends(get_admin_service)
):
    service.plans.create_plan(plan_data)
    return _refreshed(Notice(title="Plano criado!", description="Novo plano adicionado."), service, user)


@router.put("/plans/{plan_id}", response_model=AdminActionResponse)
async def update_plan(
    plan_id: str,
    plan_data: PlanUpdate,
    user: SessionUser = Depends(require_admin),
    service: AdminDashboardService = Depends(get_admin_service)
):
    service.plans.update_plan(plan_id, plan_data)
    return _refreshed(Notice(title="Plano atualizado!", description="Alterações salvas."), service, user)


@router.delete("/plans/{plan_id}", response_model=AdminActionResponse)
async def delete_plan(
    plan_id: str,
    user: SessionUser = Depends(require_admin),
    service: AdminDashboardService = Depends(get_admin_service)
):
    """Delete a plan; organizers still pointing at it are not checked"""
    service.plans.delete_plan(plan_id)
    return _refreshed(Notice(title="Plano excluído", description="Plano removido."), service, user)


@router.post("/event-types", response_model=AdminActionResponse, status_code=201)
async def create_event_type(
    event_type_data: EventTypeCreate,
    user: SessionUser = Depends(require_admin),
    service: AdminDashboardService = Depends(get_admin_service)
):
    event_type = service.event_types.create_event_type(event_type_data)
    return _refreshed(
        Notice(title="Tipo de evento criado!", description=f"{event_type.name} adicionado."),
        service, user,
    )


@router.delete("/event-types/{event_type_id}", response_model=AdminActionResponse)
async def delete_event_type(
    event_type_id: str,
    user: SessionUser = Depends(require_admin),
    service: AdminDashboardService = Depends(get_admin_service)
):
    service.event_types.delete_event_type(event_type_id)
    return _refreshed(Notice(title="Tipo de evento excluído", description="Tipo removido."), service, user)
