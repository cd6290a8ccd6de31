from supabase import Client
from eventflow.modules.admin.schemas import (
    AdminDashboard, AdminUserRow, AdminEventRow, AdminPlanRow, AdminSummary
)
from eventflow.modules.users.schemas import UserResponse
from eventflow.modules.users.service import UserService
from eventflow.modules.plans.service import PlanService
from eventflow.modules.events.schemas import EventWithDetails
from eventflow.modules.events.service import EventService
from eventflow.modules.event_types.service import EventTypeService
from eventflow.modules.stats.schemas import PlatformStats
from eventflow.modules.stats.service import StatsService
from eventflow.core.formatting import (
    ACTIVE, role_label, role_badge_variant, status_label, status_badge_variant, toggle_label,
    format_currency, format_date, max_events_label, percentage, round_half_up
)
from eventflow.core.notices import notice_error
from eventflow.core.session import SessionUser
from typing import List


def build_summary(users: List[UserResponse], events: List[EventWithDetails], stats: PlatformStats) -> AdminSummary:
    """Figures derived client-side from the lists already fetched"""
    active_events = len([e for e in events if e.status == ACTIVE])
    total_participants = sum(e.participant_count for e in events)
    average_revenue = stats.total_revenue / len(events) if events else 0.0
    return AdminSummary(
        active_users=len([u for u in users if u.active]),
        active_events=active_events,
        active_event_rate=percentage(active_events, len(events)),
        average_participants_per_event=round_half_up(total_participants / len(events)) if events else 0,
        average_revenue_per_event=average_revenue,
        average_revenue_per_event_display=format_currency(average_revenue),
        total_revenue_display=format_currency(stats.total_revenue),
    )


class AdminDashboardService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.users = UserService(supabase)
        self.plans = PlanService(supabase)
        self.events = EventService(supabase)
        self.event_types = EventTypeService(supabase)
        self.stats = StatsService(supabase)

    def get_dashboard(self, current_user: SessionUser) -> AdminDashboard:
        stats = self.stats.get_platform_stats()
        users = self.users.list_users()
        plans = self.plans.list_plans()
        event_types = self.event_types.list_event_types()
        events = self.events.list_all_events()

        return AdminDashboard(
            user=current_user,
            stats=stats,
            users=[self._user_row(u, current_user) for u in users],
            events=[self._event_row(e) for e in events],
            plans=[self._plan_row(p) for p in plans],
            event_types=event_types,
            summary=build_summary(users, events, stats),
        )

    def toggle_user_active(self, user_id: str, current_user: SessionUser) -> UserResponse:
        if user_id == current_user.id:
            raise notice_error(400, "Erro ao atualizar status", "Você não pode alterar o próprio status.")
        return self.users.toggle_active(user_id)

    @staticmethod
    def _user_row(user: UserResponse, current_user: SessionUser) -> AdminUserRow:
        return AdminUserRow(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            role_label=role_label(user.role),
            role_badge=role_badge_variant(user.role),
            active=user.active,
            status_label=status_label(user.active),
            status_badge=status_badge_variant(user.active),
            toggle_label=toggle_label(user.active),
            can_toggle=user.id != current_user.id,
            created_at=user.created_at,
            created_at_display=format_date(user.created_at),
        )

    @staticmethod
    def _event_row(event: EventWithDetails) -> AdminEventRow:
        is_active = event.status == ACTIVE
        return AdminEventRow(
            id=event.id,
            title=event.title,
            description=event.description or "",
            price=event.price,
            price_display=format_currency(event.price),
            status=event.status,
            status_label=status_label(is_active),
            status_badge=status_badge_variant(is_active),
            toggle_label=toggle_label(is_active),
            organizer_name=event.organizer_name,
            participant_count=event.participant_count,
            created_at=event.created_at,
            created_at_display=format_date(event.created_at),
        )

    @staticmethod
    def _plan_row(plan) -> AdminPlanRow:
        return AdminPlanRow(
            id=plan.id,
            name=plan.name,
            max_events=plan.max_events,
            max_events_label=max_events_label(plan.max_events),
            price=plan.price,
            price_display=format_currency(plan.price),
            created_at=plan.created_at,
        )
