from supabase import Client
from eventflow.modules.plans.schemas import PlanCreate, PlanUpdate, PlanResponse
from eventflow.core.notices import notice_error, error_message
from typing import List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class PlanService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_plans(self) -> List[PlanResponse]:
        """All plans, newest first (admin listing)"""
        try:
            result = self.supabase.table("plans")\
                .select("id, name, max_events, price, created_at")\
                .order("created_at", desc=True)\
                .execute()
            return [PlanResponse(**plan) for plan in result.data or []]
        except Exception as e:
            raise notice_error(500, "Erro ao carregar dados", error_message(e))

    def list_plans_by_price(self) -> List[PlanResponse]:
        """All plans, cheapest first (registration form)"""
        try:
            result = self.supabase.table("plans")\
                .select("*")\
                .order("price", desc=False)\
                .execute()
            return [PlanResponse(**plan) for plan in result.data or []]
        except Exception as e:
            raise notice_error(500, "Erro ao carregar planos", error_message(e))

    def create_plan(self, plan_data: PlanCreate) -> PlanResponse:
        """Create a new plan"""
        if not plan_data.name.strip():
            raise notice_error(400, "Campos obrigatórios", "Preencha todos os campos.")
        try:
            result = self.supabase.table("plans").insert({
                "name": plan_data.name,
                "max_events": plan_data.max_events,
                "price": plan_data.price,
            }).execute()

            if not result.data:
                raise notice_error(500, "Erro", "Falha ao criar plano")

            logger.info(f"Created plan {result.data[0]['id']}")
            return PlanResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro", error_message(e))

    def update_plan(self, plan_id: str, plan_data: PlanUpdate) -> PlanResponse:
        """Update plan"""
        try:
            update_data = {}
            if plan_data.name:
                update_data["name"] = plan_data.name
            if plan_data.max_events is not None:
                update_data["max_events"] = plan_data.max_events
            if plan_data.price is not None:
                update_data["price"] = plan_data.price

            if not update_data:
                raise notice_error(400, "Campos obrigatórios", "Nada para atualizar.")

            result = self.supabase.table("plans")\
                .update(update_data)\
                .eq("id", plan_id)\
                .execute()

            if not result.data:
                raise notice_error(404, "Plano não encontrado")

            return PlanResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro", error_message(e))

    def delete_plan(self, plan_id: str) -> bool:
        """Delete plan. Organizers referencing it are the database's concern."""
        try:
            result = self.supabase.table("plans")\
                .delete()\
                .eq("id", plan_id)\
                .execute()

            if not result.data:
                raise notice_error(404, "Plano não encontrado")

            logger.info(f"Deleted plan {plan_id}")
            return True
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro", error_message(e))
