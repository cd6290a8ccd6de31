from supabase import Client
from eventflow.modules.users.schemas import UserCreate, UserResponse
from eventflow.core.notices import notice_error, error_message
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_user_by_id(self, user_id: str) -> UserResponse:
        """Get user by ID"""
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("id", user_id)\
                .limit(1)\
                .execute()

            if not result.data:
                raise notice_error(404, "Usuário não encontrado")

            return UserResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao carregar usuário", error_message(e))

    def get_user_by_email(self, email: str) -> Optional[UserResponse]:
        """Get user by email; None when no row matches"""
        result = self.supabase.table("users")\
            .select("*")\
            .eq("email", email)\
            .limit(1)\
            .execute()

        if not result.data:
            return None

        return UserResponse(**result.data[0])

    def create_user(self, user_data: UserCreate) -> UserResponse:
        """Insert a user row. plan_id is only kept for organizers."""
        try:
            insert_data = {
                "name": user_data.name,
                "email": user_data.email,
                "role": user_data.role,
                "plan_id": user_data.plan_id if user_data.role == "organizer" else None,
            }

            result = self.supabase.table("users").insert(insert_data).execute()

            if not result.data:
                raise notice_error(500, "Erro no cadastro", "Falha ao criar usuário")

            logger.info(f"Created user {result.data[0]['id']} with role {user_data.role}")
            return UserResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro no cadastro", error_message(e))

    def list_users(self) -> List[UserResponse]:
        """List all users, newest first"""
        try:
            result = self.supabase.table("users")\
                .select("id, name, email, role, active, created_at")\
                .order("created_at", desc=True)\
                .execute()
            return [UserResponse(**user) for user in result.data or []]
        except Exception as e:
            raise notice_error(500, "Erro ao carregar dados", error_message(e))

    def set_active(self, user_id: str, active: bool) -> UserResponse:
        """Update the active flag"""
        try:
            result = self.supabase.table("users")\
                .update({"active": active})\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                raise notice_error(404, "Usuário não encontrado")

            logger.info(f"User {user_id} active set to {active}")
            return UserResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao atualizar status", error_message(e))

    def toggle_active(self, user_id: str) -> UserResponse:
        user = self.get_user_by_id(user_id)
        return self.set_active(user_id, not user.active)
