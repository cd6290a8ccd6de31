from supabase import Client
from eventflow.modules.auth.schemas import LoginRequest, RegisterRequest, RegisterPage, PlanOption, RoleOption
from eventflow.modules.users.schemas import UserCreate, UserResponse
from eventflow.modules.users.service import UserService
from eventflow.modules.plans.service import PlanService
from eventflow.config.roles_config import ORGANIZER, REGISTRATION_ROLE_OPTIONS
from eventflow.core.formatting import role_label, plan_option_label
from eventflow.core.notices import notice_error, error_message
from eventflow.core.session import SessionUser
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.users = UserService(supabase)
        self.plans = PlanService(supabase)

    def login(self, login_data: LoginRequest) -> SessionUser:
        """Look the user up by email.

        The password is accepted but never checked: the users table holds no
        credential to compare it with.
        """
        try:
            user = self.users.get_user_by_email(login_data.email)
        except Exception as e:
            logger.error(f"Login lookup failed: {e}")
            raise notice_error(401, "Erro no login", "Credenciais inválidas")

        if user is None:
            raise notice_error(401, "Erro no login", "Credenciais inválidas")

        return SessionUser(**user.model_dump())

    def register(self, register_data: RegisterRequest) -> UserResponse:
        """Validate the form and insert the user"""
        if not register_data.name.strip() or not register_data.password:
            raise notice_error(400, "Campos obrigatórios", "Preencha todos os campos obrigatórios.")

        if register_data.role == ORGANIZER and not register_data.plan_id:
            raise notice_error(400, "Plano obrigatório", "Organizadores devem escolher um plano.")

        try:
            if self.users.get_user_by_email(register_data.email):
                raise notice_error(400, "Erro no cadastro", "Este email já está cadastrado.")
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro no cadastro", error_message(e))

        return self.users.create_user(UserCreate(
            name=register_data.name.strip(),
            email=register_data.email,
            role=register_data.role,
            plan_id=register_data.plan_id,
        ))

    def register_page(self) -> RegisterPage:
        plans = self.plans.list_plans_by_price()
        return RegisterPage(
            roles=[RoleOption(value=role, label=role_label(role)) for role in REGISTRATION_ROLE_OPTIONS],
            plans=[
                PlanOption(
                    id=plan.id,
                    label=plan_option_label(plan.name, plan.max_events, plan.price),
                    name=plan.name,
                    max_events=plan.max_events,
                    price=plan.price,
                )
                for plan in plans
            ],
        )
