from fastapi import APIRouter, Depends
from eventflow.database.supabase_client import get_supabase
from eventflow.modules.auth.schemas import (
    LoginRequest, LoginResponse, LoginPage,
    RegisterRequest, RegisterResponse, RegisterPage, LogoutResponse
)
from eventflow.modules.auth.service import AuthService
from eventflow.core.dependencies import get_session_store, get_optional_user, dashboard_path
from eventflow.core.notices import Notice
from eventflow.core.session import SessionStore, SessionUser
from eventflow.config.roles_config import HOME_PATH, LOGIN_PATH
from supabase import Client
from typing import Optional

router = APIRouter(tags=["auth"])


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


@router.get("/login", response_model=LoginPage)
async def login_page(user: Optional[SessionUser] = Depends(get_optional_user)):
    """Login page; a logged-in user is reported so the client can skip it"""
    return LoginPage(user=user)


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
    store: SessionStore = Depends(get_session_store)
):
    """Log in by email and store the user as the session record"""
    user = service.login(login_data)
    store.save(user)
    return LoginResponse(
        user=user,
        redirect_to=dashboard_path(user.role),
        notice=Notice(title="Login realizado com sucesso!", description=f"Bem-vindo(a), {user.name}!"),
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(store: SessionStore = Depends(get_session_store)):
    """Clear the session record"""
    store.clear()
    return LogoutResponse(
        redirect_to=HOME_PATH,
        notice=Notice(title="Logout realizado", description="Você foi desconectado com sucesso."),
    )


@router.get("/register", response_model=RegisterPage)
async def register_page(service: AuthService = Depends(get_auth_service)):
    """Role options and plans (cheapest first) for the registration form"""
    return service.register_page()


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    register_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Create an account; the user logs in afterwards"""
    user = service.register(register_data)
    return RegisterResponse(
        user_id=user.id,
        email=user.email,
        redirect_to=LOGIN_PATH,
        notice=Notice(title="Conta criada com sucesso!", description="Você pode fazer login agora."),
    )
