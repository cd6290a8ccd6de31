from pydantic import BaseModel, EmailStr
from typing import Optional, List
from eventflow.core.notices import Notice
from eventflow.core.session import SessionUser
from eventflow.modules.users.schemas import Role


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    user: SessionUser
    redirect_to: str
    notice: Notice


class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str
    role: Role
    plan_id: Optional[str] = None


class RegisterResponse(BaseModel):
    user_id: str
    email: str
    redirect_to: str
    notice: Notice


class LogoutResponse(BaseModel):
    redirect_to: str
    notice: Notice


class PlanOption(BaseModel):
    id: str
    label: str
    name: str
    max_events: int
    price: float


class RoleOption(BaseModel):
    value: str
    label: str


class RegisterPage(BaseModel):
    roles: List[RoleOption]
    plans: List[PlanOption]


class LoginPage(BaseModel):
    user: Optional[SessionUser] = None
    register_path: str = "/register"
