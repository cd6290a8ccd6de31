from fastapi import APIRouter, Depends
from eventflow.database.supabase_client import get_supabase
from eventflow.modules.home.schemas import HomePage
from eventflow.modules.home.service import HomeService
from eventflow.core.dependencies import get_optional_user
from eventflow.core.session import SessionUser
from supabase import Client
from typing import Optional

router = APIRouter(tags=["home"])


def get_home_service(supabase: Client = Depends(get_supabase)) -> HomeService:
    return HomeService(supabase)


@router.get("/", response_model=HomePage)
async def home(
    user: Optional[SessionUser] = Depends(get_optional_user),
    service: HomeService = Depends(get_home_service)
):
    """Landing page with the most popular active events"""
    return service.get_home_page(user)
