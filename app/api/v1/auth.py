from fastapi import APIRouter, Depends

from app.core.auth.dependencies import get_current_user, is_authenticated
from app.core.auth.schemas import UserResponse
from app.shared.database.models import User

router = APIRouter()


@router.get("/user", response_model=UserResponse, dependencies=[Depends(is_authenticated)])
async def get_auth_user(current_user: User = Depends(get_current_user)):
    """
    Usuario de la sesión actual

    **Returns:**
    - 401 si no hay una sesión vigente
    - 404 si el usuario de la sesión ya no existe
    """
    return current_user
