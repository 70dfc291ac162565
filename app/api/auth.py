from fastapi import APIRouter, Depends, status

from app.api.deps import get_auth_service, get_current_active_user
from app.models.usuario import Usuario
from app.schemas.auth import UserLogin, Token
from app.schemas.usuario import UsuarioCreate, UsuarioResponse
from app.services.auth_service import AuthService

router = APIRouter()


@router.post(
    "/register", response_model=UsuarioResponse, status_code=status.HTTP_201_CREATED
)
def register(
    user_in: UsuarioCreate, service: AuthService = Depends(get_auth_service)
):
    """Registrar un usuario (estudiante por defecto)"""
    return service.register(user_in)


@router.post("/login", response_model=Token)
def login_for_access_token(
    user_data: UserLogin, service: AuthService = Depends(get_auth_service)
):
    """
    Login por legajo o email que devuelve un JWT token
    """
    return service.login(user_data.identifier, user_data.password)


@router.get("/profile", response_model=UsuarioResponse)
def get_profile(current_user: Usuario = Depends(get_current_active_user)):
    """Información del usuario autenticado"""
    return current_user
