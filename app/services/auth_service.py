import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, InvalidArgumentError, UnauthorizedError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.crud.usuario import CRUDUsuario
from app.models.usuario import RolUsuario, Usuario
from app.schemas.usuario import UsuarioCreate, UsuarioResponse

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self, db: Session, *, usuarios: CRUDUsuario, access_token_expire_minutes: int
    ):
        self.db = db
        self.usuarios = usuarios
        self.access_token_expire_minutes = access_token_expire_minutes

    def register(self, user_in: UsuarioCreate) -> Usuario:
        if not user_in.password:
            raise InvalidArgumentError("La contraseña es obligatoria")
        if self.usuarios.get_by_legajo(self.db, user_in.legajo):
            raise ConflictError("El legajo ya está registrado")
        if self.usuarios.get_by_email(self.db, user_in.email):
            raise ConflictError("El email ya está registrado")

        data = user_in.model_dump(exclude={"password", "rol"})
        data["password"] = get_password_hash(user_in.password)
        data["rol"] = (user_in.rol or RolUsuario.ESTUDIANTE).value

        user = self.usuarios.create(self.db, obj_in=data)
        logger.info("Usuario %s registrado con rol %s", user.legajo, user.rol)
        return self.usuarios.get_with_plan(self.db, user.id)

    def authenticate(self, identifier: str, password: str) -> Usuario:
        """Autenticar por legajo o email"""
        if not identifier or not password:
            raise InvalidArgumentError("Se requieren el correo/legajo y la contraseña")

        user = self.usuarios.get_by_legajo(self.db, identifier)
        if user is None:
            user = self.usuarios.get_by_email(self.db, identifier)
        if user is None or not verify_password(password, user.password):
            raise UnauthorizedError("Credenciales inválidas")
        return user

    def login(self, identifier: str, password: str) -> dict:
        user = self.authenticate(identifier, password)

        access_token = create_access_token(
            subject=user.id,
            expires_delta=timedelta(minutes=self.access_token_expire_minutes),
            email=user.email,
            rol=user.rol,
            legajo=user.legajo,
        )
        full_user = self.usuarios.get_with_plan(self.db, user.id)
        return {
            "access_token": access_token,
            "token_type": "bearer",
            "user": UsuarioResponse.model_validate(full_user),
        }
