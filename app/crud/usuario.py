from typing import Optional
from sqlalchemy.orm import Session, joinedload

from app.crud.base import CRUDBase
from app.models.usuario import Usuario
from app.schemas.usuario import UsuarioCreate, UsuarioUpdate


class CRUDUsuario(CRUDBase[Usuario, UsuarioCreate, UsuarioUpdate]):
    def get_with_plan(self, db: Session, id: int) -> Optional[Usuario]:
        return (
            db.query(Usuario)
            .options(joinedload(Usuario.plan_estudio))
            .filter(Usuario.id == id)
            .first()
        )

    def get_by_legajo(self, db: Session, legajo: str) -> Optional[Usuario]:
        return db.query(Usuario).filter(Usuario.legajo == legajo).first()

    def get_by_email(self, db: Session, email: str) -> Optional[Usuario]:
        return db.query(Usuario).filter(Usuario.email == email).first()


usuario = CRUDUsuario(Usuario)
