from typing import Optional, List
from sqlalchemy.orm import Session, joinedload

from app.crud.base import CRUDBase
from app.models.examen import ExamenFinal
from app.models.materia import Materia
from app.schemas.examen import ExamenCreate, ExamenUpdate


class CRUDExamen(CRUDBase[ExamenFinal, ExamenCreate, ExamenUpdate]):
    def get_with_jefe(self, db: Session, id: int) -> Optional[ExamenFinal]:
        """Examen con la materia y su jefe de cátedra"""
        return (
            db.query(ExamenFinal)
            .options(joinedload(ExamenFinal.materia).joinedload(Materia.jefe_catedra))
            .filter(ExamenFinal.id == id)
            .first()
        )

    def get_by_estudiante_materia(
        self, db: Session, estudiante_id: int, materia_id: int
    ) -> Optional[ExamenFinal]:
        return (
            db.query(ExamenFinal)
            .filter(
                ExamenFinal.estudiante_id == estudiante_id,
                ExamenFinal.materia_id == materia_id,
            )
            .first()
        )

    def get_by_estudiante(self, db: Session, estudiante_id: int) -> List[ExamenFinal]:
        return (
            db.query(ExamenFinal)
            .filter(ExamenFinal.estudiante_id == estudiante_id)
            .order_by(ExamenFinal.id.desc())
            .all()
        )


examen = CRUDExamen(ExamenFinal)
