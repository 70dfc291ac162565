from typing import Optional, List
from sqlalchemy.orm import Session, selectinload

from app.crud.base import CRUDBase
from app.models.comision import Comision
from app.models.inscripcion import Inscripcion
from app.schemas.inscripcion import InscripcionCreate, InscripcionUpdate


class CRUDInscripcion(CRUDBase[Inscripcion, InscripcionCreate, InscripcionUpdate]):
    def get_by_estudiante(self, db: Session, estudiante_id: int) -> List[Inscripcion]:
        return (
            db.query(Inscripcion)
            .filter(Inscripcion.estudiante_id == estudiante_id)
            .order_by(Inscripcion.id.desc())
            .all()
        )

    def get_by_estudiante_with_relations(
        self, db: Session, estudiante_id: int
    ) -> List[Inscripcion]:
        return (
            db.query(Inscripcion)
            .options(
                selectinload(Inscripcion.materia),
                selectinload(Inscripcion.comision).selectinload(Comision.horarios),
                selectinload(Inscripcion.comision).selectinload(Comision.profesor),
            )
            .filter(Inscripcion.estudiante_id == estudiante_id)
            .order_by(Inscripcion.id.desc())
            .all()
        )

    def get_by_estudiante_materia(
        self, db: Session, estudiante_id: int, materia_id: int
    ) -> Optional[Inscripcion]:
        return (
            db.query(Inscripcion)
            .filter(
                Inscripcion.estudiante_id == estudiante_id,
                Inscripcion.materia_id == materia_id,
            )
            .first()
        )

    def get_by_estudiante_materias(
        self, db: Session, estudiante_id: int, materia_ids: List[int]
    ) -> List[Inscripcion]:
        """Inscripciones del estudiante a un conjunto de materias (una consulta IN)"""
        if not materia_ids:
            return []
        return (
            db.query(Inscripcion)
            .filter(
                Inscripcion.estudiante_id == estudiante_id,
                Inscripcion.materia_id.in_(materia_ids),
            )
            .all()
        )


inscripcion = CRUDInscripcion(Inscripcion)
