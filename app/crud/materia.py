from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from app.crud.base import CRUDBase
from app.models.comision import Comision
from app.models.materia import Materia
from pydantic import BaseModel


class CRUDMateria(CRUDBase[Materia, BaseModel, BaseModel]):
    def get_with_correlativas_final(
        self, db: Session, id: int
    ) -> Optional[Materia]:
        return (
            db.query(Materia)
            .options(selectinload(Materia.correlativas_final))
            .filter(Materia.id == id)
            .first()
        )

    def get_with_relations(self, db: Session, id: int) -> Optional[Materia]:
        return (
            db.query(Materia)
            .options(
                selectinload(Materia.correlativas_final),
                selectinload(Materia.correlativas_cursada),
                selectinload(Materia.jefe_catedra),
                selectinload(Materia.comisiones).selectinload(Comision.horarios),
                selectinload(Materia.comisiones).selectinload(Comision.profesor),
            )
            .filter(Materia.id == id)
            .first()
        )

    def get_by_plan(self, db: Session, plan_estudio_id: int) -> List[Materia]:
        """Obtener las materias de un plan de estudios ordenadas por nivel"""
        return (
            db.query(Materia)
            .options(
                selectinload(Materia.correlativas_final),
                selectinload(Materia.correlativas_cursada),
                selectinload(Materia.comisiones).selectinload(Comision.horarios),
                selectinload(Materia.comisiones).selectinload(Comision.profesor),
            )
            .filter(Materia.plan_estudio_id == plan_estudio_id)
            .order_by(Materia.nivel, Materia.id)
            .all()
        )


materia = CRUDMateria(Materia)
