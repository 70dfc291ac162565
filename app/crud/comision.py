from typing import Dict, List
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.comision import Comision
from app.models.inscripcion import Inscripcion
from pydantic import BaseModel


class CRUDComision(CRUDBase[Comision, BaseModel, BaseModel]):
    def count_inscriptos(self, db: Session, comision_id: int) -> int:
        return (
            db.query(func.count(Inscripcion.id))
            .filter(Inscripcion.comision_id == comision_id)
            .scalar()
        )

    def count_inscriptos_by_ids(
        self, db: Session, comision_ids: List[int]
    ) -> Dict[int, int]:
        """Cantidad de inscriptos por comisión en una sola consulta"""
        if not comision_ids:
            return {}
        rows = (
            db.query(Inscripcion.comision_id, func.count(Inscripcion.id))
            .filter(Inscripcion.comision_id.in_(comision_ids))
            .group_by(Inscripcion.comision_id)
            .all()
        )
        return {comision_id: total for comision_id, total in rows}


comision = CRUDComision(Comision)
