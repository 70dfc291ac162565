from typing import Dict, List

from sqlalchemy.orm import Session

from app.core.exceptions import InvalidArgumentError, NotFoundError
from app.core.validation import unwrap, validar_id
from app.crud.comision import CRUDComision
from app.crud.materia import CRUDMateria
from app.models.comision import Comision
from app.models.materia import Materia
from app.models.usuario import Usuario
from app.schemas.materia import (
    ComisionOut,
    DocenteBrief,
    HorarioOut,
    MateriaBrief,
    MateriaDetalle,
)

SIN_PLAN = "Tu cuenta no tiene un plan de estudios asignado."


def comision_out(comision: Comision, inscriptos: int) -> ComisionOut:
    profesor = comision.profesor
    return ComisionOut(
        id=comision.id,
        nombre=comision.nombre,
        cupo_maximo=comision.cupo_maximo,
        cupo_disponible=max(comision.cupo_maximo - inscriptos, 0),
        docente=DocenteBrief.model_validate(profesor) if profesor else None,
        horarios=[HorarioOut.model_validate(h) for h in comision.horarios],
    )


def materia_detalle(materia: Materia, inscriptos: Dict[int, int]) -> MateriaDetalle:
    jefe = materia.jefe_catedra
    return MateriaDetalle(
        id=materia.id,
        nombre=materia.nombre,
        descripcion=materia.descripcion,
        nivel=materia.nivel,
        jefe_catedra=DocenteBrief.model_validate(jefe) if jefe else None,
        correlativas_final=[MateriaBrief.model_validate(c) for c in materia.correlativas_final],
        correlativas_cursada=[
            MateriaBrief.model_validate(c) for c in materia.correlativas_cursada
        ],
        comisiones=[comision_out(c, inscriptos.get(c.id, 0)) for c in materia.comisiones],
    )


class MateriaService:
    def __init__(self, db: Session, *, materias: CRUDMateria, comisiones: CRUDComision):
        self.db = db
        self.materias = materias
        self.comisiones = comisiones

    def _inscriptos(self, materias: List[Materia]) -> Dict[int, int]:
        ids = [c.id for m in materias for c in m.comisiones]
        return self.comisiones.count_inscriptos_by_ids(self.db, ids)

    def listar_del_plan(self, usuario: Usuario) -> List[MateriaDetalle]:
        if usuario.plan_estudio_id is None:
            raise InvalidArgumentError(SIN_PLAN)
        materias = self.materias.get_by_plan(self.db, usuario.plan_estudio_id)
        inscriptos = self._inscriptos(materias)
        return [materia_detalle(m, inscriptos) for m in materias]

    def detalle(self, materia_id: int) -> MateriaDetalle:
        unwrap(validar_id(materia_id))
        materia = self.materias.get_with_relations(self.db, materia_id)
        if materia is None:
            raise NotFoundError("Materia no encontrada")
        return materia_detalle(materia, self._inscriptos([materia]))
