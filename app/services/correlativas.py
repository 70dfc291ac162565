from typing import Iterable, List

from sqlalchemy.orm import Session

from app.crud.inscripcion import CRUDInscripcion
from app.models.materia import Materia
from app.schemas.examen import CorrelativaFaltante


def correlativas_faltantes(
    db: Session,
    inscripciones: CRUDInscripcion,
    estudiante_id: int,
    correlativas: List[Materia],
    stc_aprobatorios: Iterable[str],
) -> List[CorrelativaFaltante]:
    """
    Devuelve las correlativas que el estudiante todavía no aprobó.

    Las inscripciones a todas las correlativas se buscan en una sola
    consulta IN. El orden del resultado respeta el de ``correlativas``.
    """
    if not correlativas:
        return []

    aprobatorios = set(stc_aprobatorios)
    registros = inscripciones.get_by_estudiante_materias(
        db, estudiante_id, [c.id for c in correlativas]
    )
    aprobadas = {i.materia_id for i in registros if i.stc in aprobatorios}

    return [
        CorrelativaFaltante(id=c.id, nombre=c.nombre)
        for c in correlativas
        if c.id not in aprobadas
    ]


def nombres_faltantes(faltantes: List[CorrelativaFaltante]) -> str:
    return ", ".join(f.nombre for f in faltantes)
