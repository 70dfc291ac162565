import logging
from typing import Iterable, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
)
from app.core.validation import unwrap, validar_id, validar_ids
from app.crud.comision import CRUDComision
from app.crud.inscripcion import CRUDInscripcion
from app.crud.materia import CRUDMateria
from app.crud.usuario import CRUDUsuario
from app.models.horario import DIAS_SEMANA
from app.models.inscripcion import EstadoCursada, Inscripcion
from app.schemas.inscripcion import BloqueHorario, InscripcionOut
from app.schemas.materia import ComisionBrief, MateriaBrief, MateriaDetalle
from app.services.correlativas import correlativas_faltantes, nombres_faltantes
from app.services.materia_service import SIN_PLAN, comision_out, materia_detalle

logger = logging.getLogger(__name__)

YA_INSCRIPTO = "Ya estás inscripto a esta materia"


def _orden_dia(dia: str) -> int:
    dia = dia.upper()
    return DIAS_SEMANA.index(dia) if dia in DIAS_SEMANA else len(DIAS_SEMANA)


class InscripcionService:
    """Inscripción a cursadas, bajas y horario semanal del estudiante"""

    def __init__(
        self,
        db: Session,
        *,
        usuarios: CRUDUsuario,
        materias: CRUDMateria,
        comisiones: CRUDComision,
        inscripciones: CRUDInscripcion,
        stc_aprobatorios: Iterable[str],
    ):
        self.db = db
        self.usuarios = usuarios
        self.materias = materias
        self.comisiones = comisiones
        self.inscripciones = inscripciones
        self.stc_aprobatorios = tuple(stc_aprobatorios)

    def inscribir(
        self, estudiante_id: int, materia_id: int, comision_id: int
    ) -> Inscripcion:
        unwrap(validar_ids(estudiante_id, materia_id, comision_id))

        if self.usuarios.get(self.db, estudiante_id) is None:
            raise NotFoundError("Estudiante no encontrado")

        materia = self.materias.get_with_relations(self.db, materia_id)
        if materia is None:
            raise NotFoundError("Materia no encontrada")

        comision = self.comisiones.get(self.db, comision_id)
        if comision is None or comision.materia_id != materia.id:
            raise InvalidArgumentError("La comisión no pertenece a la materia")

        if self.inscripciones.get_by_estudiante_materia(
            self.db, estudiante_id, materia_id
        ):
            raise ConflictError(YA_INSCRIPTO)

        faltantes = correlativas_faltantes(
            self.db,
            self.inscripciones,
            estudiante_id,
            list(materia.correlativas_cursada),
            self.stc_aprobatorios,
        )
        if faltantes:
            raise ConflictError(
                "No puedes cursar la materia. Faltan correlativas: "
                f"{nombres_faltantes(faltantes)}"
            )

        if self.comisiones.count_inscriptos(self.db, comision.id) >= comision.cupo_maximo:
            raise ConflictError("No hay cupo disponible en la comisión")

        try:
            inscripcion = self.inscripciones.create(
                self.db,
                obj_in={
                    "estudiante_id": estudiante_id,
                    "materia_id": materia_id,
                    "comision_id": comision.id,
                    "stc": EstadoCursada.CURSANDO.value,
                },
            )
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(YA_INSCRIPTO) from None

        logger.info(
            "Inscripción %s creada: estudiante=%s materia=%s comision=%s",
            inscripcion.id,
            estudiante_id,
            materia_id,
            comision.id,
        )
        return inscripcion

    def mis_inscripciones(self, estudiante_id: int) -> List[InscripcionOut]:
        unwrap(validar_id(estudiante_id, "ID inválido"))

        inscripciones = self.inscripciones.get_by_estudiante_with_relations(
            self.db, estudiante_id
        )
        inscriptos = self.comisiones.count_inscriptos_by_ids(
            self.db, [i.comision_id for i in inscripciones if i.comision_id]
        )

        result = []
        for i in inscripciones:
            puede_baja = i.stc == EstadoCursada.CURSANDO.value
            result.append(
                InscripcionOut(
                    id=i.id,
                    materia=MateriaBrief.model_validate(i.materia),
                    comision=(
                        comision_out(i.comision, inscriptos.get(i.comision_id, 0))
                        if i.comision
                        else None
                    ),
                    stc=i.stc,
                    fecha_inscripcion=i.created_at,
                    puede_darse_de_baja=puede_baja,
                    motivo_no_baja=(
                        None if puede_baja else f"La cursada ya finalizó ({i.stc})"
                    ),
                )
            )
        return result

    def materias_disponibles(self, estudiante_id: int) -> List[MateriaDetalle]:
        """Materias del plan del estudiante a las que todavía no se inscribió"""
        unwrap(validar_id(estudiante_id, "ID inválido"))

        estudiante = self.usuarios.get(self.db, estudiante_id)
        if estudiante is None:
            raise NotFoundError("Estudiante no encontrado")
        if estudiante.plan_estudio_id is None:
            raise InvalidArgumentError(SIN_PLAN)

        inscriptas = {
            i.materia_id
            for i in self.inscripciones.get_by_estudiante(self.db, estudiante_id)
        }
        materias = [
            m
            for m in self.materias.get_by_plan(self.db, estudiante.plan_estudio_id)
            if m.id not in inscriptas
        ]
        inscriptos = self.comisiones.count_inscriptos_by_ids(
            self.db, [c.id for m in materias for c in m.comisiones]
        )
        return [materia_detalle(m, inscriptos) for m in materias]

    def dar_de_baja(self, estudiante_id: int, inscripcion_id: int) -> None:
        unwrap(validar_ids(estudiante_id, inscripcion_id))

        inscripcion = self.inscripciones.get(self.db, inscripcion_id)
        if inscripcion is None:
            raise NotFoundError("Inscripción no encontrada")
        if inscripcion.estudiante_id != estudiante_id:
            raise ForbiddenError("No puedes dar de baja una inscripción ajena")
        if inscripcion.stc != EstadoCursada.CURSANDO.value:
            raise ConflictError(
                f"No puedes darte de baja: la cursada ya finalizó ({inscripcion.stc})"
            )

        self.inscripciones.remove(self.db, id=inscripcion_id)
        logger.info("Inscripción %s dada de baja por %s", inscripcion_id, estudiante_id)

    def mi_horario(self, estudiante_id: int) -> List[BloqueHorario]:
        """Bloques horarios de las materias en curso, por día y hora de inicio"""
        unwrap(validar_id(estudiante_id, "ID inválido"))

        bloques = []
        for i in self.inscripciones.get_by_estudiante_with_relations(
            self.db, estudiante_id
        ):
            if i.stc != EstadoCursada.CURSANDO.value or i.comision is None:
                continue
            for h in i.comision.horarios:
                bloques.append(
                    BloqueHorario(
                        dia=h.dia.upper(),
                        hora_inicio=h.hora_inicio,
                        hora_fin=h.hora_fin,
                        aula=h.aula or "Sin aula asignada",
                        materia=MateriaBrief(id=i.materia.id, nombre=i.materia.nombre),
                        comision=ComisionBrief(id=i.comision.id, nombre=i.comision.nombre),
                    )
                )

        bloques.sort(key=lambda b: (_orden_dia(b.dia), b.hora_inicio))
        return bloques
