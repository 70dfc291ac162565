import logging
from typing import Iterable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
)
from app.core.validation import es_id_valido, unwrap, validar_carga_nota, validar_id, validar_ids
from app.crud.examen import CRUDExamen
from app.crud.inscripcion import CRUDInscripcion
from app.crud.materia import CRUDMateria
from app.crud.usuario import CRUDUsuario
from app.models.examen import EstadoExamen, ExamenFinal
from app.schemas.examen import ExamenResumen, VerificacionCorrelativas
from app.services.correlativas import correlativas_faltantes, nombres_faltantes

logger = logging.getLogger(__name__)

YA_INSCRIPTO = "Ya estás inscripto al examen final de esta materia"


class ExamenService:
    """
    Inscripción a exámenes finales y carga de notas.

    Es el único componente que crea exámenes o cambia su estado. Cada
    camino de escritura valida todo antes de escribir.
    """

    def __init__(
        self,
        db: Session,
        *,
        usuarios: CRUDUsuario,
        materias: CRUDMateria,
        inscripciones: CRUDInscripcion,
        examenes: CRUDExamen,
        stc_aprobatorios: Iterable[str],
    ):
        self.db = db
        self.usuarios = usuarios
        self.materias = materias
        self.inscripciones = inscripciones
        self.examenes = examenes
        self.stc_aprobatorios = tuple(stc_aprobatorios)

    def verificar_correlativas_final(
        self, estudiante_id: int, materia_id: int
    ) -> VerificacionCorrelativas:
        """Verifica que el estudiante aprobó todas las correlativas del final"""
        unwrap(validar_ids(estudiante_id, materia_id))

        estudiante = self.usuarios.get(self.db, estudiante_id)
        materia = self.materias.get_with_correlativas_final(self.db, materia_id)
        if not estudiante or not materia:
            raise InvalidArgumentError("Estudiante o materia no encontrados")

        faltantes = correlativas_faltantes(
            self.db,
            self.inscripciones,
            estudiante_id,
            list(materia.correlativas_final),
            self.stc_aprobatorios,
        )
        return VerificacionCorrelativas(cumple=not faltantes, faltantes=faltantes)

    def inscribirse(self, estudiante_id: int, materia_id: int) -> ExamenFinal:
        """
        Inscripción a examen final:
        - No duplicar inscripción
        - Correlativas completas
        - Estado inicial inscripto, sin nota
        """
        unwrap(validar_ids(estudiante_id, materia_id))

        estudiante = self.usuarios.get(self.db, estudiante_id)
        materia = self.materias.get(self.db, materia_id)
        if not estudiante or not materia:
            raise InvalidArgumentError("Estudiante o materia no encontrados")

        if self.examenes.get_by_estudiante_materia(self.db, estudiante_id, materia_id):
            raise ConflictError(YA_INSCRIPTO)

        verificacion = self.verificar_correlativas_final(estudiante_id, materia_id)
        if not verificacion.cumple:
            logger.warning(
                "Inscripción a final rechazada: estudiante=%s materia=%s faltan=%s",
                estudiante_id,
                materia_id,
                [f.id for f in verificacion.faltantes],
            )
            raise ConflictError(
                "No puedes rendir el final. Faltan correlativas: "
                f"{nombres_faltantes(verificacion.faltantes)}"
            )

        try:
            examen = self.examenes.create(
                self.db,
                obj_in={
                    "estudiante_id": estudiante_id,
                    "materia_id": materia_id,
                    "estado": EstadoExamen.INSCRIPTO.value,
                    "nota": None,
                },
            )
        except IntegrityError:
            # Otra petición concurrente insertó el mismo par
            self.db.rollback()
            raise ConflictError(YA_INSCRIPTO) from None

        logger.info(
            "Examen %s creado: estudiante=%s materia=%s",
            examen.id,
            estudiante_id,
            materia_id,
        )
        return examen

    def _buscar_jefe_de_examen(self, examen_id: int) -> Optional[ExamenFinal]:
        return self.examenes.get_with_jefe(self.db, examen_id)

    @staticmethod
    def _jefe_id(examen: ExamenFinal) -> Optional[int]:
        if examen.materia is None:
            return None
        return examen.materia.jefe_catedra_id

    def es_jefe_de_catedra(self, user_id: int, examen_id: int) -> bool:
        """Consulta booleana para el guard: nunca lanza"""
        if not es_id_valido(user_id) or not es_id_valido(examen_id):
            return False

        examen = self._buscar_jefe_de_examen(examen_id)
        if examen is None:
            return False
        jefe_id = self._jefe_id(examen)
        return jefe_id is not None and jefe_id == user_id

    def assert_jefe_de_catedra(self, user_id: int, examen_id: int) -> None:
        """Lanza 404 si el examen no existe, 403 si no es jefe de cátedra"""
        unwrap(validar_ids(user_id, examen_id))

        examen = self._buscar_jefe_de_examen(examen_id)
        if examen is None:
            raise NotFoundError("Examen no encontrado")

        if self._jefe_id(examen) != user_id:
            raise ForbiddenError("No tienes permisos para esta operación")

    def cargar_nota(
        self, user_id: int, examen_id: int, nota: float, estado: str
    ) -> ExamenFinal:
        """
        Carga de nota asegurando:
        - Nota válida [0..10] y estado final permitido.
        - Usuario jefe de cátedra de la materia del examen.
        """
        carga = unwrap(validar_carga_nota(examen_id, nota, estado))

        self.assert_jefe_de_catedra(user_id, carga.examen_id)

        examen = self.examenes.get(self.db, carga.examen_id)
        if examen is None:
            raise NotFoundError("Examen no encontrado")

        examen = self.examenes.update(
            self.db,
            db_obj=examen,
            obj_in={"nota": carga.nota, "estado": carga.estado.value},
        )
        logger.info(
            "Nota cargada en examen %s por %s: %s (%s)",
            examen.id,
            user_id,
            carga.nota,
            carga.estado.value,
        )
        return examen

    def ver_examenes(self, estudiante_id: int) -> List[ExamenResumen]:
        """Listado para el estudiante: solo campos necesarios, más recientes primero"""
        unwrap(validar_id(estudiante_id, "ID inválido"))

        return [
            ExamenResumen.model_validate(examen)
            for examen in self.examenes.get_by_estudiante(self.db, estudiante_id)
        ]
