"""Validación explícita de entradas antes de llegar a la lógica de negocio.

Cada validador devuelve un resultado etiquetado: ``Valid`` con el payload
normalizado o ``Invalid`` con el ``InvalidArgumentError`` a reportar.
"""
import math
from dataclasses import dataclass
from typing import Any, Generic, Tuple, TypeVar, Union

from app.core.exceptions import InvalidArgumentError
from app.models.examen import EstadoExamen

T = TypeVar("T")

NOTA_MINIMA = 0
NOTA_MAXIMA = 10

# Estados finales que puede asignar una carga de nota
ESTADOS_CARGA_NOTA = frozenset(
    {EstadoExamen.APROBADO, EstadoExamen.DESAPROBADO, EstadoExamen.AUSENTE}
)


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    error: InvalidArgumentError


ValidationResult = Union[Valid, Invalid]


@dataclass(frozen=True)
class CargaNota:
    examen_id: int
    nota: float
    estado: EstadoExamen


def unwrap(result: ValidationResult):
    """Devolver el payload validado o lanzar el error asociado"""
    if isinstance(result, Invalid):
        raise result.error
    return result.value


def es_id_valido(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validar_id(value: Any, message: str = "Parámetros inválidos") -> ValidationResult:
    if not es_id_valido(value):
        return Invalid(InvalidArgumentError(message))
    return Valid(value)


def validar_ids(*values: Any, message: str = "Parámetros inválidos") -> ValidationResult:
    if not all(es_id_valido(v) for v in values):
        return Invalid(InvalidArgumentError(message))
    return Valid(tuple(values))


def _es_nota_valida(nota: Any) -> bool:
    if isinstance(nota, bool) or not isinstance(nota, (int, float)):
        return False
    return math.isfinite(nota) and NOTA_MINIMA <= nota <= NOTA_MAXIMA


def _parse_estado(estado: Any) -> Tuple[bool, Any]:
    try:
        return True, EstadoExamen(estado)
    except ValueError:
        return False, None


def validar_carga_nota(examen_id: Any, nota: Any, estado: Any) -> ValidationResult:
    """Validar examen, nota en [0, 10] y estado final permitido"""
    if not es_id_valido(examen_id) or not _es_nota_valida(nota):
        return Invalid(InvalidArgumentError("Datos inválidos: examenId/nota"))

    ok, estado_examen = _parse_estado(estado)
    if not ok or estado_examen not in ESTADOS_CARGA_NOTA:
        return Invalid(InvalidArgumentError("Estado inválido"))

    return Valid(CargaNota(examen_id=examen_id, nota=float(nota), estado=estado_examen))
