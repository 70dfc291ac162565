from .plan_estudio import PlanEstudio
from .usuario import RolUsuario, Usuario
from .materia import Materia
from .comision import Comision
from .horario import Horario
from .inscripcion import EstadoCursada, Inscripcion
from .examen import EstadoExamen, ExamenFinal

__all__ = [
    "Comision",
    "EstadoCursada",
    "EstadoExamen",
    "ExamenFinal",
    "Horario",
    "Inscripcion",
    "Materia",
    "PlanEstudio",
    "RolUsuario",
    "Usuario",
]
