import enum

from sqlalchemy import Column, Float, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import BaseModel


class EstadoExamen(str, enum.Enum):
    INSCRIPTO = "inscripto"
    APROBADO = "aprobado"
    DESAPROBADO = "desaprobado"
    AUSENTE = "ausente"


class ExamenFinal(BaseModel):
    __tablename__ = "examenes_finales"
    __table_args__ = (
        UniqueConstraint(
            "estudiante_id", "materia_id", name="uq_examen_estudiante_materia"
        ),
    )

    estudiante_id = Column(Integer, ForeignKey("usuarios.id"), nullable=False)
    materia_id = Column(Integer, ForeignKey("materias.id"), nullable=False)
    estado = Column(String(20), nullable=False, default=EstadoExamen.INSCRIPTO.value)
    nota = Column(Float, nullable=True)

    # Relationships
    estudiante = relationship("Usuario", back_populates="examenes")
    materia = relationship("Materia")
