from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from .base import BaseModel


class Comision(BaseModel):
    __tablename__ = "comisiones"

    nombre = Column(String(100), nullable=False)
    cupo_maximo = Column(Integer, nullable=False)
    materia_id = Column(Integer, ForeignKey("materias.id"), nullable=False)
    profesor_id = Column(Integer, ForeignKey("usuarios.id"), nullable=True)

    # Relationships
    materia = relationship("Materia", back_populates="comisiones")
    profesor = relationship("Usuario")
    horarios = relationship(
        "Horario", back_populates="comision", order_by="Horario.id"
    )
    inscripciones = relationship("Inscripcion", back_populates="comision")
