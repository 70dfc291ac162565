from sqlalchemy import Column, String, Integer, ForeignKey, Time
from sqlalchemy.orm import relationship
from .base import BaseModel

DIAS_SEMANA = ["LUNES", "MARTES", "MIERCOLES", "JUEVES", "VIERNES", "SABADO"]


class Horario(BaseModel):
    __tablename__ = "horarios"

    dia = Column(String(20), nullable=False)
    hora_inicio = Column(Time, nullable=False)
    hora_fin = Column(Time, nullable=False)
    aula = Column(String(50), nullable=True)
    comision_id = Column(Integer, ForeignKey("comisiones.id"), nullable=False)

    # Relationships
    comision = relationship("Comision", back_populates="horarios")
