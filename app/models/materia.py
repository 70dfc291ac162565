from sqlalchemy import Column, String, Integer, ForeignKey, Table, Text
from sqlalchemy.orm import relationship

from app.config.database import Base
from .base import BaseModel

# Correlativas exigidas para rendir el final
correlativas_final_table = Table(
    "materia_correlativas_final",
    Base.metadata,
    Column("materia_id", Integer, ForeignKey("materias.id"), primary_key=True),
    Column("correlativa_id", Integer, ForeignKey("materias.id"), primary_key=True),
)

# Correlativas exigidas para cursar
correlativas_cursada_table = Table(
    "materia_correlativas_cursada",
    Base.metadata,
    Column("materia_id", Integer, ForeignKey("materias.id"), primary_key=True),
    Column("correlativa_id", Integer, ForeignKey("materias.id"), primary_key=True),
)


class Materia(BaseModel):
    __tablename__ = "materias"

    nombre = Column(String(200), nullable=False)
    descripcion = Column(Text, nullable=True)
    nivel = Column(Integer, nullable=True)
    plan_estudio_id = Column(Integer, ForeignKey("planes_estudio.id"), nullable=True)
    jefe_catedra_id = Column(Integer, ForeignKey("usuarios.id"), nullable=True)

    # Relationships
    plan_estudio = relationship("PlanEstudio", back_populates="materias")
    jefe_catedra = relationship("Usuario", back_populates="materias_a_cargo")
    comisiones = relationship("Comision", back_populates="materia")

    correlativas_final = relationship(
        "Materia",
        secondary=correlativas_final_table,
        primaryjoin=lambda: Materia.id == correlativas_final_table.c.materia_id,
        secondaryjoin=lambda: Materia.id == correlativas_final_table.c.correlativa_id,
        order_by=lambda: Materia.id,
    )
    correlativas_cursada = relationship(
        "Materia",
        secondary=correlativas_cursada_table,
        primaryjoin=lambda: Materia.id == correlativas_cursada_table.c.materia_id,
        secondaryjoin=lambda: Materia.id == correlativas_cursada_table.c.correlativa_id,
        order_by=lambda: Materia.id,
    )
