import logging
from datetime import time as dt_time

from sqlalchemy.orm import Session

from app.config.database import SessionLocal
from app.core.security import get_password_hash
from app.models.comision import Comision
from app.models.examen import ExamenFinal, EstadoExamen
from app.models.horario import Horario
from app.models.inscripcion import EstadoCursada, Inscripcion
from app.models.materia import Materia
from app.models.plan_estudio import PlanEstudio
from app.models.usuario import RolUsuario, Usuario

logger = logging.getLogger(__name__)

PASSWORD_DEMO = "123456"

MATERIAS_DATA = [
    # Nivel 1
    {"codigo": "MAT1", "nombre": "Análisis Matemático I", "nivel": 1},
    {"codigo": "ALG", "nombre": "Álgebra y Geometría Analítica", "nivel": 1},
    {"codigo": "PRG1", "nombre": "Programación I", "nivel": 1},
    {"codigo": "SYO", "nombre": "Sistemas y Organizaciones", "nivel": 1},
    # Nivel 2
    {"codigo": "MAT2", "nombre": "Análisis Matemático II", "nivel": 2},
    {"codigo": "PRG2", "nombre": "Programación II", "nivel": 2},
    {"codigo": "ARQ", "nombre": "Arquitectura de Computadoras", "nivel": 2},
    # Nivel 3
    {"codigo": "EDD", "nombre": "Estructuras de Datos", "nivel": 3},
    {"codigo": "BDD", "nombre": "Bases de Datos", "nivel": 3},
    {"codigo": "SO", "nombre": "Sistemas Operativos", "nivel": 3},
]

# materia -> correlativas (se usan las mismas para cursar y para el final)
CORRELATIVAS = {
    "MAT2": ["MAT1"],
    "PRG2": ["PRG1"],
    "ARQ": ["PRG1"],
    "EDD": ["PRG2", "ALG"],
    "BDD": ["PRG2"],
    "SO": ["ARQ", "PRG2"],
}

DOCENTES_DATA = [
    {"legajo": "DOC001", "nombre": "Marta", "apellido": "Ríos", "email": "mrios@autogestion.edu.ar"},
    {"legajo": "DOC002", "nombre": "Jorge", "apellido": "Paz", "email": "jpaz@autogestion.edu.ar"},
    {"legajo": "DOC003", "nombre": "Laura", "apellido": "Gómez", "email": "lgomez@autogestion.edu.ar"},
]

ESTUDIANTES_DATA = [
    {"legajo": "EST001", "nombre": "Victor", "apellido": "Salvatierra", "email": "vsalvatierra@autogestion.edu.ar"},
    {"legajo": "EST002", "nombre": "Tatiana", "apellido": "Cuéllar", "email": "tcuellar@autogestion.edu.ar"},
    {"legajo": "EST003", "nombre": "Gabriel", "apellido": "Fernández", "email": "gfernandez@autogestion.edu.ar"},
    {"legajo": "EST004", "nombre": "Lucía", "apellido": "Soto", "email": "lsoto@autogestion.edu.ar"},
]

HORARIOS_POR_NIVEL = {
    1: [("LUNES", dt_time(8, 0), dt_time(10, 0)), ("MIERCOLES", dt_time(8, 0), dt_time(10, 0))],
    2: [("MARTES", dt_time(10, 0), dt_time(12, 0)), ("JUEVES", dt_time(10, 0), dt_time(12, 0))],
    3: [("VIERNES", dt_time(18, 0), dt_time(22, 0))],
}


def seed_database():
    """Poblar la base de datos con datos iniciales"""

    with SessionLocal() as db:
        try:
            logger.info("Iniciando seeding de la base de datos...")

            # 1. Plan de estudios
            plan = PlanEstudio(codigo="ISI-2023", nombre="Ingeniería en Sistemas de Información")
            db.add(plan)
            db.commit()
            db.refresh(plan)

            # 2. Docentes
            password_hash = get_password_hash(PASSWORD_DEMO)
            docentes = []
            for data in DOCENTES_DATA:
                docente = Usuario(
                    **data, password=password_hash, rol=RolUsuario.PROFESOR.value
                )
                db.add(docente)
                docentes.append(docente)
            db.commit()

            # 3. Materias con jefe de cátedra
            materias = {}
            for i, data in enumerate(MATERIAS_DATA):
                materia = Materia(
                    nombre=data["nombre"],
                    descripcion=f"{data['codigo']} - {data['nombre']}",
                    nivel=data["nivel"],
                    plan_estudio_id=plan.id,
                    jefe_catedra_id=docentes[i % len(docentes)].id,
                )
                db.add(materia)
                materias[data["codigo"]] = materia
            db.commit()

            # 4. Correlativas
            for codigo, requeridas in CORRELATIVAS.items():
                correlativas = [materias[c] for c in requeridas]
                materias[codigo].correlativas_final = correlativas
                materias[codigo].correlativas_cursada = list(correlativas)
            db.commit()

            # 5. Comisiones y horarios
            for i, (codigo, materia) in enumerate(materias.items()):
                for turno, sufijo in (("Mañana", "M"), ("Noche", "N")):
                    comision = Comision(
                        nombre=f"{codigo}-{sufijo}",
                        cupo_maximo=30,
                        materia_id=materia.id,
                        profesor_id=docentes[(i + 1) % len(docentes)].id,
                    )
                    db.add(comision)
                    db.flush()
                    for dia, inicio, fin in HORARIOS_POR_NIVEL[materia.nivel]:
                        db.add(
                            Horario(
                                dia=dia,
                                hora_inicio=inicio,
                                hora_fin=fin,
                                aula=f"Aula {100 * materia.nivel + i}{sufijo}",
                                comision_id=comision.id,
                            )
                        )
            db.commit()

            # 6. Estudiantes
            estudiantes = []
            for data in ESTUDIANTES_DATA:
                estudiante = Usuario(
                    **data,
                    password=password_hash,
                    rol=RolUsuario.ESTUDIANTE.value,
                    plan_estudio_id=plan.id,
                )
                db.add(estudiante)
                estudiantes.append(estudiante)
            db.commit()

            # 7. Historia académica: primer nivel aprobado para los dos primeros
            for estudiante in estudiantes[:2]:
                for codigo in ("MAT1", "ALG", "PRG1", "SYO"):
                    db.add(
                        Inscripcion(
                            estudiante_id=estudiante.id,
                            materia_id=materias[codigo].id,
                            stc=EstadoCursada.APROBADA.value,
                        )
                    )
                db.add(
                    ExamenFinal(
                        estudiante_id=estudiante.id,
                        materia_id=materias["PRG1"].id,
                        estado=EstadoExamen.APROBADO.value,
                        nota=8.0,
                    )
                )
            db.commit()

            logger.info(
                "Seeding completado: %d materias, %d docentes, %d estudiantes",
                len(materias),
                len(docentes),
                len(estudiantes),
            )
            for est in estudiantes:
                logger.info(
                    "Credencial demo: %s / %s (%s %s)",
                    est.legajo,
                    PASSWORD_DEMO,
                    est.nombre,
                    est.apellido,
                )

        except Exception:
            logger.exception("Error durante seeding")
            db.rollback()
            raise


def check_if_seeded(db: Session) -> bool:
    """Verificar si ya existen datos en la base"""
    return db.query(PlanEstudio).first() is not None


def run_seeder():
    """Ejecutar seeder solo si no hay datos"""
    with SessionLocal() as db:
        if check_if_seeded(db):
            logger.info("Base de datos ya tiene datos, saltando seeding...")
            return False

    seed_database()
    return True
