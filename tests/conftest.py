import os

# La configuración se lee al importar app.config: definirla antes
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "clave-de-prueba"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

import app.models  # noqa: F401
from app.config.database import Base, SessionLocal, engine, get_db
from app.core.security import create_access_token, get_password_hash
from app.crud.comision import comision as comision_crud
from app.crud.examen import examen as examen_crud
from app.crud.inscripcion import inscripcion as inscripcion_crud
from app.crud.materia import materia as materia_crud
from app.crud.usuario import usuario as usuario_crud
from app.models import (
    Comision,
    ExamenFinal,
    Horario,
    Inscripcion,
    Materia,
    PlanEstudio,
    RolUsuario,
    Usuario,
)
from app.services.examen_service import ExamenService
from app.services.inscripcion_service import InscripcionService

PASSWORD = "123456"


@pytest.fixture(scope="session")
def password_hash():
    return get_password_hash(PASSWORD)


@pytest.fixture
def db():
    """Sesión sobre una base SQLite en memoria, recreada en cada test"""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def plan(db):
    plan = PlanEstudio(codigo="ISI-2023", nombre="Ingeniería en Sistemas")
    db.add(plan)
    db.commit()
    return plan


@pytest.fixture
def crear_usuario(db, password_hash, plan):
    def _crear(legajo, rol=RolUsuario.ESTUDIANTE, id=None, con_plan=True):
        usuario = Usuario(
            id=id,
            nombre=f"Nombre {legajo}",
            apellido=f"Apellido {legajo}",
            legajo=legajo,
            email=f"{legajo.lower()}@autogestion.edu.ar",
            password=password_hash,
            rol=rol.value,
            plan_estudio_id=plan.id if con_plan else None,
        )
        db.add(usuario)
        db.commit()
        return usuario

    return _crear


@pytest.fixture
def crear_materia(db, plan):
    def _crear(nombre, id=None, nivel=1, jefe=None, correlativas_final=(), correlativas_cursada=()):
        materia = Materia(
            id=id,
            nombre=nombre,
            nivel=nivel,
            plan_estudio_id=plan.id,
            jefe_catedra_id=jefe.id if jefe else None,
        )
        materia.correlativas_final = list(correlativas_final)
        materia.correlativas_cursada = list(correlativas_cursada)
        db.add(materia)
        db.commit()
        return materia

    return _crear


@pytest.fixture
def crear_comision(db):
    def _crear(materia, nombre="A", cupo_maximo=30, profesor=None, horarios=()):
        comision = Comision(
            nombre=nombre,
            cupo_maximo=cupo_maximo,
            materia_id=materia.id,
            profesor_id=profesor.id if profesor else None,
        )
        db.add(comision)
        db.flush()
        for dia, inicio, fin, aula in horarios:
            db.add(
                Horario(
                    dia=dia,
                    hora_inicio=inicio,
                    hora_fin=fin,
                    aula=aula,
                    comision_id=comision.id,
                )
            )
        db.commit()
        return comision

    return _crear


@pytest.fixture
def crear_inscripcion(db):
    def _crear(estudiante, materia, stc="aprobada", comision=None):
        inscripcion = Inscripcion(
            estudiante_id=estudiante.id,
            materia_id=materia.id,
            comision_id=comision.id if comision else None,
            stc=stc,
        )
        db.add(inscripcion)
        db.commit()
        return inscripcion

    return _crear


@pytest.fixture
def crear_examen(db):
    def _crear(estudiante, materia, estado="inscripto", nota=None):
        examen = ExamenFinal(
            estudiante_id=estudiante.id,
            materia_id=materia.id,
            estado=estado,
            nota=nota,
        )
        db.add(examen)
        db.commit()
        return examen

    return _crear


@pytest.fixture
def examen_service(db):
    return ExamenService(
        db,
        usuarios=usuario_crud,
        materias=materia_crud,
        inscripciones=inscripcion_crud,
        examenes=examen_crud,
        stc_aprobatorios=["aprobada"],
    )


@pytest.fixture
def inscripcion_service(db):
    return InscripcionService(
        db,
        usuarios=usuario_crud,
        materias=materia_crud,
        comisiones=comision_crud,
        inscripciones=inscripcion_crud,
        stc_aprobatorios=["aprobada"],
    )


@pytest.fixture
def client(db):
    from app.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(usuario):
        token = create_access_token(subject=usuario.id)
        return {"Authorization": f"Bearer {token}"}

    return _headers

