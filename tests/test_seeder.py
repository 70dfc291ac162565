from fastapi.testclient import TestClient

from app.config.database import SessionLocal
from app.config.settings import settings
from app.core.seeder_sync import (
    DOCENTES_DATA,
    ESTUDIANTES_DATA,
    MATERIAS_DATA,
    PASSWORD_DEMO,
    check_if_seeded,
    run_seeder,
)
from app.core.security import verify_password
from app.models import (
    Comision,
    ExamenFinal,
    Inscripcion,
    Materia,
    PlanEstudio,
    RolUsuario,
    Usuario,
)


class TestSeeder:
    def test_base_vacia_no_esta_poblada(self, db):
        assert check_if_seeded(db) is False

    def test_datos_de_demo(self, db):
        assert run_seeder() is True

        plan = db.query(PlanEstudio).one()
        assert plan.codigo == "ISI-2023"
        assert db.query(Materia).count() == len(MATERIAS_DATA)
        assert db.query(Comision).count() == 2 * len(MATERIAS_DATA)

        docentes = db.query(Usuario).filter(Usuario.rol == RolUsuario.PROFESOR.value)
        assert docentes.count() == len(DOCENTES_DATA)
        estudiantes = db.query(Usuario).filter(Usuario.rol == RolUsuario.ESTUDIANTE.value)
        assert estudiantes.count() == len(ESTUDIANTES_DATA)
        assert all(e.plan_estudio_id == plan.id for e in estudiantes)

        estructuras = db.query(Materia).filter(Materia.nombre == "Estructuras de Datos").one()
        assert {c.nombre for c in estructuras.correlativas_final} == {
            "Programación II",
            "Álgebra y Geometría Analítica",
        }
        assert {c.nombre for c in estructuras.correlativas_cursada} == {
            "Programación II",
            "Álgebra y Geometría Analítica",
        }
        assert all(m.jefe_catedra_id is not None for m in db.query(Materia))

    def test_historia_academica(self, db):
        run_seeder()

        aprobadas = db.query(Inscripcion).filter(Inscripcion.stc == "aprobada")
        assert aprobadas.count() == 8
        finales = db.query(ExamenFinal).all()
        assert [(f.estado, f.nota) for f in finales] == [("aprobado", 8.0), ("aprobado", 8.0)]

        estudiante = db.query(Usuario).filter(Usuario.legajo == "EST001").one()
        assert verify_password(PASSWORD_DEMO, estudiante.password)

    def test_segunda_ejecucion_no_duplica(self, db):
        assert run_seeder() is True
        assert run_seeder() is False

        assert db.query(PlanEstudio).count() == 1
        assert db.query(Materia).count() == len(MATERIAS_DATA)


class TestLifespan:
    def test_arranque_crea_tablas_y_siembra(self, monkeypatch):
        from app.main import app

        monkeypatch.setattr(settings, "run_seeder", True)

        with TestClient(app) as client:
            assert client.get("/health").json()["status"] == "healthy"
            with SessionLocal() as db:
                assert check_if_seeded(db) is True
                assert db.query(Materia).count() == len(MATERIAS_DATA)

            response = client.post(
                "/auth/login", json={"legajo": "EST001", "password": PASSWORD_DEMO}
            )
            assert response.status_code == 200
            assert response.json()["user"]["plan_estudio"]["codigo"] == "ISI-2023"
