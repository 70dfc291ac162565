import math

import pytest

from app.core.exceptions import ForbiddenError, InvalidArgumentError, NotFoundError
from app.models.usuario import RolUsuario


class TestCargaNota:
    @pytest.fixture(autouse=True)
    def setup(self, crear_usuario, crear_materia, crear_examen):
        self.jefe = crear_usuario("DOC001", rol=RolUsuario.PROFESOR)
        self.profesor = crear_usuario("DOC002", rol=RolUsuario.PROFESOR)
        self.estudiante = crear_usuario("EST001")
        self.materia = crear_materia("Sistemas Operativos", jefe=self.jefe)
        self.examen = crear_examen(self.estudiante, self.materia)

    def recargar(self, db):
        db.refresh(self.examen)
        return self.examen

    def test_jefe_carga_nota(self, examen_service, db):
        examen = examen_service.cargar_nota(self.jefe.id, self.examen.id, 7.5, "aprobado")

        assert examen.id == self.examen.id
        assert examen.nota == 7.5
        assert examen.estado == "aprobado"
        assert self.recargar(db).nota == 7.5

    @pytest.mark.parametrize("nota", [0, 10, 4.0])
    def test_limites_inclusivos(self, examen_service, nota):
        examen = examen_service.cargar_nota(self.jefe.id, self.examen.id, nota, "desaprobado")
        assert examen.nota == nota

    def test_nota_entera_se_guarda_como_float(self, examen_service):
        examen = examen_service.cargar_nota(self.jefe.id, self.examen.id, 8, "aprobado")
        assert isinstance(examen.nota, float)

    def test_sobrescribe_sin_historial(self, examen_service, db):
        examen_service.cargar_nota(self.jefe.id, self.examen.id, 2, "desaprobado")
        examen_service.cargar_nota(self.jefe.id, self.examen.id, 9, "aprobado")

        examen = self.recargar(db)
        assert (examen.nota, examen.estado) == (9.0, "aprobado")

    @pytest.mark.parametrize("nota", [-1, 10.01, math.inf, math.nan, True])
    def test_nota_invalida_no_modifica_el_examen(self, examen_service, db, nota):
        with pytest.raises(InvalidArgumentError, match="Datos inválidos: examenId/nota"):
            examen_service.cargar_nota(self.jefe.id, self.examen.id, nota, "aprobado")

        examen = self.recargar(db)
        assert examen.nota is None
        assert examen.estado == "inscripto"

    @pytest.mark.parametrize("estado", ["inscripto", "APROBADO", "regular", ""])
    def test_estado_invalido(self, examen_service, db, estado):
        with pytest.raises(InvalidArgumentError, match="Estado inválido"):
            examen_service.cargar_nota(self.jefe.id, self.examen.id, 6, estado)

        assert self.recargar(db).estado == "inscripto"

    def test_nota_se_valida_antes_que_el_estado(self, examen_service):
        with pytest.raises(InvalidArgumentError, match="Datos inválidos"):
            examen_service.cargar_nota(self.jefe.id, self.examen.id, 11, "inscripto")

    def test_otro_profesor_no_puede_cargar(self, examen_service, db):
        with pytest.raises(ForbiddenError):
            examen_service.cargar_nota(self.profesor.id, self.examen.id, 7.5, "aprobado")

        examen = self.recargar(db)
        assert examen.nota is None
        assert examen.estado == "inscripto"

    def test_estudiante_no_puede_cargar(self, examen_service):
        with pytest.raises(ForbiddenError):
            examen_service.cargar_nota(self.estudiante.id, self.examen.id, 10, "aprobado")

    def test_examen_inexistente(self, examen_service):
        with pytest.raises(NotFoundError, match="Examen no encontrado"):
            examen_service.cargar_nota(self.jefe.id, 999, 7, "aprobado")

    def test_examen_id_invalido(self, examen_service):
        with pytest.raises(InvalidArgumentError, match="Datos inválidos"):
            examen_service.cargar_nota(self.jefe.id, 0, 7, "aprobado")

    def test_ausente_con_nota_cero(self, examen_service):
        examen = examen_service.cargar_nota(self.jefe.id, self.examen.id, 0, "ausente")
        assert examen.estado == "ausente"
        assert examen.nota == 0.0
