import pytest

from app.core.exceptions import ForbiddenError, InvalidArgumentError, NotFoundError
from app.models.usuario import RolUsuario


class TestJefeDeCatedra:
    @pytest.fixture(autouse=True)
    def setup(self, crear_usuario, crear_materia, crear_examen):
        self.jefe = crear_usuario("DOC001", rol=RolUsuario.PROFESOR)
        self.otro_profesor = crear_usuario("DOC002", rol=RolUsuario.PROFESOR)
        self.estudiante = crear_usuario("EST001")
        self.materia = crear_materia("Bases de Datos", jefe=self.jefe)
        self.sin_jefe = crear_materia("Seminario")
        self.examen = crear_examen(self.estudiante, self.materia)
        self.examen_sin_jefe = crear_examen(self.estudiante, self.sin_jefe)

    def test_es_jefe(self, examen_service):
        assert examen_service.es_jefe_de_catedra(self.jefe.id, self.examen.id) is True

    def test_no_es_jefe(self, examen_service):
        assert examen_service.es_jefe_de_catedra(self.otro_profesor.id, self.examen.id) is False

    @pytest.mark.parametrize("user_id, examen_id", [(0, 1), (1, -5), ("1", 1), (None, None)])
    def test_consulta_booleana_no_lanza_con_ids_invalidos(
        self, examen_service, user_id, examen_id
    ):
        assert examen_service.es_jefe_de_catedra(user_id, examen_id) is False

    def test_consulta_booleana_examen_inexistente(self, examen_service):
        assert examen_service.es_jefe_de_catedra(self.jefe.id, 999) is False

    def test_consulta_booleana_materia_sin_jefe(self, examen_service):
        assert examen_service.es_jefe_de_catedra(self.jefe.id, self.examen_sin_jefe.id) is False

    def test_assert_pasa_para_el_jefe(self, examen_service):
        assert examen_service.assert_jefe_de_catedra(self.jefe.id, self.examen.id) is None

    def test_assert_ids_invalidos(self, examen_service):
        with pytest.raises(InvalidArgumentError):
            examen_service.assert_jefe_de_catedra(0, self.examen.id)

    def test_assert_examen_inexistente(self, examen_service):
        with pytest.raises(NotFoundError, match="Examen no encontrado"):
            examen_service.assert_jefe_de_catedra(self.jefe.id, 999)

    def test_assert_otro_profesor(self, examen_service):
        with pytest.raises(ForbiddenError, match="No tienes permisos"):
            examen_service.assert_jefe_de_catedra(self.otro_profesor.id, self.examen.id)

    def test_assert_materia_sin_jefe(self, examen_service):
        with pytest.raises(ForbiddenError):
            examen_service.assert_jefe_de_catedra(self.jefe.id, self.examen_sin_jefe.id)
