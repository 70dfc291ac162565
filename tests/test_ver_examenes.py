import pytest

from app.core.exceptions import InvalidArgumentError


class TestVerExamenes:
    @pytest.fixture(autouse=True)
    def setup(self, crear_usuario, crear_materia, crear_examen):
        self.estudiante = crear_usuario("EST001")
        self.otro = crear_usuario("EST002")
        materias = [crear_materia(nombre) for nombre in ("Física I", "Química", "Inglés I")]
        self.examenes = [
            crear_examen(self.estudiante, materias[0], estado="aprobado", nota=8),
            crear_examen(self.estudiante, materias[1]),
            crear_examen(self.otro, materias[1]),
            crear_examen(self.estudiante, materias[2], estado="ausente"),
        ]

    def test_orden_descendente_por_id(self, examen_service):
        resultado = examen_service.ver_examenes(self.estudiante.id)

        ids = [e.id for e in resultado]
        assert ids == sorted(ids, reverse=True)
        assert ids == [self.examenes[3].id, self.examenes[1].id, self.examenes[0].id]

    def test_campos_minimos(self, examen_service):
        resultado = examen_service.ver_examenes(self.estudiante.id)

        assert set(resultado[0].model_dump()) == {
            "id",
            "estado",
            "nota",
            "created_at",
            "updated_at",
        }
        assert resultado[-1].estado == "aprobado"
        assert resultado[-1].nota == 8

    def test_estudiante_sin_examenes(self, examen_service, crear_usuario):
        nuevo = crear_usuario("EST003")
        assert examen_service.ver_examenes(nuevo.id) == []

    @pytest.mark.parametrize("estudiante_id", [0, -1, "1", None])
    def test_id_invalido(self, examen_service, estudiante_id):
        with pytest.raises(InvalidArgumentError, match="ID inválido"):
            examen_service.ver_examenes(estudiante_id)
