import logging

import pytest
from fastapi.testclient import TestClient

from app.config.database import get_db
from app.main import create_app


class TestFormatoDeErrores:
    @pytest.fixture(autouse=True)
    def setup(self, crear_usuario):
        self.estudiante = crear_usuario("EST001")

    def test_formato_comun(self, client, auth_headers):
        response = client.get("/api/v1/materias/999", headers=auth_headers(self.estudiante))

        body = response.json()
        assert body["status_code"] == 404
        assert body["error"] == "Not Found"
        assert body["path"] == "/api/v1/materias/999"
        assert body["timestamp"]
        assert body["details"]["method"] == "GET"
        assert "authorization" in body["details"]["header_keys"]

    def test_request_id_se_propaga(self, client, auth_headers):
        headers = {**auth_headers(self.estudiante), "X-Request-ID": "req-123"}

        response = client.get("/api/v1/materias/999", headers=headers)

        assert response.json()["request_id"] == "req-123"
        assert response.headers["X-Request-ID"] == "req-123"

    def test_correlation_id_como_alternativa(self, client):
        response = client.get("/auth/profile", headers={"X-Correlation-ID": "corr-9"})
        assert response.json()["request_id"] == "corr-9"

    def test_request_id_generado(self, client):
        response = client.get("/auth/profile")
        assert len(response.json()["request_id"]) == 36

    def test_parametro_de_ruta_invalido(self, client, auth_headers):
        response = client.get(
            "/api/v1/materias/abc", headers=auth_headers(self.estudiante)
        )

        assert response.status_code == 400
        body = response.json()
        assert isinstance(body["message"], list)
        assert body["message"][0].startswith("path.materia_id")

    def test_claves_del_body_en_detalles(self, client, auth_headers):
        response = client.post(
            "/api/v1/inscripciones/materia/1",
            json={"comision": 1},
            headers=auth_headers(self.estudiante),
        )

        assert response.status_code == 400
        assert response.json()["details"]["body_keys"] == ["comision"]

    def test_errores_de_cliente_se_registran_como_error(self, client, caplog):
        with caplog.at_level(logging.ERROR, logger="app.core.error_handlers"):
            client.get("/auth/profile", headers={"X-Request-ID": "req-log"})

        registros = [r for r in caplog.records if "req-log" in r.getMessage()]
        assert len(registros) == 1
        assert registros[0].levelno == logging.ERROR
        assert "-> 401" in registros[0].getMessage()

    def test_ruta_inexistente(self, client):
        response = client.get("/api/v1/no-existe")

        assert response.status_code == 404
        assert response.json()["error"] == "Not Found"


class TestErrorNoControlado:
    @pytest.fixture
    def client_con_falla(self, db):
        app = create_app()

        @app.get("/falla")
        def falla():
            raise RuntimeError("se rompió algo")

        app.dependency_overrides[get_db] = lambda: db
        return TestClient(app, raise_server_exceptions=False)

    def test_respuesta_500(self, client_con_falla):
        response = client_con_falla.get("/falla")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "se rompió algo"
        assert body["error"] == "RuntimeError"

    def test_respuesta_500_en_produccion(self, client_con_falla, monkeypatch):
        from app.config.settings import settings

        monkeypatch.setattr(settings, "environment", "production")

        response = client_con_falla.get("/falla")

        body = response.json()
        assert body["message"] == "Internal server error"
        assert body["error"] == "Internal Server Error"
        assert "details" not in body
