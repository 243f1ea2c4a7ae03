import pytest
from fastapi.testclient import TestClient

from registro.api.deps import limiter
from registro.core.config import Settings
from registro.crud.crud_registro import CRUDRegistro
from registro.main import create_app

ADMIN_USER = "profesora"
ADMIN_PASS = "clave:segura-2024"


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def static_dir(tmp_path):
    root = tmp_path / "static"
    root.mkdir()
    (root / "index.html").write_text("<h1>Formulario de asistencia</h1>", encoding="utf-8")
    (root / "admin.html").write_text("<h1>Panel de administración</h1>", encoding="utf-8")
    (root / "app.js").write_text("console.log('ok');", encoding="utf-8")
    (root / "logo.PNG").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "datos.bin").write_bytes(b"\x00\x01\x02")
    (root / "css").mkdir()
    (root / "css" / "styles.css").write_text("body { margin: 0; }", encoding="utf-8")
    (tmp_path / "secreto.txt").write_text("fuera de la raiz", encoding="utf-8")
    return root


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "registro_estudiantes.json"


@pytest.fixture
def store(data_file):
    return CRUDRegistro(data_file)


@pytest.fixture
def config(data_file, static_dir):
    return Settings(
        ADMIN_USER=ADMIN_USER,
        ADMIN_PASS=ADMIN_PASS,
        DATA_FILE=data_file,
        STATIC_DIR=static_dir,
        RATE_LIMIT_ENABLED=False,
    )


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_auth():
    return (ADMIN_USER, ADMIN_PASS)
