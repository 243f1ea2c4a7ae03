import pathlib

import pytest

from registro.core.errors import ForbiddenError, NotFoundError, StaticReadError
from registro.services.static_service import ADMIN_DOCUMENT, StaticAssetResolver, media_type_for


@pytest.fixture
def resolver(static_dir):
    return StaticAssetResolver(static_dir)


@pytest.mark.parametrize("path", ["", "/"])
def test_root_maps_to_index(resolver, path):
    asset = resolver.read(path)
    assert asset.content == "<h1>Formulario de asistencia</h1>".encode("utf-8")
    assert asset.media_type == "text/html; charset=utf-8"


def test_admin_document(resolver):
    assert "administración" in resolver.read(ADMIN_DOCUMENT).content.decode("utf-8")


def test_nested_asset(resolver):
    asset = resolver.read("/css/styles.css")
    assert asset.media_type == "text/css; charset=utf-8"


def test_media_types(resolver):
    assert resolver.read("/app.js").media_type == "application/javascript; charset=utf-8"
    assert resolver.read("/logo.PNG").media_type == "image/png"
    assert resolver.read("/datos.bin").media_type == "application/octet-stream"
    assert media_type_for(pathlib.Path("foto.jpeg")) == "image/jpeg"
    assert media_type_for(pathlib.Path("icono.svg")) == "image/svg+xml"


@pytest.mark.parametrize(
    "path",
    [
        "/../secreto.txt",
        "../secreto.txt",
        "/../../etc/passwd",
        "/css/../../secreto.txt",
        "/css/../../../../../../etc/passwd",
        "/..",
    ],
)
def test_traversal_is_forbidden(resolver, path):
    with pytest.raises(ForbiddenError):
        resolver.resolve(path)


@pytest.mark.parametrize("path", ["//etc/passwd", "/etc/passwd", "/index.html\x00.png", "/..%2f..%2fetc/passwd"])
def test_odd_paths_never_escape_the_root(resolver, path):
    with pytest.raises((ForbiddenError, NotFoundError)):
        resolver.read(path)


def test_symlink_out_of_root_is_forbidden(resolver, static_dir):
    (static_dir / "enlace.txt").symlink_to(static_dir.parent / "secreto.txt")
    with pytest.raises(ForbiddenError):
        resolver.read("/enlace.txt")


def test_dot_segments_inside_root_are_allowed(resolver):
    assert resolver.read("/css/../app.js").content == b"console.log('ok');"


@pytest.mark.parametrize("path", ["/no-existe.html", "/css", "/css/"])
def test_missing_or_directory_is_not_found(resolver, path):
    with pytest.raises(NotFoundError):
        resolver.read(path)


def test_read_fault_is_a_server_error(resolver, monkeypatch):
    def unreadable(self):
        raise PermissionError("denied")

    monkeypatch.setattr(pathlib.Path, "read_bytes", unreadable)
    with pytest.raises(StaticReadError):
        resolver.read("/app.js")
