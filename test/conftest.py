import pytest

from miniserve.config import ServerConfig
from miniserve.file_server import create_app


@pytest.fixture
def data_dir(tmp_path):
    root = tmp_path / "data"
    root.mkdir()
    (root / "a.txt").write_text("alpha\n")
    (root / "b.txt").write_text("bravo\n")
    sub = root / "sub"
    sub.mkdir()
    (sub / "c.md").write_text("# charlie\n")
    (tmp_path / "secret.txt").write_text("top secret\n")
    return root


@pytest.fixture
def dir_client(data_dir):
    app = create_app(ServerConfig.create(data_dir))
    return app.test_client()


@pytest.fixture
def report(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n%%EOF\n")
    return path


@pytest.fixture
def file_client(report):
    app = create_app(ServerConfig.create(report))
    return app.test_client()
