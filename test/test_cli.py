import pytest

import miniserve.__main__ as cli
from miniserve.config import ServerConfig
from miniserve.errors import BindError


class FakeServer:
    def __init__(self):
        self.closed = False

    def serve_forever(self):
        raise KeyboardInterrupt

    def server_close(self):
        self.closed = True


def test_missing_path_exits_nonzero(tmp_path) -> None:
    assert cli.main([str(tmp_path / "nope")]) == 1


def test_invalid_port_exits_nonzero(data_dir) -> None:
    assert cli.main([str(data_dir), "-p", "99999"]) == 1


def test_invalid_interface_exits_nonzero(data_dir) -> None:
    assert cli.main([str(data_dir), "--if", "not-an-ip"]) == 1


def test_bind_failure_exits_nonzero(data_dir, monkeypatch) -> None:
    def fail(*args, **kwargs):
        raise OSError("Address already in use")

    monkeypatch.setattr(cli, "make_server", fail)

    assert cli.main([str(data_dir)]) == 1


def test_bind_wraps_werkzeug_exit(data_dir, monkeypatch) -> None:
    def fail(*args, **kwargs):
        raise SystemExit(1)

    monkeypatch.setattr(cli, "make_server", fail)
    config = ServerConfig.create(data_dir)

    with pytest.raises(BindError, match="0.0.0.0:8080"):
        cli.bind(config, None)


def test_interrupt_exits_zero(data_dir, monkeypatch, capsys) -> None:
    server = FakeServer()
    calls = []

    def fake_make_server(host, port, app, threaded):
        calls.append((host, port, threaded))
        return server

    monkeypatch.setattr(cli, "make_server", fake_make_server)

    assert cli.main([str(data_dir), "-p", "9000", "-v"]) == 0
    assert calls == [("0.0.0.0", 9000, True)]
    assert server.closed

    out = capsys.readouterr().out
    assert "miniserve is serving your files at http://localhost:9000" in out
    assert f"Currently serving path {data_dir.resolve()}" in out
    assert "Quit by pressing CTRL-C" in out
