"""
Zomato Backend — Server Entry Point Tests
===========================================

What we test:
    ✅ bind_listener returns a listening socket
    ✅ A second bind on a listening port is rejected
    ✅ run() exits with status 1 when the port is taken
    ✅ run() hands the bound socket to uvicorn
"""

import socket
from unittest.mock import patch

import pytest

from app.config import settings
from app.server import bind_listener, run


@pytest.fixture
def listener():
    sock = bind_listener("127.0.0.1", 0)
    yield sock
    sock.close()


class TestBindListener:

    def test_binds_ephemeral_port(self, listener):
        host, port = listener.getsockname()
        assert host == "127.0.0.1"
        assert port > 0

    def test_socket_accepts_connections(self, listener):
        port = listener.getsockname()[1]
        with socket.create_connection(("127.0.0.1", port), timeout=2):
            pass

    def test_second_bind_rejected(self, listener):
        """Standard address-in-use behavior, despite SO_REUSEADDR."""
        port = listener.getsockname()[1]
        with pytest.raises(OSError):
            bind_listener("127.0.0.1", port)


class TestRun:

    def test_run_exits_when_port_in_use(self, listener):
        port = listener.getsockname()[1]

        with patch.object(settings, "backend_host", "127.0.0.1"), \
             patch.object(settings, "backend_port", port), \
             patch("app.server.setup_logging"), \
             patch("app.server.uvicorn.Server") as server_cls:
            with pytest.raises(SystemExit) as exc_info:
                run()

        assert exc_info.value.code == 1
        server_cls.assert_not_called()

    def test_run_serves_on_bound_socket(self):
        with patch.object(settings, "backend_host", "127.0.0.1"), \
             patch.object(settings, "backend_port", 0), \
             patch("app.server.setup_logging"), \
             patch("app.server.uvicorn.Server") as server_cls:
            run()

        server = server_cls.return_value
        server.run.assert_called_once()
        sockets = server.run.call_args.kwargs["sockets"]
        assert len(sockets) == 1
        # run() closes the socket once the server returns
        assert sockets[0].fileno() == -1
