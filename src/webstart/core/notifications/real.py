"""Loopback-socket notification channel."""

import hmac
import json
import logging
import os
import secrets
import socket
import threading
from collections.abc import Sequence
from pathlib import Path

from webstart.core.notifications.abc import NotificationCallback, NotificationChannel

logger = logging.getLogger(__name__)

LOOPBACK = "127.0.0.1"
CONNECT_TIMEOUT_SECONDS = 2.0
REPLY_TIMEOUT_SECONDS = 10.0
ACCEPT_POLL_SECONDS = 0.5
REPLY_OK = "ok"
REPLY_ERROR = "error"
REPLY_DENIED = "denied"


class SocketNotificationChannel(NotificationChannel):
    """Notifications over a TCP socket bound to the loopback interface.

    The primary binds an ephemeral port and writes the port and a random
    token to the port file, readable only by the current user:

        54321
        3f0c9d...

    A notification is one JSON line, {"token": ..., "args": [...]}. The
    primary answers "ok" once the callback returned, "error" if it raised,
    and "denied" for a missing token or a malformed message. A port file
    whose port nobody answers on is stale and means no primary is running.
    """

    def __init__(self, port_file: Path) -> None:
        self._port_file = port_file
        self._token = ""
        self._server: socket.socket | None = None
        self._thread: threading.Thread | None = None
        self._closing = threading.Event()

    def forward(self, args: Sequence[str]) -> bool:
        endpoint = self._read_endpoint()
        if endpoint is None:
            return False
        port, token = endpoint
        message = json.dumps({"token": token, "args": list(args)})

        try:
            sock = socket.create_connection((LOOPBACK, port), timeout=CONNECT_TIMEOUT_SECONDS)
        except OSError as e:
            logger.debug("No primary instance on port %d: %s", port, e)
            return False

        with sock:
            try:
                sock.sendall(message.encode("utf-8") + b"\n")
                sock.settimeout(REPLY_TIMEOUT_SECONDS)
                reply = sock.makefile("r", encoding="utf-8").readline().strip()
            except TimeoutError:
                logger.warning(
                    "Primary instance did not confirm the notification within %g seconds",
                    REPLY_TIMEOUT_SECONDS,
                )
                return True
            except OSError as e:
                logger.debug("Lost connection to instance on port %d: %s", port, e)
                return False

        if reply == REPLY_OK:
            return True
        if reply == REPLY_ERROR:
            logger.warning("Primary instance could not handle the notification")
            return True
        logger.warning("Instance on port %d rejected the notification (%r)", port, reply)
        return False

    def listen(self, callback: NotificationCallback) -> None:
        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        server.bind((LOOPBACK, 0))
        server.listen()
        server.settimeout(ACCEPT_POLL_SECONDS)
        port = server.getsockname()[1]

        self._token = secrets.token_hex(16)
        self._write_endpoint(port)
        self._server = server
        self._closing.clear()

        self._thread = threading.Thread(
            target=self._serve, args=(server, callback), name="webstart-notifications", daemon=True
        )
        self._thread.start()
        logger.debug("Listening for startup notifications on port %d", port)

    def close(self) -> None:
        if self._server is None:
            return
        self._closing.set()
        self._server.close()
        if self._thread is not None:
            self._thread.join(timeout=CONNECT_TIMEOUT_SECONDS)
        self._server = None
        self._thread = None
        self._port_file.unlink(missing_ok=True)
        logger.debug("Stopped listening for startup notifications")

    def _serve(self, server: socket.socket, callback: NotificationCallback) -> None:
        while not self._closing.is_set():
            try:
                conn, _ = server.accept()
            except TimeoutError:
                continue
            except OSError:
                # Socket closed by close()
                return
            with conn:
                self._handle(conn, callback)

    def _handle(self, conn: socket.socket, callback: NotificationCallback) -> None:
        conn.settimeout(CONNECT_TIMEOUT_SECONDS)
        try:
            line = conn.makefile("r", encoding="utf-8").readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read startup notification: %s", e)
            return

        reply = self._dispatch(line, callback)

        try:
            conn.sendall(reply.encode("utf-8") + b"\n")
        except OSError as e:
            logger.debug("Could not answer startup notification: %s", e)

    def _dispatch(self, line: str, callback: NotificationCallback) -> str:
        try:
            message = json.loads(line)
        except json.JSONDecodeError:
            logger.warning("Rejected malformed startup notification")
            return REPLY_DENIED
        if not isinstance(message, dict) or not hmac.compare_digest(
            str(message.get("token", "")).encode("utf-8"), self._token.encode("utf-8")
        ):
            logger.warning("Rejected startup notification without a valid token")
            return REPLY_DENIED
        args = message.get("args")
        if not isinstance(args, list) or not all(isinstance(arg, str) for arg in args):
            logger.warning("Rejected startup notification with malformed arguments")
            return REPLY_DENIED

        try:
            callback(args)
        except Exception:
            logger.exception("Startup notification %r failed", args)
            return REPLY_ERROR
        return REPLY_OK

    def _write_endpoint(self, port: int) -> None:
        self._port_file.parent.mkdir(parents=True, exist_ok=True)
        self._port_file.unlink(missing_ok=True)
        fd = os.open(self._port_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(f"{port}\n{self._token}\n")

    def _read_endpoint(self) -> tuple[int, str] | None:
        if not self._port_file.exists():
            return None
        try:
            lines = self._port_file.read_text(encoding="utf-8").split()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read port file %s: %s", self._port_file, e)
            return None
        if len(lines) != 2 or not lines[0].isdigit():
            logger.debug("Ignoring malformed port file %s", self._port_file)
            return None
        return int(lines[0]), lines[1]
