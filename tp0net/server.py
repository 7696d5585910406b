"""Server: accepts one client and logs the messages and packets it sends."""

from __future__ import annotations

import argparse
import logging
import socket
import sys

from tp0net.client import close_logger, setup_logger
from tp0net.protocol import WORD, OpCode, ProtocolError, decode_text, decode_values

PORT = 4444


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    """Read up to ``size`` bytes, stopping early only at end of stream."""
    chunks = bytearray()
    while len(chunks) < size:
        data = sock.recv(size - len(chunks))
        if not data:
            break
        chunks += data
    return bytes(chunks)


def start_server(host: str = "", port: int = PORT) -> socket.socket:
    """Create an IPv4 TCP socket listening on ``host``:``port``."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError:
        sock.close()
        raise
    return sock


def wait_client(server_sock: socket.socket) -> socket.socket:
    """Accept one client and return its socket."""
    conn, _ = server_sock.accept()
    return conn


def receive_operation(sock: socket.socket) -> int | None:
    """Read an operation code; return None when the client has gone away."""
    data = _recv_exact(sock, WORD.size)
    if len(data) < WORD.size:
        return None
    (code,) = WORD.unpack(data)
    return code


def receive_buffer(sock: socket.socket) -> bytes:
    """Read a size-prefixed payload."""
    header = _recv_exact(sock, WORD.size)
    if len(header) < WORD.size:
        raise ConnectionError("connection closed while reading payload size")
    (size,) = WORD.unpack(header)
    if size < 0:
        raise ProtocolError(f"negative payload size {size}")
    payload = _recv_exact(sock, size)
    if len(payload) < size:
        raise ConnectionError("connection closed while reading payload")
    return payload


def receive_message(sock: socket.socket) -> str:
    """Read the payload of a message frame as text."""
    return decode_text(receive_buffer(sock))


def receive_packet(sock: socket.socket) -> list[str]:
    """Read the payload of a packet frame as a list of strings."""
    return [decode_text(value) for value in decode_values(receive_buffer(sock))]


def serve_client(sock: socket.socket, logger: logging.Logger) -> None:
    """Handle frames from ``sock`` until the client disconnects, then close it."""
    with sock:
        while True:
            try:
                code = receive_operation(sock)
                if code is None:
                    break
                if code == OpCode.MESSAGE:
                    logger.info("Received message %s", receive_message(sock))
                elif code == OpCode.PACKET:
                    values = receive_packet(sock)
                    logger.info("Received the following values:")
                    for value in values:
                        logger.info("%s", value)
                else:
                    logger.warning("Unknown operation %d", code)
            except ConnectionError:
                break
    logger.error("The client disconnected. Shutting down server")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Receive messages and packets from one client.")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    parser.add_argument("--log", default="log.log", help="log file")
    args = parser.parse_args(argv)

    logger = setup_logger(args.log, "Servidor")
    logger.setLevel(logging.DEBUG)
    try:
        try:
            server = start_server("", args.port)
        except OSError as exc:
            logger.error("Could not listen on port %d: %s", args.port, exc)
            return 1
        with server:
            logger.debug("Ready to listen to my client")
            logger.info("Server ready to receive the client")
            try:
                conn = wait_client(server)
            except OSError as exc:
                logger.error("Error accepting the client: %s", exc)
                return 1
            logger.info("A client connected!")
            serve_client(conn, logger)
        return 1
    finally:
        close_logger(logger)


if __name__ == "__main__":
    sys.exit(main())