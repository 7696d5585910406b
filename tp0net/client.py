"""Client: logs console input, then sends a message and a packet to the server."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from collections.abc import Callable, Iterator

from tp0net.config import ConfigError, load_config
from tp0net.protocol import Packet, encode_message

_LOG_FORMAT = "[%(levelname)s] %(asctime)s %(name)s/(%(process)d:%(thread)d): %(message)s"


def setup_logger(path: str = "tp0.log", name: str = "LOGGER") -> logging.Logger:
    """Return a logger writing INFO and above to ``path`` and to stdout."""
    logger = logging.getLogger(name)
    close_logger(logger)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    formatter = logging.Formatter(_LOG_FORMAT)
    for handler in (logging.FileHandler(path, encoding="utf-8"),
                    logging.StreamHandler(sys.stdout)):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def close_logger(logger: logging.Logger) -> None:
    """Detach and close every handler of ``logger``."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def create_connection(ip: str, port: str | int) -> socket.socket:
    """Open an IPv4 TCP connection to ``ip``:``port``."""
    infos = socket.getaddrinfo(ip, port, socket.AF_INET, socket.SOCK_STREAM)
    family, socktype, proto, _, address = infos[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.connect(address)
    except OSError:
        sock.close()
        raise
    return sock


def send_message(sock: socket.socket, message: str) -> None:
    """Send a single message frame."""
    sock.sendall(encode_message(message))


def send_packet(sock: socket.socket, packet: Packet) -> None:
    """Send a built packet."""
    sock.sendall(packet.serialize())


def read_lines(input_func: Callable[[], str] | None = None) -> Iterator[str]:
    """Yield lines read from the console until an empty line or end of input."""
    if input_func is None:
        def input_func() -> str:
            return input("> ")
    while True:
        try:
            line = input_func()
        except EOFError:
            return
        if not line:
            return
        yield line


def log_console(logger: logging.Logger, input_func: Callable[[], str] | None = None) -> None:
    """Log every line read from the console."""
    print("Enter lines to log. Press Enter on an empty line to finish:")
    for line in read_lines(input_func):
        logger.info("Read from console: %s", line)


def build_packet(input_func: Callable[[], str] | None = None) -> Packet:
    """Build a packet holding every line read from the console."""
    print("Enter the values to send to the server. Press Enter on an empty line to finish:")
    packet = Packet()
    for line in read_lines(input_func):
        packet.add(line)
    return packet


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send console input to the server.")
    parser.add_argument("--config", default="cliente.config", help="configuration file")
    parser.add_argument("--log", default="tp0.log", help="log file")
    args = parser.parse_args(argv)

    print("Starting logger...")
    logger = setup_logger(args.log, "LOGGER")
    try:
        logger.info("Hello! I am a log")

        print("Loading configuration...")
        try:
            config = load_config(args.config)
        except ConfigError as exc:
            print(f"Could not load configuration file {args.config}: {exc}", file=sys.stderr)
            return 1
        missing = [key for key in ("IP", "PUERTO", "CLAVE") if key not in config]
        if missing:
            print(f"Missing configuration keys: {', '.join(missing)}", file=sys.stderr)
            return 1
        ip, port, value = config["IP"], config["PUERTO"], config["CLAVE"]
        logger.info("The config value is: %s", value)

        log_console(logger)

        print(f"Connecting to server {ip}:{port}...")
        try:
            conn = create_connection(ip, port)
        except OSError as exc:
            print(f"Could not connect to the server: {exc}", file=sys.stderr)
            return 1
        with conn:
            print("Connection established.")
            send_message(conn, value)
            send_packet(conn, build_packet())
            print("Packet sent.")
        print("Done.")
        return 0
    finally:
        close_logger(logger)


if __name__ == "__main__":
    sys.exit(main())