# tp0net

A small TCP client and server that talk over a simple binary protocol.
The client logs lines typed at the console, then sends one text message and a
packet of values. The server logs each message and each packet it receives.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the server

```
tp0net-server [--port PORT] [--log FILE]
```

The server listens on TCP port 4444 (or `--port`) on all local IPv4
addresses. It logs at DEBUG level and above to the console and to `log.log`
(or `--log`). It accepts a single client and handles its operations one after
another:

- a message is logged as `Received message ...`;
- a packet is logged as `Received the following values:` followed by one line
  per value;
- an unknown operation code is logged as a warning and skipped.

When the client disconnects, the server logs an error, closes its sockets and
exits with status 1. It also exits with status 1 if it cannot listen on the
port or accept the client.

## Running the client

The client reads its settings from `cliente.config` in the current directory
(or `--config`). The file holds `KEY=VALUE` lines; blank lines and lines
starting with `#` are skipped:

```
IP=127.0.0.1
PUERTO=4444
CLAVE=hello
```

Start the server first, then:

```
tp0net-client [--config FILE] [--log FILE]
```

The client:

1. Logs to the console and to `tp0.log` (or `--log`), at level INFO and above.
2. Loads the configuration and logs the value of `CLAVE`.
3. Reads lines from the console (prompt `> `) and logs each one, until an
   empty line or end of input.
4. Connects to `IP`:`PUERTO` and sends `CLAVE` as a message.
5. Reads more lines from the console, until an empty line or end of input,
   and sends them all together as one packet.

If the configuration file cannot be read or parsed, lacks any of `IP`,
`PUERTO` or `CLAVE`, or the connection fails, the client prints an error and
exits with status 1.

## Protocol

Every operation is framed as follows, with integers 32-bit signed
little-endian:

| field        | size         |
|--------------|--------------|
| op code      | 4 bytes      |
| payload size | 4 bytes      |
| payload      | payload size |

Op codes come from `OpCode`: `MESSAGE` (0) carries one NUL-terminated UTF-8
string; `PACKET` (1) carries a sequence of values, each prefixed with its own
4-byte length.

## Using the library

```python
from tp0net.protocol import Packet, encode_message, decode_values, decode_text

packet = Packet()
packet.add("first")        # text is encoded as UTF-8 and NUL-terminated
packet.add(b"raw bytes")   # bytes are sent as they are
frame = packet.serialize()

message_frame = encode_message("hello")
```

On the receiving side, `decode_values` splits a packet payload back into its
values and `decode_text` turns a value into a string, ignoring anything after
the first NUL. A truncated payload or a negative value size raises
`ProtocolError`.

`tp0net.config.load_config` reads a `KEY=VALUE` file into a dictionary and
raises `ConfigError` on failure.

`tp0net.client` offers `setup_logger`, `close_logger`, `create_connection`,
`send_message`, `send_packet`, `read_lines`, `log_console` and `build_packet`.
`tp0net.server` offers `start_server`, `wait_client`, `receive_operation`,
`receive_buffer`, `receive_message`, `receive_packet` and `serve_client`.
`read_lines`, `log_console` and `build_packet` take an optional function to
call for each line instead of reading the console.

## What it does not do

The server serves exactly one client and then exits; it does not handle
several clients at once or keep running between connections. Traffic is not
encrypted or authenticated, and nothing is stored beyond the log files.