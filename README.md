# minitalk

Send a text message from one process to another using nothing but two
POSIX signals. Each byte goes over as eight signals, most significant bit
first: `SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. A zero byte
ends the message.

The server acknowledges every bit with `SIGUSR1`, and the client waits for
that acknowledgement before it sends the next bit. When a message is
complete, the server also sends `SIGUSR2` to its sender.

This works on POSIX systems only.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for signals until it is interrupted:

```
minitalk-server
```

From another terminal, send it a message:

```
minitalk-client <PID_SERVER> "hello there"
```

The server writes each message's bytes to standard output as soon as its
terminating zero byte arrives. No newline is added after a message.

The client exits with status 1 and a message on standard error when:

- it is not given exactly two arguments (`Usage: client [PID_SERVER] [MESSAGE]`);
- the process id does not read as a positive number (`Error: Invalid PID_SERVER`);
- the process cannot be signalled (`Error: Could not send signal to PID_SERVER`);
- a signal fails while the message is being sent (`kill error`).

## Library use

### Encoding and decoding

`minitalk.protocol` turns messages into bits and back without sending any
signals:

```python
from minitalk.protocol import Decoder, encode_byte, encode_message

encode_byte(ord("A"))      # (0, 1, 0, 0, 0, 0, 0, 1)

decoder = Decoder()
messages = [m for m in map(decoder.feed, encode_message("hi")) if m is not None]
# messages == [b"hi"]
```

`encode_message` takes text (encoded as UTF-8) or bytes, stops at the first
embedded zero byte, and appends the terminator. `Decoder.feed` returns the
completed message when its terminator arrives and `None` otherwise;
`Decoder.reset` discards anything partly received. The `pending` and
`bits_pending` properties show what has been received so far.

### Signals

`minitalk.signals` maps bits to signals (`bit_to_signal`, `signal_to_bit`)
and sends them:

- `send_bit(pid, bit, wait=True)` signals `pid` and, with `wait`, blocks
  until a user signal arrives in reply, returning it as a `Received`
  (`signum`, `sender`, and its `bit`).
- `send_byte(pid, value)` sends eight bits, waiting for a reply after each.
- `block_signals()` is a context manager that blocks `SIGUSR1` and `SIGUSR2`
  for the calling thread, so they can be taken with `wait_for_signal(timeout)`.

Failures to signal a process raise `SignalError`, a subclass of `OSError`.

### Client and server

`minitalk.client.send_message(pid, message)` sends a whole message to a
running server and returns `True` when the server confirmed the end of the
message. `parse_pid` reads a process id the way the command line does and
raises `UsageError` for one that is not positive.

`minitalk.server.Server` can be driven directly. It takes a binary output
stream and a `reply(pid, bit)` callable, which default to standard output and
signalling the sender:

```python
import io
import signal
from minitalk.protocol import encode_message
from minitalk.server import Server

out = io.BytesIO()
replies = []
server = Server(output=out, reply=lambda pid, bit: replies.append((pid, bit)))
for bit in encode_message("ok"):
    server.handle_signal(signal.SIGUSR2 if bit else signal.SIGUSR1, 4242)
# out.getvalue() == b"ok"
```

`Server.serve_forever` receives signals and handles them until the process
is stopped; `banner(pid)` builds the greeting the server prints.

### Helpers

The package also carries small helpers that work on Python values:

- `minitalk.charclass`: ASCII `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `toupper`, `tolower`.
- `minitalk.numeric`: `atoi` (leading decimal integer, wrapping like a
  32-bit signed integer) and `itoa`.
- `minitalk.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` writing to a
  text stream, standard output by default.
- `minitalk.strings`: `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`,
  `strjoin`, `strtrim`, `split`, `count_words`, `strmapi`, `striteri`,
  `strlcpy`, `strlcat`.
- `minitalk.memory`: `memchr`, `memcmp`, `memset`, `bzero`, `memcpy`,
  `memmove`, `calloc` on byte buffers.

## Limitations

The server keeps a single decoder, so messages from clients sending at the
same time are not kept apart. Messages are delivered only as raw bytes on
standard output; nothing is stored.

## Tests

```
pip install .[test]
pytest
```