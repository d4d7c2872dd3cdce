# sigtalk

sigtalk lets one process send text to another using only the `SIGUSR1` and
`SIGUSR2` signals. Each byte goes out as eight signals, most significant bit
first. `SIGUSR1` carries a 1 and `SIGUSR2` carries a 0. After every bit, the
server sends `SIGUSR1` back to the sender as an acknowledgement. The client
waits for that acknowledgement before it sends the next bit. Each message is
sent as its UTF-8 bytes followed by a NUL byte.

sigtalk runs on POSIX systems only. The server waits for signals with
`signal.sigwaitinfo`, so it needs a platform where Python provides that
function, such as Linux.

## Install

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id:

```
sigtalk-server
Server PID is: 12345
```

Send a message from another terminal:

```
sigtalk-client 12345 "Hello, world"
```

The server writes each byte to standard output as soon as all eight of its
bits have arrived, and it writes the terminating NUL byte as well. Because
bytes pass through unchanged, multi-byte UTF-8 text arrives intact. Stop the
server with Ctrl-C.

If the client gets anything other than exactly two arguments, it prints
`### Wrong Parameter Input ###` and exits. The process id is read the way C's
`atoi` reads a number: leading whitespace and an optional sign are accepted,
and reading stops at the first non-digit. An empty message sends nothing.

### End-of-message notice

Start the server with `--bonus` to have it answer each NUL byte with
`SIGUSR2`:

```
sigtalk-server --bonus
```

Run the client with `--report-end` to have it handle that signal. When the
signal arrives, the client prints `>> SIGNAL FROM SERVER RECEIVED <<`:

```
sigtalk-client --report-end 12345 "Hello, world"
```

## Library use

### Protocol pieces

`sigtalk.protocol` works without any signals:

```python
from sigtalk.protocol import ByteAssembler, frame_message, iter_bits

assembler = ByteAssembler()
for byte in frame_message("hi"):          # b"hi\x00"
    for bit in iter_bits(byte):           # most significant bit first
        value = assembler.push(bit)       # None until eight bits are in
        if value is not None:
            print(value)
```

The module provides the following:

- `bit_to_signal` and `signal_to_bit` map between bits and the signals that
  carry them.
- `ByteAssembler.pending` gives the number of bits held towards the current
  byte.
- `ByteAssembler.reset()` discards a partly received byte.

### Server

`sigtalk.server.Server(output=None, notify=None, acknowledge_end=False)`
takes the following arguments:

- `output` is the binary stream that receives the bytes. It defaults to
  standard output.
- `notify(pid, signum)` sends the acknowledgements. It defaults to `os.kill`,
  and a sender that has already exited is ignored.

`Server.handle(signum, sender_pid)` processes one signal and returns the
completed byte, or `None`. This makes the server testable without real
signals:

```python
import io
from sigtalk.protocol import bit_to_signal, iter_bits
from sigtalk.server import Server

sent = []
out = io.BytesIO()
server = Server(output=out, notify=lambda pid, sig: sent.append(sig))
for bit in iter_bits(ord("A")):
    server.handle(bit_to_signal(bit), 4242)
assert out.getvalue() == b"A"
```

`Server.serve_forever()` blocks `SIGUSR1` and `SIGUSR2` and handles them as
they arrive. When it returns, it restores the previous signal mask.

### Client

`sigtalk.client.Client(pid, notify=None, poll_interval=50e-6,
report_end=False)` sends to process `pid`:

- `send(message)` sends a `str` or `bytes` message and its NUL terminator, and
  returns the number of bytes sent.
- `send_byte(value)` sends a single byte.
- `on_signal(signum)` must be called from the caller's signal handler. A
  `SIGUSR1` marks the current bit as acknowledged. A `SIGUSR2` prints the end
  notice when `report_end` is set.

### Helper modules

- `sigtalk.printf` provides `sprintf` and `printf`, a minimal formatter for
  `%c %s %p %d %i %u %x %X %%`. It also provides the single-value helpers
  `format_signed`, `format_unsigned`, `format_hex`, `format_pointer` and
  `format_string`.
- `sigtalk.chars` provides `atoi` and `itoa`, the ASCII tests `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii` and `is_print`, and the case mappers
  `to_lower` and `to_upper`.
- `sigtalk.textutils` provides `split`, `strtrim`, `substr`, `strnstr`,
  `strncmp` and `strmapi`.

## Limitations

- The server keeps one partial byte for all senders. If two clients send at
  the same time, their bits are mixed.
- The client has no timeout. If the server never acknowledges a bit, the
  client waits forever.
- The server does not group output into messages or record which process
  sent a byte. It only writes the raw bytes to its output stream.

## Tests

```
pip install .[test]
pytest
```