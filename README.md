# minitalk

minitalk is a small messaging pair for POSIX systems. A client sends a message to a server using only two signals:

- `SIGUSR1` carries a 1 bit.
- `SIGUSR2` carries a 0 bit.

Each byte goes out as eight bits, most significant bit first. A zero byte marks the end of the message.

The server answers every bit with `SIGUSR1`. The client waits for that answer before it sends the next bit. When the server decodes the terminating zero byte, it writes a newline and answers with `SIGUSR2` instead. The client then prints `Received!` and exits.

## Installing

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for signals:

```
minitalk-server
```

From another terminal, send a message to that process id:

```
minitalk-client <server-pid> "hello, world"
```

The server writes `hello, world` to standard output, followed by a newline. Some details of the client:

- It sends the message as the bytes of the command-line argument.
- A message stops at its first zero byte.
- It needs exactly two arguments. With any other number it writes `Wrong argument` to standard error and exits with a non-zero status.
- It reads the process id the way `atoi` does: leading whitespace, an optional sign, then digits. Text without digits gives 0.

The server waits with `signal.sigwaitinfo`, so it needs a platform that provides that call, such as Linux. If a signal cannot be sent, either side writes the error to standard error and stops. The server also stops on Ctrl-C.

## Library use

### `minitalk.protocol`

The wire format, with no signals involved.

- `encode_byte(value)` returns the eight bits of a byte.
- `encode_message(message)` yields the bits of a `str` or `bytes` message, then the bits of the terminating zero byte. Text is encoded as UTF-8.
- `BitDecoder` rebuilds bytes from bits:
  - `feed(bit)` returns the completed byte after every eighth bit, and `None` otherwise.
  - `reset()` discards a partial byte.
  - `pending` is the number of bits received so far towards the current byte.
- `ServerState` (`READY`, `BUSY`) records whether the client may send its next bit.

### `minitalk.signals`

- `send_signal(pid, signum)` sends a signal to a process.
- `install_handler(signum, handler)` installs a handler and returns the previous one.

Both raise `SignalError` when the operating system refuses the call.

### `minitalk.server.Server(output=None, send=None)`

- `handle_bit(bit, sender_pid)` decodes one bit, writes each completed byte to `output`, and acknowledges the bit through `send(pid, signum)`. It returns the byte that the bit completed, or `None`.
- `serve_forever()` blocks `SIGUSR1` and `SIGUSR2` and handles them as they arrive.

By default, output goes to the binary standard output and `send` is `send_signal`.

### `minitalk.client.Client(pid, send=None, wait=None)`

- `send_byte(value)` sends one byte.
- `send_message(message)` sends a message and its terminating zero byte.
- `acknowledge()` marks the last bit as taken.

After each bit the client calls `wait()` until `acknowledge()` has been called. By default `wait` sleeps for 42 microseconds.

Because `send` and `wait` can be replaced, both classes can be driven without real signals.

### Helpers

- `minitalk.printf`:
  - `format_printf(fmt, *args)` handles `%c %s %p %d %i %u %x %X %%`.
  - `printf(fmt, *args, file=None)` writes the result and returns its length.
  - `itoa` and `to_hex` are also available.
- `minitalk.strings` offers `atoi`, `split`, `strtrim`, `substr` and `strnstr`.
- `minitalk.lines.LineReader(stream, buffer_size=42)` reads lines from a text or binary stream in chunks of `buffer_size`. Use `readline()`, or iterate over the reader.

## What it does not do

- The client has no timeout. If the server never acknowledges a bit, the client waits forever.
- The server keeps no record of past messages.
- The server decodes from one client at a time. Bits from different clients sent at the same moment are mixed together.

## Running the tests

```
pip install .[test]
pytest
```