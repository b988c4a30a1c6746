# sigtalk

sigtalk sends a text message from one process to another using only POSIX
signals. The message is encoded as UTF-8, and each byte travels as eight
bits, most significant bit first: `SIGUSR1` carries a 1 and `SIGUSR2`
carries a 0. The server puts the bits back together and writes each byte
to its standard output as soon as its eighth bit arrives.

It runs on POSIX systems only, because it needs `SIGUSR1`, `SIGUSR2` and
`signal.pause()`.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for signals until it is killed:

```
sigtalk-server
Server PID: 4242
```

If it cannot install its signal handlers it prints, for example,
`Failed to set SIGUSR1 handler` and exits with status 1.

From another terminal, send a message to that process id:

```
sigtalk-client 4242 "hello there"
```

The server's terminal shows `hello there`.

The client needs exactly two arguments. With any other number it prints
`Usage: <program> <pid> <message>` and exits with status 1. The process id
is read the way C `atoi` reads a number: leading whitespace and one sign
are accepted, and reading stops at the first non-digit. If the result is
not a positive number the client prints `Error: Invalid pid.` and exits
with status 1. After each signal it pauses 0.0001 seconds.

## Library

The pieces behind the two commands can also be used on their own:

- `sigtalk.protocol`: `encode_bits(message)` yields the bits of a string
  (encoded as UTF-8) or of bytes; `signal_for_bit` and `bit_for_signal`
  map between bits and signals; `BitAssembler.feed(bit)` returns a whole
  byte after every eighth bit and `None` otherwise, and its `pending`
  property counts the bits received towards the current byte.
- `sigtalk.client`: `parse_pid(text)`, which raises `ValueError` for a
  non-positive id, and `send_message(pid, message, delay)`.
- `sigtalk.server`: the `Server` class, which writes decoded bytes to a
  binary stream (standard output by default). `handle_signal` takes one
  signal, `install()` registers the handler for both signals and returns
  the previous handlers, and `serve()` installs, announces the pid and
  waits. A handler that cannot be installed raises `SignalSetupError`.
- `sigtalk.output`: `format_printf` and `print_formatted`, a small printf
  that handles `%c %s %d %i %u %x %X %p` and emits any other character
  after `%` as itself; also `put_char`, `put_str`, `put_endl` and
  `put_number`.
- `sigtalk.lines`: `LineReader` and `read_lines`, which read lines as
  bytes from a file descriptor through a fixed-size buffer (two bytes by
  default), keeping each line's newline.
- `sigtalk.chars`: ASCII character classes (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_lower`, `to_upper`, and 32-bit
  `atoi` and `itoa`.
- `sigtalk.text`: string and byte helpers such as `split`, `trim`,
  `substring`, `find_bounded`, `compare_n`, `find_char`, `rfind_char`,
  `map_indexed`, `iter_indexed`, `find_byte` and `compare_bytes`.

## Limitations

- The server sends nothing back. The client cannot tell whether a signal
  arrived, and signals sent too quickly may be merged or lost by the
  operating system.
- The server keeps a single bit buffer, so messages from two clients at
  once are interleaved bit by bit.

## Running the tests

```
pip install ".[test]"
pytest
```