# minitalk

A small tool that sends text from one process to another using only two
POSIX signals. Every character goes over as eight signals, lowest bit
first: `SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit.

It works only on POSIX systems, because it needs `SIGUSR1` and `SIGUSR2`.

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

After each signal it receives, the server shifts the bit in from the top
of an 8-bit register. It then prints the register as a character on one
line and as eight binary digits on the next. A character is complete only
after all eight of its signals have arrived.

In a second terminal, pipe text into the client and give it the server's
process id:

```
echo "hello" | minitalk-client 12345
```

The client reads standard input one byte at a time. It skips NUL bytes
and newlines and sends every other byte to the server.

The client exits with status 1 in these cases:

- it is not given exactly one argument;
- the process id is not a positive number;
- standard input cannot be read;
- a signal cannot be delivered. In that case it also prints `error`.

## What it does not do

- The server sends no acknowledgement. The client sends its signals as
  fast as it can, without waiting between them, and does not check that
  they were received. Signals that arrive close together may merge, and
  then bits are lost.
- The server does not gather characters into a message. It only reports
  its register after every signal.

## Library

The package can also be used as a library:

- `minitalk.protocol` contains `encode_char`, which turns a character,
  byte or small integer into its eight `Bit` values, least significant
  first. `Bit.signal` and `Bit.from_signal` map between bits and signals.
  `CharDecoder` rebuilds a byte from incoming bits with `feed` and
  `value`, and `to_binary` renders a byte as eight binary digits.
- `minitalk.client` contains `parse_pid`, `send_char` and `send_stream`.
  `send_char` and `send_stream` take a `kill` callable, so you can swap out
  the way signals are delivered. A failed delivery raises `SendError`.
  `send_stream` returns the number of characters it sent.
- `minitalk.server.Server` decodes signals through `handle_signal`. It
  writes its reports to the text stream given as `out`, or to standard
  output. `install` sets the signal handlers, and `serve_forever` runs
  the loop.
- `minitalk.printf` has `sprintf` and `printf`. They handle the
  `%c %s %d %i %u %x %X %p %%` conversions with the `#0- +` flags, a width
  and a precision. `ConversionSpec` parses and renders a single
  conversion. The functions raise `FormatError` in three cases: a
  malformed conversion, a missing argument, or flags that contradict each
  other. Contradictory flags are not an error for `%c`. `printf` writes
  the text that comes before the failing conversion before it raises. It
  also writes a contradictory conversion itself before it raises.
- `minitalk.numbers` provides `atoi`, `itoa` and `itoa_base`. `atoi` works
  like the C function. It returns 0 when the text has no digits or when
  the value is out of 32-bit range.
- `minitalk.strtools` provides helpers that follow the classic C string
  routines: `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`,
  `strrchr`, `strlcpy`, `strlcat`, `strmapi` and `striteri`. The search
  functions return an index, or `None` when nothing is found.
- `minitalk.lines` provides `LineReader` and `iter_lines`. They read a
  binary or text stream line by line, a fixed number of units at a time.
  The default is 42.

## Running the tests

```
pip install .[test]
pytest
```