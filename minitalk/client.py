"""Send standard input to a server process, one signal per bit."""

import os
import sys

from minitalk.numbers import atoi
from minitalk.printf import printf
from minitalk.protocol import encode_char

_SKIPPED = frozenset((0, ord("\n")))


class SendError(OSError):
    """Raised when a signal could not be delivered."""


def parse_pid(text):
    """Return the process id in ``text``; it must be a positive number."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"not a valid process id: {text!r}")
    return pid


def send_char(pid, char, kill=os.kill):
    """Send the eight bits of ``char`` to ``pid`` through ``kill``."""
    for bit in encode_char(char):
        try:
            kill(pid, bit.signal)
        except OSError as error:
            raise SendError(f"cannot signal process {pid}: {error}") from error


def send_stream(pid, stream, kill=os.kill):
    """Send every byte of ``stream`` to ``pid``, skipping NUL and newline.

    Returns the number of characters sent.
    """
    sent = 0
    while chunk := stream.read(1):
        value = chunk[0] if isinstance(chunk, (bytes, bytearray)) else ord(chunk)
        if value in _SKIPPED:
            continue
        send_char(pid, value, kill)
        sent += 1
    return sent


def main(argv=None):
    """Run the client: ``client PID`` sends standard input to PID."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        return 1
    try:
        send_stream(pid, sys.stdin.buffer, os.kill)
    except SendError:
        printf("error\n")
        return 1
    except OSError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())