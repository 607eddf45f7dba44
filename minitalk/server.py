"""Receive characters sent bit by bit as user signals and print them."""

import os
import signal
import sys

from minitalk.printf import printf
from minitalk.protocol import Bit, CharDecoder, to_binary


class Server:
    """Decodes incoming signals and reports the register after each one."""

    def __init__(self, out=None):
        self._out = out
        self.decoder = CharDecoder()

    @property
    def out(self):
        return sys.stdout if self._out is None else self._out

    def handle_signal(self, signum, frame):
        """Signal handler: shift the bit that ``signum`` carries into the register."""
        self.decoder.feed(Bit.from_signal(signum))

    def report(self):
        """Write the register as a character and as eight binary digits."""
        out = self.out
        value = self.decoder.value()
        printf("%c\n", value, file=out)
        out.write(to_binary(value))
        printf("\n", file=out)
        out.flush()

    def install(self):
        """Install :meth:`handle_signal` for both user signals."""
        for signum in (signal.SIGUSR1, signal.SIGUSR2):
            signal.signal(signum, self.handle_signal)
            signal.siginterrupt(signum, False)

    def serve_forever(self):
        """Print the process id, then report after every signal received."""
        self.install()
        printf("%i\n", os.getpid(), file=self.out)
        self.out.flush()
        while True:
            signal.pause()
            self.report()


def main(argv=None):
    """Run the server until interrupted."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())