"""Receive messages sent as signals and write each byte as it completes."""

import os
import signal
import sys

from sigtalk.output import print_formatted
from sigtalk.protocol import BitAssembler, bit_for_signal


class SignalSetupError(OSError):
    """A signal handler could not be installed."""

    def __init__(self, signal_name):
        super().__init__(f"Failed to set {signal_name} handler")
        self.signal_name = signal_name


class Server:
    """Decode SIGUSR1/SIGUSR2 bits into bytes written to a binary stream."""

    def __init__(self, stream=None):
        self.stream = sys.stdout.buffer if stream is None else stream
        self._assembler = BitAssembler()

    def handle_signal(self, signum, frame=None):
        """Take one bit from a signal; write the byte once it is whole."""
        byte = self._assembler.feed(bit_for_signal(signum))
        if byte is not None:
            self.stream.write(bytes([byte]))
            self.stream.flush()

    def install(self):
        """Install the handler for both signals; return the previous handlers."""
        previous = {}
        for signum in (signal.SIGUSR1, signal.SIGUSR2):
            try:
                previous[signum] = signal.signal(signum, self.handle_signal)
            except (OSError, ValueError) as exc:
                raise SignalSetupError(signal.Signals(signum).name) from exc
        return previous

    def serve(self):
        """Install the handlers, announce the pid and wait for signals forever."""
        self.install()
        self.stream.write(f"Server PID: {os.getpid()}\n".encode())
        self.stream.flush()
        while True:
            signal.pause()


def main(argv=None):
    """Run the server until it is killed."""
    server = Server()
    try:
        server.serve()
    except SignalSetupError as exc:
        print_formatted("%s\n", str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())