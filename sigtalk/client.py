"""Send a text message to a server process as a stream of signals."""

import os
import sys
import time

from sigtalk.chars import atoi
from sigtalk.output import print_formatted
from sigtalk.protocol import encode_bits, signal_for_bit

DEFAULT_DELAY = 0.0001


def parse_pid(text):
    """Parse a process id the way atoi does; it must be positive."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"invalid pid: {text!r}")
    return pid


def send_message(pid, message, delay=DEFAULT_DELAY):
    """Signal every bit of message to pid, pausing delay seconds after each."""
    for bit in encode_bits(message):
        os.kill(pid, signal_for_bit(bit))
        time.sleep(delay)


def main(argv=None):
    """Run the client: arguments are a pid and a message."""
    prog = sys.argv[0] if sys.argv else "client"
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print_formatted("Usage: %s <pid> <message>\n", prog)
        return 1
    pid_text, message = args
    try:
        pid = parse_pid(pid_text)
    except ValueError:
        print_formatted("Error: Invalid pid.\n")
        return 1
    send_message(pid, message)
    return 0


if __name__ == "__main__":
    sys.exit(main())