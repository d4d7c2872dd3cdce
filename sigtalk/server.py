"""Signal receiver: rebuilds bytes from SIGUSR1/SIGUSR2 and writes them out."""

from __future__ import annotations

import argparse
import contextlib
import os
import signal
import sys
from collections.abc import Callable
from typing import BinaryIO

from sigtalk.printf import printf
from sigtalk.protocol import (
    SIGNAL_ONE,
    SIGNAL_ZERO,
    TERMINATOR,
    ByteAssembler,
    signal_to_bit,
)

Notifier = Callable[[int, int], None]


def _send_signal(pid: int, signum: int) -> None:
    # A sender that has gone away must not bring the server down.
    with contextlib.suppress(ProcessLookupError):
        os.kill(pid, signum)


class Server:
    """Receives bits, acknowledging each one to its sender with SIGUSR1.

    With *acknowledge_end*, a received NUL byte is also answered with SIGUSR2.
    """

    def __init__(
        self,
        output: BinaryIO | None = None,
        notify: Notifier | None = None,
        acknowledge_end: bool = False,
    ) -> None:
        self._output = output
        self._notify = notify or _send_signal
        self.acknowledge_end = acknowledge_end
        self._assembler = ByteAssembler()

    @property
    def output(self) -> BinaryIO:
        return self._output if self._output is not None else sys.stdout.buffer

    def handle(self, signum: int, sender_pid: int) -> int | None:
        """Process one signal from *sender_pid*; return a byte once one is complete."""
        byte = self._assembler.push(signal_to_bit(signum))
        if byte is not None:
            out = self.output
            out.write(bytes([byte]))
            out.flush()
            if self.acknowledge_end and byte == TERMINATOR:
                self._notify(sender_pid, SIGNAL_ZERO)
        self._notify(sender_pid, SIGNAL_ONE)
        return byte

    def serve_forever(self) -> None:
        """Wait for SIGUSR1/SIGUSR2 and handle them until interrupted."""
        signals = {SIGNAL_ONE, SIGNAL_ZERO}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: list[str] | None = None) -> int:
    """Print the process id and receive messages forever."""
    parser = argparse.ArgumentParser(description="Receive messages sent as signals.")
    parser.add_argument(
        "--bonus",
        action="store_true",
        help="answer the end of each message with SIGUSR2",
    )
    args = parser.parse_args(argv)
    printf("Server PID is: %i\n", os.getpid())
    server = Server(acknowledge_end=args.bonus)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())