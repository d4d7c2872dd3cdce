"""Signal sender: transmits a message bit by bit, waiting for each acknowledgement."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Callable

from sigtalk.chars import atoi
from sigtalk.printf import printf
from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, bit_to_signal, frame_message, iter_bits

Notifier = Callable[[int, int], None]

END_NOTICE = ">> SIGNAL FROM SERVER RECEIVED <<\n"
USAGE_ERROR = "### Wrong Parameter Input ###\n"


class Client:
    """Sends bytes to the process *pid*, one signal per bit."""

    def __init__(
        self,
        pid: int,
        notify: Notifier | None = None,
        poll_interval: float = 50e-6,
        report_end: bool = False,
    ) -> None:
        self.pid = pid
        self._notify = notify or os.kill
        self.poll_interval = poll_interval
        self.report_end = report_end
        self._received = False

    def on_signal(self, signum: int) -> None:
        """React to a signal from the receiver."""
        if signum == SIGNAL_ONE:
            self._received = True
        if signum == SIGNAL_ZERO and self.report_end:
            printf(END_NOTICE)

    def send_byte(self, value: int) -> None:
        """Send one byte, waiting for an acknowledgement after every bit."""
        for bit in iter_bits(value):
            self._received = False
            self._notify(self.pid, bit_to_signal(bit))
            while not self._received:
                time.sleep(self.poll_interval)

    def send(self, message: str | bytes) -> int:
        """Send a message and its terminating NUL; return the bytes sent."""
        data = frame_message(message)
        for byte in data:
            self.send_byte(byte)
        return len(data)


def main(argv: list[str] | None = None) -> int:
    """Send ``MESSAGE`` to the server ``PID``; ``--report-end`` shows its end notice."""
    args = list(sys.argv[1:] if argv is None else argv)
    report_end = "--report-end" in args
    positional = [arg for arg in args if arg != "--report-end"]
    if len(positional) != 2:
        printf(USAGE_ERROR)
        return 0
    pid_text, message = positional
    client = Client(atoi(pid_text), report_end=report_end)
    handler = lambda signum, _frame: client.on_signal(signum)  # noqa: E731
    signal.signal(SIGNAL_ONE, handler)
    if report_end:
        signal.signal(SIGNAL_ZERO, handler)
    client.send(os.fsencode(message))
    return 0


if __name__ == "__main__":
    sys.exit(main())