"""Receives messages sent one signal per bit and prints them."""

from __future__ import annotations

import codecs
import os
import signal
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from .encoding import BitDecoder
from .printf import printf


class Server:
    """Decodes SIGUSR1 (set bit) and SIGUSR2 (clear bit) into text.

    Each completed message is followed by a newline. With ``acknowledge``
    the sender is sent SIGUSR2 once its message is complete.
    """

    def __init__(self, stream: Optional[TextIO] = None, acknowledge: bool = False) -> None:
        self._stream = stream
        self.acknowledge = acknowledge
        self._bits = BitDecoder()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def stream(self) -> TextIO:
        return sys.stdout if self._stream is None else self._stream

    def _write(self, text: str) -> None:
        if text:
            self.stream.write(text)
            self.stream.flush()

    def handle(self, signum: int, sender: Optional[int] = None) -> None:
        """Take one signal; ``sender`` is the sending process, when known."""
        value = self._bits.feed(signum == signal.SIGUSR1)
        if value is None:
            return
        if value == 0:
            self._write(self._text.decode(b"", final=True) + "\n")
            self._text.reset()
            if self.acknowledge and sender:
                os.kill(sender, signal.SIGUSR2)
        else:
            self._write(self._text.decode(bytes([value])))

    def run(self) -> NoReturn:
        """Print this process's PID and handle signals forever."""
        printf("PID: %d\n", os.getpid(), stream=self.stream)
        self.stream.flush()
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        if hasattr(signal, "sigwaitinfo"):
            signal.pthread_sigmask(signal.SIG_BLOCK, signals)
            try:
                while True:
                    info = signal.sigwaitinfo(signals)
                    self.handle(info.si_signo, info.si_pid)
            finally:
                signal.pthread_sigmask(signal.SIG_UNBLOCK, signals)
        for signum in signals:
            signal.signal(signum, lambda received, _frame: self.handle(received))
        while True:
            signal.pause()


def _serve(argv: Optional[Sequence[str]], acknowledge: bool) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        printf("ERROR")
        return 1
    try:
        Server(acknowledge=acknowledge).run()
    except KeyboardInterrupt:
        return 130


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Usage: server (no arguments)."""
    return _serve(argv, acknowledge=False)


def bonus_main(argv: Optional[Sequence[str]] = None) -> int:
    """Like :func:`main`, and acknowledges each complete message."""
    return _serve(argv, acknowledge=True)