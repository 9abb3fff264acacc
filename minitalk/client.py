"""Sends a message to a server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import List, Optional, Sequence

from .chars import atoi
from .encoding import Message, _message_bytes, encode_byte
from .printf import printf

DEFAULT_DELAY = 70e-6

_ACK_BANNER = "".join(
    f"\033[1;{color}m{ch}"
    for color, ch in zip(
        (31, 32, 33, 34, 35, 36, 37, 36, 35, 34, 33, 32, 31), "ACKNOWLEDGED!"
    )
) + "\n"


def send_byte(pid: int, value: int, delay: float = DEFAULT_DELAY) -> None:
    """Send one byte to ``pid``: SIGUSR1 for a set bit, SIGUSR2 for a clear one."""
    for bit in encode_byte(value):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)


def send_message(pid: int, message: Message, delay: float = DEFAULT_DELAY) -> None:
    """Send every byte of ``message`` followed by the terminating NUL."""
    for value in _message_bytes(message):
        send_byte(pid, value, delay)
    send_byte(pid, 0, delay)


def _print_ack(signum: int, frame: object) -> None:
    printf("%s", _ACK_BANNER)
    sys.stdout.flush()


def _parse(argv: Optional[Sequence[str]]) -> Optional[List[str]]:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("ERROR")
        return None
    return args


def _run(args: List[str], acknowledge: bool) -> int:
    pid = atoi(args[0])
    data = args[1]
    try:
        for value in _message_bytes(data):
            send_byte(pid, value)
        if acknowledge:
            signal.signal(signal.SIGUSR2, _print_ack)
        send_byte(pid, 0)
    except OSError as exc:
        print(f"cannot signal process {pid}: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Usage: client PID MESSAGE."""
    args = _parse(argv)
    if args is None:
        return 1
    return _run(args, acknowledge=False)


def bonus_main(argv: Optional[Sequence[str]] = None) -> int:
    """Like :func:`main`, and prints a banner when the server acknowledges."""
    args = _parse(argv)
    if args is None:
        return 1
    return _run(args, acknowledge=True)