# minitalk

Two small programs that pass a text message from one process to another
using nothing but POSIX signals. Each byte goes as eight signals, least
significant bit first: `SIGUSR1` for a 1 bit and `SIGUSR2` for a 0 bit. A
zero byte ends the message. Text is sent as UTF-8.

Needs a POSIX system (Linux, macOS).

## Installing

```
pip install .
```

## Running

Start the server in one terminal. It prints its process id and then waits
until it is interrupted:

```
minitalk-server
PID: 12345
```

Send it a message from another terminal:

```
minitalk-client 12345 "hello there"
```

The server prints the text as it arrives and a newline when the message
ends. If a command gets the wrong number of arguments (the server takes
none, the client takes a PID and a message) it prints `ERROR` and exits
with status 1. If the client cannot signal the given process it reports
this on standard error and exits with status 1.

### Acknowledged delivery

The bonus pair works the same way, but when the server has received a
whole message it sends `SIGUSR2` back to the sender, and the client prints
a coloured `ACKNOWLEDGED!`:

```
minitalk-server-bonus
minitalk-client-bonus 12345 "hello there"
```

The server learns who sent a signal through `signal.sigwaitinfo`. Where
Python does not offer it (for example on macOS) the server still receives
messages but cannot send the acknowledgement.

## Using it as a library

The bit encoding and decoding are plain functions and classes:

```python
from minitalk.encoding import encode_message, BitDecoder

bits = encode_message("hi")      # 1 = SIGUSR1, 0 = SIGUSR2, NUL byte at the end
decoder = BitDecoder()
for bit in bits:
    byte = decoder.feed(bit)     # a complete byte after every eighth bit, else None
```

`encode_byte(value)` gives the eight bits of one byte. A message that holds
a NUL byte raises `ValueError`.

`minitalk.server.Server(stream, acknowledge)` writes to the given stream
(standard output by default). Its `handle(signum, sender)` method takes one
signal at a time, so it can be driven directly in tests; `run()` prints the
PID and handles signals forever. `minitalk.client.send_byte(pid, value, delay)`
and `minitalk.client.send_message(pid, message, delay)` signal a running
process, sleeping `delay` seconds (70 microseconds by default) after each bit.

The package also has the helpers the programs use:

- `minitalk.chars`: character classes (`is_alpha`, `is_digit`, ...),
  `to_lower`, `to_upper`, `atoi` (wraps like a 32-bit int) and `itoa`
- `minitalk.memory`: byte-buffer operations (`memset`, `bzero`, `calloc`,
  `memcpy`, `memmove`, `memchr`, `memcmp`)
- `minitalk.strings`: `split`, `strtrim`, `substr`, `strjoin`, `strnstr`,
  `strncmp`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strmapi`, `striteri`;
  text after a NUL character is ignored
- `minitalk.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` to a stream
- `minitalk.linkedlist`: a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`
- `minitalk.printf`: `format_string` and `printf` for `%c %s %p %d %i %u %x %X %%`
- `minitalk.lines`: `LineReader`, `get_next_line` and `iter_lines`, which read
  file descriptors line by line and return `bytes`

## What it does not do

Messages go only between processes on the same machine that may signal each
other. There is no retransmission or flow control beyond the fixed delay
between bits: if signals arrive faster than the server handles them, bits
can be lost and the text garbled.

## Tests

```
pip install ".[test]"
pytest
```