"""
Streams the lines of a publishing profile for a bounded amount of wall-clock time
"""
import codecs
import re
import time
from typing import Callable, Iterable, Iterator, Optional
from . import utilities


_LINE_BREAK = re.compile(r'\r\n|\r|\n')


def iter_lines(chunks: Iterable[bytes], encoding: str = 'utf-8') -> Iterator[str]:
    """Split a stream of byte chunks into text lines, breaking only at \\r\\n, \\r and \\n"""
    decoder = codecs.getincrementaldecoder(encoding)(errors='replace')
    pending = ''

    for chunk in chunks:
        pending += decoder.decode(chunk)
        # A trailing \r may be the first half of \r\n in the next chunk
        held = ''
        if pending.endswith('\r'):
            pending, held = pending[:-1], '\r'
        lines = _LINE_BREAK.split(pending)
        pending = lines.pop() + held
        for line in lines:
            yield line

    pending += decoder.decode(b'', final=True)
    lines = _LINE_BREAK.split(pending)
    tail = lines.pop()
    for line in lines:
        yield line
    if tail:
        yield tail


class LogStreamer:
    """Logs lines from a stream until it ends or the timeout elapses"""

    def __init__(self, timeout: float = 120, clock: Callable[[], float] = time.time):
        self.timeout = timeout
        self.clock = clock

    def stream(self, lines: Iterable[str], on_start: Optional[Callable[[], object]] = None) -> int:
        """
        Read the first line, start the clock and fire on_start, then log lines
        while the stream yields them and the timeout has not elapsed.

        The timeout is only checked between lines; on_start's work is not
        cancelled when the loop exits. Returns the number of lines logged.
        """
        line_iter = iter(lines)
        logged = 0

        line = next(line_iter, None)
        start_time = self.clock()
        if on_start is not None:
            on_start()

        while line is not None and self.clock() - start_time < self.timeout:
            utilities.log(line)
            logged += 1
            line = next(line_iter, None)

        return logged

    def stream_profile(self, chunks: Iterable[bytes],
                       on_start: Optional[Callable[[], object]] = None) -> int:
        """Stream a publishing profile byte stream, releasing it when the loop exits"""
        try:
            return self.stream(iter_lines(chunks), on_start)
        finally:
            close = getattr(chunks, 'close', None)
            if callable(close):
                close()
