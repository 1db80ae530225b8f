"""UTF-8 output sink for standard output."""

import asyncio
import sys
from typing import BinaryIO


class OutputSink:
    """Writes UTF-8 encoded text to a binary stream, synchronously or asynchronously."""

    def __init__(self, stream: BinaryIO | None = None):
        """
        Args:
            stream: Binary stream to write to. Defaults to the process stdout,
                resolved on every write so redirected streams are honoured.
        """
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        if self._stream is not None:
            return self._stream
        stdout = sys.stdout
        return getattr(stdout, "buffer", stdout)

    def isatty(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def write(self, message: str) -> None:
        if self._stream is None:
            # text already buffered on sys.stdout must come first
            sys.stdout.flush()
        stream = self.stream
        stream.write(message.encode("utf-8"))
        stream.flush()

    def write_line(self, message: str) -> None:
        self.write(f"{message}\n")

    async def write_async(self, message: str) -> None:
        await asyncio.to_thread(self.write, message)

    async def write_line_async(self, message: str) -> None:
        await self.write_async(f"{message}\n")
