import os
from typing import Optional, BinaryIO
from pmf.errors import ImageIOError


class IFilter:
    def __init__(self, path: str):
        self._path = path
        self._stream: Optional[BinaryIO] = None

    @property
    def name(self) -> str:
        return "Plain file"

    @property
    def base_path(self) -> str:
        return self._path

    @property
    def length(self) -> int:
        return os.path.getsize(self._path)

    def get_data_fork_stream(self) -> BinaryIO:
        if not self._stream or self._stream.closed:
            try:
                self._stream = open(self._path, 'rb')
            except OSError as e:
                raise ImageIOError(f"Failed to open {self._path}: {e}", self._path) from e
        return self._stream

    def identify(self) -> bool:
        # Overridden by specific filter implementations
        return os.path.isfile(self._path)

    def close(self):
        if self._stream:
            self._stream.close()
            self._stream = None
