import io
import json
import os
from types import TracebackType
from typing import IO, Any, Optional, Type


def read_json(path: str) -> Any:
    # editors on windows tend to add a byte order mark
    with open(path, 'r', encoding='utf-8-sig') as stream:
        return json.load(stream)


class FileSink(object):
    """Text output which replaces the target only after a successful write.

    path: str -
        target file

    overwrite: bool (default False) -
        allow replacing an existing target

    dry_run: bool (default False) -
        write to memory and discard
    """

    def __init__(self, path: str, overwrite: bool = False, dry_run: bool = False) -> None:
        self.path = os.fspath(path)
        self.tmp_path = f'{self.path}.tmp'
        self.overwrite = overwrite
        self.dry_run = dry_run
        self.stream: Optional[IO[str]] = None

    def __enter__(self) -> IO[str]:
        if not self.overwrite and os.path.exists(self.path):
            raise FileExistsError(f'{self.path} already exists, use --overwrite to replace it')
        if self.dry_run:
            self.stream = io.StringIO()
        else:
            self.stream = open(self.tmp_path, 'w', encoding='utf-8', newline='\n')
        return self.stream

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        assert self.stream is not None
        if self.dry_run:
            self.stream.close()
            return
        replaced = False
        try:
            try:
                if exc_type is None:
                    self.stream.flush()
                    os.fsync(self.stream.fileno())
            finally:
                self.stream.close()
            if exc_type is None:
                os.replace(self.tmp_path, self.path)
                replaced = True
        finally:
            if not replaced:
                os.remove(self.tmp_path)
