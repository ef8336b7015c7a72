from pathlib import Path


class DirectoryWriter:
    """Write output files into a directory, creating it on first use.

    Implements the ``OutputWriter`` protocol.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def write(self, filename: str, text: str) -> str:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._directory / filename
        path.write_bytes(text.encode("utf-8"))
        return str(path)
