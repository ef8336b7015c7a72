from typing import Protocol


class OutputWriter(Protocol):
    def write(self, filename: str, text: str) -> str: ...
