from lua_splitter.writer.filesystem import DirectoryWriter
from lua_splitter.writer.memory import InMemoryWriter

__all__ = [
    "DirectoryWriter",
    "InMemoryWriter",
]
