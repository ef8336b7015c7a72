class InMemoryWriter:
    """Collect output files in a dictionary; last write to a name wins."""

    def __init__(self) -> None:
        self.files: dict[str, str] = {}
        self.order: list[str] = []

    def write(self, filename: str, text: str) -> str:
        self.files[filename] = text
        self.order.append(filename)
        return filename
