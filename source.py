DEFAULT_SOURCE = "sample.txt"


class LexscanError(Exception):
    pass


class SourceUnavailable(LexscanError):
    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path
        self.message = message

    def __str__(self) -> str:
        return f"Error reading the file: {self.message}"


def read_source(path: str = DEFAULT_SOURCE) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise SourceUnavailable(path, str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceUnavailable(path, f"{path}: {e.reason}") from e
