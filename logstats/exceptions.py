class LogReadError(Exception):
    "Raised when a log file cannot be opened, read or decoded"

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
