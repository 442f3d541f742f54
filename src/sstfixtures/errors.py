"""Exception types raised by sstfixtures."""

from sstfixtures.codes import WriterStage


class ConfigurationError(ValueError):
    """Raised when a dimension name or parameter space is not valid."""
    pass


class WriterStageError(RuntimeError):
    """A table writer stage failed for one fixture file."""

    def __init__(self, stage: WriterStage, path: str, message: str, records_written: int = 0):
        self.stage = stage
        self.path = path
        self.message = message
        self.records_written = records_written
        super().__init__(f"[{stage.value}] {path}: {message}")

    @classmethod
    def from_exception(
        cls,
        stage: WriterStage,
        path: str,
        exc: BaseException,
        records_written: int = 0,
    ) -> "WriterStageError":
        message = str(exc) or type(exc).__name__
        return cls(stage, path, message, records_written=records_written)
