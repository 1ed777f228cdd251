class BenchError(Exception):
    """Base class for every fatal harness error."""

    error_code: str = "BENCH_ERROR"
    exit_code: int = 1

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(BenchError):
    """Invalid configuration value (environment or CLI)."""

    error_code = "CONFIG_ERROR"
    exit_code = 1


class UnknownTransformationError(ConfigError):
    """Requested transformation is not registered."""

    error_code = "UNKNOWN_TRANSFORMATION"

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown transformation {name!r}. Available: {', '.join(available) or '<none>'}"
        )


class ResourceLoadError(BenchError):
    """Input document could not be read."""

    error_code = "RESOURCE_LOAD_ERROR"
    exit_code = 3

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load workload {path}: {reason}")


class TransformationError(BenchError):
    """Transformation failed; the measurement is discarded."""

    error_code = "TRANSFORMATION_ERROR"
    exit_code = 4

    def __init__(
        self,
        reason: str,
        *,
        transform: str | None = None,
        iteration: int | None = None,
    ) -> None:
        self.reason = reason
        self.transform = transform
        self.iteration = iteration

        where = []
        if transform:
            where.append(f"transform={transform}")
        if iteration is not None:
            where.append(f"iteration={iteration}")
        prefix = f"Transformation failed ({', '.join(where)})" if where else "Transformation failed"
        super().__init__(f"{prefix}: {reason}")


class EncodingDetectionError(TransformationError):
    """Cannot decode the input buffer as text."""

    error_code = "ENCODING_ERROR"

    def __init__(self, detail: str = "input is not decodable text") -> None:
        super().__init__(f"Cannot detect encoding: {detail}")
