"""Library exceptions for the reactivetesting package."""


class ReactiveTestingError(Exception):
    """Base exception for reactivetesting library."""

    pass


class SerializationError(ReactiveTestingError):
    """Raised when a subscription cannot be encoded or decoded."""

    def __init__(self, format_name: str, message: str) -> None:
        self.format_name = format_name
        super().__init__(f"Serialization error for {format_name} format: {message}")


class UnsupportedFormatVersionError(SerializationError):
    """
    Raised when persisted data carries a format version this library cannot read.

    Persisted subscriptions always start with a format version. A version
    outside supported_versions means the data was written by a newer (or
    corrupted) writer and must be migrated deliberately rather than guessed at.

    Attributes:
        format_name: Name of the encoding ("binary" or "json")
        version: Version found in the data
        supported_versions: Versions this library can decode
    """

    def __init__(self, format_name: str, version: int, supported_versions: tuple[int, ...]) -> None:
        self.version = version
        self.supported_versions = supported_versions
        supported = ", ".join(str(v) for v in supported_versions)
        super().__init__(
            format_name,
            f"unsupported format version {version} (supported: {supported})",
        )
