class SongLibError(Exception):
    """Base exception for songlib."""


class NoContentError(SongLibError):
    """Raised when there is nothing to import."""

    def __init__(self):
        super().__init__("There is no content to import")


class UnknownFileExtensionError(SongLibError):
    """Raised when no importer handles the given file extension.

    *supported* is true for formats songlib knows but cannot import yet.
    """

    def __init__(self, extension: str, supported: bool = False):
        self.extension = extension
        self.supported = supported
        if supported:
            message = f"Importing {extension} files is not implemented yet"
        else:
            message = f"No importer found for file extension: {extension or '<none>'}"
        super().__init__(message)


class SongFileNotFoundError(SongLibError):
    """Raised when a song file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Song file does not exist: {path}")


class TemplateRenderError(SongLibError):
    """Raised when a metadata template cannot be rendered."""

    def __init__(self, template: str, reason: str):
        self.template = template
        self.reason = reason
        super().__init__(f"Could not render template {template!r}: {reason}")


class ConfigError(SongLibError):
    """Raised when a settings file cannot be loaded or is invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class TrackMismatchError(SongLibError, ValueError):
    """Raised when parallel block tracks do not have the same number of stanzas.

    This signals a bug in the caller, not bad input.
    """

    def __init__(self, lengths: list[int]):
        self.lengths = lengths
        super().__init__(f"Block tracks must have equal lengths, got {lengths}")


class SongFileReadError(SongLibError):
    """Raised when a song file exists but cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read song file {path}: {reason}")
