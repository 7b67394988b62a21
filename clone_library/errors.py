"""Error types raised by the clone library.

None of these are recovered inside the library. Each carries the offending
input so callers can report an actionable message.
"""


class CloneError(Exception):
    """Base class for clone library errors."""


class ParseError(CloneError, ValueError):
    """Repository identifier did not yield both an owner and a name."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Could not parse owner and repo from input: {raw}")


class TemplateCompileError(CloneError, ValueError):
    """Path template string is malformed."""

    def __init__(self, template: str, reason: str, language_key: str | None = None) -> None:
        self.template = template
        self.reason = reason
        self.language_key = language_key
        message = f"failed to parse PathTemplate from string '{template}': {reason}"
        if language_key is not None:
            message = f"{message} (language '{language_key}')"
        super().__init__(message)


class TemplateExecutionError(CloneError):
    """Path template references a field the descriptor does not expose."""

    def __init__(self, language_key: str, field: str) -> None:
        self.language_key = language_key
        self.field = field
        super().__init__(f"failed to execute PathTemplate for language '{language_key}': unknown field '{field}'")


class HomeDirectoryError(CloneError):
    """Home directory of the current user could not be determined."""


class LanguageLookupError(CloneError):
    """Main language of a repository could not be fetched."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"could not get repo languages for {url}: {reason}")
