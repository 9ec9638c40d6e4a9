"""Exception hierarchy shared by the conversion pipeline and the commands."""

from pathlib import Path

PREVIEW_LIMIT = 200


def preview(text: str, limit: int = PREVIEW_LIMIT) -> str:
    """Return a bounded preview of ``text`` for error messages."""
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


class DocmdError(Exception):
    """Base class for every error raised by docmd."""


class SelectorParseFailed(DocmdError):
    """A CSS selector string could not be parsed."""

    def __init__(self, selector: str, error: str) -> None:
        """Record the offending selector and the parser message."""
        self.selector = selector
        self.error = error
        super().__init__(f"Failed to parse selector '{selector}': {error}")


class ElementNotFound(DocmdError):
    """An element required by the document shape is missing."""

    def __init__(self, selector: str, content: str = "", detail: str = "") -> None:
        """Record the selector and a bounded preview of the searched content."""
        self.selector = selector
        self.preview = preview(content.strip())
        msg = f"Element not found with selector '{selector}'"
        if detail:
            msg += f": {detail}"
        if self.preview:
            msg += f"\nContent preview:\n{self.preview}"
        super().__init__(msg)


class KindMismatch(DocmdError):
    """A renderer was handed an item of the wrong kind."""

    def __init__(self, expected: str, actual: str) -> None:
        """Record the expected and actual item kinds."""
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} item, found {actual}")


class InputValidationFailed(DocmdError):
    """Caller supplied an item path or library name that is malformed."""

    def __init__(self, value: str, reason: str) -> None:
        """Record the rejected value and why it was rejected."""
        self.value = value
        self.reason = reason
        super().__init__(f"invalid item path '{value}': {reason}")


class PathResolutionFailed(DocmdError):
    """An item path has no generated Markdown file."""

    def __init__(self, item_path: str, library: str) -> None:
        """Record the unresolved path using the caller's spelling."""
        self.item_path = item_path
        self.library = library
        super().__init__(
            f"could not resolve item path '{item_path}'. "
            f"Run `cargo docmd list {library}` to see available items, "
            f"or rebuild with `cargo docmd build {library}`."
        )


class BuildError(DocmdError):
    """Base class for failures while producing a documentation corpus."""


class CargoExecutionFailed(BuildError):
    """A cargo subprocess exited with a non-zero status."""

    def __init__(self, command: str, output: str) -> None:
        """Record the command line and its captured stderr."""
        self.command = command
        self.output = output
        super().__init__(f"Failed to execute `{command}`:\n{output}")


class DependencyNotFound(BuildError):
    """The requested library is not a declared dependency of the project."""

    def __init__(self, name: str, available: list[str]) -> None:
        """Record the requested name and the declared dependencies."""
        self.name = name
        self.available = available
        super().__init__(
            f"Crate '{name}' is not an installed dependency.\n\n"
            f"Available crates: {', '.join(available)}\n\n"
            "Only installed dependencies can be built. "
            "Add the crate to Cargo.toml as a dependency first."
        )


class DocNotGenerated(BuildError):
    """The documentation toolchain did not produce the expected files."""

    def __init__(self, name: str, expected_path: Path) -> None:
        """Record the library and the path that should have existed."""
        self.name = name
        self.expected_path = expected_path
        super().__init__(
            f"Documentation was not generated for crate '{name}'. "
            f"Expected '{expected_path}'"
        )


class HtmlParseFailed(BuildError):
    """Converting one HTML page failed."""

    def __init__(self, path: Path, cause: Exception) -> None:
        """Attach the page path to the underlying conversion error."""
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse HTML file '{path}': {cause}")


class FileWriteFailed(BuildError):
    """A generated file could not be written."""

    def __init__(self, path: Path, error: str) -> None:
        """Record the destination path and the OS error text."""
        self.path = path
        super().__init__(f"Failed to write file '{path}': {error}")


class MetadataCorrupt(BuildError):
    """A metadata sidecar exists but cannot be read back."""

    def __init__(self, path: Path, error: str) -> None:
        """Record the sidecar path and the decoding error."""
        self.path = path
        super().__init__(f"Metadata file '{path}' is unreadable: {error}")
