"""The two spellings of a library name."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LibraryIdentity:
    """A library name as declared in Cargo.toml and as emitted on disk.

    Cargo accepts hyphens in package names, while rustdoc writes its output
    under the crate name with hyphens replaced by underscores. User-facing
    messages use ``declared_name``; filesystem lookups use ``canonical_name``.
    """

    declared_name: str
    canonical_name: str

    @classmethod
    def from_name(cls, name: str) -> "LibraryIdentity":
        """Build an identity from either spelling."""
        return cls(declared_name=name, canonical_name=canonicalize(name))

    def matches(self, name: str) -> bool:
        """Check whether ``name`` refers to this library in either spelling."""
        return canonicalize(name) == self.canonical_name


def canonicalize(name: str) -> str:
    """Normalize a library name to the spelling rustdoc uses on disk."""
    return name.strip().replace("-", "_")
