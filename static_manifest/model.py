import dataclasses
import pathlib
import typing

from . import naming
from ._typing_compat import TypeAlias
from .errors import DuplicateIdentifier

#: The sanitized scope names leading from the root scope to a nested scope.
Namespace: TypeAlias = tuple[str, ...]


@dataclasses.dataclass(frozen=True)
class StaticRecord:
    identifier: str
    # The canonical absolute location of the source file.
    file_name: str
    # The cache-busted public path, e.g. "/static/vendor/script-<hash>.js".
    name: str
    mime: str

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class RecordReference:
    namespace: Namespace
    identifier: str

    def qualified(self, separator: str) -> str:
        return naming.qualify(self.namespace, self.identifier, separator)


@dataclasses.dataclass(eq=False)
class NamespaceScope:
    name: str
    parent: typing.Optional["NamespaceScope"] = dataclasses.field(default=None, repr=False)
    members: list[StaticRecord] = dataclasses.field(default_factory=list)
    children: list["NamespaceScope"] = dataclasses.field(default_factory=list)
    # The directory which first opened this scope.
    location: typing.Optional[pathlib.Path] = dataclasses.field(default=None, repr=False)

    @property
    def path(self) -> Namespace:
        if self.parent is None:
            return ()
        return (*self.parent.path, self.name)

    def declared_names(self) -> list[str]:
        return [record.identifier for record in self.members] + [scope.name for scope in self.children]

    def locate(self, name: str) -> typing.Optional[pathlib.Path]:
        """The source path behind a name declared directly in this scope."""
        for record in self.members:
            if record.identifier == name:
                return pathlib.Path(record.file_name)
        for scope in self.children:
            if scope.name == name:
                return scope.location
        return None

    def child(self, name: str, location: typing.Optional[pathlib.Path] = None) -> "NamespaceScope":
        """Return the sub-scope called ``name``, opening it if it doesn't exist yet."""
        for scope in self.children:
            if scope.name == name:
                return scope
        if any(record.identifier == name for record in self.members):
            raise DuplicateIdentifier(
                f"Namespace {name!r} clashes with a record of the same name in {self.describe()}",
                path=location,
            )
        scope = NamespaceScope(name=name, parent=self, location=location)
        self.children.append(scope)
        return scope

    def add(self, record: StaticRecord) -> None:
        if record.identifier in self.declared_names():
            raise DuplicateIdentifier(
                f"{record.file_name!r} produces the identifier {record.identifier!r}, "
                f"which is already declared in {self.describe()}",
                path=pathlib.Path(record.file_name),
            )
        self.members.append(record)

    def walk(self) -> typing.Iterator["NamespaceScope"]:
        """Pre-order traversal: this scope, then each child scope recursively."""
        yield self
        for scope in self.children:
            yield from scope.walk()

    def describe(self) -> str:
        if not self.path:
            return "the root namespace"
        return f"namespace {'/'.join(self.path)!r}"


@dataclasses.dataclass
class Manifest:
    root: NamespaceScope
    url_prefix: str = "/static"

    @property
    def index(self) -> list[RecordReference]:
        """References to every record, in the order they are declared."""
        return [
            RecordReference(scope.path, record.identifier)
            for scope in self.root.walk()
            for record in scope.members
        ]

    @property
    def records(self) -> list[StaticRecord]:
        return [record for scope in self.root.walk() for record in scope.members]

    def lookup(self, name: str) -> typing.Optional[StaticRecord]:
        for record in self.records:
            if record.name == name:
                return record
        return None

    def __len__(self) -> int:
        return sum(len(scope.members) for scope in self.root.walk())
