import json
import keyword
from pathlib import Path
import typing

import jinja2

from ._typing_compat import override
from .errors import DuplicateIdentifier, InvalidAssetPath
from .model import Manifest

here = Path(__file__).absolute().parent


def python_str(value: str) -> str:
    # A JSON string is also a valid Python string literal.
    return json.dumps(value, ensure_ascii=False)


def rust_str(value: str) -> str:
    escaped = []
    for char in value:
        if char in ('"', '\\'):
            escaped.append('\\' + char)
        elif char == '\n':
            escaped.append('\\n')
        elif char == '\r':
            escaped.append('\\r')
        elif char == '\t':
            escaped.append('\\t')
        elif ord(char) < 0x20 or ord(char) == 0x7f:
            escaped.append(f'\\u{{{ord(char):x}}}')
        else:
            escaped.append(char)
    return '"' + ''.join(escaped) + '"'


def create_templates_environment(templates_paths: typing.Sequence[Path] = (here / "templates",)) -> jinja2.Environment:
    loader = jinja2.FileSystemLoader(templates_paths)
    templates = jinja2.Environment(
        loader=loader,
        autoescape=False,
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    templates.filters['python_str'] = python_str
    templates.filters['rust_str'] = rust_str
    return templates


class Renderer:
    """Serialize a :class:`Manifest` into the source of a generated module."""

    #: The name used to select this renderer, e.g. on the command line.
    format_name: typing.ClassVar[str]
    template_name: typing.ClassVar[str]
    #: The token joining namespace segments in a qualified reference.
    namespace_separator: typing.ClassVar[str]
    #: Names the generated module declares itself at the top level.
    reserved_names: typing.ClassVar[frozenset[str]] = frozenset({'StaticFile', 'STATICS'})

    def __init__(self, templates_env: typing.Optional[jinja2.Environment] = None) -> None:
        self.templates_env = templates_env or create_templates_environment()

    def is_keyword(self, name: str) -> bool:
        return False

    def validate(self, manifest: Manifest) -> None:
        for name in manifest.root.declared_names():
            if name in self.reserved_names:
                raise DuplicateIdentifier(
                    f"{name!r} clashes with a name declared by the generated {self.format_name} module",
                    path=manifest.root.locate(name),
                )
        for scope in manifest.root.walk():
            for name in scope.declared_names():
                if self.is_keyword(name):
                    raise InvalidAssetPath(
                        f"{name!r} in {scope.describe()} is a reserved {self.format_name} keyword",
                        path=scope.locate(name),
                    )

    def render(self, manifest: Manifest) -> str:
        self.validate(manifest)
        index = [reference.qualified(self.namespace_separator) for reference in manifest.index]
        return self.templates_env.get_template(self.template_name).render(
            root=manifest.root,
            index=index,
        )


class PythonRenderer(Renderer):
    format_name = 'python'
    template_name = 'python/manifest.py.j2'
    namespace_separator = '.'
    reserved_names = Renderer.reserved_names | {'_dataclasses', '_typing'}

    @override
    def is_keyword(self, name: str) -> bool:
        return keyword.iskeyword(name)


RUST_KEYWORDS = frozenset({
    'Self', 'abstract', 'as', 'async', 'await', 'become', 'box', 'break', 'const',
    'continue', 'crate', 'do', 'dyn', 'else', 'enum', 'extern', 'false', 'final', 'fn',
    'for', 'if', 'impl', 'in', 'let', 'loop', 'macro', 'match', 'mod', 'move', 'mut',
    'override', 'priv', 'pub', 'ref', 'return', 'self', 'static', 'struct', 'super',
    'trait', 'true', 'try', 'type', 'typeof', 'unsafe', 'unsized', 'use', 'virtual',
    'where', 'while', 'yield',
})


class RustRenderer(Renderer):
    format_name = 'rust'
    template_name = 'rust/manifest.rs.j2'
    namespace_separator = '::'

    @override
    def is_keyword(self, name: str) -> bool:
        return name in RUST_KEYWORDS


RENDERERS: typing.Mapping[str, type[Renderer]] = {
    renderer.format_name: renderer for renderer in (PythonRenderer, RustRenderer)
}


def get_renderer(output_format: str) -> Renderer:
    try:
        renderer_cls = RENDERERS[output_format]
    except KeyError:
        raise ValueError(
            f"Unknown output format {output_format!r} (choose from {', '.join(sorted(RENDERERS))})",
        ) from None
    return renderer_cls()
