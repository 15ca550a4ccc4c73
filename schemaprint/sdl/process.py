import logging
import pathlib
from typing import Any, Iterable, Iterator, List, Set

import jinja2

from ..types import NamedType, SchemaDocument
from .filters import INDENT, Filters, is_reserved, type_ref, visible

logger = logging.getLogger(__name__)

templates_folder = pathlib.Path(__file__).parent / 'templates'

# Every server reports these, and none of them need declaring
STANDARD_SCALARS = frozenset(['String', 'Int', 'Float', 'Boolean', 'ID'])

KIND_TEMPLATES = {
    'OBJECT': 'object_type',
    'INTERFACE': 'object_type',
    'INPUT_OBJECT': 'input_object_type',
    'ENUM': 'enum_type',
    'UNION': 'union_type',
    'SCALAR': 'scalar_type',
}


def make_environment(filters: Filters) -> jinja2.Environment:
    """A template environment with the SDL formatters registered as filters."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(templates_folder))
    )
    env.filters['type_ref'] = type_ref
    env.filters['visible'] = visible
    env.filters['description'] = filters.description
    env.filters['deprecated'] = filters.deprecated
    env.filters['input_value'] = filters.input_value
    env.filters['arguments'] = filters.arguments
    env.filters['minified_input_value'] = filters.minified_input_value
    env.filters['minified_arguments'] = filters.minified_arguments
    env.filters['minified_field'] = filters.minified_field
    env.globals['indent'] = INDENT
    return env


class SchemaPrinter:
    """Render a SchemaDocument as SDL, descriptions and deprecations included."""

    template_set = 'full'

    def __init__(self, omit_default_reason: bool = False) -> None:
        self.filters = Filters(omit_default_reason=omit_default_reason)
        self.env = make_environment(self.filters)

    def render(self, name: str, **context: Any) -> str:
        tmpl = self.env.get_template(f'{self.template_set}/{name}.graphql.tmpl')
        return tmpl.render(**context)

    def print_schema(self, document: SchemaDocument) -> str:
        blocks = []
        roots = [(operation, name) for operation, name in document.root_types() if name]
        if roots:
            blocks.append(self.render('schema', roots=roots))
        for t in self.printable_types(document.types):
            blocks.append(self.render(KIND_TEMPLATES[t.kind], t=t))
        for directive in document.directives:
            blocks.append(self.render('directive', d=directive))
        return self.join(blocks)

    def join(self, blocks: List[str]) -> str:
        return '\n\n'.join(blocks).strip() + '\n\n'

    def skip_standard_scalar(self, t: NamedType) -> bool:
        # a described built-in is unusual enough to keep
        return not t.description

    def printable_types(self, types: Iterable[NamedType]) -> Iterator[NamedType]:
        """Yield the types worth declaring, first occurrence of each name only."""
        printed: Set[str] = set()
        for t in types:
            if not t.name or is_reserved(t.name):
                continue
            if t.name in printed:
                logger.debug("Skipping duplicate type %s", t.name)
                continue
            if t.kind not in KIND_TEMPLATES:
                logger.debug("Skipping type %s of unknown kind %r", t.name, t.kind)
                continue
            if (t.kind == 'SCALAR' and t.name in STANDARD_SCALARS
                    and self.skip_standard_scalar(t)):
                continue
            printed.add(t.name)
            yield t


class MinifiedSchemaPrinter(SchemaPrinter):
    """Compact SDL: no descriptions, no deprecations, minimal whitespace."""

    template_set = 'minified'

    def join(self, blocks: List[str]) -> str:
        return ' '.join(blocks) + '\n'

    def skip_standard_scalar(self, t: NamedType) -> bool:
        return True


def print_sdl(document: SchemaDocument, omit_default_reason: bool = False) -> str:
    """Render `document` as SDL, ending with a blank line.

    With `omit_default_reason`, a deprecation reason equal to the GraphQL
    default ("No longer supported") is dropped from `@deprecated`.
    """
    return SchemaPrinter(omit_default_reason=omit_default_reason).print_schema(document)

def print_minified_sdl(document: SchemaDocument) -> str:
    """Render `document` as single-line SDL without descriptions or deprecations."""
    return MinifiedSchemaPrinter().print_schema(document)
