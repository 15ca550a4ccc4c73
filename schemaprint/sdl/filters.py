from typing import Any, List, Optional, Sequence

from ..types import Field, InputValue, TypeRef

INDENT = '  '

# What graphql-js / graphql-core report for a bare `@deprecated`
DEFAULT_DEPRECATION_REASON = 'No longer supported'

_STRING_ESCAPES = str.maketrans({
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
})


def type_ref(t: Optional[TypeRef]) -> str:
    """Render a TypeRef into a string, e.g. `[String!]!`."""
    if t is None:
        return ''
    if t.kind == 'NON_NULL' and t.of_type is not None:
        return type_ref(t.of_type) + '!'
    if t.kind == 'LIST' and t.of_type is not None:
        return '[' + type_ref(t.of_type) + ']'
    if not t.name and t.of_type is not None:
        # partial data: a named kind with the name further down
        return type_ref(t.of_type)
    return t.name

def quoted(s: str) -> str:
    """Return `s` as a GraphQL string literal."""
    return '"' + s.translate(_STRING_ESCAPES) + '"'

def has_description(text: str) -> bool:
    return bool(text and text.strip())

def is_reserved(name: str) -> bool:
    """Names starting with __ belong to introspection itself."""
    return name.startswith('__')

def visible(items: Sequence[Any]) -> List[Any]:
    """Drop fields, input fields and enum values with reserved names."""
    return [item for item in items if not is_reserved(item.name)]


class Filters:
    """The small formatters shared by the full and minified printers."""

    def __init__(self, omit_default_reason: bool = False) -> None:
        self.omit_default_reason = omit_default_reason

    def description(self, text: str, indent: str = '') -> str:
        """Render `text` as a block string at `indent`, including the final newline."""
        if not has_description(text):
            return ''
        escaped = text.replace('"""', '\\"""').strip()
        lines = [indent + '"""']
        for line in escaped.splitlines():
            line = line.rstrip()
            lines.append(indent + line if line else '')
        lines.append(indent + '"""')
        return '\n'.join(lines) + '\n'

    def deprecated(self, is_deprecated: bool, reason: str) -> str:
        if not is_deprecated:
            return ''
        if not reason or (self.omit_default_reason and reason == DEFAULT_DEPRECATION_REASON):
            return ' @deprecated'
        return f' @deprecated(reason: {quoted(reason)})'

    def input_value(self, value: InputValue) -> str:
        out = f'{value.name}: {type_ref(value.type)}'
        if value.default_value:
            # TODO check the literal against the declared type (enum vs string).
            # The literal is verbatim in both layouts, so a string default may
            # contain characters such as # that are not comments.
            out += f' = {value.default_value}'
        return out + self.deprecated(value.is_deprecated, value.deprecation_reason)

    def arguments(self, args: Sequence[InputValue], base_indent: str = '') -> str:
        """Render a parenthesized argument list; empty when there are no args.

        If any argument is described the list goes multi-line, one argument per
        line, closing paren back at `base_indent`.
        """
        if not args:
            return ''
        if not any(has_description(arg.description) for arg in args):
            return '(' + ', '.join(self.input_value(arg) for arg in args) + ')'
        arg_indent = base_indent + INDENT
        out = '(\n'
        for arg in args:
            out += self.description(arg.description, arg_indent)
            out += arg_indent + self.input_value(arg) + '\n'
        return out + base_indent + ')'

    def minified_input_value(self, value: InputValue) -> str:
        out = f'{value.name}:{type_ref(value.type)}'
        if value.default_value:
            out += f'={value.default_value}'
        return out

    def minified_arguments(self, args: Sequence[InputValue]) -> str:
        if not args:
            return ''
        return '(' + ','.join(self.minified_input_value(arg) for arg in args) + ')'

    def minified_field(self, field: Field) -> str:
        return field.name + self.minified_arguments(field.args) + ':' + type_ref(field.type)
