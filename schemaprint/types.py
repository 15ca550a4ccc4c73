import json
from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, Optional, Tuple, Union

from . import schema_types
from .errors import IntrospectionParseError

_SNIPPET_LENGTH = 200


@dataclass(frozen=True)
class TypeRef:
    """A reference to a named type, possibly wrapped in LIST / NON_NULL.

    Wrapping kinds carry `of_type` and no name; the named type sits at the
    bottom of the chain.
    """
    kind: str
    name: str = ''
    of_type: Optional['TypeRef'] = None

@dataclass(frozen=True)
class InputValue:
    """An argument or an input object field."""
    name: str
    type: Optional[TypeRef]
    description: str = ''
    # GraphQL literal text as reported by the server; empty means no default
    default_value: str = ''
    is_deprecated: bool = False
    deprecation_reason: str = ''

@dataclass(frozen=True)
class Field:
    name: str
    type: Optional[TypeRef]
    description: str = ''
    args: Tuple[InputValue, ...] = ()
    is_deprecated: bool = False
    deprecation_reason: str = ''

@dataclass(frozen=True)
class EnumValue:
    name: str
    description: str = ''
    is_deprecated: bool = False
    deprecation_reason: str = ''

@dataclass(frozen=True)
class NamedType:
    kind: str
    name: str
    description: str = ''
    fields: Tuple[Field, ...] = ()
    input_fields: Tuple[InputValue, ...] = ()
    interfaces: Tuple[TypeRef, ...] = ()
    enum_values: Tuple[EnumValue, ...] = ()
    possible_types: Tuple[TypeRef, ...] = ()

@dataclass(frozen=True)
class Directive:
    name: str
    description: str = ''
    locations: Tuple[str, ...] = ()
    args: Tuple[InputValue, ...] = ()
    is_repeatable: bool = False

@dataclass(frozen=True)
class SchemaDocument:
    query_type: str = ''
    mutation_type: str = ''
    subscription_type: str = ''
    types: Tuple[NamedType, ...] = ()
    directives: Tuple[Directive, ...] = ()

    def root_types(self) -> Iterator[Tuple[str, str]]:
        """Yield (operation, type name) pairs, including unset ones."""
        yield 'query', self.query_type
        yield 'mutation', self.mutation_type
        yield 'subscription', self.subscription_type


def snippet(value: Any) -> str:
    if isinstance(value, bytes):
        value = value.decode('utf-8', errors='replace')
    if not isinstance(value, str):
        value = json.dumps(value)
    return value[:_SNIPPET_LENGTH]

def _text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return str(value)

def _objects(value: Any, what: str) -> List[Mapping[str, Any]]:
    """Check that `value` is a list of JSON objects; null counts as empty."""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        raise IntrospectionParseError(
            f"Expected a list of objects for {what}", snippet=snippet(value))
    return value

def _root_name(value: Optional[schema_types.RootType]) -> str:
    if isinstance(value, dict):
        return _text(value.get('name'))
    return ''

def make_type_ref(raw: Optional[schema_types.TypeRef]) -> Optional[TypeRef]:
    """Recursively build a TypeRef; the nesting depth is whatever the data has."""
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise IntrospectionParseError("Expected an object for a type reference",
                                      snippet=snippet(raw))
    return TypeRef(
        kind=_text(raw.get('kind')),
        name=_text(raw.get('name')),
        of_type=make_type_ref(raw.get('ofType')),
    )

def make_input_value(raw: schema_types.InputValue) -> InputValue:
    default = raw.get('defaultValue')
    if default is not None and not isinstance(default, str):
        # some servers send the value itself instead of its literal text
        default = json.dumps(default)
    return InputValue(
        name=_text(raw.get('name')),
        description=_text(raw.get('description')),
        type=make_type_ref(raw.get('type')),
        default_value=_text(default),
        is_deprecated=bool(raw.get('isDeprecated')),
        deprecation_reason=_text(raw.get('deprecationReason')),
    )

def make_field(raw: schema_types.Field) -> Field:
    name = _text(raw.get('name'))
    return Field(
        name=name,
        description=_text(raw.get('description')),
        args=tuple(make_input_value(a) for a in _objects(raw.get('args'), f"args of {name}")),
        type=make_type_ref(raw.get('type')),
        is_deprecated=bool(raw.get('isDeprecated')),
        deprecation_reason=_text(raw.get('deprecationReason')),
    )

def make_named_type(raw: schema_types.SchemaType) -> NamedType:
    name = _text(raw.get('name'))
    return NamedType(
        kind=_text(raw.get('kind')),
        name=name,
        description=_text(raw.get('description')),
        fields=tuple(
            make_field(f) for f in _objects(raw.get('fields'), f"fields of {name}")),
        input_fields=tuple(
            make_input_value(f)
            for f in _objects(raw.get('inputFields'), f"inputFields of {name}")),
        interfaces=tuple(
            make_type_ref(t) for t in _objects(raw.get('interfaces'), f"interfaces of {name}")),
        enum_values=tuple(
            EnumValue(
                name=_text(v.get('name')),
                description=_text(v.get('description')),
                is_deprecated=bool(v.get('isDeprecated')),
                deprecation_reason=_text(v.get('deprecationReason')),
            )
            for v in _objects(raw.get('enumValues'), f"enumValues of {name}")),
        possible_types=tuple(
            make_type_ref(t)
            for t in _objects(raw.get('possibleTypes'), f"possibleTypes of {name}")),
    )

def make_directive(raw: schema_types.Directive) -> Directive:
    name = _text(raw.get('name'))
    locations = raw.get('locations') or []
    if not isinstance(locations, list):
        raise IntrospectionParseError(f"Expected a list of locations for @{name}",
                                      snippet=snippet(locations))
    return Directive(
        name=name,
        description=_text(raw.get('description')),
        locations=tuple(_text(loc) for loc in locations),
        args=tuple(make_input_value(a) for a in _objects(raw.get('args'), f"args of @{name}")),
        is_repeatable=bool(raw.get('isRepeatable')),
    )

def _find_schema(payload: Any) -> schema_types.Schema:
    """Locate the __schema object in a response body or a bare introspection result."""
    if not isinstance(payload, dict):
        raise IntrospectionParseError("Expected a JSON object", snippet=snippet(payload))
    data = payload.get('data', payload)
    if isinstance(data, dict) and isinstance(data.get('__schema'), dict):
        return data['__schema']
    errors = payload.get('errors')
    if isinstance(errors, list) and errors:
        messages = [
            _text(e.get('message')) if isinstance(e, dict) else _text(e)
            for e in errors
        ]
        raise IntrospectionParseError(
            "Introspection returned errors: " + '; '.join(messages),
            snippet=snippet(payload))
    raise IntrospectionParseError("No __schema object in introspection response",
                                  snippet=snippet(payload))

def load_schema(source: Union[str, bytes, Mapping[str, Any]]) -> SchemaDocument:
    """Parse an introspection result into a SchemaDocument.

    `source` is either JSON text or an already decoded object. Both
    {"data": {"__schema": ...}} and {"__schema": ...} are accepted.
    Raises IntrospectionParseError if the data is not shaped like an
    introspection result.
    """
    if isinstance(source, (str, bytes)):
        try:
            payload = json.loads(source)
        except ValueError as e:
            raise IntrospectionParseError(
                f"Error parsing introspection response: {e}", snippet=snippet(source)
            ) from e
    else:
        payload = source
    schema = _find_schema(payload)
    return SchemaDocument(
        query_type=_root_name(schema.get('queryType')),
        mutation_type=_root_name(schema.get('mutationType')),
        subscription_type=_root_name(schema.get('subscriptionType')),
        types=tuple(make_named_type(t) for t in _objects(schema.get('types'), 'types')),
        directives=tuple(
            make_directive(d) for d in _objects(schema.get('directives'), 'directives')),
    )
