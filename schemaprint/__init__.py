"""Turn a GraphQL introspection result into SDL."""
from .errors import (
    SchemaPrintError, ConfigurationError, FetchError, IntrospectionParseError, OutputError
)
from .fetch import INTROSPECTION_QUERY, fetch_introspection, parse_header
from .sdl import (
    DEFAULT_DEPRECATION_REASON, MinifiedSchemaPrinter, SchemaPrinter,
    print_minified_sdl, print_sdl
)
from .types import (
    Directive, EnumValue, Field, InputValue, NamedType, SchemaDocument, TypeRef, load_schema
)

__version__ = '0.1.0'
