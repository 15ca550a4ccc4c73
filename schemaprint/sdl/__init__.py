from .filters import DEFAULT_DEPRECATION_REASON, Filters, quoted, type_ref
from .process import (
    STANDARD_SCALARS, MinifiedSchemaPrinter, SchemaPrinter, make_environment,
    print_minified_sdl, print_sdl
)
