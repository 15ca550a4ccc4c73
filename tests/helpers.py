"""Builders for raw introspection JSON, shaped like a server response."""


def named(name, kind='SCALAR'):
    return {'kind': kind, 'name': name, 'ofType': None}

def non_null(of_type):
    return {'kind': 'NON_NULL', 'name': None, 'ofType': of_type}

def list_of(of_type):
    return {'kind': 'LIST', 'name': None, 'ofType': of_type}

def input_value(name, type, description=None, default=None,
                deprecated=False, reason=None):
    return {
        'name': name,
        'description': description,
        'type': type,
        'defaultValue': default,
        'isDeprecated': deprecated,
        'deprecationReason': reason,
    }

def field(name, type, args=(), description=None, deprecated=False, reason=None):
    return {
        'name': name,
        'description': description,
        'args': list(args),
        'type': type,
        'isDeprecated': deprecated,
        'deprecationReason': reason,
    }

def named_type(kind, name, description=None, fields=None, input_fields=None,
               interfaces=None, enum_values=None, possible_types=None):
    return {
        'kind': kind,
        'name': name,
        'description': description,
        'fields': fields,
        'inputFields': input_fields,
        'interfaces': interfaces,
        'enumValues': enum_values,
        'possibleTypes': possible_types,
    }

def object_type(name, fields, interfaces=(), description=None):
    return named_type('OBJECT', name, description=description,
                      fields=list(fields), interfaces=list(interfaces))

def scalar_type(name, description=None):
    return named_type('SCALAR', name, description=description)

def enum_value(name, description=None, deprecated=False, reason=None):
    return {
        'name': name,
        'description': description,
        'isDeprecated': deprecated,
        'deprecationReason': reason,
    }

def directive(name, locations, args=(), description=None):
    return {
        'name': name,
        'description': description,
        'locations': list(locations),
        'args': list(args),
    }

def introspection(types, directives=(), query='Query', mutation=None, subscription=None):
    def root(name):
        return {'name': name} if name else None
    return {
        'data': {
            '__schema': {
                'queryType': root(query),
                'mutationType': root(mutation),
                'subscriptionType': root(subscription),
                'types': list(types),
                'directives': list(directives),
            }
        }
    }


# Query { user(id: ID!): User }, User { id: ID!, name: String }
USER_TYPES = [
    object_type('Query', [
        field('user', named('User', 'OBJECT'), args=[input_value('id', non_null(named('ID')))]),
    ]),
    object_type('User', [
        field('id', non_null(named('ID'))),
        field('name', named('String')),
    ]),
    scalar_type('ID'),
    scalar_type('String'),
]

INCLUDE_DIRECTIVE = directive(
    'include',
    ['FIELD', 'FRAGMENT_SPREAD', 'INLINE_FRAGMENT'],
    args=[input_value('if', non_null(named('Boolean')))],
)
