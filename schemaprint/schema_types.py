"""Shapes of the raw JSON returned by the standard introspection query.

Only used for annotations; `schemaprint.types` turns these into frozen objects.
"""
from typing import List, Optional, TypedDict

TypeRef = TypedDict('TypeRef',
                    {
                        'kind': str,  # NON_NULL / LIST / SCALAR / OBJECT ...
                        'name': Optional[str],
                        'ofType': Optional['TypeRef']
                    }, total=False)

InputValue = TypedDict('InputValue',
                       {
                           'name': str,
                           'description': Optional[str],
                           'type': TypeRef,
                           'defaultValue': Optional[str],  # a gql literal, e.g. "\"USER\"" or "10"
                           'isDeprecated': bool,
                           'deprecationReason': Optional[str],
                       }, total=False)

Field = TypedDict('Field',
                  {
                      'name': str,
                      'description': Optional[str],
                      'args': List[InputValue],
                      'type': TypeRef,
                      'isDeprecated': bool,
                      'deprecationReason': Optional[str],
                  }, total=False)

EnumValue = TypedDict('EnumValue',
                      {
                          'name': str,
                          'description': Optional[str],
                          'isDeprecated': bool,
                          'deprecationReason': Optional[str],
                      }, total=False)

SchemaType = TypedDict('SchemaType',
                       {
                           'kind': str,
                           'name': str,
                           'description': Optional[str],
                           'fields': Optional[List[Field]],
                           'inputFields': Optional[List[InputValue]],
                           'interfaces': Optional[List[TypeRef]],
                           'enumValues': Optional[List[EnumValue]],
                           'possibleTypes': Optional[List[TypeRef]],
                       }, total=False)

Directive = TypedDict('Directive',
                      {
                          'name': str,
                          'description': Optional[str],
                          'locations': List[str],
                          'args': List[InputValue],
                          'isRepeatable': bool,
                      }, total=False)

RootType = TypedDict('RootType', {'name': str})

Schema = TypedDict('Schema',
                   {
                       'queryType': Optional[RootType],
                       'mutationType': Optional[RootType],
                       'subscriptionType': Optional[RootType],
                       'types': List[SchemaType],
                       'directives': List[Directive],
                   }, total=False)
