import pytest

from graphql import build_schema, introspection_from_schema
from schemaprint import load_schema

STARWARS_SDL = '''
schema {
  query: Query
  mutation: Mutation
  subscription: Subscription
}

"""An ISO-8601 timestamp."""
scalar DateTime

"""The episodes in the Star Wars trilogy"""
enum Episode {
  "Released in 1977."
  NEWHOPE
  EMPIRE
  JEDI
  HOLIDAY_SPECIAL @deprecated(reason: "We don't talk about it.")
}

interface Node {
  id: ID!
}

"""A character in the Star Wars trilogy."""
interface Character implements Node {
  id: ID!
  name: String
  friends: [Character]
  appearsIn: [Episode!]!
}

type Human implements Character & Node {
  id: ID!
  name: String
  friends: [Character]
  appearsIn: [Episode!]!
  homePlanet: String
  height(unit: LengthUnit = METER): Float
}

"""
A mechanical creature.
Says \\"""beep\\""" a lot.
"""
type Droid implements Character & Node {
  id: ID!
  name: String
  friends: [Character]
  appearsIn: [Episode!]!
  primaryFunction: String @deprecated
}

type Starship implements Node {
  id: ID!
  name: String!
  coordinates: [[Float!]!]
}

enum LengthUnit {
  METER
  FOOT
}

union SearchResult = Human | Droid | Starship

input ReviewInput {
  stars: Int! = 5
  "Free-form text"
  commentary: String = "none"
}

type Review {
  stars: Int!
  commentary: String
  createdAt: DateTime
}

type Query {
  hero(episode: Episode = NEWHOPE): Character
  human(id: ID!): Human
  droid(id: ID!): Droid
  search(
    "Matched against names"
    text: String!
    first: Int = 10
  ): [SearchResult!]!
}

type Mutation {
  createReview(episode: Episode, review: ReviewInput!): Review
}

type Subscription {
  reviewAdded(episode: Episode): Review
}

"""Hint for caches."""
directive @cacheControl(maxAge: Int) on FIELD_DEFINITION | OBJECT
'''


@pytest.fixture(scope='session')
def starwars_schema():
    yield build_schema(STARWARS_SDL)

@pytest.fixture(scope='session')
def starwars_introspection(starwars_schema):
    yield {'data': introspection_from_schema(starwars_schema)}

@pytest.fixture(scope='session')
def starwars_document(starwars_introspection):
    yield load_schema(starwars_introspection)
