# usergraph/api/typedefs.py
"""
Type definitions for the user lookup: one root field, user(id), returning
the User shape. Resolvers live in routes.py and are bound in __init__.py.
Every field is nullable: a lookup miss is returned as null, not an error.
"""

type_defs = """
schema {
  query: RootQueryType
}

type RootQueryType {
  user(id: String): User
}

type User {
  id: String
  firstName: String
  age: Int
}
"""
