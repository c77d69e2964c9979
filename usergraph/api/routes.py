from ariadne import ObjectType

from usergraph.api.data import find_user

query = ObjectType("RootQueryType")

@query.field("user")
def resolve_user(_, info, **args):
    return find_user(args.get("id"))
