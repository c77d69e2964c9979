from typing import Any, Dict, Optional, Tuple

from ariadne import make_executable_schema, graphql_sync

from . import settings
from .typedefs import type_defs
from .routes import query
from .utils.logger import log_execution

schema = make_executable_schema(type_defs, [query], convert_names_case=True)

def execute_query(
    source: str,
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None,
) -> Tuple[bool, dict]:
    """
    Run a GraphQL document against the schema.

    Returns ariadne's (success, result) pair; result is the standard
    envelope with "data" and, when something went wrong, "errors".
    """
    data = {"query": source, "variables": variables, "operationName": operation_name}

    success, result = graphql_sync(
        schema,
        data,
        context_value=context or {},
        debug=settings.DEBUG,
        introspection=settings.INTROSPECTION,
    )
    log_execution(operation_name, success, result.get("errors"))
    return success, result
