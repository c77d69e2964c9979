import argparse
import json
import sys

from usergraph import __version__
from usergraph.api import execute_query

def parse_variables(value):
    try:
        variables = json.loads(value)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON: {e}")
    if not isinstance(variables, dict):
        raise argparse.ArgumentTypeError("variables must be a JSON object")
    return variables

def build_parser():
    parser = argparse.ArgumentParser(description="Run a GraphQL query against the user schema")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("query", nargs="?", help="Query document (read from stdin when omitted)")
    source.add_argument("--file", help="Read the query document from a file")
    parser.add_argument("--variables", type=parse_variables, help="Query variables as a JSON object")
    parser.add_argument("--operation", help="Operation name to execute")
    parser.add_argument("--indent", type=int, default=None, help="Indent the JSON output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file:
        try:
            with open(args.file) as f:
                source = f.read()
        except OSError as e:
            parser.error(f"cannot read query file: {e}")
    elif args.query is not None:
        source = args.query
    else:
        source = sys.stdin.read()

    success, result = execute_query(source, variables=args.variables, operation_name=args.operation)
    print(json.dumps(result, indent=args.indent, ensure_ascii=False))
    return 0 if success else 1

if __name__ == "__main__":
    sys.exit(main())
