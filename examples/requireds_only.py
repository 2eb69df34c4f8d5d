"""Usage: requireds_only source.txt destination.txt"""
import sys

from argus import ArgumentSchema, ParseError, report_error

schema = ArgumentSchema()
schema.add_required("source", label="source", description="Source file")
schema.add_required("destination", label="dest", description="Destination file")


def main() -> int:
    try:
        args = schema.parse(sys.argv)
    except ParseError as error:
        report_error(error)
        schema.print_help(sys.argv[0])
        return 1

    print(f"Copying {args.source} to {args.destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
