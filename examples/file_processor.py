"""Usage: file_processor <input> <output> [-t<threads>] [-h]"""
import sys

from argus import ArgumentSchema

schema = ArgumentSchema()
schema.add_required("input_file", label="input", description="Input file path")
schema.add_required("output_file", label="output", description="Output file path")
schema.add_optional(
    "threads",
    "uint",
    short="t",
    long="threads",
    arg_label="threads",
    default=1,
    description="Number of threads to use",
)
schema.add_boolean("help", short="h", long="help", description="Show help")


def main() -> None:
    args = schema.parse_or_exit(sys.argv)
    print(f"Processing {args.input_file} -> {args.output_file}")
    print(f"Threads: {args.threads}")


if __name__ == "__main__":
    main()
