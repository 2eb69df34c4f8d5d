"""Usage: file_printer <input> <output> [OPTIONS]"""
import sys

from argus import ArgumentSchema
from argus.parser.value_parsers import parse_int


def parse_positive_int(text: str) -> tuple[int, int | None]:
    value, consumed = parse_int(text)
    if value < 0:
        raise ValueError(f"{value} is not a positive integer")
    return value, consumed


schema = ArgumentSchema()
schema.add_required("input_file", label="input", description="Input file path")
schema.add_required("output_file", label="output", description="Output file path")
schema.add_optional(
    "pattern",
    short="c",
    long="contains",
    arg_label="pattern",
    default="",
    description="Print only lines containing the pattern",
)
schema.add_optional(
    "threads", "uint", short="t", long="threads", default=1,
    description="Number of threads to use",
)
schema.add_optional(
    "head", "int", short="h", long="head", arg_label="lines", default=-1,
    description="Number of lines to print from start", parser=parse_positive_int,
)
schema.add_optional(
    "tail", "int", short="T", long="tail", arg_label="lines", default=-1,
    description="Number of lines to print from end", parser=parse_positive_int,
)
schema.add_boolean("sort", short="s", long="sort", description="Sort lines")
schema.add_boolean("reverse", short="r", long="reverse", description="Print in reverse")
schema.add_boolean("help", long="help", description="Print help")


def select_lines(lines: list[str], args) -> list[str]:
    if args.pattern:
        lines = [line for line in lines if args.pattern in line]
    if args.sort:
        lines = sorted(lines)
    if args.reverse:
        lines = lines[::-1]
    if args.head >= 0:
        lines = lines[: args.head]
    if args.tail >= 0:
        lines = lines[len(lines) - args.tail :] if args.tail else []
    return lines


def main() -> None:
    args = schema.parse_or_exit(sys.argv)

    with open(args.input_file, encoding="UTF-8") as source:
        lines = source.read().splitlines()
    with open(args.output_file, "w", encoding="UTF-8") as target:
        for line in select_lines(lines, args):
            target.write(f"{line}\n")
    print(f"Processing {args.input_file} -> {args.output_file} with {args.threads} thread(s)")


if __name__ == "__main__":
    main()
