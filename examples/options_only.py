"""Usage: options_only [-c<config>] [-v] [--disable-cache] [-h]"""
import sys

from argus import ArgumentSchema, BooleanArgument, OptionalArgument

schema = ArgumentSchema(
    optional=[
        OptionalArgument(
            "config_file",
            short="c",
            long="config",
            arg_label="config",
            default="config.ini",
            description="Configuration file path",
        ),
    ],
    boolean=[
        BooleanArgument("verbose", short="v", long="verbose", description="Verbose output"),
        BooleanArgument("no_cache", long="disable-cache", description="Disable the use of cache"),
        BooleanArgument("help", short="h", long="help", description="Show help"),
    ],
)


def main() -> None:
    args = schema.parse_or_exit(sys.argv)

    print(f"Configuration file: {args.config_file}")
    print(f"Verbose: {'On' if args.verbose else 'Off'}")
    print(f"Using cache: {'No' if args.no_cache else 'Yes'}")


if __name__ == "__main__":
    main()
