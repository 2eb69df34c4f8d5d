import pytest

from argus.exceptions import (
    InvalidValue,
    MissingRequiredArgument,
    OptionRequiresValue,
    ParseError,
    SchemaError,
    TrailingUnparsedInput,
    UnexpectedPositionalArgument,
    UnknownFlag,
)
from argus.parser import ArgumentSchema
from argus.parser.value_parsers import parse_int


def test_end_to_end(file_processor):
    args = file_processor.parse(["prog", "in.txt", "out.txt", "-t4"])
    assert args == {
        "input_file": "in.txt",
        "output_file": "out.txt",
        "threads": 4,
        "help": False,
    }
    assert args.threads == 4


def test_defaults_when_options_absent(file_processor):
    args = file_processor.parse(["prog", "in.txt", "out.txt"])
    assert args.threads == 1
    assert args.help is False


def test_long_options(file_processor):
    args = file_processor.parse(["prog", "a", "b", "--threads", "8", "--help"])
    assert args.threads == 8
    assert args.help is True


def test_options_in_any_order(file_processor):
    args = file_processor.parse(["prog", "a", "b", "-h", "--threads", "2"])
    assert args.threads == 2
    assert args.help is True


def test_last_occurrence_wins(file_processor):
    args = file_processor.parse(["prog", "a", "b", "-t2", "--threads", "3", "-t5"])
    assert args.threads == 5


def test_short_cluster(cluster_schema):
    args = cluster_schema.parse(["prog", "-vxt4"])
    assert args == {"threads": 4, "verbose": True, "extract": True}


def test_short_cluster_resumes_after_value(cluster_schema):
    args = cluster_schema.parse(["prog", "-t4v"])
    assert args.threads == 4
    assert args.verbose is True
    assert args.extract is False


def test_short_value_requires_inline_text(cluster_schema):
    with pytest.raises(OptionRequiresValue) as excinfo:
        cluster_schema.parse(["prog", "-t", "4"])
    assert excinfo.value.option == "-t"
    assert str(excinfo.value) == "Option '-t' requires a value"


def test_short_value_invalid(cluster_schema):
    with pytest.raises(InvalidValue) as excinfo:
        cluster_schema.parse(["prog", "-vtx"])
    assert excinfo.value.argument == "threads"
    assert excinfo.value.raw_text == "x"


def test_unknown_short_flag(cluster_schema):
    with pytest.raises(UnknownFlag) as excinfo:
        cluster_schema.parse(["prog", "-vq"])
    assert excinfo.value.flag == "q"
    assert str(excinfo.value) == "Invalid flag '-q' in '-vq'"


def test_long_option_missing_value_leaves_container_untouched(file_processor):
    container = file_processor.make_default()
    before = container.as_dict()
    with pytest.raises(OptionRequiresValue) as excinfo:
        file_processor.parse(["prog", "a", "b", "-h", "--threads"], container)
    assert excinfo.value.option == "--threads"
    assert container == before


def test_long_option_trailing_input(file_processor):
    with pytest.raises(TrailingUnparsedInput) as excinfo:
        file_processor.parse(["prog", "a", "b", "--threads", "4x"])
    assert excinfo.value.raw_text == "4x"
    assert excinfo.value.option == "--threads"


def test_long_option_invalid_value(file_processor):
    with pytest.raises(InvalidValue, match="Invalid value 'many' for 'threads'"):
        file_processor.parse(["prog", "a", "b", "--threads", "many"])


def test_unsigned_rejects_negative(file_processor):
    with pytest.raises(InvalidValue, match="out of range"):
        file_processor.parse(["prog", "a", "b", "-t-1"])


def test_unknown_long_option_suggestions(file_processor):
    with pytest.raises(UnknownFlag) as excinfo:
        file_processor.parse(["prog", "a", "b", "--thread", "4"])
    assert excinfo.value.suggestions == ["--threads"]
    assert str(excinfo.value) == (
        "Unrecognized option '--thread'. Did you mean one of: --threads?"
    )


def test_unknown_long_option_without_suggestions(file_processor):
    with pytest.raises(UnknownFlag) as excinfo:
        file_processor.parse(["prog", "a", "b", "--bogus"])
    assert excinfo.value.suggestions == []
    assert str(excinfo.value) == "Unrecognized option '--bogus'"


def test_bare_double_dash_is_unknown(file_processor):
    with pytest.raises(UnknownFlag):
        file_processor.parse(["prog", "a", "b", "--"])


def test_missing_required(file_processor):
    with pytest.raises(MissingRequiredArgument) as excinfo:
        file_processor.parse(["prog", "in.txt"])
    error = excinfo.value
    assert (error.argument, error.expected, error.received) == ("output_file", 2, 1)
    assert str(error) == (
        "Not all required arguments included: missing <output> (expected 2, got 1)"
    )


def test_required_consumes_flag_looking_tokens(file_processor):
    args = file_processor.parse(["prog", "-t4", "out.txt"])
    assert args.input_file == "-t4"
    assert args.threads == 1


def test_unexpected_positional(file_processor):
    with pytest.raises(UnexpectedPositionalArgument) as excinfo:
        file_processor.parse(["prog", "a", "b", "extra"])
    assert str(excinfo.value) == "Invalid argument 'extra'"


def test_bare_dash_is_an_empty_cluster(file_processor):
    args = file_processor.parse(["prog", "a", "b", "-", "-t3", "-"])
    assert args.threads == 3
    assert args.help is False


def test_required_int_invalid():
    schema = ArgumentSchema()
    schema.add_required("count", "int")
    with pytest.raises(InvalidValue) as excinfo:
        schema.parse(["prog", "abc"])
    assert isinstance(excinfo.value, ParseError)
    assert "no digits" in excinfo.value.reason


def test_required_value_uses_parsed_prefix():
    schema = ArgumentSchema()
    schema.add_required("count", "int")
    schema.add_required("mode", "char")
    args = schema.parse(["prog", "4x", "ab"])
    assert args.count == 4
    assert args.mode == "a"


def test_required_value_without_digits_is_still_invalid():
    schema = ArgumentSchema()
    schema.add_required("count", "int")
    with pytest.raises(InvalidValue, match="no digits"):
        schema.parse(["prog", "x4"])


def test_custom_parser():
    def parse_positive_int(text):
        value, consumed = parse_int(text)
        if value < 0:
            raise ValueError(f"{value} is not a positive integer")
        return value, consumed

    schema = ArgumentSchema()
    schema.add_optional("head", "int", short="H", default=-1, parser=parse_positive_int)
    assert schema.parse(["prog", "-H10"]).head == 10
    assert schema.parse(["prog"]).head == -1
    with pytest.raises(InvalidValue, match="-3 is not a positive integer"):
        schema.parse(["prog", "-H-3"])


def test_broken_parser_is_a_schema_error():
    schema = ArgumentSchema()
    schema.add_required("value", parser=lambda text: None)
    with pytest.raises(SchemaError):
        schema.parse(["prog", "abc"])


def test_parse_is_idempotent(file_processor):
    argv = ["prog", "in.txt", "out.txt", "-ht3"]
    first = file_processor.parse(argv)
    second = file_processor.parse(argv)
    assert first == second
    assert first is not second


def test_parse_into_given_container(file_processor):
    container = file_processor.make_default()
    result = file_processor.parse(["prog", "a", "b"], container)
    assert result is container
    assert container.input_file == "a"


def test_program_alias_is_never_parsed(file_processor):
    args = file_processor.parse(["--threads", "a", "b"])
    assert args.threads == 1


def test_empty_argv():
    schema = ArgumentSchema()
    schema.add_boolean("verbose", short="v")
    assert schema.parse([]) == {"verbose": False}


def test_string_argv_is_rejected(file_processor):
    with pytest.raises(TypeError):
        file_processor.parse("prog a b")


def test_long_option_hex_float():
    schema = ArgumentSchema()
    schema.add_optional("ratio", "double", short="r", long="ratio", default=0.5)
    assert schema.parse(["prog", "--ratio", "0x1p3"]).ratio == 8.0
    assert schema.parse(["prog", "-r0x1p-1"]).ratio == 0.5
