import pytest

from argus.parser import ArgumentSchema


@pytest.fixture
def file_processor():
    schema = ArgumentSchema(program="file_processor")
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
    return schema


@pytest.fixture
def cluster_schema():
    schema = ArgumentSchema()
    schema.add_optional("threads", "uint", short="t", long="threads", default=1)
    schema.add_boolean("verbose", short="v", long="verbose")
    schema.add_boolean("extract", short="x")
    return schema
