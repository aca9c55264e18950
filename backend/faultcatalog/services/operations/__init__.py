from __future__ import annotations

"""backend/faultcatalog/services/operations/__init__.py

Operation registry.

This module exposes a single convenience helper `get_default_demonstrations`
that binds every demonstrated operation to the input that triggers its
failure, in the fixed order the CLI runs them:

- file and stream access (io_operations)
- name resolution, arithmetic, indexing, casting, bounds, parsing and
  custom validation (runtime_operations)
"""

from functools import partial

from .base import Demonstration  # noqa: F401
from .io_operations import (  # noqa: F401
    connect_to_external_resource,
    open_and_read_file,
    open_input_stream,
    read_past_end_of_stream,
)
from .runtime_operations import (  # noqa: F401
    custom_validation,
    dereference_null,
    divide,
    index_access,
    load_named_type,
    parse_integer,
    set_priority,
    type_cast,
)


def get_default_demonstrations() -> list[Demonstration]:
    return [
        Demonstration(
            "open_and_read_file",
            partial(open_and_read_file, "nonexistent.txt"),
            "read a text file that does not exist",
        ),
        Demonstration(
            "open_input_stream",
            partial(open_input_stream, "nonexistent.txt"),
            "open a byte stream on a missing file",
        ),
        Demonstration(
            "read_past_end_of_stream",
            partial(read_past_end_of_stream, b"", 4),
            "read four bytes from an empty stream",
        ),
        Demonstration(
            "connect_to_external_resource",
            partial(connect_to_external_resource, "invalid-url"),
            "connect to a URL without a scheme",
        ),
        Demonstration(
            "load_named_type",
            partial(load_named_type, "com.example.NonExistentClass"),
            "resolve a dotted name that does not exist",
        ),
        Demonstration("divide", partial(divide, 10, 0), "divide by zero"),
        Demonstration(
            "dereference_null",
            partial(dereference_null, None),
            "call a method on a missing reference",
        ),
        Demonstration(
            "index_access",
            partial(index_access, [1, 2, 3], 5),
            "index past the end of a list",
        ),
        Demonstration(
            "type_cast",
            partial(type_cast, "Hello", int),
            "treat a string as an int",
        ),
        Demonstration(
            "set_priority",
            partial(set_priority, 11),
            "set a priority above the accepted range",
        ),
        Demonstration(
            "parse_integer",
            partial(parse_integer, "InvalidNumber"),
            "parse a non-numeric string",
        ),
        Demonstration(
            "custom_validation",
            partial(custom_validation, False, "This is a custom exception!"),
            "fail a caller-defined precondition",
        ),
    ]
