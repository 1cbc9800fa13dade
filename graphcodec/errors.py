"""Exceptions raised by the object/graph codec.

Only schema problems are raised. A node whose type cannot be determined
during decoding is logged and decoded to an empty dict instead.
"""


class GraphCodecError(Exception):
    """Base exception for graphcodec"""
    pass


class SchemaError(GraphCodecError, ValueError):
    """The schema cannot describe the requested object or type"""
    pass


class UnknownTypeError(SchemaError, KeyError):
    """A type key is not registered in the schema"""

    def __init__(self, type_key: str):
        super().__init__(f"Unknown type: {type_key!r}")
        self.type_key = type_key

    def __str__(self) -> str:
        return self.args[0]


class SchemaCycleError(SchemaError):
    """A chain of ``extends`` declarations loops back on itself"""

    def __init__(self, cycle: list[str]):
        super().__init__(f"Cyclic extends chain: {' → '.join(cycle)}")
        self.cycle = cycle


class MissingTypeDiscriminatorError(SchemaError):
    """A multi-type property value carries no ``type`` field"""
    pass


class MissingPropertyError(SchemaError):
    """A required property is absent from the object being built"""
    pass
