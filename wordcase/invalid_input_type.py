"""Error raised when a value cannot be converted into words."""


class InvalidInputType(TypeError):
    """Raised for values that are neither text nor numbers."""

    def __init__(self, type_name: str) -> None:
        """Record the offending type name and build the message."""
        self.type_name = type_name
        super().__init__(f"expected a string or number, got {type_name}")
