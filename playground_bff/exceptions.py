class UnsupportedExpressionError(NotImplementedError):
    """Raised when an expression cannot be rendered as GraphQL."""

    def __init__(self, expression: object, reason: str):
        self.expression = expression
        self.message = f"{reason}: {expression!r}"

        super().__init__(self.message)
