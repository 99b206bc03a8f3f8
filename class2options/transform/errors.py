"""
Exceptions raised while rewriting a class component declaration.

Every error is scoped to the declaration being rewritten; the visitor
records it and leaves that declaration untouched.
"""
from typing import Optional


class TransformError(Exception):
    """Base exception for declaration rewrite failures"""
    def __init__(self, message: str, declaration: Optional[str] = None):
        self.message = message
        self.declaration = declaration
        super().__init__(message)

    def __str__(self) -> str:
        if self.declaration:
            return f"{self.declaration}: {self.message}"
        return self.message


class StructuralError(TransformError):
    """Component marker present on a class that has no extends clause"""


class MissingGetter(TransformError):
    """A computed property was declared with a setter but no getter"""
    def __init__(self, name: str, declaration: Optional[str] = None):
        self.name = name
        super().__init__(f"No getter defined for computed property '{name}'", declaration)


class MalformedDecoratorArgument(TransformError):
    """Hook or Watch decorator without a non-empty string literal first argument"""
    def __init__(self, decorator: str, detail: str, declaration: Optional[str] = None):
        self.decorator = decorator
        self.detail = detail
        super().__init__(f"Malformed @{decorator} argument: {detail}", declaration)


class SuperOutsideCall(TransformError):
    """super used anywhere other than as the target of a method call"""
    def __init__(self, member: str, declaration: Optional[str] = None):
        self.member = member
        super().__init__(
            f"'super' in '{member}' can only be used to call a base method",
            declaration,
        )
