"""
Type definitions for the class component transform.

Nodes are ESTree-shaped dictionaries, the same shape JSParser produces.
"""
from typing import Dict, Any, List, TypedDict, Literal


Node = Dict[str, Any]


class DecoratorNode(TypedDict):
    """
    A decorator attached to a class or class member.

    Attributes:
        type: Always "Decorator"
        expression: Either the bare decorator expression (@Hook) or a
                    CallExpression when applied with arguments (@Hook('created'))
    """
    type: Literal["Decorator"]
    expression: Node


class ClassMemberNode(TypedDict, total=False):
    """
    A member of a ClassBody.

    Attributes:
        type: MethodDefinition, PropertyDefinition or a TSAbstract* variant
        key: Member name node
        computed: True for [expr] names
        kind: method, get, set or constructor (MethodDefinition only)
        value: FunctionExpression for methods, initializer (or None) for fields
        decorators: Decorators in source order
        abstract: Set by TypeScript-aware parsers for abstract members
    """
    type: str
    key: Node
    computed: bool
    kind: Literal["method", "get", "set", "constructor"]
    value: Node
    decorators: List[DecoratorNode]
    static: bool
    abstract: bool


class ClassDeclarationNode(TypedDict, total=False):
    """
    A class declaration.

    Attributes:
        id: Identifier naming the class (None for anonymous default exports)
        superClass: Base reference expression from the extends clause
        body: ClassBody holding the members
        decorators: Class decorators in source order
    """
    type: Literal["ClassDeclaration"]
    id: Node
    superClass: Node
    body: Node
    decorators: List[DecoratorNode]


class TransformResult(TypedDict):
    """
    Result of transforming a program.

    Attributes:
        program: The rewritten Program node
        errors: Messages for declarations that were left untouched due to fatal errors
        warnings: Messages for declarations that were rejected by the structural guard
    """
    program: Node
    errors: List[str]
    warnings: List[str]
