"""
Decorator inspection helpers.

A decorator is either bare (@Hook) or applied as a call (@Hook('created')).
The two shapes are always told apart by checking for a CallExpression.
"""
from typing import List, Optional

from .nodes import expression_text
from .types import Node


def _is_call(decorator: Node) -> bool:
    return decorator['expression'].get('type') == 'CallExpression'


def decorator_name(decorator: Node) -> str:
    """
    Get the logical name of a decorator.

    @Watch('foo') and @Watch both yield "Watch"; @ns.Prop() yields "ns.Prop".
    """
    expression = decorator['expression']

    if _is_call(decorator):
        return expression_text(expression['callee'])

    return expression_text(expression)


def decorator_argument(decorator: Node, index: int) -> Optional[Node]:
    """
    Get a positional argument of a decorator call.

    Returns:
        The argument node, or None for bare decorators and missing arguments
    """
    if not _is_call(decorator):
        return None

    arguments = decorator['expression'].get('arguments', [])
    return arguments[index] if index < len(arguments) else None


def get_decorators(node: Node) -> List[Node]:
    return node.get('decorators') or []


def find_decorator(node: Node, name: str) -> Optional[Node]:
    """First decorator on a node with the given name."""
    for decorator in get_decorators(node):
        if decorator_name(decorator) == name:
            return decorator
    return None


def filter_decorators(node: Node, name: str) -> List[Node]:
    """All decorators on a node with the given name, in source order."""
    return [d for d in get_decorators(node) if decorator_name(d) == name]
