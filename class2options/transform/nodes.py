"""
Node construction and traversal for ESTree-shaped dictionaries.

Nodes are never mutated: builders return fresh dicts and visit_each_child
returns a new parent whenever any child changed.
"""
from typing import Any, Callable, Dict, List, Optional, Union
from copy import deepcopy
import json
import re

from .types import Node


IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')

# Keys that never hold child nodes
NON_CHILD_KEYS = ('type', 'range', 'loc', 'raw', 'regex')

VisitResult = Union[Node, List[Node], None]
Visitor = Callable[[Node], VisitResult]


def is_node(value: Any) -> bool:
    """Check whether a value is an ESTree node dictionary."""
    return isinstance(value, dict) and 'type' in value


def is_string_literal(node: Optional[Node]) -> bool:
    """Check whether a node is a string Literal."""
    return bool(node) and node.get('type') == 'Literal' and isinstance(node.get('value'), str)


def is_object_expression(node: Optional[Node]) -> bool:
    return bool(node) and node.get('type') == 'ObjectExpression'


def is_abstract(member: Node) -> bool:
    """Abstract members come either flagged or as TSAbstract* node types."""
    return bool(member.get('abstract')) or member.get('type', '').startswith('TSAbstract')


def expression_text(node: Optional[Node]) -> str:
    """
    Render the source text of simple expressions.

    Covers identifiers, member chains, literals and calls, which is what
    decorator names and computed member names are made of.

    Args:
        node: Expression node

    Returns:
        Source-like text, or an empty string for unsupported expressions
    """
    if not node:
        return ""

    node_type = node.get('type')

    if node_type == 'Identifier':
        return node.get('name', '')
    if node_type == 'PrivateIdentifier':
        return '#' + node.get('name', '')
    if node_type == 'ThisExpression':
        return 'this'
    if node_type == 'Super':
        return 'super'
    if node_type == 'Literal':
        raw = node.get('raw')
        return raw if raw is not None else json.dumps(node.get('value'))
    if node_type == 'MemberExpression':
        obj = expression_text(node.get('object'))
        if node.get('computed'):
            return f"{obj}[{expression_text(node.get('property'))}]"
        return f"{obj}.{expression_text(node.get('property'))}"
    if node_type == 'CallExpression':
        args = ', '.join(expression_text(arg) for arg in node.get('arguments', []))
        return f"{expression_text(node.get('callee'))}({args})"

    return ""


def key_name(key: Optional[Node], computed: bool = False) -> str:
    """
    Get the name of a class member or property key.

    Identifier and literal keys yield their text; computed keys yield the
    text of the key expression.
    """
    if not key:
        return ""

    if not computed:
        if key.get('type') in ('Identifier', 'PrivateIdentifier'):
            return key.get('name', '')
        if key.get('type') == 'Literal':
            return str(key.get('value'))

    if is_string_literal(key):
        return key['value']

    return expression_text(key)


def property_name(prop: Node) -> Optional[str]:
    """
    Get the static name of an object literal property.

    Returns:
        The name, or None for spread elements and dynamic computed keys
    """
    if prop.get('type') != 'Property':
        return None

    key = prop.get('key') or {}
    if prop.get('computed'):
        return key['value'] if is_string_literal(key) else None

    if key.get('type') == 'Identifier':
        return key.get('name')
    if key.get('type') == 'Literal':
        return str(key.get('value'))

    return None


def visit_each_child(node: Node, visitor: Visitor) -> Node:
    """
    Visit the direct children of a node.

    Child nodes are replaced by the visitor's result. In list slots a list
    result is spliced in place and None removes the element.

    Args:
        node: Parent node (left unmodified)
        visitor: Callable invoked on each child node

    Returns:
        The original node when nothing changed, otherwise a new node
    """
    updates: Dict[str, Any] = {}

    for key, value in node.items():
        if key in NON_CHILD_KEYS:
            continue

        if is_node(value):
            result = visitor(value)
            if isinstance(result, list):
                # Statement lists in a single-statement slot become a block
                result = result[0] if len(result) == 1 else NodeFactory.block(result)
            if result is not value:
                updates[key] = result

        elif isinstance(value, list):
            items: List[Any] = []
            changed = False
            for item in value:
                if not is_node(item):
                    items.append(item)
                    continue

                result = visitor(item)
                if isinstance(result, list):
                    items.extend(result)
                    changed = True
                elif result is None:
                    changed = True
                else:
                    items.append(result)
                    changed = changed or result is not item

            if changed:
                updates[key] = items

    if not updates:
        return node

    return {**node, **updates}


class NodeFactory:
    """Builds ESTree nodes."""

    @staticmethod
    def clone(node: Node) -> Node:
        return deepcopy(node)

    @staticmethod
    def identifier(name: str) -> Node:
        return {'type': 'Identifier', 'name': name}

    @staticmethod
    def literal(value: Any) -> Node:
        if isinstance(value, str):
            raw = "'" + value.replace('\\', '\\\\').replace("'", "\\'") + "'"
        else:
            raw = json.dumps(value)
        return {'type': 'Literal', 'value': value, 'raw': raw}

    @staticmethod
    def this() -> Node:
        return {'type': 'ThisExpression'}

    def property_key(self, name: str) -> Node:
        """Identifier key for valid identifiers, string literal otherwise."""
        if IDENTIFIER_PATTERN.match(name):
            return self.identifier(name)
        return self.literal(name)

    def member(self, obj: Node, prop: Union[str, Node], computed: bool = False) -> Node:
        if isinstance(prop, str):
            prop = self.identifier(prop)
        return {
            'type': 'MemberExpression',
            'computed': computed,
            'object': obj,
            'property': prop,
        }

    @staticmethod
    def call(callee: Node, arguments: List[Node]) -> Node:
        return {
            'type': 'CallExpression',
            'callee': callee,
            'arguments': list(arguments),
            'optional': False,
        }

    @staticmethod
    def object_expression(properties: List[Node]) -> Node:
        return {'type': 'ObjectExpression', 'properties': list(properties)}

    @staticmethod
    def array_expression(elements: List[Node]) -> Node:
        return {'type': 'ArrayExpression', 'elements': list(elements)}

    @staticmethod
    def spread(argument: Node) -> Node:
        return {'type': 'SpreadElement', 'argument': argument}

    def property(self, key: Union[str, Node], value: Node, computed: bool = False) -> Node:
        if isinstance(key, str):
            key = self.property_key(key)
        return {
            'type': 'Property',
            'key': key,
            'computed': computed,
            'value': value,
            'kind': 'init',
            'method': False,
            'shorthand': False,
        }

    def method(
        self,
        key: Union[str, Node],
        params: List[Node],
        body: Node,
        computed: bool = False,
        function: Optional[Node] = None
    ) -> Node:
        """
        Build a method-shorthand property: key(params) { body }.

        Args:
            key: Property name or key node
            params: Parameter nodes
            body: BlockStatement
            computed: True for [expr]() { } keys
            function: Source FunctionExpression whose async/generator flags are kept
        """
        if isinstance(key, str):
            key = self.property_key(key)

        value = self.function_expression(params, body)
        if function:
            value['async'] = bool(function.get('async') or function.get('isAsync'))
            value['generator'] = bool(function.get('generator'))

        return {
            'type': 'Property',
            'key': key,
            'computed': computed,
            'value': value,
            'kind': 'init',
            'method': True,
            'shorthand': False,
        }

    @staticmethod
    def function_expression(params: List[Node], body: Node) -> Node:
        return {
            'type': 'FunctionExpression',
            'id': None,
            'params': list(params),
            'body': body,
            'generator': False,
            'async': False,
            'expression': False,
        }

    @staticmethod
    def block(statements: List[Node]) -> Node:
        return {'type': 'BlockStatement', 'body': list(statements)}

    @staticmethod
    def return_statement(argument: Optional[Node]) -> Node:
        return {'type': 'ReturnStatement', 'argument': argument}

    @staticmethod
    def expression_statement(expression: Node) -> Node:
        return {'type': 'ExpressionStatement', 'expression': expression}

    @staticmethod
    def const_declaration(identifier: Node, init: Node) -> Node:
        return {
            'type': 'VariableDeclaration',
            'kind': 'const',
            'declarations': [{
                'type': 'VariableDeclarator',
                'id': identifier,
                'init': init,
            }],
        }

    @staticmethod
    def export_default(declaration: Node) -> Node:
        return {'type': 'ExportDefaultDeclaration', 'declaration': declaration}

    @staticmethod
    def export_named(identifiers: List[Node]) -> Node:
        specifiers = [
            {
                'type': 'ExportSpecifier',
                'local': identifier,
                'exported': deepcopy(identifier),
            }
            for identifier in identifiers
        ]
        return {
            'type': 'ExportNamedDeclaration',
            'declaration': None,
            'specifiers': specifiers,
            'source': None,
        }
