"""
JavaScript Parser wrapper using esprima.

Parses JavaScript snippets to ESTree-compatible dict trees. esprima does not
understand decorators or class fields, so hosts parse those pieces
separately and assemble the declaration nodes themselves.
"""
from typing import Dict, Any, List
import esprima

from .types import DecoratorNode


# Placeholder base used to make `super` legal inside parsed member snippets
SNIPPET_BASE = '__SnippetBase__'


class ParseError(Exception):
    """Raised when a JavaScript snippet cannot be parsed"""
    def __init__(self, message: str, line: int = 0, column: int = 0, source: str = ""):
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        super().__init__(f"Cannot parse snippet ({line}:{column}): {message}")


class JSParser:
    """
    JavaScript parser that converts JavaScript code to AST.

    Uses esprima to parse JavaScript and returns an ESTree-compatible AST.
    """

    @staticmethod
    def parse(code: str, module: bool = True) -> Dict[str, Any]:
        """
        Parse a JavaScript program to AST.

        Args:
            code: JavaScript code to parse
            module: Parse as an ES module (import/export allowed)

        Returns:
            Program AST as a dictionary

        Raises:
            ParseError: If parsing fails
        """
        try:
            if module:
                ast = esprima.parseModule(code)
            else:
                ast = esprima.parseScript(code)
            return JSParser._node_to_dict(ast)
        except esprima.Error as e:
            raise ParseError(getattr(e, 'description', None) or str(e),
                             getattr(e, 'lineNumber', 0), getattr(e, 'column', 0), code)

    @staticmethod
    def parse_expression(code: str) -> Dict[str, Any]:
        """
        Parse a single JavaScript expression.

        Args:
            code: JavaScript expression to parse

        Returns:
            Expression AST as a dictionary
        """
        # Wrap in parentheses to ensure it's parsed as expression
        program = JSParser.parse(f"({code})", module=False)
        body = program.get('body', [])
        if not body or body[0].get('type') != 'ExpressionStatement':
            raise ParseError("not an expression", source=code)
        return body[0]['expression']

    @staticmethod
    def parse_class_body(code: str) -> List[Dict[str, Any]]:
        """
        Parse class members (methods and accessors).

        The snippet is placed inside a class with an extends clause so that
        super references inside member bodies are accepted.

        Args:
            code: Class body source, e.g. "get foo() { return 1 } bar() {}"

        Returns:
            List of MethodDefinition nodes in source order
        """
        expression = JSParser.parse_expression(f"class extends {SNIPPET_BASE} {{ {code} }}")
        return expression['body']['body']

    @staticmethod
    def parse_decorator(code: str) -> DecoratorNode:
        """
        Parse a decorator without its leading '@'.

        Args:
            code: Decorator expression, e.g. "Watch('foo', { deep: true })"

        Returns:
            Decorator node
        """
        return {'type': 'Decorator', 'expression': JSParser.parse_expression(code)}

    @staticmethod
    def _node_to_dict(node: Any) -> Any:
        """Convert an esprima node, or a list of them, to plain dicts."""
        if isinstance(node, list):
            return [JSParser._node_to_dict(item) for item in node]

        if not hasattr(node, '__dict__'):
            return node

        return {
            key: JSParser._node_to_dict(value)
            for key, value in vars(node).items()
            if not key.startswith('_')
        }
