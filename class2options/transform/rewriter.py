"""
Rewrites calls through `super` into explicit base method invocations.

    super.save(a, b)   ->  Base.options.methods.save.call(this, a, b)
    super[key](a)      ->  Base.options.methods[key].call(this, a)

The options object has no implicit base, so any other use of `super`
(property reads, bare super() calls) cannot be expressed and is an error.
Nested classes and object literal methods keep their own `super`.
"""
from ..config import Settings
from .errors import SuperOutsideCall
from .nodes import NodeFactory, is_node, visit_each_child
from .types import Node


CLASS_TYPES = ('ClassDeclaration', 'ClassExpression')


class SuperCallRewriter:
    """
    Rewrites super calls inside one member body.

    Attributes:
        base: Base reference expression from the extends clause
        member: Name of the member being rewritten, for error messages
    """

    def __init__(self, base: Node, factory: NodeFactory, settings: Settings, member: str = ""):
        self.base = base
        self.factory = factory
        self.settings = settings
        self.member = member

    def rewrite(self, node: Node) -> Node:
        """
        Rewrite every super call below a node.

        Args:
            node: Function or statement node (left unmodified)

        Returns:
            The node itself when it contains no super references, otherwise a new node

        Raises:
            SuperOutsideCall: If super appears outside call position
        """
        return self._visit(node)

    def _visit(self, node: Node) -> Node:
        node_type = node.get('type')

        if node_type == 'CallExpression' and self._is_super_call(node):
            return self._rewrite_call(node)

        if node_type == 'Super':
            raise SuperOutsideCall(self.member)

        # Nested classes and object literal methods bind their own super
        if node_type in CLASS_TYPES:
            return self._visit_fields(node, ('superClass',))
        if node_type == 'Property' and (node.get('method') or node.get('kind') in ('get', 'set')):
            return self._visit_fields(node, ('key',) if node.get('computed') else ())

        return visit_each_child(node, self._visit)

    def _visit_fields(self, node: Node, fields) -> Node:
        """Visit only the named children of a node."""
        updates = {}
        for field in fields:
            child = node.get(field)
            if is_node(child):
                result = self._visit(child)
                if result is not child:
                    updates[field] = result

        return {**node, **updates} if updates else node

    @staticmethod
    def _is_super_call(node: Node) -> bool:
        callee = node.get('callee') or {}
        return (
            callee.get('type') == 'MemberExpression'
            and (callee.get('object') or {}).get('type') == 'Super'
        )

    def _rewrite_call(self, node: Node) -> Node:
        """Build Base.options.methods[key].call(this, ...args)."""
        factory = self.factory
        callee = node['callee']

        # Arguments and computed keys may hold super calls of their own;
        # they are rewritten here so the new subtree is never revisited.
        arguments = [self._visit(arg) for arg in node.get('arguments', [])]
        computed = callee.get('computed', False)
        key = self._visit(callee['property']) if computed else factory.clone(callee['property'])

        methods = factory.member(
            factory.member(factory.clone(self.base), self.settings.BASE_OPTIONS_ACCESSOR),
            'methods'
        )
        method = factory.member(methods, key, computed=computed)

        return factory.call(factory.member(method, 'call'), [factory.this(), *arguments])
