"""
Class component to options object transformer.

Entry points:
- transformer(context): visitor factory for a host pipeline
- ClassComponentTransformer / transform_program: transform a whole Program
- DeclarationTransformer: the single-pass rewrite of one class declaration
"""
from typing import Callable, Dict, List, Optional
import logging

from ..config import Settings, settings as default_settings
from .aggregators import DeclarationState
from .assembler import ObjectAssembler
from .builder import DeclarationBuilder, can_transform
from .classifier import MemberKind, classify_member, concrete_members, member_name
from .decorators import decorator_argument, decorator_name, find_decorator, get_decorators
from .errors import StructuralError, TransformError
from .nodes import NodeFactory, is_object_expression, visit_each_child
from .rewriter import SuperCallRewriter
from .types import ClassDeclarationNode, Node, TransformResult

logger = logging.getLogger(__name__)


EXPORT_TYPES = ('ExportDefaultDeclaration', 'ExportNamedDeclaration')


class TransformContext:
    """
    Services and diagnostics shared by one traversal.

    Attributes:
        settings: Transform settings
        factory: Node construction service
        errors: Messages for declarations aborted by a fatal error
        warnings: Messages for declarations rejected by the structural guard
    """

    def __init__(self, settings: Optional[Settings] = None, factory: Optional[NodeFactory] = None):
        self.settings = settings or default_settings
        self.factory = factory or NodeFactory()
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, error: str):
        self.errors.append(error)

    def add_warning(self, warning: str):
        self.warnings.append(warning)


class DeclarationTransformer:
    """
    Rewrites one component class declaration.

    A fresh DeclarationState is created per call, so instances can be
    reused across declarations.
    """

    def __init__(self, context: TransformContext):
        self.context = context
        self.settings = context.settings
        self.factory = context.factory
        self.assembler = ObjectAssembler(self.factory, self.settings)
        self.builder = DeclarationBuilder(self.factory, self.settings)

    def transform(
        self,
        declaration: ClassDeclarationNode,
        export_default: bool = False,
        export_named: bool = False
    ) -> List[Node]:
        """
        Rewrite a component class into `const Name = Base.extend({...})`.

        Args:
            declaration: ClassDeclaration carrying the component decorator
            export_default: Re-export the binding as default
            export_named: Re-export the binding by name

        Returns:
            Replacement statements

        Raises:
            StructuralError: If the class has no name or no extends clause
            MissingGetter: If a computed property has only a setter
            MalformedDecoratorArgument: If a Hook/Watch decorator lacks a string argument
            SuperOutsideCall: If super is used outside a method call
        """
        if not can_transform(declaration):
            raise StructuralError("component class needs a name and an extends clause")

        name = declaration['id']['name']

        try:
            state = DeclarationState(self.factory, self.settings)
            rewriter = SuperCallRewriter(declaration['superClass'], self.factory, self.settings)

            handlers: Dict[MemberKind, Callable[[Node, DeclarationState, SuperCallRewriter], None]] = {
                MemberKind.ACCESSOR: self._collect_accessor,
                MemberKind.INPUT_FIELD: self._collect_input_field,
                MemberKind.RESERVED_FIELD: self._skip_member,
                MemberKind.DATA_FIELD: self._collect_data_field,
                MemberKind.METHOD: self._collect_method,
                MemberKind.OTHER: self._skip_member,
            }

            for member in concrete_members(declaration, self.settings):
                kind = classify_member(member, self.settings)
                rewriter.member = member_name(member)
                handlers[kind](member, state, rewriter)

            component = find_decorator(declaration, self.settings.COMPONENT_DECORATOR)
            existing = decorator_argument(component, 0) if component else None
            options = self.assembler.assemble(existing, state, name)

        except TransformError as e:
            if e.declaration is None:
                e.declaration = name
            raise

        logger.info(
            f"Rewrote component '{name}': {len(state.methods)} methods, {len(state.props)} props, "
            f"{len(state.data)} data, {len(state.computed)} computed, {len(state.watch)} watched, "
            f"{len(state.hooks)} hooks"
        )

        return self.builder.build(declaration, options, export_default, export_named)

    def _collect_accessor(self, member: Node, state: DeclarationState, rewriter: SuperCallRewriter):
        state.computed.add({**member, 'value': rewriter.rewrite(member['value'])})

    def _collect_input_field(self, member: Node, state: DeclarationState, rewriter: SuperCallRewriter):
        decorator = find_decorator(member, self.settings.PROP_DECORATOR)
        options = decorator_argument(decorator, 0)
        properties = list(options['properties']) if is_object_expression(options) else []

        state.props.append(self.factory.property(
            member['key'],
            self.factory.object_expression(properties),
            computed=member.get('computed', False)
        ))

    def _collect_data_field(self, member: Node, state: DeclarationState, rewriter: SuperCallRewriter):
        initializer = member.get('value')
        initializer = rewriter.rewrite(initializer) if initializer else self.factory.identifier('undefined')

        state.data.append(self.factory.property(
            member['key'],
            initializer,
            computed=member.get('computed', False)
        ))

    def _collect_method(self, member: Node, state: DeclarationState, rewriter: SuperCallRewriter):
        function = rewriter.rewrite(member['value'])

        state.methods.append(self.factory.method(
            member['key'],
            function['params'],
            function['body'],
            computed=member.get('computed', False),
            function=function
        ))

        for decorator in get_decorators(member):
            name = decorator_name(decorator)
            if name == self.settings.HOOK_DECORATOR:
                state.hooks.add(decorator, member)
            elif name == self.settings.WATCH_DECORATOR:
                state.watch.add(decorator, member)

    def _skip_member(self, member: Node, state: DeclarationState, rewriter: SuperCallRewriter):
        logger.debug(f"Skipping member '{member_name(member)}' ({member.get('type')})")


def transformer(context: TransformContext) -> Callable[[Node], Node]:
    """
    Create a tree visitor for one source tree.

    Component classes (bare or wrapped in an export) are replaced by their
    options form. A declaration that fails keeps its original node; the
    failure is logged and recorded on the context.

    Args:
        context: Host services and diagnostics collector

    Returns:
        Function taking the root node and returning the rewritten root
    """
    settings = context.settings
    declarations = DeclarationTransformer(context)

    def visit_children(declaration: Node, export: Optional[Node]) -> Node:
        visited = visit_each_child(declaration, visit)
        if export is None or visited is declaration:
            return export or visited
        return {**export, 'declaration': visited}

    def visit_class(declaration: Node, export: Optional[Node] = None):
        original = export or declaration

        if not find_decorator(declaration, settings.COMPONENT_DECORATOR):
            return visit_children(declaration, export)

        if not can_transform(declaration):
            if not declaration.get('id'):
                message = "Anonymous component class left unchanged"
            else:
                message = str(StructuralError(
                    "component class has no extends clause",
                    declaration['id'].get('name')
                ))
            logger.warning(message)
            context.add_warning(message)
            return visit_children(declaration, export)

        try:
            return declarations.transform(
                declaration,
                export_default=bool(export) and export['type'] == 'ExportDefaultDeclaration',
                export_named=bool(export) and export['type'] == 'ExportNamedDeclaration'
            )
        except TransformError as e:
            logger.error(f"Component rewrite failed: {e}")
            context.add_error(str(e))
            if settings.FAIL_FAST:
                raise
            return original

    def visit(node: Node):
        node_type = node.get('type')

        if node_type in EXPORT_TYPES:
            inner = node.get('declaration') or {}
            if inner.get('type') == 'ClassDeclaration':
                return visit_class(inner, node)

        if node_type == 'ClassDeclaration':
            return visit_class(node)

        return visit_each_child(node, visit)

    def transform_root(root: Node) -> Node:
        return visit_each_child(root, visit)

    return transform_root


class ClassComponentTransformer:
    """
    Transforms every component class in a Program.

    Example:
        transformer = ClassComponentTransformer()
        result = transformer.transform(program)
        result['program']   # rewritten tree
        result['errors']    # declarations left untouched
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def transform(self, program: Node) -> TransformResult:
        """
        Transform a Program node.

        Args:
            program: ESTree Program (not modified)

        Returns:
            TransformResult with the rewritten program, errors, and warnings
        """
        context = TransformContext(self.settings)
        rewritten = transformer(context)(program)

        return {
            'program': rewritten,
            'errors': context.errors,
            'warnings': context.warnings
        }


def transform_program(program: Node, settings: Optional[Settings] = None) -> TransformResult:
    """
    Convenience function to transform a Program.

    Args:
        program: ESTree Program
        settings: Optional settings (defaults to the global settings)

    Returns:
        TransformResult with the rewritten program
    """
    return ClassComponentTransformer(settings).transform(program)
