"""
Options object assembly.

Builds the final options literal from the component decorator's own object
and the per-declaration buckets, in a fixed order:

    <pre-existing keys>, methods, props, data(), watch, computed, <hook phases>

`methods` and `props` are always present; the rest only when non-empty.
"""
from typing import Dict, Any, List, Optional
import logging

from ..config import Settings
from .aggregators import DeclarationState
from .nodes import NodeFactory, is_object_expression, is_string_literal, property_name
from .types import Node

logger = logging.getLogger(__name__)


# Option keys owned by the transform
RESERVED_KEYS = ('methods', 'props', 'data', 'computed', 'watch')
# Reserved keys whose existing entries are kept alongside derived ones
UNION_KEYS = ('methods', 'props')


class ObjectAssembler:
    """
    Merges declaration buckets into an options ObjectExpression.

    Merge policy for keys already present in the decorator's object:
    - methods/props: existing entries first, derived entries appended
    - data/computed/watch and hook phases: the synthesized value replaces
      the existing one; an existing key with nothing synthesized is kept
    - any other key: passed through in place
    """

    def __init__(self, factory: NodeFactory, settings: Settings):
        self.factory = factory
        self.settings = settings

    def assemble(
        self,
        existing: Optional[Node],
        state: DeclarationState,
        component_name: Optional[str] = None
    ) -> Node:
        """
        Assemble the options object.

        Args:
            existing: First argument of the component decorator (used when it is an object literal)
            state: Buckets collected from the class members
            component_name: Class name, used when name injection is enabled

        Returns:
            New ObjectExpression

        Raises:
            MissingGetter: If a computed property has no getter
        """
        existing_properties: List[Node] = (
            list(existing['properties']) if is_object_expression(existing) else []
        )

        synthesized: Dict[str, Node] = {}
        synthesized['methods'] = self.factory.property(
            'methods', self._union(existing_properties, 'methods', state.methods)
        )
        synthesized['props'] = self.factory.property(
            'props', self._union(existing_properties, 'props', state.props)
        )

        if state.data:
            synthesized['data'] = self._build_data(state.data)
        if len(state.watch):
            synthesized['watch'] = self._build_watch(state.watch.paths)
        if len(state.computed):
            synthesized['computed'] = self._build_computed(state)

        for phase, references in state.hooks.phases.items():
            if phase in synthesized:
                logger.warning(f"Hook phase '{phase}' collides with the '{phase}' option and replaces it")
            synthesized[phase] = self._build_hook(phase, references)

        kept: List[Node] = []
        for prop in existing_properties:
            name = property_name(prop)
            if name not in synthesized:
                kept.append(prop)
            elif name in RESERVED_KEYS and name not in UNION_KEYS:
                logger.warning(f"Option '{name}' of {component_name or 'component'} replaced by class members")
            elif name not in UNION_KEYS:
                logger.warning(f"Option '{name}' of {component_name or 'component'} replaced by hook methods")

        properties = kept + list(synthesized.values())

        if self.settings.INJECT_COMPONENT_NAME and component_name:
            if not any(property_name(prop) == 'name' for prop in properties):
                properties.insert(0, self.factory.property('name', self.factory.literal(component_name)))

        return self.factory.object_expression(properties)

    def _union(self, existing_properties: List[Node], key: str, derived: List[Node]) -> Node:
        """
        Existing entries of an option object followed by derived ones.

        Array props (props: ['title', OTHER]) become `title: null` and
        `[OTHER]: null` entries; any other non-literal value
        (methods: sharedMethods) is spread into the new object.
        """
        merged: List[Node] = []

        for prop in existing_properties:
            if property_name(prop) != key:
                continue
            value = prop['value']
            if is_object_expression(value):
                merged.extend(value['properties'])
            elif value.get('type') == 'ArrayExpression':
                merged.extend(
                    self._array_entry(element) for element in value['elements'] if element is not None
                )
            else:
                merged.append(self.factory.spread(value))

        return self.factory.object_expression(merged + derived)

    def _array_entry(self, element: Node) -> Node:
        """One element of an array-form option as an object entry."""
        factory = self.factory

        if is_string_literal(element):
            return factory.property(element['value'], factory.literal(None))

        if element.get('type') == 'SpreadElement':
            # ...names -> ...Object.fromEntries(names.map(function (name) { return [name, null]; }))
            name = factory.identifier('name')
            pair = factory.function_expression(
                [name],
                factory.block([factory.return_statement(
                    factory.array_expression([factory.identifier('name'), factory.literal(None)])
                )])
            )
            entries = factory.call(factory.member(element['argument'], 'map'), [pair])
            return factory.spread(factory.call(
                factory.member(factory.identifier('Object'), 'fromEntries'), [entries]
            ))

        return factory.property(element, factory.literal(None), computed=True)

    def _build_data(self, data: List[Node]) -> Node:
        """data() { return { ...fields } }"""
        factory = self.factory
        body = factory.block([factory.return_statement(factory.object_expression(data))])
        return factory.method('data', [], body)

    def _build_watch(self, paths: Dict[str, List[Node]]) -> Node:
        """watch: { 'path': [ { ...options, handler: 'method' } ] }"""
        factory = self.factory
        entries = [
            factory.property(factory.literal(path), factory.array_expression(descriptors))
            for path, descriptors in paths.items()
        ]
        return factory.property('watch', factory.object_expression(entries))

    def _build_computed(self, state: DeclarationState) -> Node:
        """computed: { name: { get() {}, set(v) {} } }"""
        factory = self.factory
        entries = []

        for entry in state.computed.entries():
            getter = entry.getter['value']
            accessors = [factory.method('get', [], getter['body'], function=getter)]

            if entry.setter is not None:
                setter = entry.setter['value']
                accessors.append(factory.method('set', setter['params'], setter['body'], function=setter))

            entries.append(factory.property(
                factory.clone(entry.key),
                factory.object_expression(accessors),
                computed=entry.computed
            ))

        return factory.property('computed', factory.object_expression(entries))

    def _build_hook(self, phase: str, references: List[Node]) -> Node:
        """phase() { this[ref].apply(this, arguments); ... }"""
        factory = self.factory
        statements = [
            factory.expression_statement(factory.call(
                factory.member(factory.member(factory.this(), reference, computed=True), 'apply'),
                [factory.this(), factory.identifier('arguments')]
            ))
            for reference in references
        ]
        return factory.method(phase, [], factory.block(statements))


def assemble_options(
    existing: Optional[Node],
    state: DeclarationState,
    settings: Settings,
    component_name: Optional[str] = None
) -> Dict[str, Any]:
    """
    Convenience function to assemble an options object.

    Args:
        existing: Component decorator's first argument
        state: Collected buckets
        settings: Transform settings
        component_name: Class name

    Returns:
        Options ObjectExpression
    """
    return ObjectAssembler(NodeFactory(), settings).assemble(existing, state, component_name)
