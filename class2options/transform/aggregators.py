"""
Aggregators for cross-member options: computed properties, lifecycle hooks
and watchers.

All state here is owned by a single DeclarationState and lives only for the
duration of one declaration rewrite.
"""
from typing import Dict, List, Optional

from ..config import Settings
from .decorators import decorator_argument
from .errors import MissingGetter, MalformedDecoratorArgument
from .nodes import NodeFactory, expression_text, is_object_expression, is_string_literal, key_name
from .types import Node


def member_reference(member: Node, factory: NodeFactory) -> Node:
    """
    Expression evaluating to a member's name at runtime.

    Static names become string literals; computed names keep their key
    expression so that symbols and constants still resolve.
    """
    key = member['key']

    if member.get('computed') and not is_string_literal(key):
        return factory.clone(key)

    return factory.literal(key_name(key, member.get('computed', False)))


def required_string_argument(decorator: Node, decorator_label: str) -> str:
    """
    First decorator argument as a non-empty string.

    Raises:
        MalformedDecoratorArgument: If the argument is missing, not a string literal or empty
    """
    argument = decorator_argument(decorator, 0)

    if argument is None:
        raise MalformedDecoratorArgument(decorator_label, "expected a string literal argument, got nothing")
    if not is_string_literal(argument):
        found = expression_text(argument) or argument.get('type', 'unknown')
        raise MalformedDecoratorArgument(decorator_label, f"expected a string literal argument, got {found}")
    if not argument['value']:
        raise MalformedDecoratorArgument(decorator_label, "expected a non-empty string, got ''")

    return argument['value']


class ComputedEntry:
    """A computed property built from a getter and an optional setter."""

    def __init__(self, name: str, key: Node, computed: bool):
        self.name = name
        self.key = key
        self.computed = computed
        self.getter: Optional[Node] = None
        self.setter: Optional[Node] = None


class AccessorAggregator:
    """Pairs get/set accessors by name, whichever comes first."""

    def __init__(self):
        self._entries: Dict[str, ComputedEntry] = {}

    def add(self, member: Node):
        computed = member.get('computed', False)
        name = key_name(member['key'], computed)

        entry = self._entries.get(name)
        if entry is None:
            entry = self._entries[name] = ComputedEntry(name, member['key'], computed)

        if member['kind'] == 'get':
            entry.getter = member
        else:
            entry.setter = member

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> List[ComputedEntry]:
        """
        Completed entries in first-declaration order.

        Raises:
            MissingGetter: If an entry only has a setter
        """
        for entry in self._entries.values():
            if entry.getter is None:
                raise MissingGetter(entry.name)
        return list(self._entries.values())


class HookAggregator:
    """Groups method references by lifecycle phase."""

    def __init__(self, factory: NodeFactory, settings: Settings):
        self.factory = factory
        self.settings = settings
        self.phases: Dict[str, List[Node]] = {}

    def add(self, decorator: Node, method: Node):
        phase = required_string_argument(decorator, self.settings.HOOK_DECORATOR)
        self.phases.setdefault(phase, []).append(member_reference(method, self.factory))

    def __len__(self) -> int:
        return len(self.phases)


class WatchAggregator:
    """Groups handler descriptors by watched path."""

    def __init__(self, factory: NodeFactory, settings: Settings):
        self.factory = factory
        self.settings = settings
        self.paths: Dict[str, List[Node]] = {}

    def add(self, decorator: Node, method: Node):
        path = required_string_argument(decorator, self.settings.WATCH_DECORATOR)

        options = decorator_argument(decorator, 1)
        properties = list(options['properties']) if is_object_expression(options) else []
        properties.append(
            self.factory.property('handler', member_reference(method, self.factory))
        )

        self.paths.setdefault(path, []).append(self.factory.object_expression(properties))

    def __len__(self) -> int:
        return len(self.paths)


class DeclarationState:
    """
    Buckets and aggregators for one declaration.

    Attributes:
        methods: Method-shorthand properties (decorators stripped, super rewritten)
        props: Input-field properties
        data: Data-field properties
        computed: Accessor aggregator
        hooks: Lifecycle hook aggregator
        watch: Watcher aggregator
    """

    def __init__(self, factory: NodeFactory, settings: Settings):
        self.methods: List[Node] = []
        self.props: List[Node] = []
        self.data: List[Node] = []
        self.computed = AccessorAggregator()
        self.hooks = HookAggregator(factory, settings)
        self.watch = WatchAggregator(factory, settings)
