"""
Declaration builder.

Replaces a class declaration with a factory call bound to a const:

    export default class My extends Vue { ... }

becomes

    const My = Vue.extend({ ... });
    export default My;
"""
from typing import List

from ..config import Settings
from .nodes import NodeFactory
from .types import ClassDeclarationNode, Node


def can_transform(declaration: ClassDeclarationNode) -> bool:
    """A declaration needs both a name and an extends clause to be rewritten."""
    return bool(declaration.get('id')) and bool(declaration.get('superClass'))


class DeclarationBuilder:
    """Builds the replacement statements for a rewritten declaration."""

    def __init__(self, factory: NodeFactory, settings: Settings):
        self.factory = factory
        self.settings = settings

    def build(
        self,
        declaration: ClassDeclarationNode,
        options: Node,
        export_default: bool = False,
        export_named: bool = False
    ) -> List[Node]:
        """
        Build the replacement statements.

        Args:
            declaration: Original ClassDeclaration (name and base are taken from it)
            options: Assembled options ObjectExpression
            export_default: The class was declared with `export default`
            export_named: The class was declared with `export`

        Returns:
            The const declaration, followed by an export statement when needed
        """
        factory = self.factory
        name = declaration['id']

        extend_call = factory.call(
            factory.member(factory.clone(declaration['superClass']), self.settings.FACTORY_METHOD),
            [options]
        )
        statements = [factory.const_declaration(factory.clone(name), extend_call)]

        if export_default:
            statements.append(factory.export_default(factory.clone(name)))
        elif export_named:
            statements.append(factory.export_named([factory.clone(name)]))

        return statements
