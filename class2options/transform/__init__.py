"""
Class Component to Options Object Transformer

Rewrites decorator-annotated component classes into the plain options
object consumed by the runtime's `extend` factory:

- ClassComponentTransformer: Transforms every component class in a Program
- transformer: Visitor factory for host pipelines
- DeclarationTransformer: Rewrites a single class declaration

Nodes are ESTree-shaped dictionaries; input trees are never modified.
"""

from .transformer import (
    ClassComponentTransformer,
    DeclarationTransformer,
    TransformContext,
    transformer,
    transform_program,
)
from .parser import JSParser, ParseError
from .nodes import NodeFactory, visit_each_child
from .errors import (
    TransformError,
    StructuralError,
    MissingGetter,
    MalformedDecoratorArgument,
    SuperOutsideCall,
)
from .types import Node, TransformResult

__all__ = [
    "ClassComponentTransformer",
    "DeclarationTransformer",
    "TransformContext",
    "transformer",
    "transform_program",
    "JSParser",
    "ParseError",
    "NodeFactory",
    "visit_each_child",
    "TransformError",
    "StructuralError",
    "MissingGetter",
    "MalformedDecoratorArgument",
    "SuperOutsideCall",
    "Node",
    "TransformResult",
]
