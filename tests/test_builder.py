from class2options.transform import NodeFactory
from class2options.transform.builder import DeclarationBuilder, can_transform
from class2options.transform.nodes import expression_text

from tests.factories import component


def build(settings, declaration, **kwargs):
    options = NodeFactory.object_expression([])
    return DeclarationBuilder(NodeFactory(), settings).build(declaration, options, **kwargs)


def test_const_binding_calls_extend_on_base(settings):
    [statement] = build(settings, component([], name='Card', base='ui.Base'))

    assert statement['kind'] == 'const'
    declarator = statement['declarations'][0]
    assert declarator['id'] == {'type': 'Identifier', 'name': 'Card'}
    assert expression_text(declarator['init']['callee']) == 'ui.Base.extend'
    assert declarator['init']['arguments'] == [NodeFactory.object_expression([])]


def test_default_export_wins_over_named(settings):
    statements = build(settings, component([]), export_default=True, export_named=True)

    assert [s['type'] for s in statements] == ['VariableDeclaration', 'ExportDefaultDeclaration']


def test_base_reference_is_copied(settings):
    declaration = component([])

    [statement] = build(settings, declaration)

    callee = statement['declarations'][0]['init']['callee']
    assert callee['object'] == declaration['superClass']
    assert callee['object'] is not declaration['superClass']


def test_guard_requires_name_and_base():
    assert can_transform(component([]))
    assert not can_transform(component([], name=None))
    assert not can_transform(component([], base=None))
