from class2options.transform import JSParser, NodeFactory, visit_each_child
from class2options.transform.nodes import (
    expression_text,
    is_abstract,
    key_name,
    property_name,
)


def test_expression_text_of_member_chains():
    assert expression_text(JSParser.parse_expression("a.b[c].d")) == 'a.b[c].d'
    assert expression_text(JSParser.parse_expression("ns.Hook('x')")) == "ns.Hook('x')"
    assert expression_text(JSParser.parse_expression("x => x")) == ''


def test_key_name_variants():
    factory = NodeFactory()

    assert key_name(factory.identifier('foo')) == 'foo'
    assert key_name(factory.literal(1)) == '1'
    assert key_name(factory.literal('a-b'), computed=True) == 'a-b'
    assert key_name(JSParser.parse_expression("Symbol.iterator"), computed=True) == 'Symbol.iterator'
    assert key_name(None) == ''


def test_property_name_skips_spreads_and_dynamic_keys():
    obj = JSParser.parse_expression("{ a: 1, 'b': 2, ['c']: 3, [d]: 4 }")

    assert [property_name(prop) for prop in obj['properties']] == ['a', 'b', 'c', None]
    assert property_name(NodeFactory.spread(NodeFactory.identifier('e'))) is None


def test_property_key_quotes_non_identifiers():
    factory = NodeFactory()

    assert factory.property_key('created') == {'type': 'Identifier', 'name': 'created'}
    assert factory.property_key('user.name')['type'] == 'Literal'


def test_is_abstract():
    assert is_abstract({'type': 'TSAbstractPropertyDefinition'})
    assert is_abstract({'type': 'PropertyDefinition', 'abstract': True})
    assert not is_abstract({'type': 'MethodDefinition'})


def test_visit_each_child_returns_same_node_when_unchanged():
    node = JSParser.parse_expression("a + b")

    assert visit_each_child(node, lambda child: child) is node


def test_visit_each_child_splices_and_drops_list_items():
    factory = NodeFactory()
    block = factory.block([
        factory.expression_statement(factory.identifier('keep')),
        factory.expression_statement(factory.identifier('drop')),
        factory.expression_statement(factory.identifier('split')),
    ])

    def visitor(statement):
        name = statement['expression']['name']
        if name == 'drop':
            return None
        if name == 'split':
            return [statement, statement]
        return statement

    result = visit_each_child(block, visitor)

    assert [s['expression']['name'] for s in result['body']] == ['keep', 'split', 'split']
    assert len(block['body']) == 3


def test_visit_each_child_wraps_statement_lists_in_single_slot():
    factory = NodeFactory()
    node = {'type': 'LabeledStatement', 'label': factory.identifier('x'), 'body': factory.block([])}
    replacement = [factory.expression_statement(factory.literal(1))] * 2

    result = visit_each_child(node, lambda child: replacement if child['type'] == 'BlockStatement' else child)

    assert result['body'] == {'type': 'BlockStatement', 'body': replacement}


def test_string_literals_are_quoted():
    assert NodeFactory.literal("it's")['raw'] == "'it\\'s'"
    assert NodeFactory.literal(None)['raw'] == 'null'
