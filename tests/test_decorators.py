from class2options.transform.decorators import (
    decorator_argument,
    decorator_name,
    filter_decorators,
    find_decorator,
)

from tests.factories import decorators, method


def test_name_of_call_and_bare_decorators():
    call, bare, member = decorators("Hook('created')", "Hook", "lib.Prop({})")

    assert decorator_name(call) == 'Hook'
    assert decorator_name(bare) == 'Hook'
    assert decorator_name(member) == 'lib.Prop'


def test_arguments_only_exist_on_calls():
    call, bare = decorators("Watch('foo', { deep: true })", "Watch")

    assert decorator_argument(call, 0)['value'] == 'foo'
    assert decorator_argument(call, 1)['type'] == 'ObjectExpression'
    assert decorator_argument(call, 2) is None
    assert decorator_argument(bare, 0) is None


def test_find_and_filter_keep_source_order():
    member = method("m() {}", "Watch('a')", "Hook('created')", "Watch('b')")

    assert decorator_argument(find_decorator(member, 'Watch'), 0)['value'] == 'a'
    assert [decorator_argument(d, 0)['value'] for d in filter_decorators(member, 'Watch')] == ['a', 'b']
    assert find_decorator(member, 'Prop') is None
    assert filter_decorators({'type': 'MethodDefinition'}, 'Watch') == []
