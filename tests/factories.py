"""
Builders for class component trees.

esprima parses method bodies and decorator expressions; decorators and
class fields are attached by hand since esprima does not parse them.
"""
from typing import Any, Dict, List, Optional, Sequence

from class2options.transform import JSParser
from class2options.transform.nodes import property_name


def decorators(*codes: str) -> List[Dict[str, Any]]:
    return [JSParser.parse_decorator(code) for code in codes]


def method(code: str, *decorator_codes: str) -> Dict[str, Any]:
    """A single method or accessor, e.g. method("onFoo() {}", "Watch('foo')")."""
    member = JSParser.parse_class_body(code)[0]
    return {**member, 'decorators': decorators(*decorator_codes)}


def field(
    name: str,
    initializer: Optional[str] = None,
    *decorator_codes: str,
    computed: bool = False
) -> Dict[str, Any]:
    """A class field, e.g. field("foo", None, "Prop({ default: 'foo' })")."""
    key = JSParser.parse_expression(name) if computed else {'type': 'Identifier', 'name': name}
    return {
        'type': 'PropertyDefinition',
        'key': key,
        'computed': computed,
        'static': False,
        'value': JSParser.parse_expression(initializer) if initializer else None,
        'decorators': decorators(*decorator_codes),
    }


def component(
    members: Sequence[Dict[str, Any]] = (),
    name: Optional[str] = 'My',
    base: Optional[str] = 'Vue',
    marker: Optional[str] = 'Component({})',
) -> Dict[str, Any]:
    """A ClassDeclaration, decorated with the component marker unless marker is None."""
    return {
        'type': 'ClassDeclaration',
        'id': {'type': 'Identifier', 'name': name} if name else None,
        'superClass': JSParser.parse_expression(base) if base else None,
        'body': {'type': 'ClassBody', 'body': list(members)},
        'decorators': decorators(marker) if marker else [],
    }


def program(*statements: Dict[str, Any]) -> Dict[str, Any]:
    return {'type': 'Program', 'sourceType': 'module', 'body': list(statements)}


def options_of(statement: Dict[str, Any]) -> Dict[str, Any]:
    """Options object passed to Base.extend() in a const declaration."""
    return statement['declarations'][0]['init']['arguments'][0]


def keys(obj: Dict[str, Any]) -> List[Optional[str]]:
    return [property_name(prop) for prop in obj['properties']]


def value(obj: Dict[str, Any], name: str) -> Dict[str, Any]:
    for prop in obj['properties']:
        if property_name(prop) == name:
            return prop['value']
    raise KeyError(name)
