"""
Class member classification.

Every non-abstract member lands in exactly one bucket.
"""
from enum import Enum
import logging

from ..config import Settings
from .decorators import find_decorator, get_decorators, decorator_name
from .nodes import is_abstract, key_name
from .types import ClassMemberNode, Node

logger = logging.getLogger(__name__)


class MemberKind(str, Enum):
    """Buckets for class members"""
    ACCESSOR = "accessor"
    INPUT_FIELD = "input_field"
    RESERVED_FIELD = "reserved_field"
    DATA_FIELD = "data_field"
    METHOD = "method"
    OTHER = "other"


FIELD_TYPES = ('PropertyDefinition',)
METHOD_TYPES = ('MethodDefinition',)


def member_name(member: ClassMemberNode) -> str:
    return key_name(member.get('key'), member.get('computed', False))


def classify_member(member: ClassMemberNode, settings: Settings) -> MemberKind:
    """
    Classify a class member. First matching rule wins:

    1. get/set accessor            -> ACCESSOR
    2. field with input decorator  -> INPUT_FIELD
    3. field named with the sigil  -> RESERVED_FIELD (dropped)
    4. any other field             -> DATA_FIELD
    5. plain method                -> METHOD
    6. anything else               -> OTHER (ignored)

    Args:
        member: Non-abstract class member
        settings: Decorator names and reserved sigil

    Returns:
        The member's bucket
    """
    member_type = member.get('type')

    if member_type in METHOD_TYPES:
        kind = member.get('kind')
        if kind in ('get', 'set'):
            return MemberKind.ACCESSOR
        if kind == 'method':
            return MemberKind.METHOD
        return MemberKind.OTHER

    if member_type in FIELD_TYPES:
        if find_decorator(member, settings.PROP_DECORATOR):
            return MemberKind.INPUT_FIELD
        if member_name(member).startswith(settings.RESERVED_FIELD_SIGIL):
            return MemberKind.RESERVED_FIELD
        return MemberKind.DATA_FIELD

    return MemberKind.OTHER


def concrete_members(declaration: Node, settings: Settings) -> list:
    """
    Members of a class body with abstract members removed.

    Unknown decorators are reported at debug level; they are stripped from
    the output along with the known ones.
    """
    known = set(settings.decorator_names())
    members = []

    for member in declaration['body'].get('body', []):
        if is_abstract(member):
            continue

        for decorator in get_decorators(member):
            name = decorator_name(decorator)
            if name not in known:
                logger.debug(f"Ignoring unrecognized decorator @{name} on '{member_name(member)}'")

        members.append(member)

    return members
