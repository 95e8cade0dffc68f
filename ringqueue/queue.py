from typing import List, Optional

import structlog

from ringqueue.interfaces import Payload
from ringqueue.listhead import ListHead
from ringqueue.models import Element, entry, release_element
from ringqueue.settings import settings
from ringqueue.utils import to_bytes, to_text

logger = structlog.getLogger(__name__)


def create() -> Optional[ListHead]:
    try:
        return ListHead()
    except MemoryError:
        logger.debug("allocation failed", op="create")
        return None


def destroy(head: Optional[ListHead]):
    if head is None:
        return
    for node in head:
        node.remove()
        release_element(entry(node))
    head.init()


def _new_element(op: str, head: Optional[ListHead], s: Optional[Payload]) -> Optional[Element]:
    if head is None or s is None:
        logger.debug("invalid argument", op=op, head=head, payload=s)
        return None
    if not isinstance(s, (str, bytes, bytearray)):
        logger.debug("invalid payload type", op=op, type=type(s).__name__)
        return None
    try:
        value = to_text(s)
        # payloads must have a byte form for comparison and copy-out
        to_bytes(value)
        return Element(value)
    except UnicodeEncodeError:
        logger.debug("payload not encodable", op=op)
        return None
    except MemoryError:
        logger.debug("allocation failed", op=op)
        return None


def insert_head(head: Optional[ListHead], s: Optional[Payload]) -> bool:
    element = _new_element("insert_head", head, s)
    if element is None or head is None:
        return False
    head.insert_after(element)
    return True


def insert_tail(head: Optional[ListHead], s: Optional[Payload]) -> bool:
    element = _new_element("insert_tail", head, s)
    if element is None or head is None:
        return False
    head.insert_before(element)
    return True


def _copy_out(e: Element, sp: Optional[bytearray], bufsize: Optional[int]):
    if sp is None:
        return
    if bufsize is None:
        bufsize = settings.MAX_STRING_LENGTH
    if bufsize <= 0:
        return
    data = to_bytes(e.value)[: bufsize - 1] + b"\0"
    sp[: len(data)] = data


def remove_head(
    head: Optional[ListHead],
    sp: Optional[bytearray] = None,
    bufsize: Optional[int] = None,
) -> Optional[Element]:
    """Detach the first element, copying its payload into ``sp`` if given.

    At most ``bufsize - 1`` payload bytes are copied, always followed by a
    NUL byte. The caller owns the returned element.
    """
    if head is None or head.empty():
        return None
    e = entry(head.next)
    _copy_out(e, sp, bufsize)
    e.remove_init()
    return e


def remove_tail(
    head: Optional[ListHead],
    sp: Optional[bytearray] = None,
    bufsize: Optional[int] = None,
) -> Optional[Element]:
    if head is None or head.empty():
        return None
    e = entry(head.prev)
    _copy_out(e, sp, bufsize)
    e.remove_init()
    return e


def size(head: Optional[ListHead]) -> int:
    if head is None:
        return 0
    count = 0
    for _ in head:
        count += 1
    return count


def values(head: Optional[ListHead]) -> List[str]:
    if head is None:
        return []
    return [entry(node).value for node in head]
