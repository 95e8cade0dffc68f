from typing import Optional

import structlog

from ringqueue.listhead import ListHead
from ringqueue.models import entry, release_element
from ringqueue.queue import size
from ringqueue.utils import strcmp

logger = structlog.getLogger(__name__)


def _delete(node: ListHead):
    node.remove()
    release_element(entry(node))


def delete_middle(head: Optional[ListHead]) -> bool:
    if head is None or head.empty():
        return False
    slow = fast = head.next
    # for an even count this stops on the later of the two central nodes
    while fast is not head and fast.next is not head:
        slow = slow.next
        fast = fast.next.next
    _delete(slow)
    return True


def delete_duplicates(head: Optional[ListHead]) -> bool:
    """Delete every run of equal adjacent payloads, first occurrence included.

    The queue is expected to be sorted.
    """
    if head is None or head.empty():
        return False
    dup = False
    for node in head:
        nxt = node.next
        if nxt is not head and strcmp(entry(node).value, entry(nxt).value) == 0:
            dup = True
            _delete(node)
        elif dup:
            # last node of a run
            dup = False
            _delete(node)
    return True


def swap_pairs(head: Optional[ListHead]):
    if head is None or head.empty():
        return
    cur = head.next
    while cur is not head and cur.next is not head:
        cur.move(cur.next)
        cur = cur.next


def reverse(head: Optional[ListHead]):
    if head is None or head.empty():
        return
    for node in head:
        node.move(head)


def reverse_k(head: Optional[ListHead], k: int):
    if head is None or k <= 0:
        logger.debug("invalid argument", op="reverse_k", k=k)
        return
    remaining = size(head)
    if k == 1 or remaining < k:
        return
    prev = head
    cur = head.next
    while remaining >= k:
        start = cur
        for _ in range(k):
            nxt = cur.next
            cur.next = cur.prev
            cur.prev = nxt
            cur = nxt
        # cur is the first node past the group and still points back at
        # the group's old last node, which is its new first
        first = cur.prev
        prev.next = first
        first.prev = prev
        start.next = cur
        cur.prev = start
        prev = start
        remaining -= k


def _before(a: str, b: str, descend: bool) -> bool:
    if descend:
        return strcmp(a, b) >= 0
    return strcmp(a, b) <= 0


def merge(head: ListHead, left: ListHead, right: ListHead, descend: bool = False):
    """Merge sorted rings ``left`` and ``right`` onto the tail of ``head``.

    Ties are taken from ``left``. Both sources are left empty.
    """
    cur = head.prev
    while not left.empty() and not right.empty():
        if _before(entry(left.next).value, entry(right.next).value, descend):
            left.next.move(cur)
        else:
            right.next.move(cur)
        cur = cur.next
    remaining = right if left.empty() else left
    cur.splice(remaining)


def sort(head: Optional[ListHead], descend: bool = False):
    if head is None or head.empty() or head.is_singular():
        return
    slow = head.next
    fast = head.next.next
    while fast is not head and fast.next is not head:
        slow = slow.next
        fast = fast.next.next

    left = ListHead()
    right = ListHead()
    head.cut_position(left, slow)
    right.splice(head)

    sort(left, descend)
    sort(right, descend)
    merge(head, left, right, descend)


def prune_ascending(head: Optional[ListHead]) -> int:
    """Remove every element that has a strictly smaller one to its right.

    Returns the number of elements left.
    """
    if head is None or head.empty():
        return 0
    count = 0
    minimum = ""
    for node in reversed(head):
        value = entry(node).value
        if count and strcmp(value, minimum) > 0:
            _delete(node)
        else:
            count += 1
            minimum = value
    return count


def prune_descending(head: Optional[ListHead]) -> int:
    """Remove every element that has a strictly greater one to its right.

    Returns the number of elements left.
    """
    if head is None or head.empty():
        return 0
    count = 0
    maximum = ""
    for node in reversed(head):
        value = entry(node).value
        if count and strcmp(value, maximum) < 0:
            _delete(node)
        else:
            count += 1
            maximum = value
    return count
