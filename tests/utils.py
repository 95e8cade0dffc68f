from typing import Iterable, List

from ringqueue.listhead import ListHead
from ringqueue.models import entry
from ringqueue.queue import create, insert_tail


def build(values: Iterable[str]) -> ListHead:
    head = create()
    assert head is not None
    for v in values:
        assert insert_tail(head, v)
    return head


def walk(head: ListHead) -> List[str]:
    r = []
    el = head.next
    while el is not head:
        assert el.next.prev is el
        assert el.prev.next is el
        r.append(entry(el).value)
        el = el.next
    backward = []
    el = head.prev
    while el is not head:
        backward.append(entry(el).value)
        el = el.prev
    assert backward == r[::-1]
    return r


def assert_queue(order: str, head: ListHead):
    assert "-".join(walk(head)) == order
