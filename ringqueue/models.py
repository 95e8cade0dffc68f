from typing import Optional, cast

from ringqueue.listhead import ListHead


class Element(ListHead):
    __slots__ = ["value"]

    value: str

    def __init__(self, value: str):
        super().__init__()
        self.value = value

    @property
    def released(self) -> bool:
        return not hasattr(self, "value")

    def release(self):
        self.init()
        if not self.released:
            del self.value

    def __repr__(self):
        if self.released:
            return "<Element released>"
        return f"<Element {self.value!r}>"


class QueueContext(ListHead):
    """Entry of a chain: links one sub-queue into an outer queue."""

    __slots__ = ["q", "size", "id"]

    def __init__(self, q: ListHead, id: int, size: int = 0):
        super().__init__()
        self.q = q
        self.id = id
        self.size = size

    def __repr__(self):
        return f"<QueueContext id={self.id} size={self.size}>"


def entry(node: ListHead) -> Element:
    return cast(Element, node)


def context(node: ListHead) -> QueueContext:
    return cast(QueueContext, node)


def release_element(e: Optional[Element]):
    if e is None:
        return
    e.release()
