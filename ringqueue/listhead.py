from typing import Iterator, Optional


class ListHead:
    """Node of a circular doubly-linked ring.

    A ring is anchored by a sentinel ``ListHead`` that never carries data.
    Records that live in a ring subclass ``ListHead`` so the node and its
    owner are the same object.
    """

    __slots__ = ["prev", "next"]

    def __init__(self):
        self.prev: "ListHead" = self
        self.next: "ListHead" = self

    def init(self):
        self.prev = self
        self.next = self

    def __insert(self, new: "ListHead", prev: "ListHead", nxt: "ListHead"):
        nxt.prev = new
        new.next = nxt
        new.prev = prev
        prev.next = new

    def __unlink(self):
        self.prev.next = self.next
        self.next.prev = self.prev

    def insert_after(self, new: "ListHead"):
        self.__insert(new, self, self.next)

    def insert_before(self, new: "ListHead"):
        self.__insert(new, self.prev, self)

    def remove(self):
        # own pointers are left as they were
        self.__unlink()

    def remove_init(self):
        self.__unlink()
        self.init()

    def empty(self) -> bool:
        return self.next is self

    def is_singular(self) -> bool:
        return not self.empty() and self.next is self.prev

    def move(self, head: "ListHead"):
        self.__unlink()
        head.insert_after(self)

    def move_tail(self, head: "ListHead"):
        self.__unlink()
        head.insert_before(self)

    def __splice(self, other: "ListHead", prev: "ListHead", nxt: "ListHead"):
        first = other.next
        last = other.prev
        first.prev = prev
        prev.next = first
        last.next = nxt
        nxt.prev = last
        other.init()

    def splice(self, other: "ListHead"):
        """Move every node of ring ``other`` right after this node."""
        if not other.empty():
            self.__splice(other, self, self.next)

    def splice_tail(self, other: "ListHead"):
        """Move every node of ring ``other`` right before this node."""
        if not other.empty():
            self.__splice(other, self.prev, self)

    def cut_position(self, into: "ListHead", entry: "ListHead"):
        """Move the nodes from the front of this ring up to and including
        ``entry`` into the empty sentinel ``into``.

        ``entry`` must belong to this ring; passing the sentinel itself
        leaves ``into`` empty.
        """
        if self.empty():
            return
        if self.is_singular() and entry is not self.next and entry is not self:
            return
        if entry is self:
            into.init()
            return
        new_first = entry.next
        into.next = self.next
        into.next.prev = into
        into.prev = entry
        entry.next = into
        self.next = new_first
        new_first.prev = self

    def front(self) -> Optional["ListHead"]:
        if self.empty():
            return None
        return self.next

    def back(self) -> Optional["ListHead"]:
        if self.empty():
            return None
        return self.prev

    def __iter__(self) -> Iterator["ListHead"]:
        node = self.next
        while node is not self:
            # the body may unlink or move node
            nxt = node.next
            yield node
            node = nxt

    def __reversed__(self) -> Iterator["ListHead"]:
        node = self.prev
        while node is not self:
            prev = node.prev
            yield node
            node = prev
