from typing import Optional

import structlog

from ringqueue.algorithms import merge
from ringqueue.listhead import ListHead
from ringqueue.models import QueueContext, context
from ringqueue.queue import create, destroy, size

logger = structlog.getLogger(__name__)


def create_chain() -> ListHead:
    return ListHead()


def add_queue(chain: ListHead, q: Optional[ListHead] = None) -> QueueContext:
    if q is None:
        q = create()
    last = chain.back()
    ctx_id = context(last).id + 1 if last is not None else 0
    ctx = QueueContext(q=q, id=ctx_id, size=size(q))
    chain.insert_before(ctx)
    return ctx


def destroy_chain(chain: Optional[ListHead]):
    if chain is None:
        return
    for node in chain:
        ctx = context(node)
        destroy(ctx.q)
        ctx.size = 0
        ctx.remove_init()


def _advance(chain: ListHead, node: ListHead, steps: int) -> Optional[ListHead]:
    for _ in range(steps):
        node = node.next
        if node is chain:
            return None
    return node


def _absorb(dst: QueueContext, src: QueueContext, descend: bool):
    left = ListHead()
    left.splice(dst.q)
    merge(dst.q, left, src.q, descend)
    dst.size += src.size
    src.size = 0


def merge_k(chain: Optional[ListHead], descend: bool = False) -> int:
    """Merge every sorted sub-queue of ``chain`` into the first one.

    Sub-queues are merged pairwise in rounds of doubling stride; ties keep
    elements of the sub-queue nearer the front of the chain first. Returns
    the number of elements in the merged queue.
    """
    if chain is None or chain.empty():
        return 0
    queues = 0
    for node in chain:
        ctx = context(node)
        ctx.size = size(ctx.q)
        queues += 1

    stride = 1
    while True:
        left = _advance(chain, chain, 1)
        right = _advance(chain, left, stride) if left is not None else None
        if right is None:
            break
        while left is not None and right is not None:
            _absorb(context(left), context(right), descend)
            left = _advance(chain, right, stride)
            right = _advance(chain, left, stride) if left is not None else None
        stride *= 2

    first = context(chain.next)
    logger.debug("merged", op="merge_k", queues=queues, size=first.size)
    return first.size
