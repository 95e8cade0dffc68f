import random

import pytest
from structlog.testing import capture_logs

from ringqueue.algorithms import sort
from ringqueue.merge import add_queue, create_chain, destroy_chain, merge_k
from ringqueue.models import context, entry
from ringqueue.queue import create, size

from tests.utils import assert_queue, build, walk


def test_add_queue():
    chain = create_chain()
    first = add_queue(chain)
    second = add_queue(chain, build(["a", "b"]))
    assert first.id == 0
    assert second.id == 1
    assert first.size == 0
    assert second.size == 2
    assert [context(n) for n in chain] == [first, second]


def test_merge_k():
    chain = create_chain()
    add_queue(chain, build(["a", "d", "g"]))
    add_queue(chain, build(["b", "e"]))
    add_queue(chain, build(["c", "f", "h", "i"]))
    assert merge_k(chain) == 9
    contexts = [context(n) for n in chain]
    assert_queue("a-b-c-d-e-f-g-h-i", contexts[0].q)
    assert contexts[0].size == 9
    for ctx in contexts[1:]:
        assert ctx.q.empty()
        assert ctx.size == 0


def test_merge_k_descend():
    chain = create_chain()
    add_queue(chain, build(["g", "d", "a"]))
    add_queue(chain, build(["e", "b"]))
    assert merge_k(chain, descend=True) == 5
    assert_queue("g-e-d-b-a", context(chain.next).q)


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 8, 13])
def test_merge_k_random(k):
    rnd = random.Random(k)
    chain = create_chain()
    everything = []
    for _ in range(k):
        items = sorted(rnd.choice("abcdefgh") for _ in range(rnd.randint(0, 12)))
        everything.extend(items)
        add_queue(chain, build(items))
    assert merge_k(chain) == len(everything)
    assert walk(context(chain.next).q) == sorted(everything)
    assert sum(size(context(n).q) for n in chain) == len(everything)


def test_merge_k_stable():
    chain = create_chain()
    a = build(["x", "y"])
    b = build(["x", "y"])
    c = build(["x"])
    for q in (a, b, c):
        add_queue(chain, q)
    tags = {id(n): tag for tag, q in (("a", a), ("b", b), ("c", c)) for n in q}
    assert merge_k(chain) == 5
    merged = context(chain.next).q
    assert [tags[id(n)] + entry(n).value for n in merged] == ["ax", "bx", "cx", "ay", "by"]


def test_merge_k_sorted_inputs():
    rnd = random.Random(11)
    chain = create_chain()
    for _ in range(4):
        q = build([rnd.choice("pqrs") for _ in range(6)])
        sort(q, descend=True)
        add_queue(chain, q)
    assert merge_k(chain, descend=True) == 24
    values = walk(context(chain.next).q)
    assert values == sorted(values, reverse=True)


def test_merge_k_empty():
    assert merge_k(None) == 0
    assert merge_k(create_chain()) == 0
    chain = create_chain()
    add_queue(chain, create())
    add_queue(chain, create())
    assert merge_k(chain) == 0


def test_destroy_chain():
    chain = create_chain()
    queues = [build(["a"]), build(["b", "c"])]
    for q in queues:
        add_queue(chain, q)
    destroy_chain(chain)
    assert chain.empty()
    for q in queues:
        assert q.empty()
    destroy_chain(None)


def test_merge_k_logs_queue_count():
    chain = create_chain()
    for items in (["a"], ["b"], []):
        add_queue(chain, build(items))
    with capture_logs() as logs:
        assert merge_k(chain) == 2
    assert logs[-1]["queues"] == 3
    assert logs[-1]["size"] == 2
    assert logs[-1]["event"] == "merged"
