import pytest

from xvutils.umalloc import HEADER_SIZE, MIN_UNITS, Heap, OutOfMemory


def test_allocations_are_aligned_and_distinct():
    heap = Heap()
    addrs = [heap.malloc(n) for n in (1, 10, 100, 1000)]
    assert len(set(addrs)) == len(addrs)
    assert all(a % HEADER_SIZE == 0 for a in addrs)


def test_allocations_do_not_overlap():
    heap = Heap()
    sizes = [10, 200, 33, 4096, 7]
    spans = sorted((heap.malloc(n), n) for n in sizes)
    for (a, n), (b, _) in zip(spans, spans[1:]):
        assert a + n <= b


def test_base_address_offsets_results():
    heap0 = Heap()
    heap1 = Heap(base_address=0x10000)
    assert heap1.malloc(20) - heap0.malloc(20) == 0x10000


def test_first_arena_is_minimum_size():
    heap = Heap()
    a = heap.malloc(10)
    heap.free(a)
    assert heap.free_blocks() == [(0, MIN_UNITS * HEADER_SIZE)]


@pytest.mark.parametrize("order", [(0, 1, 2, 3), (3, 2, 1, 0), (1, 3, 0, 2)])
def test_freeing_everything_coalesces(order):
    heap = Heap()
    first = heap.malloc(8)
    heap.free(first)
    whole = heap.free_blocks()
    addrs = [heap.malloc(n) for n in (16, 64, 3, 500)]
    for i in order:
        heap.free(addrs[i])
    assert heap.free_blocks() == whole


def test_freed_block_is_reused():
    heap = Heap()
    a = heap.malloc(50)
    heap.free(a)
    assert heap.malloc(50) == a


def test_free_reduces_free_space_consistently():
    heap = Heap()
    a = heap.malloc(100)
    free_after_alloc = sum(size for _, size in heap.free_blocks())
    heap.free(a)
    free_after_free = sum(size for _, size in heap.free_blocks())
    assert free_after_free > free_after_alloc


def test_large_request_grows_heap():
    heap = Heap()
    a = heap.malloc(MIN_UNITS * HEADER_SIZE * 2)
    b = heap.malloc(10)
    assert a != b


def test_out_of_memory():
    heap = Heap(capacity=1000)
    with pytest.raises(OutOfMemory):
        heap.malloc(10)


def test_capacity_limits_total_growth():
    heap = Heap(capacity=MIN_UNITS * HEADER_SIZE)
    heap.malloc(100)
    with pytest.raises(OutOfMemory):
        heap.malloc(MIN_UNITS * HEADER_SIZE)


def test_free_of_unknown_address_raises():
    heap = Heap()
    heap.malloc(10)
    with pytest.raises(ValueError):
        heap.free(12345)


def test_double_free_raises():
    heap = Heap()
    a = heap.malloc(10)
    heap.free(a)
    with pytest.raises(ValueError):
        heap.free(a)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Heap().malloc(-1)