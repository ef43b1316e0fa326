import pytest

from xvutils.constants import (
    DEVSPACE,
    EXTMEM,
    KERNBASE,
    KERNLINK,
    PHYSTOP,
    FileType,
    ProcPrio,
    RtcDate,
    Stat,
    p2v,
    v2p,
)


def test_v2p_of_kernbase_is_zero():
    assert v2p(KERNBASE) == 0


def test_p2v_of_zero_is_kernbase():
    assert p2v(0) == KERNBASE


def test_kernel_link_address_maps_to_extended_memory():
    assert v2p(KERNLINK) == EXTMEM


@pytest.mark.parametrize("phys", [0, EXTMEM, PHYSTOP, 0x1234000])
def test_round_trip(phys):
    assert v2p(p2v(phys)) == phys


def test_physical_top_stays_below_device_space():
    assert p2v(PHYSTOP) <= DEVSPACE


def test_v2p_wraps_like_unsigned():
    assert v2p(0) == p2v(0)


def test_stat_coerces_type():
    st = Stat(type=2, dev=1, ino=5, nlink=1, size=10)
    assert st.type is FileType.FILE


def test_stat_rejects_unknown_type():
    with pytest.raises(ValueError):
        Stat(type=9, dev=1, ino=5, nlink=1, size=10)


def test_priority_lookup():
    assert ProcPrio(1) is ProcPrio.HI_PRIO
    assert ProcPrio(0) is ProcPrio.NORM_PRIO


def test_rtcdate_holds_fields():
    d = RtcDate(second=1, minute=2, hour=3, day=4, month=5, year=2024)
    assert (d.day, d.month, d.year) == (4, 5, 2024)