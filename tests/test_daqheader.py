import pytest

from ubobj.daqheader import DAQHeaderTime


def test_defaults_are_zero():
    header = DAQHeaderTime()
    assert header == DAQHeaderTime(0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
    assert header.gps_time == 0
    assert header.trig_pps_div == 0


def test_set_pps_time():
    header = DAQHeaderTime()
    header.set_pps_time(1500000000, 250, 125)
    assert (header.pps_sec, header.pps_micro, header.pps_nano) == (1500000000, 250, 125)
    assert header.trig_frame == 0


def test_set_trig_time():
    header = DAQHeaderTime()
    header.set_trig_time(123456, 3199, 7)
    assert (header.trig_frame, header.trig_sample, header.trig_div) == (123456, 3199, 7)
    assert header.trig_pps_frame == 0


def test_set_trig_pps_time():
    header = DAQHeaderTime()
    header.set_trig_pps_time(654321, 42, 3)
    assert (header.trig_pps_frame, header.trig_pps_sample, header.trig_pps_div) == (
        654321,
        42,
        3,
    )
    assert header.trig_sample == 0


def test_gps_and_ntp_times_are_plain_attributes():
    header = DAQHeaderTime()
    header.gps_time = 7 << 32 | 99
    header.ntp_time = 8 << 32 | 11
    assert header.gps_time >> 32 == 7
    assert header.ntp_time & 0xFFFFFFFF == 11


def test_sixteen_bit_limits():
    header = DAQHeaderTime()
    header.set_trig_time(0, 0xFFFF, 0xFFFF)
    assert header.trig_sample == 0xFFFF
    with pytest.raises(ValueError):
        header.set_trig_time(0, 0x10000, 0)
    with pytest.raises(ValueError):
        header.set_trig_pps_time(0, 0, 0x10000)


def test_thirty_two_bit_limits():
    header = DAQHeaderTime()
    with pytest.raises(ValueError):
        header.set_pps_time(1 << 32, 0, 0)
    with pytest.raises(ValueError):
        header.set_pps_time(0, -1, 0)
    assert header.pps_sec == 0


def test_constructor_rejects_out_of_range():
    with pytest.raises(ValueError):
        DAQHeaderTime(trig_div=-1)
    with pytest.raises(ValueError):
        DAQHeaderTime(trig_frame=1 << 32)