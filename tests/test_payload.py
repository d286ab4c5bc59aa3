import pytest
from datetime import datetime

from senselink import MalformedField
from senselink import payload as pl

from conftest import at


def test_read_int():

    assert pl.read_int({'n': 3}, 'n') == 3

    for bad in (True, 3.0, '3', None):
        with pytest.raises(MalformedField):
            pl.read_int({'n': bad}, 'n')

    with pytest.raises(MalformedField) as info:
        pl.read_int({}, 'n')

    assert info.value.key == 'n'
    assert info.value.reason == 'missing'


def test_read_str():

    assert pl.read_str({'s': 'batch'}, 's') == 'batch'

    with pytest.raises(MalformedField):
        pl.read_str({'s': b'batch'}, 's')


def test_read_time():

    assert pl.read_time({'t': at(0)}, 't') == at(0)

    for bad in (datetime(2017, 3, 2), at(0).isoformat(), 1488456000.0):
        with pytest.raises(MalformedField):
            pl.read_time({'t': bad}, 't')


def test_read_int_list():

    assert pl.read_int_list({'l': [1, 2]}, 'l') == [1, 2]
    assert pl.read_int_list({'l': (1, 2)}, 'l') == [1, 2]

    with pytest.raises(MalformedField) as info:
        pl.read_int_list({'l': [1, False]}, 'l')

    assert info.value.key == 'l[1]'

    with pytest.raises(MalformedField):
        pl.read_int_list({'l': 1}, 'l')


def test_read_float_list():

    values = pl.read_float_list({'v': [1, 2.5]}, 'v')
    assert values == [1.0, 2.5]
    assert all(isinstance(v, float) for v in values)

    with pytest.raises(MalformedField):
        pl.read_float_list({'v': [None]}, 'v')


def test_read_records():

    records = pl.read_records({'r': [{'a': 1}]}, 'r')
    assert records == [{'a': 1}]

    with pytest.raises(MalformedField):
        pl.read_records({'r': [{'a': 1}, 2]}, 'r')

    with pytest.raises(MalformedField):
        pl.read_records({'r': {'a': 1}}, 'r')


def test_check_time():

    assert pl.check_time(at(0), 'x') == at(0)

    with pytest.raises(TypeError):
        pl.check_time(0, 'x')

    with pytest.raises(ValueError):
        pl.check_time(datetime(2017, 3, 2), 'x')
