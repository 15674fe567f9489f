from io import BytesIO

import numpy as np
import pytest

from stlsolid.errors import TruncatedInputError
from stlsolid.inifile import Inifile
from stlsolid.readers import BinaryDecoder
from stlsolid.readers.stl import read_stl
from stlsolid.tests.stlutil import TRIANGLE, pack_binary
from stlsolid.types import Facet, Normal, Vertex


class TrickleStream(BytesIO):
    def read(self, n=-1):
        return super().read(min(n, 7) if n >= 0 else n)


class EmptyStream(BytesIO):
    def read(self, n=-1):
        return b''


def decode(raw, stream=BytesIO):
    return BinaryDecoder(Inifile()).decode(stream(raw))


def test_record_size():
    assert BinaryDecoder.dtype.itemsize == 50


def test_single_facet():
    solid = read_stl(BytesIO(pack_binary([TRIANGLE])))

    assert len(solid) == 1
    assert solid[0] == Facet(Normal(0.0, 0.0, 1.0), Vertex(0.0, 0.0, 0.0),
                             Vertex(1.0, 0.0, 0.0), Vertex(0.0, 1.0, 0.0))
    assert solid.name is None


def test_facet_order():
    facets = [[(0, 0, i), (i, 0, 0), (0, i, 0), (0, 0, i + 1)]
              for i in range(5)]
    solid = decode(pack_binary(facets))

    assert len(solid) == 5
    assert np.array_equal(solid.data, np.array(facets, dtype=np.float32))


def test_zero_facets():
    solid = decode(pack_binary([]))

    assert len(solid) == 0
    assert solid.data.shape == (0, 4, 3)
    assert list(solid) == []


def test_float32_exact():
    rng = np.random.default_rng(42)
    data = rng.standard_normal((16, 4, 3)).astype(np.float32)
    solid = decode(pack_binary(data.tolist()))

    assert solid.data.dtype == np.float32
    assert solid.data.dtype.isnative
    assert np.array_equal(solid.data.view(np.uint32), data.view(np.uint32))


def test_attribute_bytes_ignored():
    a = decode(pack_binary([TRIANGLE], attr=0))
    b = decode(pack_binary([TRIANGLE], attr=0xbeef))

    assert a == b


def test_trailing_bytes_ignored():
    solid = decode(pack_binary([TRIANGLE]) + b'\0'*17)

    assert len(solid) == 1


def test_partial_reads():
    facets = [TRIANGLE]*3

    assert decode(pack_binary(facets), TrickleStream) == \
        decode(pack_binary(facets))


def test_truncated_facets():
    raw = pack_binary([TRIANGLE], count=2)

    with pytest.raises(TruncatedInputError) as excinfo:
        decode(raw)

    assert excinfo.value.stage == 'binary'
    assert excinfo.value.expected == 100
    assert excinfo.value.got == 50


def test_truncated_header():
    with pytest.raises(TruncatedInputError) as excinfo:
        decode(b'\0'*40)

    assert excinfo.value.expected == 80
    assert excinfo.value.got == 40


def test_missing_count():
    with pytest.raises(TruncatedInputError) as excinfo:
        decode(b'\0'*82)

    assert excinfo.value.expected == 4
    assert excinfo.value.got == 2


def test_empty_reads_terminate():
    with pytest.raises(TruncatedInputError) as excinfo:
        decode(pack_binary([TRIANGLE]), EmptyStream)

    assert excinfo.value.got == 0


def test_blocked_reads(monkeypatch):
    monkeypatch.setattr(BinaryDecoder, 'blksz', 2)

    facets = [[(i, 0, 0), (0, i, 0), (0, 0, i), (i, i, i)] for i in range(5)]
    solid = decode(pack_binary(facets))

    assert np.array_equal(solid.data, np.array(facets, dtype=np.float32))

    with pytest.raises(TruncatedInputError):
        decode(pack_binary(facets, count=6))
