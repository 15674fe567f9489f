from typing import NamedTuple

import numpy as np


class Vertex(NamedTuple):
    x: float
    y: float
    z: float


class Normal(NamedTuple):
    x: float
    y: float
    z: float


class Facet(NamedTuple):
    normal: Normal
    v0: Vertex
    v1: Vertex
    v2: Vertex

    @property
    def vertices(self):
        return (self.v0, self.v1, self.v2)


def _to_facet(rows):
    n, v0, v1, v2 = rows
    return Facet(Normal(*n), Vertex(*v0), Vertex(*v1), Vertex(*v2))


class Solid:
    """
    An ordered, immutable collection of triangular facets.

    Facet data is held as a single ``(N, 4, 3)`` float32 array where,
    for each facet, the first row is the normal and the remaining three
    rows are the vertices in winding order.  Indexing and iteration
    yield :class:`Facet` tuples.
    """

    def __init__(self, data=None, name=None):
        if data is None:
            data = np.empty((0, 4, 3), dtype=np.float32)

        # Take a private, native-endian copy of the data
        data = np.array(data, dtype=np.float32)

        if data.ndim != 3 or data.shape[1:] != (4, 3):
            raise ValueError(f'Invalid facet array shape {data.shape}; '
                             'expected (N, 4, 3)')

        data.flags.writeable = False

        self._data = data
        self._name = name

    @classmethod
    def from_facets(cls, facets, name=None):
        data = [[f.normal, f.v0, f.v1, f.v2] for f in facets]
        data = np.array(data, dtype=np.float32).reshape(-1, 4, 3)

        return cls(data, name=name)

    @property
    def name(self):
        return self._name

    @property
    def data(self):
        return self._data

    @property
    def normals(self):
        return self._data[:, 0]

    @property
    def vertices(self):
        return self._data[:, 1:]

    @property
    def bounds(self):
        if not len(self):
            return None

        v = self.vertices
        return v.min(axis=(0, 1)), v.max(axis=(0, 1))

    def __len__(self):
        return len(self._data)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return Solid(self._data[i], name=self._name)

        return _to_facet(self._data[i].tolist())

    def __iter__(self):
        for rows in self._data.tolist():
            yield _to_facet(rows)

    def __eq__(self, other):
        if not isinstance(other, Solid):
            return NotImplemented

        # Compare bit patterns so that NaNs and signed zeros are honoured
        a, b = self._data, other._data
        return a.shape == b.shape and np.array_equal(a.view(np.uint32),
                                                     b.view(np.uint32))

    __hash__ = None

    def __repr__(self):
        return f'Solid(name={self._name!r}, nfacets={len(self)})'
