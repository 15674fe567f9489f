import logging

import numpy as np

from stlsolid.readers.base import BaseDecoder, read_exact
from stlsolid.types import Solid


log = logging.getLogger(__name__)


class BinaryDecoder(BaseDecoder):
    name = 'binary'

    # Size of the (ignored) header in bytes
    hdrsz = 80

    # Normal, vertices and the attribute byte count; 50 bytes in total
    dtype = np.dtype([('normal', '<f4', (3,)), ('vertices', '<f4', (3, 3)),
                      ('attr', '<u2')])

    # Number of facets to read at once
    blksz = 65536

    def _read(self, f, n, what):
        return read_exact(f, n, stage=self.name, what=what)

    def decode(self, f):
        # Skip over the header
        self._read(f, self.hdrsz, 'header')

        # Read the facet count
        buf = self._read(f, 4, 'facet count')
        nfacets = int(np.frombuffer(buf, dtype='<u4')[0])
        log.debug('Binary STL declares %d facets', nfacets)

        blocks = [np.empty((0, 4, 3), dtype=np.float32)]

        # Read the facet records in blocks
        for i in range(0, nfacets, self.blksz):
            n = min(self.blksz, nfacets - i)

            buf = self._read(f, n*self.dtype.itemsize,
                             f'facets {i}-{i + n - 1}')
            recs = np.frombuffer(buf, dtype=self.dtype)

            # Assigning into a native array swaps bytes on big-endian hosts
            blk = np.empty((n, 4, 3), dtype=np.float32)
            blk[:, 0] = recs['normal']
            blk[:, 1:] = recs['vertices']

            blocks.append(blk)

        solid = Solid(np.concatenate(blocks))
        log.debug('Decoded %d facets from binary STL', len(solid))

        return solid
