import logging
import re

import numpy as np

from stlsolid.errors import MalformedNumberError, MalformedTextError
from stlsolid.readers.base import BaseDecoder
from stlsolid.readers.grammar import STLParser
from stlsolid.types import Solid


log = logging.getLogger(__name__)


_num_re = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?',
                     re.ASCII)
_nonfinite_re = re.compile(r'[+-]?(?:nan|inf|infinity)', re.I)


class STLTreeAdapter:
    """Converts a parsed ASCII STL tree into a :class:`Solid`."""

    def __init__(self, allow_nonfinite=False):
        self.allow_nonfinite = allow_nonfinite

    def number(self, tok):
        if self.allow_nonfinite and _nonfinite_re.fullmatch(tok.text):
            return float(tok.text)
        elif not _num_re.fullmatch(tok.text):
            raise MalformedNumberError(f'Invalid number "{tok.text}"',
                                       tok.line, tok.col, tok.text)

        v = float(tok.text)

        # Literals beyond the float32 range would round to infinity
        with np.errstate(over='ignore'):
            finite = np.isfinite(np.float32(v))

        if not finite and not self.allow_nonfinite:
            raise MalformedNumberError(f'Number "{tok.text}" is out of '
                                       'range', tok.line, tok.col, tok.text)

        return v

    def triple(self, node):
        return [self.number(tok) for tok in node]

    def facet(self, node):
        return [self.triple(node.normal), *map(self.triple, node.loop)]

    def solid(self, node):
        data = [self.facet(f) for f in node.facets]
        with np.errstate(over='ignore'):
            data = np.array(data, dtype=np.float32).reshape(-1, 4, 3)

        return Solid(data, name=node.name)


class ASCIIDecoder(BaseDecoder):
    name = 'ascii'

    def __init__(self, cfg):
        super().__init__(cfg)

        sect = self.cfgsect
        self.encoding = cfg.get(sect, 'encoding', 'ascii')
        self.check_names = cfg.getbool(sect, 'check-names', False)
        self.allow_nonfinite = cfg.getbool(sect, 'allow-nonfinite', False)

    def _decode_text(self, raw):
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            # Locate the offending byte
            line = raw.count(b'\n', 0, e.start) + 1
            col = e.start - raw.rfind(b'\n', 0, e.start)

            raise MalformedTextError(f'Invalid {self.encoding} text',
                                     line, col) from e

    def decode(self, f):
        text = self._decode_text(f.read())

        # Parse the text into a tree
        tree = STLParser(text).parse()

        if self.check_names and tree.endname and tree.endname != tree.name:
            end = tree.end
            raise MalformedTextError(f'Solid name "{tree.name}" does not '
                                     f'match endsolid name "{tree.endname}"',
                                     end.line, end.col, end.text)

        solid = STLTreeAdapter(self.allow_nonfinite).solid(tree)
        log.debug('Decoded %d facets from ASCII STL', len(solid))

        return solid
