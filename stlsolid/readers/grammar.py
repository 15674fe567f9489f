"""
Tokeniser and recursive-descent parser for ASCII STL.

The grammar recognised is::

    solid := "solid" NAME? facet* "endsolid" NAME?
    facet := "facet" "normal" NUM NUM NUM
               "outer" "loop"
                 "vertex" NUM NUM NUM
                 "vertex" NUM NUM NUM
                 "vertex" NUM NUM NUM
               "endloop"
             "endfacet"

Tokens are runs of non-whitespace characters.  Names are the run
of non-keyword words following their ``solid`` or ``endsolid`` keyword,
which may span lines.  Numeric tokens are passed through verbatim;
converting them is left to the consumer of the tree.
"""

import re
from typing import NamedTuple, Optional

from stlsolid.errors import MalformedTextError


KEYWORDS = frozenset(['solid', 'endsolid', 'facet', 'endfacet', 'normal',
                      'outer', 'loop', 'endloop', 'vertex'])


class Token(NamedTuple):
    text: str
    line: int
    col: int


class NormalNode(NamedTuple):
    x: Token
    y: Token
    z: Token


class VertexNode(NamedTuple):
    x: Token
    y: Token
    z: Token


class LoopNode(NamedTuple):
    v0: VertexNode
    v1: VertexNode
    v2: VertexNode


class FacetNode(NamedTuple):
    normal: NormalNode
    loop: LoopNode


class SolidNode(NamedTuple):
    name: Optional[str]
    facets: list
    end: Token
    endname: Optional[str]


_word_re = re.compile(r'\S+')


def tokenize(text):
    for i, l in enumerate(text.splitlines(), start=1):
        for m in _word_re.finditer(l):
            yield Token(m[0], i, m.start() + 1)


class STLParser:
    def __init__(self, text):
        self._toks = tokenize(text)
        self._advance()

    def _advance(self):
        self.tok = next(self._toks, None)

    def _error(self, msg):
        tok = self.tok

        if tok is None:
            raise MalformedTextError(msg)
        else:
            raise MalformedTextError(f'{msg}; found "{tok.text}"', tok.line,
                                     tok.col, tok.text)

    def _expect(self, *kws):
        for kw in kws:
            if self.tok is None or self.tok.text != kw:
                self._error(f'Expected "{kw}"')

            self._advance()

    def _words(self):
        words = []

        while self.tok is not None and self.tok.text not in KEYWORDS:
            words.append(self.tok.text)
            self._advance()

        return ' '.join(words) or None

    def _numbers(self):
        nums = []

        for i in range(3):
            if self.tok is None or self.tok.text in KEYWORDS:
                self._error('Expected a number')

            nums.append(self.tok)
            self._advance()

        return nums

    def _facet(self):
        self._expect('facet', 'normal')
        normal = NormalNode(*self._numbers())

        self._expect('outer', 'loop')

        vertices = []
        for i in range(3):
            self._expect('vertex')
            vertices.append(VertexNode(*self._numbers()))

        self._expect('endloop', 'endfacet')

        return FacetNode(normal, LoopNode(*vertices))

    def parse(self):
        self._expect('solid')
        name = self._words()

        facets = []
        while self.tok is not None and self.tok.text == 'facet':
            facets.append(self._facet())

        end = self.tok
        self._expect('endsolid')
        endname = self._words()

        if self.tok is not None:
            self._error('Expected end of input')

        return SolidNode(name, facets, end, endname)
