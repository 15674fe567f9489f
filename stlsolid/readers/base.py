from stlsolid.errors import TruncatedInputError


def read_exact(f, n, *, stage=None, what='data'):
    chunks, got = [], 0

    while got < n:
        b = f.read(n - got)

        # An empty read means the stream is exhausted
        if not b:
            raise TruncatedInputError(n, got, stage=stage, what=what)

        chunks.append(b)
        got += len(b)

    return b''.join(chunks)


class BaseDecoder:
    name = None

    def __init__(self, cfg):
        self.cfg = cfg
        self.cfgsect = f'reader-{self.name}'

    def decode(self, f):
        pass
