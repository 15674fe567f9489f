from stlsolid.readers.base import read_exact


MAGIC = b'solid'


def sniff(f):
    """
    Classify the STL stream *f* as either ``'ascii'`` or ``'binary'``.

    Only the leading bytes are inspected and the stream is returned to
    its original position afterwards.  As with other STL readers a
    binary file whose header happens to begin with ``solid`` will be
    classified as ASCII.
    """
    pos = f.tell()

    try:
        magic = read_exact(f, len(MAGIC), stage='sniff',
                           what='format marker')
    finally:
        f.seek(pos)

    return 'ascii' if magic == MAGIC else 'binary'
