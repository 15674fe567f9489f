import io
import logging
import os

from stlsolid.inifile import Inifile
from stlsolid.readers import get_decoder_by_name, sniff


log = logging.getLogger(__name__)


def read_stl(source, cfg=None):
    """
    Read an ASCII or binary STL solid.

    *source* is either a path or a stream opened in binary mode.  The
    encoding is detected from the leading bytes unless it is forced via
    the ``format`` option in the ``[reader]`` section of *cfg*.
    """
    # Work on a private copy of the config
    cfg = Inifile(cfg.tostr()) if cfg is not None else Inifile()

    if isinstance(source, (str, os.PathLike)):
        with open(source, 'rb') as f:
            return _read_stream(f, cfg)
    else:
        return _read_stream(source, cfg)


def _read_stream(f, cfg):
    if isinstance(f, io.TextIOBase):
        raise TypeError('STL streams must be opened in binary mode')

    # Sniffing requires us to rewind the stream
    if not f.seekable():
        f = io.BytesIO(f.read())

    fmt = cfg.get('reader', 'format', 'auto')
    if fmt == 'auto':
        fmt = sniff(f)
        log.debug('Detected %s STL', fmt)
    elif fmt in {'ascii', 'binary'}:
        log.debug('Reading STL as %s', fmt)
    else:
        raise ValueError(f'Invalid STL format "{fmt}"')

    return get_decoder_by_name(fmt, cfg).decode(f)
