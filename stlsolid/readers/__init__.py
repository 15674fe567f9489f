from stlsolid.readers.base import BaseDecoder, read_exact
from stlsolid.readers.ascii import ASCIIDecoder
from stlsolid.readers.binary import BinaryDecoder
from stlsolid.readers.sniff import sniff

from stlsolid.util import subclass_where


def get_decoder_by_name(name, *args, **kwargs):
    return subclass_where(BaseDecoder, name=name)(*args, **kwargs)
