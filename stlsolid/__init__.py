from stlsolid._version import __version__
from stlsolid.errors import (MalformedNumberError, MalformedTextError,
                             STLError, TruncatedInputError)
from stlsolid.readers import sniff
from stlsolid.readers.stl import read_stl
from stlsolid.types import Facet, Normal, Solid, Vertex


load = read_stl
