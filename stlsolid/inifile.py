from collections import OrderedDict
from configparser import ConfigParser, NoSectionError, NoOptionError
import io
import os


_sentinel = object()


class Inifile:
    _bool_states = {'1': True, 'yes': True, 'true': True, 'on': True,
                    '0': False, 'no': False, 'false': False, 'off': False}

    def __init__(self, inistr=None):
        self._cp = cp = ConfigParser(inline_comment_prefixes=[';'])

        # Preserve case
        cp.optionxform = str

        if inistr:
            cp.read_string(inistr)

    @staticmethod
    def load(file):
        if isinstance(file, (str, os.PathLike)):
            with open(file) as f:
                return Inifile(f.read())
        else:
            return Inifile(file.read())

    def set(self, section, option, value):
        value = str(value)

        try:
            self._cp.set(section, option, value)
        except NoSectionError:
            self._cp.add_section(section)
            self._cp.set(section, option, value)

    def hasopt(self, section, option):
        return self._cp.has_option(section, option)

    def get(self, section, option, default=_sentinel):
        try:
            val = self._cp.get(section, option)
        except NoSectionError:
            if default is _sentinel:
                raise

            self._cp.add_section(section)
            val = self.get(section, option, default)
        except NoOptionError:
            if default is _sentinel:
                raise

            # Record the default so tostr reflects what was used
            self._cp.set(section, option, str(default))
            val = self._cp.get(section, option)

        return os.path.expandvars(val)

    def getpath(self, section, option, default=_sentinel, abs=False):
        path = os.path.expanduser(self.get(section, option, default))

        return os.path.abspath(path) if abs else path

    def getbool(self, section, option, default=_sentinel):
        v = self.get(section, option, default)

        try:
            return self._bool_states[v.lower()]
        except KeyError:
            raise ValueError(f'Invalid boolean "{v}" for option {option} '
                             f'in [{section}]') from None

    def getfloat(self, section, option, default=_sentinel):
        return float(self.get(section, option, default))

    def getint(self, section, option, default=_sentinel):
        return int(self.get(section, option, default))

    def items(self, section):
        return OrderedDict(self._cp.items(section))

    def sections(self):
        return self._cp.sections()

    def tostr(self):
        buf = io.StringIO()
        self._cp.write(buf)
        return buf.getvalue()
