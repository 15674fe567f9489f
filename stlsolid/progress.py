from argparse import Action
import contextlib
import sys
import time


def format_bytes(n, dps=2):
    labels = ['B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB']

    for l in labels:
        if n < 1024 - 0.5*10**-dps:
            break

        if l != labels[-1]:
            n /= 1024

    return f'{n:.{dps}f} {l}' if l != 'B' else f'{n} B'


class ProgressSequence:
    def __init__(self, *, prefix=''):
        self._prefix = prefix

    @contextlib.contextmanager
    def start(self, phase):
        prefix, tstart = f'{self._prefix} • {phase} ', time.time()

        sys.stderr.write(prefix)
        sys.stderr.flush()

        yield None

        dt = time.time() - tstart
        sys.stderr.write(f'\x1b[2K\x1b[G{prefix}({dt:.2f}s)\n')


class NullProgressSequence(ProgressSequence):
    def __init__(self):
        pass

    def __bool__(self):
        return False

    @contextlib.contextmanager
    def start(self, phase):
        yield None


class ProgressSequenceAction(Action):
    def __init__(self, *, nargs=0, default=NullProgressSequence(), **kwargs):
        super().__init__(nargs=nargs, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, ProgressSequence())
