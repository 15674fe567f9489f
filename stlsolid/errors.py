class STLError(ValueError):
    # Which part of the load failed; one of 'sniff', 'binary' or 'ascii'
    stage = None

    def __init__(self, msg, *, stage=None):
        super().__init__(msg)

        if stage is not None:
            self.stage = stage


class TruncatedInputError(STLError):
    def __init__(self, expected, got, *, stage=None, what='data'):
        super().__init__(f'Truncated input reading {what}: expected '
                         f'{expected} bytes, got {got}', stage=stage)

        self.expected = expected
        self.got = got


class _LocatedError(STLError):
    stage = 'ascii'

    def __init__(self, msg, line=None, col=None, token=None):
        if line is not None:
            msg = f'{msg} (line {line}, column {col})'
        else:
            msg = f'{msg} (at end of input)'

        super().__init__(msg)

        self.line = line
        self.col = col
        self.token = token


class MalformedTextError(_LocatedError):
    pass


class MalformedNumberError(_LocatedError):
    pass
