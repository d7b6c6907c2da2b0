class SixthError(Exception):
    def __init__(self, msg, /, location=None):
        if location is not None:
            super().__init__(msg, location)
        else:
            super().__init__(msg)
        self.msg = msg
        self.location = location

    def __str__(self):
        if self.location is not None:
            file, lineno, col = self.location
            return f'{file}:{lineno}:{col}: {self.msg}'
        return str(self.msg)


class BadWord(SixthError):
    "neither a word in the dictionary nor a base 6 number"


class ImmediateInLiteral(SixthError):
    "only ] may run while a literal is being collected"


class EndOfInput(SixthError):
    "the token source has nothing left"

    def __init__(self, msg='end of input', /, location=None):
        super().__init__(msg, location)


class RuntimeFault(SixthError):
    pass


class StackUnderflow(RuntimeFault):
    pass


class TypeMismatch(RuntimeFault):
    pass
