class HuffmanError(Exception):
    pass


class SymbolRangeError(HuffmanError, ValueError):
    pass


class EmptyInputError(HuffmanError, ValueError):
    pass


class TreeBuildError(HuffmanError):
    pass


class SymbolNotEncodedError(HuffmanError, KeyError):
    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ''


class InvalidBitStringError(HuffmanError, ValueError):
    pass


class TruncatedStreamError(HuffmanError):
    pass
