class SynctimeException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class ToolError(SynctimeException):
    pass


class ComparisonError(SynctimeException):
    pass


class ReferenceUnavailable(ComparisonError):
    pass


class NotSynchronized(ComparisonError):
    pass


class ServerUnreachable(ComparisonError):
    pass


class CorrectionError(SynctimeException):
    pass


class ManualActionRequired(CorrectionError):
    def __init__(self, message: str, instructions: tuple = ()):
        super().__init__(message)
        self.instructions = tuple(instructions)


class CorrectionFailed(CorrectionError):
    pass
