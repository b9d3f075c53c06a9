class CurrencyException(Exception):
    pass


class UpstreamError(CurrencyException):
    pass


class CacheError(UpstreamError):
    pass


class InvalidRequestError(CurrencyException):
    def __init__(self, errors: list[str]):
        super().__init__('; '.join(errors))
        self.errors = list(errors)
