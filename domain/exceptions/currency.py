class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass


class RateTableError(CurrencyException):
    pass


class PreferenceStoreError(CurrencyException):
    pass


class CacheError(CurrencyException):
    pass
