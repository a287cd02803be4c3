"""Memoized price labels bound to a user's display currency.

A ``DisplayPreference`` holds the selected currency and notifies subscribers
when it changes. A ``FormattedPrice`` derives its label from its own inputs
plus the preference, recomputing only when that input tuple changes, so a grid
of hundreds of labels re-renders cheaply.
"""
import inspect
import weakref
from collections.abc import Callable

from application.services.conversion_service import ConversionService
from domain.models.currency import normalize_amount

Listener = Callable[[str], None]


class DisplayPreference:
	"""Selected display currency; bound-method listeners are held weakly."""

	def __init__(self, currency: str = 'USD'):
		self._currency = currency.upper()
		self._listeners: list[Callable[[], Listener | None]] = []

	@property
	def currency(self) -> str:
		return self._currency

	@property
	def subscriber_count(self) -> int:
		return sum(1 for ref in self._listeners if ref() is not None)

	def set_currency(self, currency: str) -> None:
		currency = currency.upper()
		if currency == self._currency:
			return
		self._currency = currency

		self._listeners = [ref for ref in self._listeners if ref() is not None]
		for ref in list(self._listeners):
			listener = ref()
			if listener is not None:
				listener(currency)

	def subscribe(self, listener: Listener) -> Callable[[], None]:
		if inspect.ismethod(listener):
			ref = weakref.WeakMethod(listener)
		else:
			def ref() -> Listener:
				return listener

		self._listeners.append(ref)

		def unsubscribe() -> None:
			if ref in self._listeners:
				self._listeners.remove(ref)

		return unsubscribe


class FormattedPrice:
	def __init__(
		self,
		conversion: ConversionService,
		preference: DisplayPreference,
		amount,
		from_currency: str = 'USD',
		show_symbol: bool = True,
		on_change: Listener | None = None,
	):
		self.conversion = conversion
		self.preference = preference
		self.amount = amount
		self.from_currency = from_currency
		self.show_symbol = show_symbol
		self.on_change = on_change

		self._key: tuple | None = None
		self._value = ''
		self._unsubscribe = preference.subscribe(self._on_currency_change)

	def _inputs(self) -> tuple:
		return (
			normalize_amount(self.amount),
			self.from_currency,
			self.show_symbol,
			self.preference.currency,
		)

	@property
	def value(self) -> str:
		key = self._inputs()
		if key != self._key:
			amount, from_currency, show_symbol, display_currency = key
			self._value = self.conversion.format_price(
				amount, from_currency, display_currency, show_symbol
			)
			self._key = key
		return self._value

	def update(self, amount=None, from_currency: str | None = None, show_symbol: bool | None = None) -> str:
		if amount is not None:
			self.amount = amount
		if from_currency is not None:
			self.from_currency = from_currency
		if show_symbol is not None:
			self.show_symbol = show_symbol
		return self.value

	def _on_currency_change(self, currency: str) -> None:
		previous = self._value
		current = self.value
		if self.on_change is not None and current != previous:
			self.on_change(current)

	def close(self) -> None:
		self._unsubscribe()

	def __str__(self) -> str:
		return self.value
