"""Order number sequence — the global, strictly increasing order counter.

Kept as its own aggregate so the counter is explicit domain state: one row,
keyed by sequence name, starting at zero and advanced once per placed order.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront

ORDER_SEQUENCE = "orders"


@storefront.aggregate
class OrderSequence:
    name = String(identifier=True, required=True, max_length=50)
    last_number = Integer(default=0, min_value=0)

    def advance(self):
        """Move the counter forward and return the number just assigned."""
        self.last_number = (self.last_number or 0) + 1
        return self.last_number


def _get_or_create(name):
    repo = current_domain.repository_for(OrderSequence)
    try:
        return repo.get(name)
    except ObjectNotFoundError:
        return OrderSequence(name=name, last_number=0)


def next_order_number():
    """Assign the next order number. The first order placed is number 1."""
    sequence = _get_or_create(ORDER_SEQUENCE)
    number = sequence.advance()
    current_domain.repository_for(OrderSequence).add(sequence)
    return number


def current_order_number():
    """The number assigned to the most recent order, or 0 before the first."""
    return _get_or_create(ORDER_SEQUENCE).last_number or 0
