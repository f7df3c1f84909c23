import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def nth_order(monkeypatch):
    """Switch the discount interval for the duration of a test."""

    def _set(interval):
        monkeypatch.setenv("STOREFRONT_NTH_ORDER", str(interval))

    return _set


@pytest.fixture()
def filled_cart():
    """Factory: create a cart holding ``(product_id, unit_price, quantity)`` lines."""
    from storefront.cart.items import AddToCart
    from storefront.cart.management import get_cart

    def _make(*lines):
        cart_id = str(get_cart().id)
        for product_id, unit_price, quantity in lines:
            current_domain.process(
                AddToCart(
                    cart_id=cart_id,
                    product_id=product_id,
                    name=f"Product {product_id}",
                    unit_price=unit_price,
                    quantity=quantity,
                ),
                asynchronous=False,
            )
        return cart_id

    return _make
