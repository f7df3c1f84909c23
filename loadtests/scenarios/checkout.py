"""Storefront load test scenarios.

Stateful SequentialTaskSet journeys over the cart, checkout, discount and
admin endpoints. Checkouts from concurrent users share one order counter,
so these journeys also exercise nth-order code minting under contention.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import bogus_discount_code, cart_item_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CartState, CheckoutState


class CartToCheckoutJourney(SequentialTaskSet):
    """Create Cart -> Add Items -> Remove One -> Checkout -> Read Order.

    Checkout auto-applies the most recent unused code, so roughly one in
    every n checkouts comes back discounted.
    """

    def on_start(self):
        self.state = CartState()
        self.orders = CheckoutState()

    @task
    def create_cart(self):
        with self.client.post("/carts", catch_response=True, name="POST /carts") as resp:
            if resp.status_code == 201:
                self.state.cart_id = resp.json()["cart_id"]
            else:
                resp.failure(f"Create cart failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_items(self):
        for _ in range(random.randint(2, 4)):
            with self.client.post(
                f"/carts/{self.state.cart_id}/items",
                json=cart_item_data(),
                catch_response=True,
                name="POST /carts/{id}/items",
            ) as resp:
                if resp.status_code == 200:
                    cart = resp.json()
                    self.state.item_ids = [item["id"] for item in cart["items"]]
                    self.state.expected_total = cart["total"]
                else:
                    resp.failure(f"Add cart item failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def remove_item(self):
        if len(self.state.item_ids) < 2:
            return
        item_id = self.state.item_ids.pop()
        with self.client.delete(
            f"/carts/{self.state.cart_id}/items/{item_id}",
            catch_response=True,
            name="DELETE /carts/{id}/items/{item_id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.expected_total = resp.json()["total"]
            else:
                resp.failure(f"Remove cart item failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def checkout(self):
        with self.client.post(
            "/checkout",
            json={"cart_id": self.state.cart_id},
            catch_response=True,
            name="POST /checkout",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Checkout failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()
                return

            order = resp.json()
            if abs(order["subtotal"] - self.state.expected_total) > 0.01:
                resp.failure(f"Subtotal {order['subtotal']} does not match cart total {self.state.expected_total}")
            self.orders.order_ids.append(order["id"])
            self.orders.last_order_number = order["order_number"]

    @task
    def read_order(self):
        if not self.orders.order_ids:
            return
        self.client.get(f"/orders/{self.orders.order_ids[-1]}", name="GET /orders/{id}")

    @task
    def done(self):
        self.interrupt()


class RejectedCodeJourney(SequentialTaskSet):
    """Create Cart -> Add Item -> Checkout with a bogus code (expect 400).

    The rejected checkout must leave the cart intact.
    """

    def on_start(self):
        self.state = CartState()

    @task
    def create_cart(self):
        with self.client.post("/carts", catch_response=True, name="POST /carts") as resp:
            if resp.status_code == 201:
                self.state.cart_id = resp.json()["cart_id"]
            else:
                resp.failure(f"Create cart failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_item(self):
        resp = self.client.post(
            f"/carts/{self.state.cart_id}/items",
            json=cart_item_data(),
            name="POST /carts/{id}/items",
        )
        if resp.status_code == 200:
            self.state.expected_total = resp.json()["total"]

    @task
    def checkout_with_bogus_code(self):
        with self.client.post(
            "/checkout",
            json={"cart_id": self.state.cart_id, "discount_code": bogus_discount_code()},
            catch_response=True,
            name="POST /checkout [bogus code]",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Expected 400 for bogus code, got {resp.status_code}")

    @task
    def cart_is_untouched(self):
        with self.client.get(
            f"/carts/{self.state.cart_id}",
            catch_response=True,
            name="GET /carts/{id}",
        ) as resp:
            if resp.status_code == 200 and abs(resp.json()["total"] - self.state.expected_total) > 0.01:
                resp.failure("Cart changed after a rejected checkout")

    @task
    def done(self):
        self.interrupt()


class AdminJourney(SequentialTaskSet):
    """Read Stats -> Validate Each Listed Code -> Generate For An Order."""

    def on_start(self):
        self.state = CheckoutState()

    @task
    def read_stats(self):
        with self.client.get("/admin/stats", catch_response=True, name="GET /admin/stats") as resp:
            if resp.status_code == 200:
                stats = resp.json()
                self.state.known_codes = [code["code"] for code in stats["discount_codes"]]
                self.state.last_order_number = stats["total_orders"]
            else:
                resp.failure(f"Read stats failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def validate_codes(self):
        for code in self.state.known_codes[-3:]:
            self.client.get(f"/discounts/validate/{code}", name="GET /discounts/validate/{code}")

    @task
    def admin_generate(self):
        if not self.state.last_order_number:
            return
        with self.client.post(
            "/admin/discounts/generate",
            json={"order_number": self.state.last_order_number},
            catch_response=True,
            name="POST /admin/discounts/generate",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Admin generate failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class CheckoutUser(HttpUser):
    """Shoppers only: every journey ends in a checkout attempt."""

    wait_time = between(0.5, 2.0)
    tasks = {CartToCheckoutJourney: 9, RejectedCodeJourney: 1}


class StorefrontUser(HttpUser):
    """Mixed storefront traffic with occasional admin reads."""

    wait_time = between(1.0, 3.0)
    tasks = {CartToCheckoutJourney: 7, RejectedCodeJourney: 1, AdminJourney: 2}
