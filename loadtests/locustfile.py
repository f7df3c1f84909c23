"""Storefront Load Testing — Locust entry point.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:8000

    # Checkout traffic only:
    locust -f loadtests/locustfile.py CheckoutUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py StorefrontUser --headless \
           -u 20 -r 5 -t 120s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.checkout import CheckoutUser, StorefrontUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log the API error body of every failed request."""
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print the store statistics once the run ends.

    Every nth order mints one code, so the code count should track
    ``total_orders // nth_order`` however many users ran concurrently.
    """
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    try:
        stats = requests.get(f"{environment.host}/admin/stats", timeout=5).json()
    except requests.RequestException as e:
        print(f"[LOADTEST] Could not fetch store statistics: {e}\n")
        return

    used = sum(1 for code in stats["discount_codes"] if code["is_used"])
    print("[LOADTEST] Final store statistics:")
    print(f"  orders:          {stats['total_orders']}")
    print(f"  items purchased: {stats['items_purchased_count']}")
    print(f"  revenue:         {stats['total_purchase_amount']:.2f}")
    print(f"  discounts given: {stats['total_discount_amount']:.2f}")
    print(f"  codes issued:    {len(stats['discount_codes'])} ({used} used)")
    print()
