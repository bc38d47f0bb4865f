"""
Run one purchase against a running relay.
The platform's authorization callback is simulated with a terminal prompt.
"""

import argparse
import logging
from steam_relay.client.api import RelayClient
from steam_relay.client.coordinator import PurchaseCoordinator
from steam_relay.client.models import AuthorizationEvent, PurchaseItem


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    p = argparse.ArgumentParser(description="Buy one item through the Steam relay.")
    p.add_argument("--relay-url", default="http://localhost:5000")
    p.add_argument("--app-id", default="480")
    p.add_argument("--steam-id", required=True)
    p.add_argument("--item-id", default="item_id_1")
    p.add_argument("--description", default="1000 Coins")
    p.add_argument("--category", default="Gold")
    p.add_argument("--amount", type=int, default=199, help="Price in cents")
    p.add_argument("--order-id", type=int, default=1000)
    args = p.parse_args()

    coins = {"balance": 100}

    def grant(purchase):
        coins["balance"] += 1000

    client = RelayClient(args.relay_url, args.app_id)
    coordinator = PurchaseCoordinator(
        client, args.steam_id, on_completed=grant, first_order_id=args.order_id
    )

    item = PurchaseItem(
        item_id=args.item_id,
        description=args.description,
        category=args.category,
        amount=args.amount,
    )
    purchase = coordinator.init_purchase(item)
    if purchase is None:
        print("InitPurchase failed")
        return

    answer = input(f"Authorize order {purchase.order_id} in the Steam overlay? [y/N] ")
    coordinator.on_authorization(
        AuthorizationEvent(
            app_id=purchase.app_id,
            order_id=purchase.order_id,
            authorized=answer.strip().lower() in ("y", "yes"),
        )
    )

    print("\n=== RESULT ===")
    print("state:", purchase.state.value)
    print("transid:", purchase.trans_id)
    print("coins:", coins["balance"])


if __name__ == "__main__":
    main()
