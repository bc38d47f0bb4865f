"""
Purchase Coordinator — client side lifecycle
Drives InitPurchase -> (platform authorization callback) -> FinalizePurchase.

Transaction handles are held in memory only. If the process stops between
InitPurchase and FinalizePurchase the transid is lost and the purchase cannot
be resumed. The wait for the authorization event has no timeout; callers that
give up must call abandon().
"""

import itertools
import logging
import threading
from steam_relay.client.api import RelayClientError
from steam_relay.client.models import AuthorizationEvent, Purchase, PurchaseState

logger = logging.getLogger(__name__)


class PurchaseCoordinator:
    def __init__(self, client, steam_id, on_completed=None, first_order_id=1000):
        self.client = client
        self.app_id = client.app_id
        self.steam_id = str(steam_id)
        self.on_completed = on_completed
        self._order_ids = itertools.count(first_order_id)
        self._purchases = {}
        # The platform callback may arrive on another thread
        self._lock = threading.Lock()

    def next_order_id(self):
        with self._lock:
            return str(next(self._order_ids))

    def get(self, order_id):
        with self._lock:
            return self._purchases.get((self.app_id, str(order_id)))

    def pending(self):
        with self._lock:
            return [p for p in self._purchases.values() if not p.is_terminal]

    # --- Idle -> PendingAuthorization -----------------------------------

    def init_purchase(self, item, order_id=None):
        """
        Ask the relay to open a transaction. Returns the Purchase waiting for
        authorization, or None when the call failed or carried no transid.
        A failed order id must not be reused; the next call draws a new one.
        """
        order_id = str(order_id) if order_id is not None else self.next_order_id()
        purchase = Purchase(order_id=order_id, app_id=self.app_id, steam_id=self.steam_id, item=item)

        try:
            reply = self.client.init_purchase(order_id, self.steam_id, item)
        except RelayClientError as e:
            logger.warning("[order=%s] InitPurchase failed: %s", order_id, e.message)
            return None

        trans_id = reply.get("transid")
        if not reply.get("success") or not trans_id:
            logger.warning("[order=%s] InitPurchase returned no transaction id", order_id)
            return None

        purchase.trans_id = str(trans_id)
        purchase.advance(PurchaseState.PENDING_AUTHORIZATION)
        with self._lock:
            self._purchases[purchase.key] = purchase
        logger.info("[order=%s] transaction initiated, transid=%s", order_id, purchase.trans_id)
        return purchase

    # --- Authorization callback -----------------------------------------

    def on_authorization(self, event: AuthorizationEvent):
        """
        Handler for the platform's authorization callback. Correlates by
        (appId, orderId); approved purchases are finalized immediately.
        Returns the affected Purchase, or None for an unknown correlation.
        """
        key = (str(event.app_id), str(event.order_id))
        with self._lock:
            purchase = self._purchases.get(key)
            if purchase is None or purchase.state != PurchaseState.PENDING_AUTHORIZATION:
                purchase_state = purchase.state.value if purchase else None
                logger.warning(
                    "Ignoring authorization for app=%s order=%s (state=%s)",
                    event.app_id, event.order_id, purchase_state,
                )
                return None
            if not event.authorized:
                purchase.advance(PurchaseState.ABANDONED)
            else:
                purchase.advance(PurchaseState.AUTHORIZED)

        logger.info(
            "[order=%s] authorization received: authorized=%s", event.order_id, event.authorized
        )
        if event.authorized:
            self.finalize(purchase.order_id)
        return purchase

    # --- Authorized -> Completed | FailedFinalize -----------------------

    def finalize(self, order_id):
        """
        Finalize an authorized purchase. Any other state, including a finalize
        already in flight, is a protocol violation: nothing is sent and False
        is returned.
        """
        with self._lock:
            purchase = self._purchases.get((self.app_id, str(order_id)))
            if purchase is None or purchase.state != PurchaseState.AUTHORIZED:
                state = purchase.state.value if purchase else None
                logger.warning("[order=%s] finalize refused, purchase is not authorized (state=%s)", order_id, state)
                return False
            # Claimed: concurrent finalize calls now see FINALIZING and back off
            purchase.advance(PurchaseState.FINALIZING)

        try:
            reply = self.client.finalize_purchase(purchase.order_id)
            succeeded = bool(reply.get("success"))
        except RelayClientError as e:
            logger.error("[order=%s] FinalizePurchase failed: %s", order_id, e.message)
            succeeded = False

        with self._lock:
            purchase.advance(PurchaseState.COMPLETED if succeeded else PurchaseState.FAILED_FINALIZE)

        if not succeeded:
            return False

        logger.info("[order=%s] transaction finished", order_id)
        if self.on_completed:
            self.on_completed(purchase)
        return True

    # --- Read-only / housekeeping ---------------------------------------

    def check_status(self, order_id):
        """Query the partner for the transaction's status. Never changes local state."""
        purchase = self.get(order_id)
        if purchase is None:
            raise KeyError(f"Unknown order {order_id}")
        return self.client.check_purchase_status(purchase.order_id, purchase.trans_id)

    def abandon(self, order_id):
        with self._lock:
            purchase = self._purchases.get((self.app_id, str(order_id)))
            if purchase is None or purchase.state != PurchaseState.PENDING_AUTHORIZATION:
                return False
            purchase.advance(PurchaseState.ABANDONED)
        logger.info("[order=%s] purchase abandoned", order_id)
        return True
