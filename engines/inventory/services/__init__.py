"""
StockMaster Inventory Engine - Ledger Service
================================================
Owns the product collection and the activity log.

Both collections live in a KeyValueStore as JSON arrays and are
rewritten whole on every mutation (read → modify → write). Every
mutation appends exactly one log entry, newest first. Mutations are
serialized by one re-entrant lock per ledger.
"""

from __future__ import annotations

import json
import logging
import random
import threading
import uuid
from dataclasses import dataclass, replace
from typing import Callable, Collection, List, Optional, Tuple

from config import settings
from core.storage import KeyValueStore
from core.time import Clock, SystemClock, format_timestamp
from engines.inventory.commands import (
    AdjustStockRequest,
    DeliverStockRequest,
    MoveStockRequest,
    ReceiveStockRequest,
)
from engines.inventory.errors import (
    InsufficientStock,
    InvalidQuantity,
    ProductNotFound,
)
from engines.inventory.events import (
    build_adjusted_details,
    build_created_details,
    build_delivered_details,
    build_moved_details,
    build_received_details,
    resolve_log_type,
)
from engines.inventory.models import LogEntry, Product, fold_name
from engines.inventory.policies import (
    insufficient_stock_policy,
    non_negative_count_policy,
    positive_quantity_policy,
    product_exists_policy,
)

logger = logging.getLogger("stockmaster.inventory")


# ══════════════════════════════════════════════════════════════
# IDENTIFIERS
# ══════════════════════════════════════════════════════════════

def generate_id() -> str:
    return uuid.uuid4().hex


def generate_sku(existing: Collection[str], rng: Optional[random.Random] = None) -> str:
    """
    SKU-NNNN, unique among existing SKUs.

    Widens to six digits once the four-digit space keeps colliding.
    """
    rng = rng or random.Random()
    width = 4
    attempts = 0
    while True:
        sku = f"SKU-{rng.randrange(10 ** width):0{width}d}"
        if sku not in existing:
            return sku
        attempts += 1
        if attempts % 50 == 0:
            width += 2


# ══════════════════════════════════════════════════════════════
# EXECUTION RESULT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class LedgerResult:
    product: Product
    entry: LogEntry
    created: bool = False


# ══════════════════════════════════════════════════════════════
# LEDGER
# ══════════════════════════════════════════════════════════════

class InventoryLedger:
    """
    Inventory ledger over an explicit key-value store.

    Usage:
        ledger = InventoryLedger(InMemoryKeyValueStore())
        ledger.receive("Widget", 5, "A")
        ledger.deliver("widget", 2)
        ledger.list_log()[0].action   # "DELIVER_STOCK"
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        clock: Optional[Clock] = None,
        id_factory: Callable[[], str] = generate_id,
        sku_factory: Callable[[Collection[str]], str] = generate_sku,
        products_key: str = settings.PRODUCTS_KEY,
        logs_key: str = settings.LOGS_KEY,
        default_category: str = settings.DEFAULT_CATEGORY,
    ):
        self._store = store
        self._clock = clock or SystemClock()
        self._id_factory = id_factory
        self._sku_factory = sku_factory
        self._products_key = products_key
        self._logs_key = logs_key
        self._default_category = default_category
        self._lock = threading.RLock()
        self.initialize()

        self._handlers = {
            ReceiveStockRequest: self._apply_receive,
            DeliverStockRequest: self._apply_deliver,
            MoveStockRequest: self._apply_move,
            AdjustStockRequest: self._apply_adjust,
        }

    # ══════════════════════════════════════════════════════════
    # PERSISTENCE
    # ══════════════════════════════════════════════════════════

    def initialize(self) -> None:
        """Create both collections as empty arrays when missing."""
        with self._lock:
            for key in (self._products_key, self._logs_key):
                if self._store.get(key) is None:
                    self._store.set(key, "[]")

    def _load_products(self) -> List[Product]:
        raw = self._store.get(self._products_key)
        return [Product.from_dict(item) for item in json.loads(raw or "[]")]

    def _load_log(self) -> List[LogEntry]:
        raw = self._store.get(self._logs_key)
        return [LogEntry.from_dict(item) for item in json.loads(raw or "[]")]

    @staticmethod
    def _dump_products(products: List[Product]) -> str:
        return json.dumps([p.to_dict() for p in products])

    def _dump_log_with(self, entry: LogEntry) -> str:
        entries = self._load_log()
        entries.insert(0, entry)
        return json.dumps([e.to_dict() for e in entries])

    def _new_entry(self, action: str, details: str) -> LogEntry:
        return LogEntry(
            entry_id=self._id_factory(),
            timestamp=format_timestamp(self._clock.now_utc()),
            action=action,
            details=details,
            entry_type=resolve_log_type(action),
        )

    @staticmethod
    def _find_index(products: List[Product], name: str) -> Optional[int]:
        key = fold_name(name)
        for index, product in enumerate(products):
            if product.folded_name == key:
                return index
        return None

    def _require_index(self, products: List[Product], name: str) -> int:
        index = self._find_index(products, name)
        reason = product_exists_policy(name, None if index is None else products[index])
        if reason is not None:
            logger.warning(f"Rejected: {reason.message}")
            raise ProductNotFound(reason, name=name)
        return index

    def _commit(
        self,
        products: List[Product],
        product: Product,
        action: str,
        details: str,
        created: bool = False,
    ) -> LedgerResult:
        entry = self._new_entry(action, details)
        products_raw = self._dump_products(products)
        log_raw = self._dump_log_with(entry)
        previous_products = self._store.get(self._products_key)

        self._store.set(self._products_key, products_raw)
        try:
            self._store.set(self._logs_key, log_raw)
        except Exception:
            # no mutation without its log entry
            logger.error(f"Log write failed for {action}; restoring products")
            self._store.set(self._products_key, previous_products)
            raise
        logger.info(f"{action}: {details}")
        return LedgerResult(product=product, entry=entry, created=created)

    # ══════════════════════════════════════════════════════════
    # DISPATCH
    # ══════════════════════════════════════════════════════════

    def execute(self, request) -> LedgerResult:
        """Apply any ledger request. All-or-nothing."""
        handler = self._handlers.get(type(request))
        if handler is None:
            raise TypeError(
                f"Unsupported ledger request: {type(request).__name__}"
            )

        for policy in (positive_quantity_policy, non_negative_count_policy):
            reason = policy(request)
            if reason is not None:
                logger.warning(f"Rejected {request.action}: {reason.message}")
                raise InvalidQuantity(reason)

        with self._lock:
            return handler(request)

    # ══════════════════════════════════════════════════════════
    # OPERATIONS
    # ══════════════════════════════════════════════════════════

    def receive(
        self,
        name: str,
        quantity: int,
        location: str,
        category: Optional[str] = None,
    ) -> LedgerResult:
        return self.execute(ReceiveStockRequest(
            name=name, quantity=quantity, location=location, category=category,
        ))

    def deliver(self, name: str, quantity: int) -> LedgerResult:
        return self.execute(DeliverStockRequest(name=name, quantity=quantity))

    def move(
        self, name: str, quantity: Optional[int], to_location: str,
    ) -> LedgerResult:
        return self.execute(MoveStockRequest(
            name=name, to_location=to_location, quantity=quantity,
        ))

    def adjust(self, name: str, true_quantity: int) -> LedgerResult:
        return self.execute(AdjustStockRequest(
            name=name, true_quantity=true_quantity,
        ))

    def _apply_receive(self, request: ReceiveStockRequest) -> LedgerResult:
        products = self._load_products()
        index = self._find_index(products, request.name)

        if index is not None:
            current = products[index]
            updated = replace(
                current,
                quantity=current.quantity + request.quantity,
                location=request.location,
            )
            products[index] = updated
            return self._commit(
                products, updated, request.action,
                build_received_details(
                    updated.name, request.quantity, updated.quantity, updated.location,
                ),
            )

        category = (request.category or "").strip() or self._default_category
        created = Product(
            product_id=self._id_factory(),
            name=request.name.strip(),
            sku=self._sku_factory({p.sku for p in products}),
            category=category,
            quantity=request.quantity,
            location=request.location,
        )
        products.append(created)
        return self._commit(
            products, created, request.action,
            build_created_details(
                created.name, created.quantity, created.location, category,
            ),
            created=True,
        )

    def _apply_deliver(self, request: DeliverStockRequest) -> LedgerResult:
        products = self._load_products()
        index = self._require_index(products, request.name)
        current = products[index]

        reason = insufficient_stock_policy(request, current)
        if reason is not None:
            logger.warning(f"Rejected {request.action}: {reason.message}")
            raise InsufficientStock(
                reason,
                name=current.name,
                requested=request.quantity,
                available=current.quantity,
            )

        updated = replace(current, quantity=current.quantity - request.quantity)
        products[index] = updated
        return self._commit(
            products, updated, request.action,
            build_delivered_details(updated.name, request.quantity, updated.quantity),
        )

    def _apply_move(self, request: MoveStockRequest) -> LedgerResult:
        products = self._load_products()
        index = self._require_index(products, request.name)
        current = products[index]

        updated = replace(current, location=request.to_location)
        products[index] = updated
        return self._commit(
            products, updated, request.action,
            build_moved_details(
                updated.name, request.quantity, current.location, request.to_location,
            ),
        )

    def _apply_adjust(self, request: AdjustStockRequest) -> LedgerResult:
        products = self._load_products()
        index = self._require_index(products, request.name)
        current = products[index]

        updated = replace(current, quantity=request.true_quantity)
        products[index] = updated
        return self._commit(
            products, updated, request.action,
            build_adjusted_details(updated.name, current.quantity, updated.quantity),
        )

    # ══════════════════════════════════════════════════════════
    # READS
    # ══════════════════════════════════════════════════════════

    def list_products(self) -> List[Product]:
        with self._lock:
            return self._load_products()

    def list_log(self) -> List[LogEntry]:
        """Newest first."""
        with self._lock:
            return self._load_log()

    def find_product(self, name: str) -> Optional[Product]:
        products = self.list_products()
        index = self._find_index(products, name)
        return None if index is None else products[index]

    def snapshot(self) -> Tuple[List[Product], List[LogEntry]]:
        """Both collections read under one lock acquisition."""
        with self._lock:
            return self._load_products(), self._load_log()
