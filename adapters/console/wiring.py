"""
StockMaster Console Adapter Wiring
=====================================
Builds the object graph for one console session: store → ledger →
interpreter → command center, plus the read-only dashboard pieces.

This module is adapter-only glue; it holds no state of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ai.advisors import LowStockAdvisor
from ai.interpreter import CommandInterpreter, GeminiInterpreter
from config import settings
from core.storage import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from core.time import Clock, SystemClock
from engines.inventory.seed import seed_demo_data
from engines.inventory.services import InventoryLedger
from integration.inbound import CommandCenter
from projections.inventory import InventoryDashboard

MEMORY_STORE = ":memory:"


@dataclass(frozen=True)
class ConsoleApplication:
    store: KeyValueStore
    ledger: InventoryLedger
    center: CommandCenter
    dashboard: InventoryDashboard
    advisor: LowStockAdvisor
    clock: Clock


def build_store(store_path: Union[str, Path, None]) -> KeyValueStore:
    if str(store_path) == MEMORY_STORE:
        return InMemoryKeyValueStore()
    return JsonFileKeyValueStore(store_path or settings.STORE_PATH)


def build_application(
    *,
    store_path: Union[str, Path, None] = None,
    store: Optional[KeyValueStore] = None,
    interpreter: Optional[CommandInterpreter] = None,
    clock: Optional[Clock] = None,
    seed: bool = True,
) -> ConsoleApplication:
    clock = clock or SystemClock()
    store = store if store is not None else build_store(store_path)
    ledger = InventoryLedger(store, clock=clock)
    if seed:
        seed_demo_data(ledger)

    center = CommandCenter(
        ledger=ledger,
        interpreter=interpreter or GeminiInterpreter(),
        clock=clock,
    )
    return ConsoleApplication(
        store=store,
        ledger=ledger,
        center=center,
        dashboard=InventoryDashboard(ledger),
        advisor=LowStockAdvisor(),
        clock=clock,
    )
