import logging

from barberbook.application.ports.key_value_store import KeyValueStorePort
from barberbook.application.use_cases.ledger import Ledger
from barberbook.core.config import settings
from barberbook.core.logging import configure_logging
from barberbook.infrastructure.store.json_store import JsonFileKeyValueStore
from barberbook.infrastructure.store.ledger_repository import LedgerRepository
from barberbook.infrastructure.store.memory_store import MemoryKeyValueStore


_ledger: Ledger | None = None


def get_key_value_store() -> KeyValueStorePort:
    logger = logging.getLogger(__name__)
    if settings.STORE_PROVIDER.lower() == "memory":
        logger.info("Using MemoryKeyValueStore (STORE_PROVIDER=memory)")
        return MemoryKeyValueStore()
    logger.info("Using JsonFileKeyValueStore at %s", settings.DATA_DIR)
    return JsonFileKeyValueStore(data_dir=settings.DATA_DIR)


def get_repository() -> LedgerRepository:
    return LedgerRepository(
        store=get_key_value_store(),
        services_key=settings.SERVICES_KEY,
        appointments_key=settings.APPOINTMENTS_KEY,
    )


def get_ledger() -> Ledger:
    global _ledger
    if _ledger is None:
        configure_logging()
        _ledger = Ledger.load(
            get_repository(),
            default_start_time=settings.DEFAULT_START_TIME,
            business_name=settings.BUSINESS_NAME,
            currency=settings.CURRENCY_SYMBOL,
            language=settings.MESSAGE_LANGUAGE,
        )
    return _ledger


def reset_ledger() -> None:
    global _ledger
    _ledger = None
