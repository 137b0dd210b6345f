from ministore.services.inventory_service import InventoryLedger

# One ledger for the lifetime of the process
ledger = InventoryLedger()


def get_ledger() -> InventoryLedger:
    """
    Dependency to get the process-wide inventory ledger.
    Tests override this to hand each test a fresh ledger.
    """
    return ledger
