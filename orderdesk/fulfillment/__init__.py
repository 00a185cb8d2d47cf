from .engine import FulfillmentEngine
from .errors import FulfillmentError, InsufficientInventoryError, OrderNotFound, ValidationError
from .ledger import InventoryLedger
from .models import Order
from .store import OrderStore
