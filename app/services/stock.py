from enum import Enum


class StockStatus(str, Enum):
    OUT_OF_STOCK = "Out of Stock"
    LOW_STOCK = "Low Stock"
    IN_STOCK = "In Stock"

    @property
    def level(self) -> int:
        """Numeric level used by the stock levels chart (0 = out, 2 = healthy)."""
        return _LEVELS[self]


_LEVELS = {
    StockStatus.OUT_OF_STOCK: 0,
    StockStatus.LOW_STOCK: 1,
    StockStatus.IN_STOCK: 2,
}


class StockFilter(str, Enum):
    ALL = "all"
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


_FILTER_STATUS = {
    StockFilter.IN_STOCK: StockStatus.IN_STOCK,
    StockFilter.LOW_STOCK: StockStatus.LOW_STOCK,
    StockFilter.OUT_OF_STOCK: StockStatus.OUT_OF_STOCK,
}


def classify(quantity: int, low_stock_at: int) -> StockStatus:
    """
    Maps a quantity and its low stock threshold to a status.
    Zero is checked first; the threshold itself counts as low stock.
    """
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= low_stock_at:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def classify_product(product) -> StockStatus:
    return classify(product.quantity, product.low_stock_at)


def matches_filter(status: StockStatus, stock_filter: StockFilter) -> bool:
    if stock_filter == StockFilter.ALL:
        return True
    return _FILTER_STATUS[stock_filter] == status
