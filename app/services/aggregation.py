"""
Dashboard aggregation and CSV export over a snapshot of one inventory's products.

Every function here is pure: it takes an iterable of product-like objects
(anything exposing name, price, quantity, low_stock_at and created_at) and
never touches the database, so results depend only on the snapshot passed in.
"""
import csv
import io
from datetime import datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional
from app.core.config import HISTOGRAM_WEEKS, RECENT_PRODUCTS_LIMIT
from app.models.user_settings import DateFormat
from app.services.stock import StockStatus, classify_product

CSV_HEADERS = ["Name", "Price", "Quantity", "Low Stock At", "Status", "Total Value", "Added"]

_CENT = Decimal("0.01")
_WEEK = timedelta(days=7)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_money(value) -> Decimal:
    return _decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def newest_first(products: Iterable) -> list:
    return sorted(products, key=lambda p: _as_utc(p.created_at), reverse=True)


# ----------- Metrics -----------

def compute_metrics(products: Iterable) -> Dict:
    """Totals and stock status counts. in_stock is derived so the counts always sum to the total."""
    products = list(products)
    total_products = len(products)
    total_value = sum((_decimal(p.price) * p.quantity for p in products), Decimal("0"))

    statuses = [classify_product(p) for p in products]
    low_stock = statuses.count(StockStatus.LOW_STOCK)
    out_of_stock = statuses.count(StockStatus.OUT_OF_STOCK)

    return {
        "total_products": total_products,
        "total_value": total_value,
        "low_stock": low_stock,
        "out_of_stock": out_of_stock,
        "in_stock": total_products - low_stock - out_of_stock,
    }


def percent(count: int, total: int) -> int:
    """Share of total as a whole percentage, rounding halves up. An empty total is 0%."""
    if total == 0:
        return 0
    share = Decimal(count) * 100 / Decimal(total)
    return int(share.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_efficiency(metrics: Dict) -> Dict:
    # Each category is rounded on its own; the three may add up to 99 or 101
    total = metrics["total_products"]
    return {
        "in_stock_percent": percent(metrics["in_stock"], total),
        "low_stock_percent": percent(metrics["low_stock"], total),
        "out_of_stock_percent": percent(metrics["out_of_stock"], total),
    }


# ----------- Charts -----------

def weekly_histogram(products: Iterable, now: Optional[datetime] = None, weeks: int = HISTOGRAM_WEEKS) -> List[Dict]:
    """
    Counts products created in each of the last `weeks` whole weeks ending at `now`.
    Bucket W1 is the oldest. Each bucket is half-open: [start, end).
    Products older than the window are left out of every bucket.
    """
    now = _as_utc(now or datetime.now(timezone.utc))
    created = [_as_utc(p.created_at) for p in products]

    buckets = []
    for i in range(weeks - 1, -1, -1):
        week_start = now - (i + 1) * _WEEK
        week_end = now - i * _WEEK
        count = sum(1 for ts in created if week_start <= ts < week_end)
        buckets.append({"week": f"W{weeks - i}", "products": count})
    return buckets


def recent_products(products: Iterable, limit: int = RECENT_PRODUCTS_LIMIT) -> List[Dict]:
    recent = []
    for p in newest_first(products)[:limit]:
        status = classify_product(p)
        recent.append({
            "id": p.id,
            "name": p.name,
            "quantity": p.quantity,
            "low_stock_at": p.low_stock_at,
            "status": status,
            "level": status.level,
        })
    return recent


def build_stats(products: Iterable) -> Dict:
    metrics = compute_metrics(products)
    return {
        "total_products": metrics["total_products"],
        "total_value": metrics["total_value"],
        "low_stock_count": metrics["low_stock"],
        "out_of_stock_count": metrics["out_of_stock"],
    }


def build_dashboard(products: Iterable, now: Optional[datetime] = None) -> Dict:
    products = list(products)
    metrics = compute_metrics(products)
    return {
        "metrics": metrics,
        "weekly_data": weekly_histogram(products, now=now),
        "recent_products": recent_products(products),
        "efficiency": compute_efficiency(metrics),
    }


# ----------- CSV Export -----------

def csv_row(product, date_format: DateFormat = DateFormat.US) -> List[str]:
    """Every column after Name, already formatted."""
    price = _decimal(product.price)
    return [
        str(round_money(price)),
        str(product.quantity),
        str(product.low_stock_at),
        classify_product(product).value,
        str(round_money(price * product.quantity)),
        _as_utc(product.created_at).strftime(DateFormat(date_format).strftime_pattern),
    ]


def export_csv(products: Iterable, date_format: DateFormat = DateFormat.US) -> str:
    """Serializes products newest first under the fixed header row. Name is always quoted."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    # Writes the quoted Name cell and its separator, the row writer finishes the line
    name_writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator=",")

    writer.writerow(CSV_HEADERS)
    for product in newest_first(products):
        name_writer.writerow([product.name])
        writer.writerow(csv_row(product, date_format))
    return output.getvalue()[:-1]


def csv_filename(today: Optional[datetime] = None) -> str:
    today = today or datetime.now(timezone.utc)
    return f"inventory-{today.strftime('%Y-%m-%d')}.csv"
