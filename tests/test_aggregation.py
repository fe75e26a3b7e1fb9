import csv
import io
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from app.models.user_settings import DateFormat
from app.services.aggregation import (
    CSV_HEADERS,
    build_dashboard,
    build_stats,
    compute_efficiency,
    compute_metrics,
    csv_filename,
    export_csv,
    percent,
    recent_products,
    weekly_histogram,
)
from app.services.stock import StockStatus, classify
from conftest import NOW, FakeProduct


def _days_ago(days, hours=0):
    return NOW - timedelta(days=days, hours=hours)


class TestMetrics:
    def test_example_scenario(self):
        products = [FakeProduct(0, 5), FakeProduct(5, 5), FakeProduct(10, 5)]

        metrics = compute_metrics(products)
        assert [classify(p.quantity, p.low_stock_at) for p in products] == [
            StockStatus.OUT_OF_STOCK, StockStatus.LOW_STOCK, StockStatus.IN_STOCK,
        ]
        assert (metrics["out_of_stock"], metrics["low_stock"], metrics["in_stock"]) == (1, 1, 1)
        # Rounded independently: 33 + 33 + 33 = 99
        assert compute_efficiency(metrics) == {
            "in_stock_percent": 33,
            "low_stock_percent": 33,
            "out_of_stock_percent": 33,
        }

    def test_counts_always_sum_to_total(self):
        products = [FakeProduct(q, t) for q in range(0, 9) for t in range(0, 4)]
        metrics = compute_metrics(products)
        assert metrics["in_stock"] + metrics["low_stock"] + metrics["out_of_stock"] == metrics["total_products"]
        assert metrics["total_products"] == len(products)

    def test_total_value_is_exact_decimal(self):
        products = [
            FakeProduct(3, 1, price=Decimal("19.99")),
            FakeProduct(2, 1, price=Decimal("0.10")),
        ]
        assert compute_metrics(products)["total_value"] == Decimal("60.17")

    def test_empty_inventory_has_zero_percentages(self):
        metrics = compute_metrics([])
        assert metrics["total_value"] == Decimal("0")
        assert compute_efficiency(metrics) == {
            "in_stock_percent": 0,
            "low_stock_percent": 0,
            "out_of_stock_percent": 0,
        }

    def test_percent_rounds_halves_up(self):
        assert percent(1, 8) == 13  # 12.5
        assert percent(2, 3) == 67
        assert percent(0, 4) == 0

    def test_stats(self):
        stats = build_stats([FakeProduct(0, 5, price=Decimal("2")), FakeProduct(3, 5, price=Decimal("2"))])
        assert stats == {
            "total_products": 2,
            "total_value": Decimal("6"),
            "low_stock_count": 1,
            "out_of_stock_count": 1,
        }


class TestWeeklyHistogram:
    def test_always_twelve_chronological_buckets(self):
        buckets = weekly_histogram([], now=NOW)
        assert [b["week"] for b in buckets] == [f"W{i}" for i in range(1, 13)]
        assert all(b["products"] == 0 for b in buckets)

    def test_products_land_in_half_open_intervals(self):
        products = [
            FakeProduct(1, 0, created_at=NOW - timedelta(seconds=1)),   # W12
            FakeProduct(1, 0, created_at=_days_ago(7)),                 # W12 start, inclusive
            FakeProduct(1, 0, created_at=_days_ago(7, 1)),              # W11
            FakeProduct(1, 0, created_at=_days_ago(83, 23)),            # W1
            FakeProduct(1, 0, created_at=_days_ago(84)),                # W1 start, inclusive
            FakeProduct(1, 0, created_at=NOW),                          # end is exclusive
        ]
        counts = [b["products"] for b in weekly_histogram(products, now=NOW)]
        assert counts[11] == 2
        assert counts[10] == 1
        assert counts[0] == 2
        assert sum(counts) == 5 < len(products)

    def test_older_products_are_dropped_from_chart_only(self):
        products = [FakeProduct(1, 0, created_at=_days_ago(2)), FakeProduct(1, 0, created_at=_days_ago(200))]
        dashboard = build_dashboard(products, now=NOW)
        assert sum(b["products"] for b in dashboard["weekly_data"]) == 1
        assert dashboard["metrics"]["total_products"] == 2

    def test_naive_timestamps_are_read_as_utc(self):
        naive = (NOW - timedelta(days=1)).replace(tzinfo=None)
        counts = [b["products"] for b in weekly_histogram([FakeProduct(1, 0, created_at=naive)], now=NOW)]
        assert counts[11] == 1


class TestRecentProducts:
    def test_five_newest_with_status(self):
        products = [FakeProduct(i, 3, name=f"p{i}", created_at=_days_ago(i)) for i in range(8)]
        recent = recent_products(products)

        assert [r["name"] for r in recent] == ["p0", "p1", "p2", "p3", "p4"]
        assert recent[0]["status"] == StockStatus.OUT_OF_STOCK
        assert recent[0]["level"] == 0
        assert recent[4]["status"] == StockStatus.IN_STOCK


class TestCsvExport:
    def test_header_and_row_layout(self):
        product = FakeProduct(4, 5, price=Decimal("2.5"), name="Cable", created_at=datetime(2026, 3, 7, tzinfo=timezone.utc))
        lines = export_csv([product]).split("\n")

        assert lines[0] == "Name,Price,Quantity,Low Stock At,Status,Total Value,Added"
        assert lines[1] == '"Cable",2.50,4,5,Low Stock,10.00,03/07/2026'

    def test_rows_are_newest_first(self):
        old = FakeProduct(1, 0, name="old", created_at=_days_ago(10))
        new = FakeProduct(1, 0, name="new", created_at=_days_ago(1))
        lines = export_csv([old, new]).split("\n")
        assert lines[1].startswith('"new"')
        assert lines[2].startswith('"old"')

    def test_date_format_setting_is_applied(self):
        product = FakeProduct(1, 0, created_at=datetime(2026, 3, 7, tzinfo=timezone.utc))
        assert export_csv([product], DateFormat.ISO).endswith(",2026-03-07")
        assert export_csv([product], DateFormat.EU).endswith(",07/03/2026")

    def test_name_is_quoted_and_escaped(self):
        product = FakeProduct(1, 0, price=Decimal("1"), name='Monitor 27" 4K', created_at=datetime(2026, 3, 7, tzinfo=timezone.utc))
        line = export_csv([product]).split("\n")[1]
        assert line == '"Monitor 27"" 4K",1.00,1,0,In Stock,1.00,03/07/2026'

    def test_round_trip_preserves_rows_and_status(self):
        products = [
            FakeProduct(0, 5, name='Monitor 27" 4K', created_at=_days_ago(1)),
            FakeProduct(5, 5, name="Cable, USB-C", created_at=_days_ago(2)),
            FakeProduct(10, 5, name="Plain", created_at=_days_ago(3)),
        ]
        rows = list(csv.reader(io.StringIO(export_csv(products))))

        assert rows[0] == CSV_HEADERS
        assert len(rows) - 1 == len(products)
        by_name = {row[0]: row for row in rows[1:]}
        for p in products:
            row = by_name[p.name]
            assert len(row) == len(CSV_HEADERS)
            assert row[4] == classify(int(row[2]), int(row[3])).value

    def test_empty_export_is_header_only(self):
        assert export_csv([]) == ",".join(CSV_HEADERS)

    def test_filename_uses_date(self):
        assert csv_filename(NOW) == "inventory-2026-10-19.csv"
