import pytest

from app.services.stock import StockFilter, StockStatus, classify, matches_filter


@pytest.mark.parametrize("threshold", [0, 1, 5, 100])
def test_zero_quantity_is_out_of_stock(threshold):
    assert classify(0, threshold) == StockStatus.OUT_OF_STOCK


@pytest.mark.parametrize("quantity, threshold", [(1, 1), (1, 5), (4, 5), (5, 5)])
def test_quantity_up_to_threshold_is_low_stock(quantity, threshold):
    assert classify(quantity, threshold) == StockStatus.LOW_STOCK


@pytest.mark.parametrize("quantity, threshold", [(1, 0), (6, 5), (500, 10)])
def test_quantity_above_threshold_is_in_stock(quantity, threshold):
    assert classify(quantity, threshold) == StockStatus.IN_STOCK


def test_threshold_boundary_is_inclusive():
    assert classify(5, 5) == StockStatus.LOW_STOCK
    assert classify(6, 5) == StockStatus.IN_STOCK


def test_classification_is_a_partition():
    for threshold in range(0, 8):
        for quantity in range(0, 12):
            status = classify(quantity, threshold)
            expected = (
                StockStatus.OUT_OF_STOCK if quantity == 0
                else StockStatus.LOW_STOCK if quantity <= threshold
                else StockStatus.IN_STOCK
            )
            assert status == expected


def test_status_labels_and_levels():
    assert StockStatus.OUT_OF_STOCK.value == "Out of Stock"
    assert [s.level for s in (StockStatus.OUT_OF_STOCK, StockStatus.LOW_STOCK, StockStatus.IN_STOCK)] == [0, 1, 2]


def test_matches_filter():
    assert matches_filter(StockStatus.LOW_STOCK, StockFilter.ALL)
    assert matches_filter(StockStatus.LOW_STOCK, StockFilter.LOW_STOCK)
    assert not matches_filter(StockStatus.IN_STOCK, StockFilter.OUT_OF_STOCK)
    assert StockFilter("out-of-stock") == StockFilter.OUT_OF_STOCK
