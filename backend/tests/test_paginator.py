import pytest

from services.paginator import paginate


@pytest.mark.parametrize("n", [0, 1, 7, 10, 23])
@pytest.mark.parametrize("size", [1, 3, 10, 50])
def test_pages_reconstruct_list(n, size):
    items = list(range(n))
    first = paginate(items, 1, size)
    rebuilt = []
    for page in range(1, first.total_pages + 1):
        rebuilt.extend(paginate(items, page, size).items)
    assert rebuilt == items
    assert first.total == n


def test_slice_and_totals():
    page = paginate(list(range(10)), 2, 4)
    assert page.items == [4, 5, 6, 7]
    assert page.total == 10
    assert page.total_pages == 3
    assert (page.page, page.page_size) == (2, 4)


def test_page_past_end_returns_last_page():
    page = paginate(list(range(10)), 99, 4)
    assert page.page == 3
    assert page.items == [8, 9]


def test_invalid_arguments_are_clamped():
    page = paginate(list(range(5)), -3, 0)
    assert page.page == 1
    assert page.page_size == 1
    assert page.items == [0]


def test_empty_input():
    page = paginate([], 4, 10)
    assert page.page == 1
    assert page.items == []
    assert page.total == 0
    assert page.total_pages == 0
