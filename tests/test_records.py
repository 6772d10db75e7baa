import pytest

from structkit.records import Book, Employee, KeyedPriorityQueue, KeyedSet


def make_books():
    return [
        Book(1, "Atomic Habits", 120.30),
        Book(2, "Java", 600.50),
        Book(3, "CPP", 800.50),
        Book(4, "Art of not overthinking", 1000.10),
        Book(5, "Cloud Technologies", 700.90),
        Book(6, "Data Structures", 650.00),
    ]


def test_employee_str():
    assert str(Employee(1, "Srijan", 10000)) == "1 Srijan 10000"


def test_book_str():
    assert str(Book(1, "Atomic Habits", 120.30)) == "1 Atomic Habits 120.3"


def test_priority_queue_of_ints():
    pq = KeyedPriorityQueue()
    for value in [2, 67, 53, 21, 63, 83]:
        pq.push(value)
    assert pq.top() == 83
    assert pq.pop() == 83
    assert pq.top() == 67
    assert len(pq) == 5


def test_priority_queue_of_strings():
    pq = KeyedPriorityQueue()
    names = ["Suresh", "Amit", "Ranjan", "Mukesh"]
    for name in names:
        pq.push(name)
    assert pq.top() == max(names)


def test_priority_queue_pops_in_descending_order():
    values = [5, 1, 9, 3, 9, 0, 4]
    pq = KeyedPriorityQueue()
    for value in values:
        pq.push(value)
    popped = [pq.pop() for _ in range(len(values))]
    assert popped == sorted(values, reverse=True)
    assert len(pq) == 0


def test_priority_queue_by_name_and_salary():
    staff = [
        Employee(1, "Srijan", 10000),
        Employee(2, "Arjun", 65000),
        Employee(3, "Mukesh", 80000),
    ]
    by_name = KeyedPriorityQueue(key=lambda e: e.name)
    by_salary = KeyedPriorityQueue(key=lambda e: e.salary)
    for employee in staff:
        by_name.push(employee)
        by_salary.push(employee)
    assert by_name.top() is staff[0]
    assert by_salary.top() is staff[2]


def test_empty_priority_queue_raises():
    pq = KeyedPriorityQueue()
    with pytest.raises(IndexError):
        pq.top()
    with pytest.raises(IndexError):
        pq.pop()


def test_descending_int_set():
    values = [12, 45, 67, 84, 7, 8, 3, 3, 12, 67]
    s = KeyedSet(values, reverse=True)
    assert list(s) == sorted(set(values), reverse=True)
    assert s.count(12) == 1
    assert s.count(13) == 0


def test_add_and_erase_range_descending():
    values = [12, 45, 67, 84, 7, 8, 3, 3, 12, 67]
    s = KeyedSet(values, reverse=True)
    assert s.add(50) is True
    expected = sorted(set(values) | {50}, reverse=True)
    assert list(s) == expected
    s.erase_range(2, -2)
    assert list(s) == expected[:2] + expected[-2:]


def test_book_set_by_id_discards_duplicate_key():
    books = make_books()
    s = KeyedSet(books, key=lambda b: b.book_id)
    assert s.add(Book(1, "Crack Interview", 1200.00)) is False
    assert len(s) == len(books)
    assert list(s) == books
    assert Book(1, "Crack Interview", 1200.00) in s


def test_book_set_by_title_is_sorted():
    books = make_books()
    s = KeyedSet(books, key=lambda b: b.title)
    assert [b.title for b in s] == sorted(b.title for b in books)


def test_book_set_by_price_is_sorted():
    books = make_books()
    s = KeyedSet(books, key=lambda b: b.price)
    prices = [b.price for b in s]
    assert prices == sorted(prices)


def test_discard():
    s = KeyedSet([3, 1, 2])
    assert s.discard(2) is True
    assert s.discard(2) is False
    assert list(s) == [1, 3]
    assert 2 not in s


def test_empty_set():
    s = KeyedSet()
    assert len(s) == 0
    assert list(s) == []
    assert s.count(1) == 0