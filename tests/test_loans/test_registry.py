"""Tests for LoanRegistry."""

import time

import pytest

from libcatalog.errors import LoanNotFoundError, NotFoundError
from libcatalog.loans import Loan, LoanRegistry, SECONDS_PER_DAY
from libcatalog.store import LoanStore


class TestLend:
    """Tests for lending books."""

    def test_lend_computes_due_date(self, registry, fixed_now):
        """Test the due date is now plus the given days."""
        loan = registry.lend("Alice", "111", 7)

        assert loan == Loan(
            customer_name="Alice", isbn="111", due_at=fixed_now + 7 * SECONDS_PER_DAY
        )
        assert registry.loans == [loan]

    def test_lend_uses_wall_clock(self, loan_store):
        """Test the default clock is the system time at the lend call."""
        registry = LoanRegistry(loan_store)

        before = time.time()
        registry.lend("Alice", "111", 7)
        after = time.time()

        due_at = registry.list_loans()[0].due_at
        assert before + 7 * 86400 - 2 <= due_at <= after + 7 * 86400 + 2

    @pytest.mark.parametrize("days", [0, -3, 100_000, 10**15])
    def test_lend_days_not_validated(self, registry, fixed_now, days):
        """Test zero, negative and huge day counts are accepted."""
        loan = registry.lend("Alice", "111", days)

        assert loan.due_at == fixed_now + days * SECONDS_PER_DAY

    def test_lend_unknown_isbn(self, registry):
        """Test the ISBN is not checked against any catalog."""
        loan = registry.lend("Alice", "does-not-exist", 7)

        assert loan.isbn == "does-not-exist"

    def test_lend_same_book_twice(self, registry):
        """Test double lending is allowed."""
        registry.lend("Alice", "111", 7)
        registry.lend("Bob", "111", 7)
        registry.lend("Alice", "111", 7)

        assert len(registry) == 3

    def test_lend_reads_clock_each_time(self, loan_store):
        """Test each lend call reads the clock."""
        ticks = iter([1000.0, 2000.0])
        registry = LoanRegistry(loan_store, clock=lambda: next(ticks))

        first = registry.lend("Alice", "111", 1)
        second = registry.lend("Alice", "111", 1)

        assert second.due_at - first.due_at == 1000


class TestReturn:
    """Tests for returning books."""

    def test_return_loan(self, registry):
        """Test returning a lent book removes the loan."""
        loan = registry.lend("Alice", "111", 7)

        returned = registry.return_loan("Alice", "111")

        assert returned == loan
        assert len(registry) == 0

    def test_return_removes_only_first_match(self, loan_store):
        """Test duplicates are returned one at a time, first one first."""
        ticks = iter([1000.0, 2000.0])
        registry = LoanRegistry(loan_store, clock=lambda: next(ticks))
        registry.lend("Alice", "111", 1)
        second = registry.lend("Alice", "111", 1)

        registry.return_loan("Alice", "111")

        assert registry.loans == [second]

    def test_second_return_fails(self, registry):
        """Test returning the same loan twice fails the second time."""
        registry.lend("Alice", "111", 7)
        registry.return_loan("Alice", "111")

        with pytest.raises(LoanNotFoundError) as exc_info:
            registry.return_loan("Alice", "111")

        assert exc_info.value.customer_name == "Alice"
        assert exc_info.value.isbn == "111"

    def test_return_requires_both_fields(self, registry):
        """Test customer and ISBN must both match."""
        registry.lend("Alice", "111", 7)

        with pytest.raises(NotFoundError):
            registry.return_loan("Bob", "111")
        with pytest.raises(NotFoundError):
            registry.return_loan("Alice", "222")

        assert len(registry) == 1


class TestSearchByCustomer:
    """Tests for customer search."""

    def test_search_exact_match(self, registry):
        """Test only exact customer names match, in registry order."""
        registry.lend("Alice", "111", 1)
        registry.lend("Bob", "222", 1)
        registry.lend("Alice", "333", 1)

        results = registry.search_by_customer("Alice")

        assert [loan.isbn for loan in results] == ["111", "333"]

    def test_search_is_case_sensitive(self, registry):
        """Test case must match."""
        registry.lend("Alice", "111", 1)

        assert registry.search_by_customer("alice") == []

    def test_search_is_full_string(self, registry):
        """Test a prefix of the name does not match."""
        registry.lend("Alice", "111", 1)

        assert registry.search_by_customer("Ali") == []


class TestListLoans:
    """Tests for listing loans."""

    def test_list_empty(self, registry):
        """Test listing with no loans."""
        assert registry.list_loans() == []

    def test_list_unsorted(self, registry):
        """Test loans come back in lend order."""
        registry.lend("Zed", "1", 1)
        registry.lend("Amy", "2", 1)

        assert [loan.customer_name for loan in registry.list_loans()] == ["Zed", "Amy"]


class TestRegistryPersistence:
    """Tests for loading and saving loans."""

    def test_loads_existing_store(self, tmp_path):
        """Test the registry starts with the store's loans."""
        path = tmp_path / "loans.txt"
        path.write_text("Alice 111 1700000000\n", encoding="utf-8")

        registry = LoanRegistry(LoanStore(path))

        assert registry.loans == [Loan(customer_name="Alice", isbn="111", due_at=1700000000)]

    def test_round_trip_preserves_order(self, registry, loan_store):
        """Test saved loans reload equal and in the same order."""
        registry.lend("Zed", "1", 3)
        registry.lend("Amy", "2", -1)
        registry.lend("Zed", "1", 5)
        registry.save()

        reloaded = LoanRegistry(loan_store)

        assert reloaded.loans == registry.loans

    def test_round_trip_huge_due_date(self, registry, loan_store):
        """Test a due date beyond 64-bit range survives save and reload."""
        loan = registry.lend("Alice", "111", 10**15)
        registry.save()

        reloaded = LoanRegistry(loan_store)

        assert reloaded.loans == [loan]
        assert loan.due_at > 2**63
