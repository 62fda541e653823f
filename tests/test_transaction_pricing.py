"""
Transaction Pricing Tests - Create / Renew / Restore / Transfer Price Tables

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- domain_quotes.application.quote_service (DomainQuotes via conftest)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from domain_quotes.domain.errors import UnsupportedExtensionError

from conftest import quote

TABLES = {"renew": "renew_prices", "restore": "restore_prices", "transfer": "transfer_prices"}


class TestTransactionTables:
    @pytest.mark.parametrize("transaction,price", [("renew", 15), ("restore", 40), ("transfer", 8)])
    def test_uses_transaction_table(self, make_engine, transaction, price):
        engine = make_engine(**{TABLES[transaction]: {"com": price}})
        assert quote(engine, "com", "USD", transaction="create").base_price == 10
        result = quote(engine, "com", "USD", transaction=transaction)
        assert result.base_price == price
        assert result.transaction == transaction

    @pytest.mark.parametrize("transaction", ["renew", "restore", "transfer"])
    def test_falls_back_without_table(self, make_engine, transaction):
        engine = make_engine()
        assert quote(engine, "com", "USD", transaction=transaction).base_price == 10

    @pytest.mark.parametrize("transaction", ["renew", "restore", "transfer"])
    def test_falls_back_for_unlisted_extension(self, make_engine, transaction):
        engine = make_engine(**{TABLES[transaction]: {"net": 18}})
        assert quote(engine, "com", "USD", transaction=transaction).base_price == 10
        assert quote(engine, "net", "USD", transaction=transaction).base_price == 18

    def test_default_transaction_is_create(self, make_engine):
        engine = make_engine(renew_prices={"com": 15})
        result = quote(engine, "com", "USD")
        assert result.transaction == "create"
        assert result.base_price == 10

    def test_override_merges_per_currency(self, make_engine):
        engine = make_engine(
            create_prices={"com": {"USD": 10, "NGN": 15000}},
            renew_prices={"com": {"USD": 12}},
        )
        assert quote(engine, "com", "USD", transaction="renew").base_price == 12
        # NGN keeps the create price; implied rate is 15000 / 12
        assert quote(engine, "com", "NGN", transaction="renew").base_price == 15000

    def test_transaction_table_cannot_add_extension(self, make_engine):
        engine = make_engine(renew_prices={"xyz": 5})
        with pytest.raises(UnsupportedExtensionError):
            quote(engine, "xyz", "USD", transaction="renew")

    def test_renew_price_converted(self, make_engine):
        engine = make_engine(renew_prices={"com": 15})
        assert quote(engine, "com", "NGN", transaction="renew").base_price == 15000
