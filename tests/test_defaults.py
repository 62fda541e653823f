"""
Default Configuration Tests - Once-per-process Pricing Bundle

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- domain_quotes.application.defaults (build_config, get_default_config, lookups)
- domain_quotes.adapters.providers (LocalPricingSource, RemotePricingSource)
- unittest.mock (Mock data source, patch for settings)
- pytest (testing framework)
"""
import asyncio

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching

from domain_quotes.adapters.providers import LocalPricingSource, PricingDataSource, RemotePricingSource
from domain_quotes.application import defaults
from domain_quotes.domain.errors import PricingDataError

from conftest import NGN_RATE


@pytest.fixture
def source():
    mock_source = Mock(spec=PricingDataSource)
    mock_source.create_prices.return_value = {"com": {"USD": 10.0}, "ng": {"NGN": 7000.0, "USD": 5.0}}
    mock_source.renew_prices.return_value = {"com": {"USD": 12.0}}
    mock_source.transfer_prices.return_value = {}
    mock_source.restore_prices.return_value = {}
    mock_source.exchange_rates.return_value = [NGN_RATE]
    return mock_source


@pytest.fixture(autouse=True)
def clear_cache():
    defaults.reset_default_config()
    yield
    defaults.reset_default_config()


class TestBuildConfig:
    def test_loads_every_dataset(self, source):
        config = defaults.build_config(source)
        assert config.create_prices["com"] == {"USD": 10.0}
        assert config.renew_prices == {"com": {"USD": 12.0}}
        assert config.restore_prices is None
        assert config.exchange_rates == [NGN_RATE]
        assert config.vat_rate == 0.075
        assert config.supported_currencies == ["USD", "NGN"]

    def test_errors_propagate(self, source):
        source.exchange_rates.side_effect = PricingDataError("boom")
        with pytest.raises(PricingDataError):
            defaults.build_config(source)


class TestDefaultConfig:
    def test_loaded_once(self, source):
        first = defaults.get_default_config(source)
        second = defaults.get_default_config(source)
        assert first is second
        source.create_prices.assert_called_once()

    def test_reset_reloads(self, source):
        first = defaults.get_default_config(source)
        defaults.reset_default_config()
        assert defaults.get_default_config(source) is not first

    def test_default_quote(self, source):
        defaults.get_default_config(source)
        quote = asyncio.run(defaults.get_default_quote(".com", "ngn", allow_fractional_amounts=True))
        assert quote.base_price == 10000
        assert quote.tax == 750
        assert quote.total_price == 10750

    def test_lookups(self, source):
        defaults.get_default_config(source)
        assert defaults.list_supported_extensions() == ["com", "ng"]
        assert defaults.is_supported_extension("example.ng")
        assert not defaults.is_supported_extension("example.xyz")
        assert defaults.list_supported_currencies() == ["USD", "NGN"]
        assert defaults.is_supported_currency("ngn")
        assert not defaults.is_supported_currency("JPY")
        assert not defaults.is_supported_currency(None)


class TestDefaultSource:
    def test_remote_by_default(self):
        with patch.object(defaults.settings, "data_dir", None):
            assert isinstance(defaults.default_source(), RemotePricingSource)

    def test_local_when_data_dir_set(self, tmp_path):
        with patch.object(defaults.settings, "data_dir", tmp_path):
            source = defaults.default_source()
        assert isinstance(source, LocalPricingSource)
        assert source.data_dir == tmp_path
