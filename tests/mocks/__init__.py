from tests.mocks.mock_catalog import MockAuthManager, MockShopifyClient, MockXaitClient
