import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from webapp_logs import utilities


@pytest.fixture(scope="function", autouse=True)
def mock_env_vars(monkeypatch):
    """Set a fake service principal to prevent accidental cloud calls."""
    monkeypatch.setenv("CLIENT_ID", "test-client-id")
    monkeypatch.setenv("CLIENT_SECRET", "test-client-secret")
    monkeypatch.setenv("TENANT_ID", "test-tenant-id")
    monkeypatch.setenv("SUBSCRIPTION_ID", "00000000-0000-0000-0000-000000000000")


@pytest.fixture(autouse=True)
def logged(monkeypatch):
    """Collect everything routed through utilities.log."""
    lines = []
    monkeypatch.setattr(utilities, "logger_method", lines.append)
    monkeypatch.setattr(utilities, "is_running_mocked", False)
    return lines


@pytest.fixture(autouse=True)
def sleeps(monkeypatch):
    """Skip time.sleep calls and record the requested delays."""
    delays = []
    monkeypatch.setattr("time.sleep", lambda seconds: delays.append(seconds))
    return delays


@pytest.fixture
def web_app():
    return SimpleNamespace(
        name="webapp1-42",
        default_host_name="webapp1-42.azurewebsites.net",
        id=(
            "/subscriptions/00000000-0000-0000-0000-000000000000"
            "/resourceGroups/rg1NEMV_7/providers/Microsoft.Web/sites/webapp1-42"
        )
    )


@pytest.fixture
def mock_azure_client(web_app):
    """AzureClient stand-in with a two-line publishing profile."""
    client = MagicMock()
    client.subscription_resource_id = "/subscriptions/00000000-0000-0000-0000-000000000000"
    client.create_resource_group.return_value = SimpleNamespace(name="rg", location="eastus")
    client.create_web_app.return_value = web_app
    client.get_publishing_profile_stream.return_value = [
        b"<publishData>\n<publishProfile profileName=\"webapp1-42 - FTP\" />\n",
        b"</publishData>"
    ]
    return client
