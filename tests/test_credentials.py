"""
Tests for process-wide credentials.
"""

from zenaton.credentials import Credentials, get_credentials, init


class TestCredentials:
    """Test Credentials state."""

    def test_empty_before_init(self):
        credentials = get_credentials()

        assert credentials.app_id is None
        assert credentials.api_token is None
        assert credentials.app_env is None
        assert not credentials.is_complete()

    def test_init_sets_all_fields(self):
        credentials = init("JZMHGKYEBX", "token", "prod")

        assert credentials is get_credentials()
        assert credentials.is_complete()

    def test_later_init_overwrites_without_merge(self):
        """Verify a second init replaces every field, even with None."""
        init("first-app", "first-token", "dev")
        init("second-app", None, "prod")

        credentials = get_credentials()
        assert credentials.app_id == "second-app"
        assert credentials.api_token is None
        assert credentials.app_env == "prod"

    def test_app_params(self):
        credentials = Credentials(app_id="JZMHGKYEBX", api_token="token", app_env="prod")
        assert credentials.app_params() == {"app_env": "prod", "app_id": "JZMHGKYEBX"}

    def test_app_params_omit_unset(self):
        assert Credentials(app_env="prod").app_params() == {"app_env": "prod"}
        assert Credentials(app_id="").app_params() == {}
