"""Tests for the authentication holder."""

import threading

from atlassian_cloud.atlassian.auth import Authentication, AuthSnapshot


class TestAuthentication:
    """Tests for Authentication setters and getters."""

    def test_defaults(self) -> None:
        """Test that a new holder has no credentials."""
        auth = Authentication()
        assert not auth.has_basic_auth()
        assert not auth.has_user_agent()
        assert auth.get_basic_auth() == ("", "")
        assert auth.get_bearer_token() == ""
        assert auth.get_user_agent() == ""

    def test_basic_auth(self) -> None:
        """Test setting Basic auth."""
        auth = Authentication()
        auth.set_basic_auth("test@example.com", "test-token")
        assert auth.has_basic_auth()
        assert auth.get_basic_auth() == ("test@example.com", "test-token")

    def test_bearer_token(self) -> None:
        """Test setting a bearer token."""
        auth = Authentication()
        auth.set_bearer_token("org-key")
        assert auth.get_bearer_token() == "org-key"

    def test_user_agent(self) -> None:
        """Test setting a user agent."""
        auth = Authentication()
        auth.set_user_agent("sdk-test/1.0")
        assert auth.has_user_agent()
        assert auth.get_user_agent() == "sdk-test/1.0"


class TestAuthSnapshot:
    """Tests for Authentication.snapshot."""

    def test_empty_snapshot(self) -> None:
        """Test the snapshot of an empty holder."""
        assert Authentication().snapshot() == AuthSnapshot(basic_auth=None, bearer_token="", user_agent=None)

    def test_full_snapshot(self) -> None:
        """Test that the snapshot copies every credential."""
        auth = Authentication()
        auth.set_basic_auth("test@example.com", "test-token")
        auth.set_bearer_token("org-key")
        auth.set_user_agent("sdk-test/1.0")

        snapshot = auth.snapshot()
        assert snapshot.basic_auth == ("test@example.com", "test-token")
        assert snapshot.bearer_token == "org-key"
        assert snapshot.user_agent == "sdk-test/1.0"

    def test_snapshot_is_detached(self) -> None:
        """Test that later changes do not alter an earlier snapshot."""
        auth = Authentication()
        auth.set_bearer_token("first")
        snapshot = auth.snapshot()
        auth.set_bearer_token("second")
        assert snapshot.bearer_token == "first"

    def test_concurrent_setters(self) -> None:
        """Test that concurrent updates always leave a matching pair."""
        auth = Authentication()

        def writer(n: int) -> None:
            for _ in range(200):
                auth.set_basic_auth(f"user{n}", f"token{n}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        mail, token = auth.snapshot().basic_auth
        assert mail.removeprefix("user") == token.removeprefix("token")
