"""Unit tests for SessionService."""

from datetime import datetime, timedelta, timezone

from replicator.domain.service import SessionService
from replicator.util.jwt import create_token
from tests.harness import make_user


class TestSessionService:
    """Tests for issuing and reading session credentials."""

    def test_issue_then_read_returns_identity(self, auth_settings):
        """An issued credential reads back with the user's identity."""
        service = SessionService(auth_settings)
        user = make_user()

        payload = service.read(service.issue(user, subject="email|ada"))

        assert payload is not None
        assert payload.user_id == user.id
        assert payload.email == user.email
        assert payload.handle == "lucid-comet-417"
        assert payload.name == "Ada"
        assert payload.subject == "email|ada"

    def test_issue_without_handle(self, auth_settings):
        """Users without a handle get a credential with no handle claim."""
        service = SessionService(auth_settings)

        payload = service.read(service.issue(make_user(handle=None)))

        assert payload is not None
        assert payload.handle is None

    def test_read_missing_token_is_none(self, auth_settings):
        """No credential reads as anonymous."""
        service = SessionService(auth_settings)

        assert service.read(None) is None
        assert service.read("") is None

    def test_read_garbage_is_none(self, auth_settings):
        """A malformed credential reads as anonymous rather than raising."""
        service = SessionService(auth_settings)

        assert service.read("not-a-jwt") is None

    def test_read_forged_token_is_none(self, auth_settings):
        """A credential signed with another secret is rejected."""
        service = SessionService(auth_settings)
        forger = SessionService(
            auth_settings.model_copy(update={"jwt_secret": "other-secret"})
        )

        assert service.read(forger.issue(make_user())) is None

    def test_read_expired_token_is_none(self, auth_settings):
        """Credentials past their validity window are rejected."""
        service = SessionService(auth_settings)
        token = create_token(
            user_id=1,
            email="ada@example.com",
            name="Ada",
            handle="ada",
            settings=auth_settings,
            issued_at=datetime.now(timezone.utc) - timedelta(days=31),
        )

        assert service.read(token) is None

    def test_max_age_matches_session_days(self, auth_settings):
        """Cookie lifetime equals the credential validity window."""
        service = SessionService(auth_settings)

        assert service.max_age_seconds == 30 * 24 * 60 * 60
