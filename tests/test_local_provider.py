"""Tests for the local credential-file provider."""

import json

import pytest

from userdir.errors import StoreUnavailableError
from userdir.models import UserProfile
from userdir.security import hash_password
from userdir.services.directory import LocalProvider


class TestVerifyCredentials:
    def test_valid_password_returns_profile(self, users_file):
        provider = LocalProvider(str(users_file))

        profile = provider.verify_credentials("alice", "secret")

        assert profile == UserProfile(id="alice", username="alice", display_name="Alice A")
        assert profile.to_dict() == {"id": "alice", "username": "alice", "displayName": "Alice A"}

    def test_wrong_password_returns_none(self, users_file):
        assert LocalProvider(str(users_file)).verify_credentials("alice", "wrong") is None

    def test_unknown_user_returns_none(self, users_file):
        assert LocalProvider(str(users_file)).verify_credentials("bob", "x") is None

    def test_missing_store_returns_none(self, tmp_path):
        provider = LocalProvider(str(tmp_path / "absent.json"))
        assert provider.verify_credentials("alice", "secret") is None

    def test_malformed_hash_returns_none(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps({"carol": {"passwordHash": "not-a-bcrypt-hash"}}), encoding="utf-8")

        assert LocalProvider(str(path)).verify_credentials("carol", "anything") is None

    def test_empty_password_returns_none(self, users_file):
        assert LocalProvider(str(users_file)).verify_credentials("alice", "") is None

    def test_store_is_reread_on_every_call(self, users_file):
        provider = LocalProvider(str(users_file))
        assert provider.verify_credentials("dave", "pw") is None

        data = json.loads(users_file.read_text(encoding="utf-8"))
        data["dave"] = {"passwordHash": hash_password("pw", rounds=4), "displayName": "Dave"}
        users_file.write_text(json.dumps(data), encoding="utf-8")

        assert provider.verify_credentials("dave", "pw").username == "dave"


class TestResolveProfile:
    def test_known_username(self, users_file):
        profile = LocalProvider(str(users_file)).resolve_profile("alice")

        assert profile.id == "alice"
        assert profile.username == "alice"
        assert profile.display_name == "Alice A"
        assert profile.email is None

    def test_unknown_username(self, users_file):
        assert LocalProvider(str(users_file)).resolve_profile("alice@example.com") is None

    def test_missing_store(self, tmp_path):
        assert LocalProvider(str(tmp_path / "nope.json")).resolve_profile("alice") is None


class TestListUsers:
    def test_lists_all_users_sorted(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(
            json.dumps({
                "zed": {"passwordHash": "x", "displayName": "Zed"},
                "amy": {"passwordHash": "y"},
            }),
            encoding="utf-8",
        )

        users = LocalProvider(str(path)).list_users()

        assert [u.username for u in users] == ["amy", "zed"]
        assert users[0].display_name == ""

    def test_empty_store_returns_empty_list(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text("{}", encoding="utf-8")

        assert LocalProvider(str(path)).list_users() == []

    def test_missing_store_raises(self, tmp_path):
        with pytest.raises(StoreUnavailableError):
            LocalProvider(str(tmp_path / "absent.json")).list_users()

    @pytest.mark.parametrize("content", ["not json", "[1, 2]"])
    def test_corrupt_store_raises(self, tmp_path, content):
        path = tmp_path / "users.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(StoreUnavailableError):
            LocalProvider(str(path)).list_users()

    def test_every_listed_user_resolves(self, users_file):
        provider = LocalProvider(str(users_file))

        for u in provider.list_users():
            assert provider.resolve_profile(u.id) == u
            assert provider.resolve_profile(u.username) == u


class TestInvalidRecords:
    @pytest.fixture
    def mixed_file(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(
            json.dumps({
                "alice": {"passwordHash": hash_password("secret", rounds=4), "displayName": None},
                "bob": {"passwordHash": hash_password("pw", rounds=4), "displayName": "Bob"},
                "carol": {"displayName": "no hash"},
                "dave": "not an object",
            }),
            encoding="utf-8",
        )
        return path

    def test_null_display_name_is_empty(self, mixed_file):
        provider = LocalProvider(str(mixed_file))

        assert provider.verify_credentials("alice", "secret") == UserProfile(id="alice", username="alice")
        assert provider.resolve_profile("alice").display_name == ""

    def test_bad_record_does_not_hide_other_users(self, mixed_file):
        provider = LocalProvider(str(mixed_file))

        assert provider.verify_credentials("bob", "pw").display_name == "Bob"
        assert [u.username for u in provider.list_users()] == ["alice", "bob"]
        assert provider.resolve_profile("carol") is None
        assert provider.resolve_profile("dave") is None


class TestIdentifierWhitespace:
    def test_surrounding_whitespace_is_ignored(self, users_file):
        provider = LocalProvider(str(users_file))

        assert provider.resolve_profile("  alice ").username == "alice"
        assert provider.verify_credentials(" alice", "secret").id == "alice"
        assert provider.resolve_profile("   ") is None
