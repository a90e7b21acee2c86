"""Tests for the in-memory identity tracker."""

from __future__ import annotations

from dataclasses import fields

import pytest

from namereg.sdk.identity import Identity, IdentityTracker, LocalIdentities


class TestIdentity:
    def test_fields(self):
        identity = Identity("1A")
        assert {f.name for f in fields(identity)} == {"owner_address", "usernames"}
        assert identity.usernames == []


class TestLocalIdentities:
    def test_is_identity_tracker(self):
        assert isinstance(LocalIdentities(), IdentityTracker)

    def test_add_username(self):
        identities = LocalIdentities([Identity("1A"), Identity("1B")])
        identities.add_username(1, "alice.id")
        assert identities[1].usernames == ["alice.id"]
        assert identities[0].usernames == []

    def test_add_username_is_not_duplicated(self):
        identities = LocalIdentities([Identity("1A")])
        identities.add_username(0, "alice.id")
        identities.add_username(0, "alice.id")
        assert identities[0].usernames == ["alice.id"]

    def test_unknown_index(self):
        with pytest.raises(IndexError):
            LocalIdentities().add_username(3, "alice.id")

    def test_shares_callers_list(self):
        owned = [Identity("1A")]
        identities = LocalIdentities(owned)
        identities.add_username(0, "bob.id")
        assert owned[0].usernames == ["bob.id"]
        assert len(identities) == 1
