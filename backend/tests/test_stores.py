import pytest

from influencer_api.stores import influencers, users
from influencer_api.stores.users import DuplicateEmailError


def _fields(name="creator"):
    return {
        "youtube_link": f"https://youtube.com/@{name}",
        "instagram_link": f"https://instagram.com/{name}",
        "account_name": name,
        "email": f"{name}@example.com",
        "followers": "100",
        "category": "music",
    }


def test_user_create_and_lookup(db):
    user = users.create(db, "a@example.com", "hash")

    assert users.find_by_email(db, "a@example.com").id == user.id
    assert users.find_by_id(db, user.id).email == "a@example.com"
    assert users.find_email_by_id(db, user.id) == "a@example.com"


def test_user_email_is_unique(db):
    users.create(db, "a@example.com", "hash")
    with pytest.raises(DuplicateEmailError):
        users.create(db, "a@example.com", "other-hash")
    assert db["users"].count_documents({}) == 1


def test_user_lookup_misses(db):
    assert users.find_by_email(db, "nobody@example.com") is None
    assert users.find_by_id(db, "not-an-object-id") is None
    assert users.find_email_by_id(db, "0123456789abcdef01234567") is None


def test_profile_owner_lookup_returns_most_recent(db):
    owner = users.create(db, "a@example.com", "hash")
    influencers.create(db, _fields("first"), "/uploads/1.png", owner.id)
    latest = influencers.create(db, _fields("second"), "/uploads/2.png", owner.id)

    found = influencers.find_by_owner(db, owner.id)
    assert found.id == latest.id
    assert found.account_name == "second"


def test_profile_requires_image(db):
    owner = users.create(db, "a@example.com", "hash")
    with pytest.raises(ValueError):
        influencers.create(db, _fields(), "", owner.id)
    assert influencers.list_all(db) == []


def test_profile_lookup_scoped_to_owner(db):
    alice = users.create(db, "alice@example.com", "hash")
    bob = users.create(db, "bob@example.com", "hash")
    influencers.create(db, _fields("alice"), "/uploads/a.png", alice.id)

    assert influencers.find_by_owner(db, bob.id) is None
    assert influencers.find_by_owner(db, alice.id).user_id == alice.id
    assert len(influencers.list_all(db)) == 1
