import threading

import pytest

from app.users import InMemoryUserStore, User, UserCreate, UserNotFoundError


def test_fresh_store_holds_seed_users(store):
    users = {user.id: user for user in store.list()}
    assert users == {
        1: User(id=1, name="Alice", email="alice@example.com"),
        2: User(id=2, name="Bob", email="bob@example.com"),
    }


def test_get_returns_record_with_queried_id(store):
    for user_id in (1, 2):
        assert store.get(user_id).id == user_id
    assert store.get(1).name == "Alice"


def test_get_missing_raises_not_found(store):
    with pytest.raises(UserNotFoundError) as exc_info:
        store.get(99)
    assert exc_info.value.user_id == 99
    assert str(exc_info.value) == "User 99 not found"


def test_create_assigns_next_id_and_is_retrievable(store):
    user = store.create(UserCreate(name="Carol", email="carol@example.com"))

    assert user == User(id=3, name="Carol", email="carol@example.com")
    assert store.get(3) == user
    assert len(store.list()) == 3


def test_create_ignores_client_supplied_id(store):
    user = store.create(UserCreate(id=1, name="Mallory", email="m@example.com"))

    assert user.id == 3
    assert store.get(1).name == "Alice"


def test_list_matches_key_set(store):
    store.create(UserCreate(name="Carol", email="carol@example.com"))
    assert sorted(user.id for user in store.list()) == [1, 2, 3]
    assert len(store.list()) == 3


def test_reads_are_idempotent(store):
    assert store.list() == store.list()
    assert store.get(2) == store.get(2)


def test_returned_records_are_copies(store):
    user = store.get(1)
    user.name = "Changed"
    store.list()[0].email = "changed@example.com"

    assert store.get(1).name == "Alice"
    assert all(u.email != "changed@example.com" for u in store.list())


def test_empty_store_starts_ids_at_one():
    store = InMemoryUserStore(seed=[])
    assert store.list() == []
    assert store.create(UserCreate(name="Dan", email="dan@example.com")).id == 1


def test_ids_follow_highest_seed_id():
    store = InMemoryUserStore(seed=[User(id=10, name="Eve", email="eve@example.com")])
    assert store.create(UserCreate(name="Frank", email="frank@example.com")).id == 11


def test_concurrent_creates_get_unique_ids(store):
    threads_count, per_thread = 8, 25

    def worker(n):
        for i in range(per_thread):
            store.create(UserCreate(name=f"user-{n}-{i}", email=f"{n}.{i}@example.com"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [user.id for user in store.list()]
    assert len(ids) == 2 + threads_count * per_thread
    assert set(ids) == set(range(1, len(ids) + 1))
