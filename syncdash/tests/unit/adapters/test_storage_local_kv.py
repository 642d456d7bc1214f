import json

from syncdash.adapters.storage_local import StorageLocal


def test_set_get_remove_round_trip(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))

    storage.set("auth_token", "abc")
    storage.set("user_id", "12")

    assert storage.get("auth_token") == "abc"
    assert storage.get("user_id") == "12"

    storage.remove("auth_token")

    assert storage.get("auth_token") is None
    with (tmp_path / "local_storage.json").open("r", encoding="utf-8") as fh:
        assert json.load(fh) == {"user_id": "12"}


def test_missing_file_reads_as_empty(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))

    assert storage.get("auth_token") is None
    storage.remove("auth_token")
    assert not (tmp_path / "local_storage.json").exists()


def test_corrupt_file_reads_as_empty(tmp_path):
    (tmp_path / "local_storage.json").write_text("{not json", encoding="utf-8")
    storage = StorageLocal(root_dir=str(tmp_path))

    assert storage.get("auth_token") is None

    storage.set("auth_token", "fresh")
    assert storage.get("auth_token") == "fresh"


def test_non_string_values_are_ignored(tmp_path):
    (tmp_path / "local_storage.json").write_text(
        json.dumps({"auth_token": 5, "username": "bob"}), encoding="utf-8"
    )
    storage = StorageLocal(root_dir=str(tmp_path))

    assert storage.get("auth_token") is None
    assert storage.get("username") == "bob"


def test_write_failure_is_swallowed(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    storage = StorageLocal(root_dir=str(blocker))

    storage.set("auth_token", "abc")

    assert storage.get("auth_token") is None


def test_separate_instances_share_the_file(tmp_path):
    StorageLocal(root_dir=str(tmp_path)).set("username", "alice")

    assert StorageLocal(root_dir=str(tmp_path)).get("username") == "alice"
