import pytest

from emarket.testnet_files import (
    copy_file,
    is_sub_dir,
    node_dir_name,
    persistent_peers,
    write_file,
)


def test_is_sub_dir_inside(tmp_path):
    gentx = tmp_path / "node0" / "config" / "gentx"
    assert is_sub_dir(gentx / "gentx-abc.json", gentx) is True


def test_is_sub_dir_same_directory(tmp_path):
    assert is_sub_dir(tmp_path, tmp_path) is True


def test_is_sub_dir_outside(tmp_path):
    a = tmp_path / "node0" / "config" / "gentx" / "gentx-abc.json"
    b = tmp_path / "node1" / "config" / "gentx"
    assert is_sub_dir(a, b) is False


def test_is_sub_dir_parent_not_inside_child(tmp_path):
    assert is_sub_dir(tmp_path, tmp_path / "child") is False


def test_copy_file_copies_contents(tmp_path):
    src_dir = tmp_path / "src"
    dst_dir = tmp_path / "dst"
    src_dir.mkdir()
    dst_dir.mkdir()
    src = src_dir / "gentx-node.json"
    payload = b'{"body": {"messages": []}}'
    src.write_bytes(payload)
    copied = copy_file(src, dst_dir)
    assert copied == len(payload)
    assert (dst_dir / "gentx-node.json").read_bytes() == payload


def test_copy_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "absent.json", tmp_path)


def test_copy_file_missing_destination_dir(tmp_path):
    src = tmp_path / "a.json"
    src.write_bytes(b"x")
    with pytest.raises(FileNotFoundError):
        copy_file(src, tmp_path / "no" / "such" / "dir")


def test_write_file_creates_directory(tmp_path):
    directory = tmp_path / "validator0" / "config" / "gentx"
    path = directory / "key_seed.json"
    write_file(path, directory, b'{"secret":"secret"}')
    assert path.read_bytes() == b'{"secret":"secret"}'


def test_write_file_overwrites(tmp_path):
    path = tmp_path / "f.json"
    write_file(path, tmp_path, b"first contents")
    write_file(path, tmp_path, b"second")
    assert path.read_bytes() == b"second"


def test_write_file_directory_blocked_by_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    directory = blocker / "sub"
    with pytest.raises(OSError, match="could not create directory"):
        write_file(directory / "f.json", directory, b"data")


def test_node_dir_name():
    assert node_dir_name("validator", 0) == "validator0"
    assert node_dir_name("node", 12) == "node12"


def test_persistent_peers_single():
    assert persistent_peers(["abc"], "localhost") == "abc@localhost:26656"


def test_persistent_peers_multiple():
    peers = persistent_peers(["id0", "id1", "id2"], "192.168.0.1").split(",")
    assert len(peers) == 3
    assert peers[0] == "id0@192.168.0.1:26656"
    ports = [int(p.rsplit(":", 1)[1]) for p in peers]
    assert [a - b for a, b in zip(ports, ports[1:])] == [3, 3]
    assert [p.split("@")[0] for p in peers] == ["id0", "id1", "id2"]


def test_persistent_peers_empty():
    assert persistent_peers([], "localhost") == ""