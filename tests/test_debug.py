from hashtable.debug import print_table
from hashtable.hashing import get_hash
from hashtable.table import HashTable


def test_print_table(capsys):
    t = HashTable()
    t.insert("a", "1")
    index = get_hash("a", t.capacity, 0)
    assert index == 44

    print_table(t, "t")
    out = capsys.readouterr().out
    lines = out.splitlines()

    assert lines[0] == "== t =="
    assert lines[1] == "capacity 53 count 1 load 1%"
    # one line per slot
    assert len(lines) == 2 + 53
    assert lines[2] == "0000 EMPTY"
    assert lines[2 + index] == "0044 'a' => '1'"

    t.delete("a")
    print_table(t, "t")
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "capacity 53 count 0 load 0%"
    assert lines[2 + index] == "0044 TOMBSTONE"
