from autopatch.changeset import ChangeSet
from autopatch.models import FileChange


def paths(cs):
    return [c.path for c in cs.get_changes()]


def test_set_changes_dedupes_keeping_first_position_last_content():
    cs = ChangeSet()
    cs.set_changes([FileChange("a", "1"), FileChange("b", "2"), FileChange("a", "3")])
    assert cs.get_changes() == (FileChange("a", "3"), FileChange("b", "2"))


def test_case_insensitive_policy_merges_paths():
    cs = ChangeSet(case_insensitive=True)
    cs.set_changes([FileChange("Src/A.ts", "1"), FileChange("src/a.ts", "2")])
    assert cs.get_changes() == (FileChange("src/a.ts", "2"),)
    assert cs.find_change("SRC/A.TS") == FileChange("src/a.ts", "2")


def test_case_sensitive_policy_keeps_both():
    cs = ChangeSet(case_insensitive=False)
    cs.set_changes([FileChange("A.ts", "1"), FileChange("a.ts", "2")])
    assert len(cs) == 2
    assert cs.find_change("A.TS") is None


def test_set_changes_replaces_previous_state():
    cs = ChangeSet()
    cs.set_changes([FileChange("old", "x")])
    cs.set_changes([FileChange("new", "y")])
    assert paths(cs) == ["new"]


def test_add_change_appends_or_replaces_in_place():
    cs = ChangeSet()
    cs.set_changes([FileChange("a", "1"), FileChange("b", "2")])
    cs.add_change(FileChange("c", "3"))
    cs.add_change(FileChange("a", "9"))
    assert cs.get_changes() == (FileChange("a", "9"), FileChange("b", "2"), FileChange("c", "3"))


def test_remove_change_keeps_order_and_reaches_empty():
    cs = ChangeSet()
    a, b, c = FileChange("a", "1"), FileChange("b", "2"), FileChange("c", "3")
    cs.set_changes([a, b, c])
    assert cs.remove_change(b) is True
    assert paths(cs) == ["a", "c"]
    cs.remove_change(a)
    cs.remove_change(c)
    assert cs.is_empty


def test_remove_change_ignores_stale_entries():
    cs = ChangeSet()
    stale = FileChange("a", "old")
    cs.set_changes([FileChange("a", "new")])
    assert cs.remove_change(stale) is False
    assert cs.remove_change(FileChange("missing", "")) is False
    assert paths(cs) == ["a"]


def test_get_changes_is_a_read_view():
    cs = ChangeSet()
    cs.set_changes([FileChange("a", "1")])
    view = cs.get_changes()
    cs.clear()
    assert view == (FileChange("a", "1"),)
    assert len(cs) == 0


def test_listeners_get_one_call_per_affected_path():
    cs = ChangeSet()
    seen = []
    unsubscribe = cs.subscribe(seen.append)

    cs.set_changes([FileChange("a", "1"), FileChange("b", "2")])
    assert seen == ["a", "b"]

    seen.clear()
    cs.set_changes([FileChange("b", "3"), FileChange("c", "4")])
    assert seen == ["a", "b", "c"]

    seen.clear()
    cs.remove_change(FileChange("c", "4"))
    assert seen == ["c"]

    seen.clear()
    cs.clear()
    assert seen == ["b"]

    unsubscribe()
    cs.set_changes([FileChange("z", "")])
    assert seen == ["b"]


def test_failing_listener_does_not_break_mutation(caplog):
    cs = ChangeSet()

    def boom(path):
        raise RuntimeError("listener broke")

    cs.subscribe(boom)
    cs.set_changes([FileChange("a", "1")])
    assert paths(cs) == ["a"]
    assert any("listener failed" in rec.getMessage() for rec in caplog.records)
