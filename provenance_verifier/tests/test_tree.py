from provenance_verifier.tree import as_bool, as_dict, as_list, as_str, at, get, has, label_contains, path


def test_get_never_raises_on_wrong_shape() -> None:
    assert get({"a": 1}, "a") == 1
    assert get({"a": 1}, "b") is None
    assert get([1, 2], "a") is None
    assert get("text", "a") is None
    assert get(None, "a") is None


def test_has_counts_null_as_present() -> None:
    assert has({"a": None}, "a") is True
    assert has({}, "a") is False
    assert has(["a"], "a") is False


def test_at_and_path() -> None:
    tree = {"a": [{"b": "x"}, {"b": "y"}]}
    assert at([1, 2], 5) is None
    assert at({"0": 1}, 0) is None
    assert path(tree, "a", 1, "b") == "y"
    assert path(tree, "a", 7, "b") is None
    assert path(tree, "a", "b") is None
    assert path(None, "a", 0) is None


def test_typed_reads() -> None:
    assert as_str("x") == "x"
    assert as_str(1) is None
    assert as_bool(False) is False
    assert as_bool(0) is None
    assert as_bool("false") is None
    assert as_list([]) == []
    assert as_list({}) is None
    assert as_dict({}) == {}
    assert as_dict([]) is None


def test_label_contains_is_substring_match() -> None:
    assert label_contains({"label": "c2pa.actions.v2"}, "actions")
    assert label_contains({"label": "c2pa.thumbnail.claim.jpeg"}, "nope", "thumbnail")
    assert not label_contains({"label": 5}, "actions")
    assert not label_contains({}, "actions")
    assert not label_contains("c2pa.actions", "actions")
