from neatcharts.reorder import reorder_within, strip_within


def test_reorder_within_tags_labels() -> None:
    assert reorder_within(["A", "B"], [2018, 2019]) == ["A___2018", "B___2019"]


def test_strip_within() -> None:
    assert strip_within("Roche___2018") == "Roche"
    assert strip_within("a___b___c") == "a___b"
    assert strip_within("plain") == "plain"
    assert strip_within("A|x", sep="|") == "A"
