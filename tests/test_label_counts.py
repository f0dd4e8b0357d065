from counting_ratio.label_counts import LabelCounts


def test_observe_keeps_total_in_step() -> None:
    counts = LabelCounts()
    counts.observe("x")
    counts.observe("x")
    counts.observe("y", num=3)
    assert counts.total == 5
    assert counts.get_count("x") == 2
    assert counts.get_count("y") == 3
    assert counts.get_count("z") == 0
    assert counts.total == sum(counts.example_counts.values())
