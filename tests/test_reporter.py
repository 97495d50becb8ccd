from unicode_census.categorizer import Category
from unicode_census.reporter import (
    ReportRow,
    build_report,
    character_for,
    percentages,
    render_report,
    report,
)
from unicode_census.tally import Aggregator


def test_percentages_handles_empty_partition():
    assert percentages(0, 0) == (0.0, 0.0)
    assert percentages(3, 4) == (75.0, 25.0)
    assert percentages(0, 5) == (0.0, 100.0)


def test_character_for_falls_back_to_replacement():
    assert character_for(0x41) == "A"
    assert character_for(0xD800) == "\ufffd"
    assert character_for(0x110000) == "\ufffd"


def test_row_rendering():
    row = ReportRow("é", 0xE9, Category.ALPHANUMERIC, False, 12)
    assert row.render() == (
        "Character: é, Codepoint: 00e9, Category: Alphanumeric, ASCII: false, Count: 12"
    )
    wide = ReportRow("\U0001f600", 0x1F600, Category.SYMBOL, False, 1)
    assert "Codepoint: 1f600," in wide.render()


def test_rows_sorted_by_count_then_codepoint():
    aggregator = Aggregator()
    for char in "banana!":
        aggregator.increment(ord(char))

    (partition,) = build_report(aggregator)

    assert [(row.character, row.count) for row in partition.rows] == [
        ("a", 3),
        ("n", 2),
        ("!", 1),
        ("b", 1),
    ]
    counts = [row.count for row in partition.rows]
    assert counts == sorted(counts, reverse=True)


def test_report_for_ascii_text():
    aggregator = Aggregator()
    for char in "Hi!":
        aggregator.increment(ord(char))

    assert report(aggregator) == (
        "Character: !, Codepoint: 0021, Category: Punctuation, ASCII: true, Count: 1\n"
        "Character: H, Codepoint: 0048, Category: Alphanumeric, ASCII: true, Count: 1\n"
        "Character: i, Codepoint: 0069, Category: Alphanumeric, ASCII: true, Count: 1\n"
        "\n"
        "Summary:\n"
        "  ASCII encodings: 3 (100.00%)\n"
        "  Non-ASCII encodings: 0 (0.00%)\n"
    )


def test_report_for_empty_aggregator_uses_zero_percentages():
    assert report(Aggregator()) == (
        "\n"
        "Summary:\n"
        "  ASCII encodings: 0 (0.00%)\n"
        "  Non-ASCII encodings: 0 (0.00%)\n"
    )
    assert report(Aggregator(partitioned=True)) == ""


def test_partitioned_report_orders_partitions_by_key():
    aggregator = Aggregator(partitioned=True)
    aggregator.increment(ord("a"), "txt")
    aggregator.increment(0x3B1, "md")
    aggregator.increment(ord("a"), "md")

    reports = build_report(aggregator)
    assert [partition.key for partition in reports] == ["md", "txt"]

    text = render_report(reports, partitioned=True)
    assert text == (
        "File Extension: md\n"
        "Character: a, Codepoint: 0061, Category: Alphanumeric, ASCII: true, Count: 1\n"
        "Character: α, Codepoint: 03b1, Category: Alphanumeric, ASCII: false, Count: 1\n"
        "\n"
        "Summary:\n"
        "  ASCII encodings: 1 (50.00%)\n"
        "  Non-ASCII encodings: 1 (50.00%)\n"
        "\n"
        "File Extension: txt\n"
        "Character: a, Codepoint: 0061, Category: Alphanumeric, ASCII: true, Count: 1\n"
        "\n"
        "Summary:\n"
        "  ASCII encodings: 1 (100.00%)\n"
        "  Non-ASCII encodings: 0 (0.00%)\n"
        "\n"
    )


def test_percentages_are_rounded_to_two_places():
    aggregator = Aggregator()
    aggregator.increment(ord("a"))
    aggregator.increment(0xE9)
    aggregator.increment(0xE9)

    text = report(aggregator)

    assert "  ASCII encodings: 1 (33.33%)\n" in text
    assert "  Non-ASCII encodings: 2 (66.67%)\n" in text
