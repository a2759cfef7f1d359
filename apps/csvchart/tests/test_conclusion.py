from csvchart.builder import SummaryFacts
from csvchart.conclusion import COLOR_LEGEND, conclusion_markdown, format_conclusion


def test_conclusion_sentence() -> None:
    facts = SummaryFacts(15, 3, "B", "A")

    assert format_conclusion(facts) == (
        "Highest reading = 15 at B, Lowest reading = 3 at A. "
        "Colors assigned: R=Red, B=Blue, Y=Yellow, N=Gray, others unique."
    )


def test_conclusion_without_values() -> None:
    text = format_conclusion(SummaryFacts(None, None), legend=False)

    assert text == "Highest reading = no value at -, Lowest reading = no value at -."


def test_conclusion_formats_floats_like_the_chart() -> None:
    text = format_conclusion(SummaryFacts(9.0, 0.25, "2", "1"), legend=False)

    assert text == "Highest reading = 9 at 2, Lowest reading = 0.25 at 1."


def test_markdown_variant_mentions_legend() -> None:
    text = conclusion_markdown(SummaryFacts(7, 2, "t2", "t3"))

    assert "**7** at **t2**" in text
    assert "**2** at **t3**" in text
    assert text.endswith(COLOR_LEGEND)
