"""Tests for the markdown index renderer."""

import random

from drive_export.reporting.markdown import IndexRenderer

HEADER = "| File | Link |\n| --- | --- |\n"


def test_render_empty() -> None:
    """Test that an empty list renders the header only."""
    assert IndexRenderer().render([], "/pdf") == HEADER


def test_render_rows() -> None:
    """Test that each file gets one linked row."""
    text = IndexRenderer().render(["B", "C.pdf"], "https://example.org/pdf/")

    assert text == HEADER + (
        "| [B](https://example.org/pdf/B) | "
        "[https://example.org/pdf/B](https://example.org/pdf/B) |\n"
        "| [C.pdf](https://example.org/pdf/C.pdf) | "
        "[https://example.org/pdf/C.pdf](https://example.org/pdf/C.pdf) |\n"
    )


def test_render_is_order_independent() -> None:
    """Test that shuffled input renders like sorted input."""
    names = [f"deck-{i:02d}.pdf" for i in range(20)] + ["Zeta.svg", "alpha.svg"]
    shuffled = names[:]
    random.Random(42).shuffle(shuffled)
    renderer = IndexRenderer()

    assert renderer.render(shuffled, "/pdf") == renderer.render(sorted(names), "/pdf")
    assert renderer.render(shuffled, "/pdf") == renderer.render(shuffled, "/pdf")


def test_link_quotes_filename() -> None:
    assert IndexRenderer.link("Kubernetes 101.pdf", "/pdf") == "/pdf/Kubernetes%20101.pdf"


def test_render_escapes_table_syntax_in_labels() -> None:
    """Test that pipes and brackets in filenames keep the row intact."""
    text = IndexRenderer().render(["a|b [draft].pdf"], "/pdf")
    row = text.splitlines()[2]

    assert row == (
        "| [a\\|b \\[draft\\].pdf](/pdf/a%7Cb%20%5Bdraft%5D.pdf) | "
        "[/pdf/a%7Cb%20%5Bdraft%5D.pdf](/pdf/a%7Cb%20%5Bdraft%5D.pdf) |"
    )
    assert row.count(" | ") == 1


def test_render_sections_single_is_bare_table() -> None:
    renderer = IndexRenderer()
    assert renderer.render_sections([("slides", ["B"], "/pdf")]) == renderer.render(["B"], "/pdf")


def test_render_sections_uses_each_prefix() -> None:
    text = IndexRenderer().render_sections(
        [("slides", ["deck.pdf"], "/pdf"), ("images", ["logo.svg"], "/images")]
    )

    assert text.startswith("## slides\n\n" + HEADER)
    assert "| [deck.pdf](/pdf/deck.pdf) |" in text
    assert "## images\n\n" + HEADER in text
    assert "| [logo.svg](/images/logo.svg) |" in text
    assert "/pdf/logo.svg" not in text
