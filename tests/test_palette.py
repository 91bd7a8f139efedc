from timeuse_engine.palette import ColorAssigner
from timeuse_engine.schema import Category


def cat(category_id, color=None):
    return Category(category_id, category_id, category_id.title(), "•", color=color)


def test_reserved_colors_are_skipped():
    assigner = ColorAssigner(reserved=[cat("a", "#111111"), cat("b", "#222222")], palette=("#111111", "#333333", "#222222"))
    assert assigner.color_for(cat("c")) == "#333333"


def test_same_category_keeps_its_color():
    assigner = ColorAssigner(palette=("#111111", "#222222"))
    assert assigner.color_for(cat("a")) == "#111111"
    assert assigner.color_for(cat("b")) == "#222222"
    assert assigner.color_for(cat("a")) == "#111111"


def test_exhausted_palette_cycles():
    assigner = ColorAssigner(palette=("#111111", "#222222"))
    colors = [assigner.color_for(cat(name)) for name in ("a", "b", "c", "d", "e")]
    assert colors == ["#111111", "#222222", "#111111", "#222222", "#111111"]


def test_own_color_wins():
    assigner = ColorAssigner(palette=("#111111",))
    assert assigner.color_for(cat("a", "#abcdef")) == "#abcdef"
