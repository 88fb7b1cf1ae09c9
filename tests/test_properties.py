"""Property-based tests for RichTextStream using Hypothesis.

Invariants that hold for any call sequence:
1. Rendering is pure and repeatable
2. Boolean modifiers are idempotent
3. Fragments render independently and concatenate in order
4. A tag's nesting depth is fixed by its first use
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from richstream import RichTextStream, rich
from richstream.fragment import Tag

FLAG_METHODS = {
    "bold": Tag.BOLD,
    "italic": Tag.ITALIC,
    "underline": Tag.UNDERLINE,
    "strikethrough": Tag.STRIKETHROUGH,
    "small_caps": Tag.SMALL_CAPS,
}

texts = st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=10)
flag_names = st.sampled_from(sorted(FLAG_METHODS))
font_calls = st.one_of(
    st.tuples(st.just("font_size"), st.integers(min_value=1, max_value=100)),
    st.tuples(st.just("font_color_hex"), st.sampled_from(["fff", "000000", "ff8800"])),
    st.tuples(st.just("font_color3_input"), st.integers(0, 255)),
)
modifiers = st.lists(st.one_of(flag_names, font_calls), max_size=8)


def _apply(stream: RichTextStream, calls: list) -> RichTextStream:
    for call in calls:
        if isinstance(call, str):
            getattr(stream, call)()
        elif call[0] == "font_color3_input":
            stream.font_color3_input(call[1], call[1], call[1])
        else:
            getattr(stream, call[0])(call[1])
    return stream


def _first_seen(calls: list) -> list[str]:
    order: list[str] = []
    for call in calls:
        name = FLAG_METHODS[call] if isinstance(call, str) else Tag.FONT
        if name not in order:
            order.append(name)
    return order


class TestStreamProperties:
    """Invariants over random call sequences."""

    @given(text=texts, calls=modifiers)
    @settings(max_examples=100)
    def test_render_is_pure(self, text: str, calls: list) -> None:
        stream = _apply(rich(text), calls)
        first = stream.to_string()
        assert stream.to_string() == first
        assert str(stream) == first

    @given(text=texts, calls=st.lists(flag_names, max_size=6), flag=flag_names)
    @settings(max_examples=100)
    def test_flag_idempotent(self, text: str, calls: list, flag: str) -> None:
        once = _apply(rich(text), [*calls, flag]).to_string()
        twice = _apply(rich(text), [*calls, flag, flag]).to_string()
        assert once == twice

    @given(parts=st.lists(st.tuples(texts, modifiers), max_size=5))
    @settings(max_examples=50)
    def test_fragments_concatenate(self, parts: list) -> None:
        stream = rich()
        expected = ""
        for text, calls in parts:
            _apply(stream.add(text), calls)
            expected += _apply(rich(text), calls).to_string()
        assert stream.to_string() == expected

    @given(text=texts, calls=modifiers)
    @settings(max_examples=100)
    def test_nesting_follows_first_use(self, text: str, calls: list) -> None:
        stream = _apply(rich(text), calls)
        fragment = stream.fragments[0]
        assert list(fragment.attributes) == _first_seen(calls)

        out = stream.to_string()
        for name in reversed(_first_seen(calls)):
            assert out.startswith(f"<{name}")
            out = out[out.index(">") + 1 : -len(f"</{name}>")]
        assert out == text

    @given(text=texts, calls=modifiers)
    @settings(max_examples=50)
    def test_single_font_tag(self, text: str, calls: list) -> None:
        out = _apply(rich(text), calls).to_string()
        expected = 1 if any(not isinstance(c, str) for c in calls) else 0
        assert out.count("</font>") - text.count("</font>") == expected
