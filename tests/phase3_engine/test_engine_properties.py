"""Hypothesis property-based tests for the context search engine.

Documents are random sequences drawn from a tiny vocabulary so that hits,
gaps and overlapping windows all occur often.

Properties tested:
- Coverage: every direct hit is emitted, highlighted iff color is on
- Ordering: emitted lines are strictly ascending, never duplicated
- Count: count mode equals the number of hits, whatever the context
- Idempotence: fresh carries give identical output
- Separators: none without context; never two in a row; never first
- Merge law: hits within B + A lines of each other share a block
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from rgrep.interfaces import CountRecord, LineRecord, SearchConfig, SeparatorRecord, TraversalContext
from rgrep.patterns import compile_pattern
from rgrep.search import ContextSearchEngine

QUERY = "hit"
MATCHER = compile_pattern(QUERY)

documents = st.lists(st.sampled_from(["hit", "miss", "a hit b", "", "other"]), max_size=40)
context_sizes = st.integers(min_value=0, max_value=5)


def make_engine(**config) -> ContextSearchEngine:
    return ContextSearchEngine(MATCHER, SearchConfig(**config))


def hit_indexes(lines, invert=False):
    return [i for i, line in enumerate(lines) if (QUERY in line) != invert]


@settings(max_examples=200)
@given(lines=documents, before=context_sizes, after=context_sizes, color=st.booleans(), invert=st.booleans())
def test_every_hit_is_emitted(lines, before, after, color, invert):
    engine = make_engine(
        before_context=before,
        after_context=after,
        color=color,
        invert_match=invert,
        line_number=True,
    )
    records = engine.search(lines)
    emitted = {r.line_number - 1: r for r in records if isinstance(r, LineRecord)}

    for i in hit_indexes(lines, invert):
        assert i in emitted
        assert not emitted[i].is_context
        has_match = QUERY in lines[i]
        assert bool(emitted[i].spans) == (color and has_match)


@settings(max_examples=200)
@given(lines=documents, before=context_sizes, after=context_sizes)
def test_lines_ascending_without_duplicates(lines, before, after):
    records = make_engine(before_context=before, after_context=after, line_number=True).search(lines)
    numbers = [r.line_number for r in records if isinstance(r, LineRecord)]
    assert numbers == sorted(set(numbers))


@settings(max_examples=200)
@given(lines=documents, before=context_sizes, after=context_sizes)
def test_context_lines_within_reach_of_a_hit(lines, before, after):
    records = make_engine(before_context=before, after_context=after, line_number=True).search(lines)
    hits = hit_indexes(lines)
    for record in records:
        if isinstance(record, LineRecord) and record.is_context:
            i = record.line_number - 1
            assert any(h - before <= i <= h + after for h in hits)


@given(lines=documents, before=context_sizes, after=context_sizes, invert=st.booleans())
def test_count_matches_hits(lines, before, after, invert):
    records = make_engine(count=True, before_context=before, after_context=after, invert_match=invert).search(lines)
    assert records == [CountRecord(count=len(hit_indexes(lines, invert)))]


@given(lines=documents, before=context_sizes, after=context_sizes)
def test_idempotent(lines, before, after):
    engine = make_engine(before_context=before, after_context=after, line_number=True, color=True)
    assert engine.search(lines, carry=TraversalContext()) == engine.search(lines, carry=TraversalContext())


@given(lines=documents, carried=st.booleans())
def test_no_separator_without_context(lines, carried):
    records = make_engine().search(lines, carry=TraversalContext(needs_separator=carried))
    assert not any(isinstance(r, SeparatorRecord) for r in records)


@settings(max_examples=200)
@given(
    lines=documents,
    before=context_sizes,
    after=context_sizes.filter(lambda n: n > 0),
)
def test_separators_only_between_blocks(lines, before, after):
    records = make_engine(before_context=before, after_context=after, line_number=True).search(lines)
    if records:
        assert not isinstance(records[0], SeparatorRecord)
        assert not isinstance(records[-1], SeparatorRecord)
    for previous, current in zip(records, records[1:]):
        if isinstance(current, SeparatorRecord):
            assert isinstance(previous, LineRecord)
        if isinstance(previous, LineRecord) and isinstance(current, LineRecord):
            assert current.line_number == previous.line_number + 1


@settings(max_examples=200)
@given(lines=documents, before=context_sizes, after=context_sizes)
def test_close_hits_merge(lines, before, after):
    records = make_engine(before_context=before, after_context=after, line_number=True).search(lines)
    hits = hit_indexes(lines)

    # Block index for every emitted line
    block_of = {}
    block = 0
    for record in records:
        if isinstance(record, SeparatorRecord):
            block += 1
        else:
            block_of[record.line_number - 1] = block

    for first, second in zip(hits, hits[1:]):
        if second - first - 1 <= before + after:
            assert block_of[first] == block_of[second]
