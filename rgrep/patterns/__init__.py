"""Pattern compilation and line matching.

Components:
- Span: Character range of one match within a line
- Matcher: Abstract base class for line matchers
- RegexMatcher: Matcher backed by a compiled regex
- compile_pattern: Turn a literal query plus flags into a RegexMatcher

Usage:
    from rgrep.patterns import compile_pattern

    matcher = compile_pattern("rUsT", ignore_case=True)
    if matcher.test("Trust me."):
        print(matcher.find_spans("Trust me."))
"""

from .matcher import Matcher, Span
from .regex_matcher import RegexMatcher, build_pattern, compile_pattern

__all__ = [
    "Matcher",
    "Span",
    "RegexMatcher",
    "build_pattern",
    "compile_pattern",
]
