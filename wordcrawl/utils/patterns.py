import re
from typing import Iterable, Tuple, Union

from wordcrawl.exceptions import InvalidPatternError

PatternLike = Union[str, re.Pattern]


def compile_patterns(patterns: Iterable[PatternLike], config_path: str = "<inline>") -> Tuple[re.Pattern, ...]:
    """Compile regex patterns, failing fast on the first malformed one.

    Already-compiled patterns are passed through.
    """
    compiled = []
    for pattern in patterns or ():
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
            continue
        if not isinstance(pattern, str):
            raise InvalidPatternError(repr(pattern), TypeError("pattern must be a string"), config_path)
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidPatternError(pattern, e, config_path) from e
    return tuple(compiled)


def fully_matches_any(value: str, patterns: Iterable[re.Pattern]) -> bool:
    return any(p.fullmatch(value) for p in patterns)
