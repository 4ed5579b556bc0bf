# highlight.py - 代码块行高亮 ({1,3-5} 注解解析)

import re
from typing import Callable, NamedTuple, Optional, Tuple

# 只认第一个花括号组，组内只能有 ASCII 数字、逗号和连字符
HIGHLIGHT_RE = re.compile(r'\{([0-9,-]+)\}')


class InvalidHighlightAnnotation(ValueError):
    """花括号组能匹配上，但组内的某个 token 不是 N 或 N-M。"""

    def __init__(self, metastring: str, token: str):
        self.metastring = metastring
        self.token = token
        super().__init__(f"invalid highlight annotation {metastring!r}: bad token {token!r}")


class LineRange(NamedTuple):
    """闭区间 [start, end]，行号从 1 开始。单个行号 n 存为 (n, n)。"""
    start: int
    end: int

    def contains(self, line_number: int) -> bool:
        # start > end 的区间不匹配任何行
        return self.start <= line_number <= self.end


class HighlightSpec(NamedTuple):
    """按出现顺序保存的区间列表，不排序也不去重。"""
    ranges: Tuple[LineRange, ...] = ()

    def contains(self, line_number: int) -> bool:
        return any(r.contains(line_number) for r in self.ranges)


def _parse_token(metastring: str, token: str) -> LineRange:
    parts = token.split('-')
    if len(parts) > 2 or not all(part.isdigit() for part in parts):
        raise InvalidHighlightAnnotation(metastring, token)

    try:
        numbers = [int(part, 10) for part in parts]
    except ValueError:
        # 超长数字串会超出 int() 的位数上限
        raise InvalidHighlightAnnotation(metastring, token)

    if len(numbers) == 1:
        return LineRange(numbers[0], numbers[0])

    return LineRange(numbers[0], numbers[1])


def parse_highlight_spec(metastring: Optional[str]) -> HighlightSpec:
    """
    解析代码块语言标签后面的 meta 字符串，例如 "{2,4-6,9}"。
    没有注解 (None、空串、找不到花括号组) 时返回空的 HighlightSpec。
    组内 token 格式错误时抛出 InvalidHighlightAnnotation。
    """
    if not metastring:
        return HighlightSpec()

    match = HIGHLIGHT_RE.search(metastring)
    if not match:
        return HighlightSpec()

    ranges = tuple(
        _parse_token(metastring, token)
        for token in match.group(1).split(',')
    )
    return HighlightSpec(ranges)


def build_selector(metastring: Optional[str]) -> Callable[[int], bool]:
    """
    返回一个判断函数：传入从 0 开始的行下标，返回该行是否需要强调。
    meta 字符串只在这里解析一次，之后每一行都只做区间判断。
    """
    spec = parse_highlight_spec(metastring)

    if not spec.ranges:
        return lambda index: False

    def should_highlight_line(index: int) -> bool:
        return spec.contains(index + 1)

    return should_highlight_line
