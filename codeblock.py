# codeblock.py - 代码块渲染 (Pygments 分词 + 行号 + {1,3-5} 行强调)

import os
from typing import Any, Callable, Dict, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.styles import get_style_by_name
from pygments.token import Token
from pygments.util import ClassNotFound

import config
from highlight import InvalidHighlightAnnotation, build_selector

# --- Jinja2 环境配置 ---
TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), 'templates')
env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True
)

TokenLine = List[Tuple[Any, str]]


# --- 辅助函数：样式 ---

def css_from_dict(style: Dict[str, str]) -> str:
    """把 {'font-size': '1rem'} 这样的字典转成内联 style 字符串。"""
    return '; '.join(f"{key}: {value}" for key, value in style.items() if value)


def token_css(style_cls: Any, ttype: Any) -> str:
    # 主题里没定义的子类型，沿着父类型往上找
    while not style_cls.styles_token(ttype) and ttype.parent is not None:
        ttype = ttype.parent

    info = style_cls.style_for_token(ttype)
    rules = {}
    if info['color']:
        rules['color'] = f"#{info['color']}"
    if info['bgcolor']:
        rules['background-color'] = f"#{info['bgcolor']}"
    if info['bold']:
        rules['font-weight'] = 'bold'
    if info['italic']:
        rules['font-style'] = 'italic'
    if info['underline']:
        rules['text-decoration'] = 'underline'
    return css_from_dict(rules)


def language_label(language: Optional[str]) -> str:
    """标准化语言标签，写入 pre 的 data-lang 属性。"""
    if not language:
        return config.DEFAULT_CODE_LANG
    return config.LANGUAGE_LABELS.get(language.lower(), language.upper())


# --- 分词 ---

def get_lexer(language: Optional[str]):
    if language:
        try:
            return get_lexer_by_name(language, stripnl=False)
        except ClassNotFound:
            pass
    return TextLexer(stripnl=False)


def tokenize_lines(code: str, language: Optional[str] = None) -> List[TokenLine]:
    """
    用 Pygments 分词，并按换行符切成行。
    最后一个换行产生的空行会被丢掉，空代码块保留一行空行。
    """
    lines: List[TokenLine] = [[]]
    for ttype, value in get_lexer(language).get_tokens(code):
        parts = value.split('\n')
        for i, part in enumerate(parts):
            if i > 0:
                lines.append([])
            if part:
                lines[-1].append((ttype, part))

    if len(lines) > 1 and not lines[-1]:
        lines.pop()
    return lines


# --- 核心渲染函数 ---

def _selector_for(metastring: Optional[str]) -> Callable[[int], bool]:
    try:
        return build_selector(metastring)
    except InvalidHighlightAnnotation as e:
        # 注解写错了只影响强调效果，不能让整篇文章渲染失败
        print(f"Warning: {e}; rendering code block without highlighted lines")
        return lambda index: False


def render_code_block(code: str, language: Optional[str] = None, metastring: Optional[str] = None) -> str:
    """
    渲染单个代码块为 HTML。
    metastring 是语言标签后面的文本 (例如 "{2,4-6}")，只在这里解析一次，
    然后逐行询问是否需要强调。
    """
    should_highlight_line = _selector_for(metastring)
    style_cls = get_style_by_name(config.CODE_THEME)

    pre_style = dict(config.CODE_BLOCK_STYLE)
    text_color = style_cls.style_for_token(Token.Text)['color']
    if text_color:
        pre_style['color'] = f"#{text_color}"
    pre_style['background-color'] = style_cls.background_color

    highlight_style = css_from_dict(config.HIGHLIGHT_LINE_STYLE)
    lines = []
    for i, token_line in enumerate(tokenize_lines(code, language)):
        highlighted = should_highlight_line(i)
        lines.append({
            'number': i + 1,
            'class_name': 'token-line highlight-line' if highlighted else 'token-line',
            'style': highlight_style if highlighted else '',
            'tokens': [
                {'text': text, 'style': token_css(style_cls, ttype)}
                for ttype, text in token_line
            ],
        })

    template = env.get_template('code_block.html')
    class_name = config.CODE_HIGHLIGHT_CLASS
    if language:
        class_name = f"{class_name} language-{language}"

    return template.render({
        'class_name': class_name,
        'lang_label': language_label(language),
        'pre_style': css_from_dict(pre_style),
        'line_number_style': css_from_dict(config.LINE_NUMBER_STYLE),
        'lines': lines,
    })
