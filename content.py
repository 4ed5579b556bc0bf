# content.py - 文章正文渲染 (Markdown -> HTML -> 后处理 -> 文章容器)

import re
import unicodedata
from typing import List

import markdown
from bs4 import BeautifulSoup
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

import config
from codeblock import env, render_code_block

# -------------------------------------------------------------------------
# 【TOC/目录专用 Slugify】
# -------------------------------------------------------------------------
def my_custom_slugify(s: str, separator: str) -> str:
    s = str(s).lower().strip()
    s = unicodedata.normalize('NFKD', s)
    s = re.sub(r'[^\w\s-]', '', s)
    s = re.sub(r'[\s-]+', separator, s).strip(separator)
    return s

# -------------------------------------------------------------------------
# 【核心逻辑：代码块接管】
# 语言标签后面的整行文本作为 meta 字符串交给 render_code_block，
# 例如 ```jsx {1,4-6} 得到 language='jsx', metastring='{1,4-6}'
# -------------------------------------------------------------------------
FENCED_BLOCK_RE = re.compile(
    r'''
    (?P<fence>^(?:~{3,}|`{3,}))[ ]*   # 开始围栏
    (?P<lang>[\w#.+-]*)               # 可选的语言标签
    (?P<meta>[^\n]*)\n                # 可选的 meta 字符串，到行尾为止
    (?P<code>.*?)(?<=\n)              # 代码内容
    (?P=fence)[ ]*$                   # 结束围栏
    ''',
    re.MULTILINE | re.DOTALL | re.VERBOSE
)


class HighlightedCodePreprocessor(Preprocessor):

    def run(self, lines: List[str]) -> List[str]:
        text = '\n'.join(lines)
        while True:
            m = FENCED_BLOCK_RE.search(text)
            if not m:
                break
            html = render_code_block(
                m.group('code'),
                m.group('lang') or None,
                m.group('meta').strip() or None,
            )
            placeholder = self.md.htmlStash.store(html)
            text = f'{text[:m.start()]}\n{placeholder}\n{text[m.end():]}'
        return text.split('\n')


class HighlightedCodeExtension(Extension):

    def extendMarkdown(self, md):
        md.registerExtension(self)
        # 优先级必须高于 fenced_code (25)，先把围栏代码块拿走
        md.preprocessors.register(HighlightedCodePreprocessor(md), 'highlighted_code', 28)

# -------------------------------------------------------------------------
# 【HTML 后处理】
# -------------------------------------------------------------------------
def post_process_html(html_content: str) -> str:
    """
    使用 BeautifulSoup 对 HTML 进行后处理：
    1. 图片懒加载
    2. 表格包裹
    """
    if not html_content:
        return ""

    soup = BeautifulSoup(html_content, 'html.parser')

    # 1. 图片懒加载
    for img in soup.find_all('img'):
        if not img.get('loading'):
            img['loading'] = 'lazy'

    # 2. 表格包裹器
    for table in soup.find_all('table'):
        parent = table.parent
        if parent and 'table-wrapper' not in parent.get('class', []):
            wrapper_div = soup.new_tag('div', attrs={'class': 'table-wrapper'})
            table.replace_with(wrapper_div)
            wrapper_div.append(table)

    return str(soup)


def render_content(text: str) -> str:
    """把文章正文 (Markdown) 渲染为包裹在文章容器里的 HTML。"""
    if not text:
        return ""

    extension_configs = {key: dict(value) for key, value in config.MARKDOWN_EXTENSION_CONFIGS.items()}
    if 'toc' in extension_configs:
        extension_configs['toc']['slugify'] = my_custom_slugify

    md = markdown.Markdown(
        extensions=config.MARKDOWN_EXTENSIONS + [HighlightedCodeExtension()],
        extension_configs=extension_configs,
        output_format='html5',
    )

    content_html = post_process_html(md.convert(text))

    template = env.get_template('content.html')
    return template.render({
        'container_class': config.CONTENT_CONTAINER_CLASSES,
        'markdown_class': config.CONTENT_MARKDOWN_CLASS,
        'content_html': content_html,
    })
