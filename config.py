# config.py

# --- 代码块配置 ---
# Pygments 主题名称，代码块的 token 颜色和背景色都取自这里
CODE_THEME = 'monokai'

# 定义代码高亮使用的 CSS 类名
CODE_HIGHLIGHT_CLASS = 'highlight'

# 没有语言标签时 data-lang 的默认值
DEFAULT_CODE_LANG = 'CODE'

# 语言标签的标准化映射 (用于 pre 的 data-lang 属性)
LANGUAGE_LABELS = {
    'py': 'PYTHON', 'python': 'PYTHON',
    'js': 'JS', 'javascript': 'JS', 'jsx': 'JSX',
    'ts': 'TS', 'typescript': 'TS', 'tsx': 'TSX',
    'sh': 'SHELL', 'bash': 'SHELL', 'shell': 'SHELL', 'zsh': 'SHELL',
    'html': 'HTML', 'css': 'CSS', 'scss': 'CSS',
    'json': 'JSON', 'sql': 'SQL', 'yaml': 'YAML', 'yml': 'YAML',
    'md': 'MARKDOWN', 'markdown': 'MARKDOWN', 'mdx': 'MDX',
    'c': 'C', 'cpp': 'C++', 'c++': 'C++',
    'go': 'GO', 'java': 'JAVA', 'rust': 'RUST',
}

# --- 代码块内联样式 ---
# pre 容器样式 (背景色会在渲染时由主题补上)
CODE_BLOCK_STYLE = {
    'padding': '1rem 1rem 1rem .75rem',
    'font-size': '1rem',
    'float': 'left',
    'min-width': '100%',
    'overflow': 'initial',
}

# 被 {1,3-5} 选中的行追加的强调样式
# 负 margin 让背景延伸进 pre 的左右 padding
HIGHLIGHT_LINE_STYLE = {
    'background-color': 'rgba(201, 167, 255, 0.2)',
    'margin': '0px -0.75rem',
    'padding': '0px 5px',
    'border-left': '5px solid rgb(201, 167, 255)',
}

# 行号列样式
LINE_NUMBER_STYLE = {
    'display': 'inline-block',
    'width': '1.75rem',
    'user-select': 'none',
    'opacity': '0.3',
}

# --- 文章容器配置 ---
CONTENT_CONTAINER_CLASSES = 'max-w-2xl mx-auto language-diff-javascript diff-highlight line-numbers'
CONTENT_MARKDOWN_CLASS = 'markdown'

# --- Markdown 配置 ---
# 1. 扩展列表
# 注意：代码块不再交给 fenced_code / pymdownx.superfences 处理，
# 由 content.HighlightedCodeExtension 接管，这样才能拿到语言标签后面的 meta 字符串
MARKDOWN_EXTENSIONS = [
    'extra',              # 包含 fenced_code (```), tables, footnotes
    'toc',                # 目录
    'admonition',         # 提示块
    'sane_lists',         # 更好的列表
    'pymdownx.tasklist',  # 任务列表支持 (- [ ])
    'pymdownx.tilde',     # 删除线支持 (~~text~~)
]

# 2. 扩展具体配置
MARKDOWN_EXTENSION_CONFIGS = {
    'toc': {
        'baselevel': 2,
        'anchorlink': True,
    },
    'pymdownx.tasklist': {
        'custom_checkbox': True,      # 允许使用 CSS 自定义样式
        'clickable_checkbox': False,  # 静态页面通常设为不可点击
    }
}
# --- Markdown 配置结束 ---
