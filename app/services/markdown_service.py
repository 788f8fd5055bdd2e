import markdown

MD_EXTENSIONS = [
    "fenced_code",
    "tables",
    "toc",
    "smarty",
]


def render_markdown(content: str) -> str:
    """
    Render a markdown body to HTML5 for previews and the article reader
    """
    return markdown.markdown(content or "", extensions=MD_EXTENSIONS, output_format="html5")
